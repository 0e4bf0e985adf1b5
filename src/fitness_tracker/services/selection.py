"""Date-seeded selection of daily content.

The pseudo-random sequence is derived from ``frac(sin(x) * 10000)`` instead
of :mod:`random` so that a given pool and calendar date always produce the
same subset, on any run and on any client using the same transform.
"""

import math
from collections.abc import Sequence
from datetime import date
from typing import TypeVar

T = TypeVar("T")

STRENGTH_SEED_OFFSET = 1000


def date_seed(day: date) -> int:
    """Return the integer seed for a local calendar date (e.g. 20240315)."""
    return day.year * 10000 + day.month * 100 + day.day


def seeded_random(value: int) -> float:
    """Return a deterministic number in [0, 1) for an integer input."""
    scaled = math.sin(value) * 10000
    return scaled - math.floor(scaled)


def shuffle_select(pool: Sequence[T], count: int, day: date) -> list[T]:
    """Pick ``count`` items with a date-seeded Fisher-Yates shuffle.

    Used for the daily habit subset. Pools no larger than ``count`` are
    returned whole, in their original order.
    """
    if len(pool) <= count:
        return list(pool)
    seed = date_seed(day)
    shuffled = list(pool)
    for i in range(len(shuffled) - 1, 0, -1):
        j = math.floor(seeded_random(seed + i) * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled[:count]


def pick_select(
    pool: Sequence[T], count: int, day: date, seed_offset: int = 0
) -> list[T]:
    """Pick ``count`` items by independent date-seeded draws.

    Used per exercise sub-pool. A draw that repeats an earlier pick is moved
    to the next index once and then accepted, so duplicates remain possible.
    """
    if len(pool) <= count:
        return list(pool)
    seed = date_seed(day) + seed_offset
    chosen: list[T] = []
    for i in range(count):
        index = math.floor(seeded_random(seed + i) * len(pool))
        if pool[index] in chosen:
            index = (index + 1) % len(pool)
        chosen.append(pool[index])
    return chosen


def exercise_count(difficulty: str | None, counts: dict[str, int]) -> int:
    """Return items per exercise sub-pool for a difficulty level."""
    return counts.get((difficulty or "").lower(), counts["medium"])
