"""Tests for date-seeded content selection."""

from datetime import date, timedelta

import pytest

from fitness_tracker.catalog import (
    BODY_FAT_LOSS_HABITS,
    CARDIO_EXERCISES,
    EXERCISES_PER_DIFFICULTY,
)
from fitness_tracker.services import selection
from fitness_tracker.services.selection import (
    date_seed,
    exercise_count,
    pick_select,
    seeded_random,
    shuffle_select,
)


def test_date_seed_uses_calendar_month() -> None:
    assert date_seed(date(2024, 3, 15)) == 20240315
    assert date_seed(date(2023, 12, 1)) == 20231201


def test_seeded_random_is_deterministic_and_in_unit_interval() -> None:
    values = [seeded_random(20240315 + offset) for offset in range(50)]

    assert values == [seeded_random(20240315 + offset) for offset in range(50)]
    assert all(0 <= value < 1 for value in values)
    assert seeded_random(0) == 0.0


def test_shuffle_select_is_stable_for_a_day() -> None:
    day = date(2024, 3, 15)

    first = shuffle_select(BODY_FAT_LOSS_HABITS, 7, day)
    second = shuffle_select(BODY_FAT_LOSS_HABITS, 7, day)

    assert first == second
    assert len(first) == 7
    assert len({habit.key for habit in first}) == 7
    assert all(habit in BODY_FAT_LOSS_HABITS for habit in first)


def test_shuffle_select_rotates_across_days() -> None:
    start = date(2024, 1, 1)
    selections = {
        tuple(h.key for h in shuffle_select(BODY_FAT_LOSS_HABITS, 7, start + timedelta(days=n)))
        for n in range(30)
    }

    assert len(selections) > 1


def test_shuffle_select_returns_small_pool_in_order() -> None:
    pool = ["a", "b", "c"]

    assert shuffle_select(pool, 3, date(2024, 3, 15)) == ["a", "b", "c"]
    assert shuffle_select(pool, 5, date(2024, 3, 15)) == ["a", "b", "c"]
    assert shuffle_select([], 7, date(2024, 3, 15)) == []


def test_shuffle_select_swaps_from_the_end(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(selection, "seeded_random", lambda _value: 0.0)

    assert shuffle_select(["a", "b", "c", "d"], 2, date(2024, 3, 15)) == ["b", "c"]


def test_pick_select_is_stable_and_sized() -> None:
    day = date(2024, 3, 15)

    first = pick_select(CARDIO_EXERCISES, 3, day)

    assert first == pick_select(CARDIO_EXERCISES, 3, day)
    assert len(first) == 3


def test_pick_select_retries_duplicate_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(selection, "seeded_random", lambda _value: 0.0)

    assert pick_select(["a", "b", "c", "d"], 3, date(2024, 3, 15)) == ["a", "b", "b"]


def test_pick_select_seed_offset_changes_draws(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    seen: list[int] = []

    def fake_random(value: int) -> float:
        seen.append(value)
        return 0.5

    monkeypatch.setattr(selection, "seeded_random", fake_random)

    pick_select(["a", "b", "c", "d"], 2, date(2024, 3, 15), seed_offset=1000)

    assert seen == [20241315, 20241316]


def test_pick_select_returns_small_pool() -> None:
    assert pick_select(["a", "b"], 2, date(2024, 3, 15)) == ["a", "b"]


@pytest.mark.parametrize(
    ("difficulty", "expected"),
    [("easy", 1), ("medium", 2), ("hard", 3), ("HARD", 3), ("extreme", 2), (None, 2)],
)
def test_exercise_count(difficulty: str | None, expected: int) -> None:
    assert exercise_count(difficulty, EXERCISES_PER_DIFFICULTY) == expected
