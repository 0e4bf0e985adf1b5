"""Daily board assembly from rotation pools and user-created items."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from fitness_tracker.catalog import EXERCISES_PER_DIFFICULTY
from fitness_tracker.domain.content import (
    ChecklistStats,
    ContentItem,
    ContentKind,
    ContentSource,
    DailyBoard,
    ExerciseTemplate,
    HabitTemplate,
)
from fitness_tracker.domain.errors import InvalidInputError, PersistenceError
from fitness_tracker.services.scaling import round_half_up
from fitness_tracker.services.selection import (
    STRENGTH_SEED_OFFSET,
    exercise_count,
    pick_select,
    shuffle_select,
)

_logger = logging.getLogger(__name__)

DEFAULT_ITEM_ICON = "checkbox"


class ContentRepository(Protocol):
    """Persistence interface for user-created content and completions."""

    def list_items(
        self, user_id: UUID, kind: ContentKind, day: date
    ) -> list[ContentItem]:
        """Return durable items visible on a day with their completion state."""

    def create_item(
        self, user_id: UUID, kind: ContentKind, day: date, payload: dict[str, object]
    ) -> ContentItem:
        """Create a durable item and return it."""

    def save_completion(  # noqa: PLR0913
        self,
        user_id: UUID,
        kind: ContentKind,
        item_id: str,
        day: date,
        completed: bool,
        completion_record_id: str | None,
    ) -> str:
        """Insert or update a completion record and return its id."""

    def delete_item(self, kind: ContentKind, item_id: str) -> None:
        """Delete a durable item and its completion records."""


@dataclass
class DailyContentService:
    """Builds the daily board and keeps ephemeral state for the current day."""

    repository: ContentRepository
    habit_pool: list[HabitTemplate]
    cardio_pool: list[ExerciseTemplate]
    strength_pool: list[ExerciseTemplate]
    habits_per_day: int = 7
    _boards: dict[UUID, DailyBoard] = field(default_factory=dict, repr=False)

    async def load_board(
        self, user_id: UUID, day: date, difficulty: str
    ) -> DailyBoard:
        """Return a freshly loaded board for the user's local calendar day."""
        try:
            durable_habits = await asyncio.to_thread(
                self.repository.list_items, user_id, ContentKind.HABIT, day
            )
            durable_exercises = await asyncio.to_thread(
                self.repository.list_items, user_id, ContentKind.EXERCISE, day
            )
        except Exception as exc:
            _logger.exception("Failed to load durable items for %s", user_id)
            raise PersistenceError(
                "Couldn't load your daily plan. Please try again."
            ) from exc

        per_pool = exercise_count(difficulty, EXERCISES_PER_DIFFICULTY)
        board = DailyBoard(
            user_id=user_id,
            day=day,
            difficulty=difficulty,
            habits=[
                *self._daily_habits(day),
                *sorted(durable_habits, key=lambda item: item.sort_order),
            ],
            exercises=[
                *self._daily_exercises(day, per_pool),
                *sorted(durable_exercises, key=lambda item: item.sort_order),
            ],
        )

        previous = self._boards.get(user_id)
        if previous is not None:
            if previous.day == day:
                _carry_ephemeral_state(previous, board)
            previous.discarded = True
        self._boards[user_id] = board
        self._evict_before(day - timedelta(days=1))
        return board

    def _evict_before(self, cutoff: date) -> None:
        """Drop boards of days before ``cutoff``."""
        for stale_user, stale in list(self._boards.items()):
            if stale.day < cutoff:
                stale.discarded = True
                del self._boards[stale_user]

    def current_board(self, user_id: UUID) -> DailyBoard | None:
        """Return the most recently loaded board for a user."""
        return self._boards.get(user_id)

    async def add_item(  # noqa: PLR0913
        self,
        board: DailyBoard,
        kind: ContentKind,
        title: str,
        subtitle: str | None = None,
        icon: str | None = None,
        recurring: bool = False,
    ) -> ContentItem:
        """Create a durable item and append it to the board."""
        cleaned = (title or "").strip()
        if not cleaned:
            raise InvalidInputError("Please enter a title.")
        items = board.habits if kind is ContentKind.HABIT else board.exercises
        next_sort_order = max((item.sort_order for item in items), default=-1) + 1
        payload: dict[str, object] = {
            "title": cleaned,
            "subtitle": (subtitle or "").strip(),
            "icon": icon or DEFAULT_ITEM_ICON,
            "is_recurring": recurring,
            "sort_order": next_sort_order,
        }
        try:
            item = await asyncio.to_thread(
                self.repository.create_item, board.user_id, kind, board.day, payload
            )
        except Exception as exc:
            _logger.exception("Failed to create %s item", kind.value)
            raise PersistenceError("Couldn't save the item. Please try again.") from exc
        items.append(item)
        return item

    def _daily_habits(self, day: date) -> list[ContentItem]:
        selected = shuffle_select(self.habit_pool, self.habits_per_day, day)
        return [
            ContentItem(
                id=f"daily-habit-{template.key}",
                kind=ContentKind.HABIT,
                title=template.title,
                subtitle=template.subtitle,
                icon_ref=template.icon,
                source=ContentSource.EPHEMERAL,
                sort_order=index,
            )
            for index, template in enumerate(selected)
        ]

    def _daily_exercises(self, day: date, per_pool: int) -> list[ContentItem]:
        cardio = pick_select(self.cardio_pool, per_pool, day)
        strength = pick_select(
            self.strength_pool, per_pool, day, seed_offset=STRENGTH_SEED_OFFSET
        )
        items = [
            _exercise_item(f"daily-exercise-cardio-{slot}", template, slot)
            for slot, template in enumerate(cardio)
        ]
        items.extend(
            _exercise_item(
                f"daily-exercise-strength-{slot}", template, len(cardio) + slot
            )
            for slot, template in enumerate(strength)
        )
        return items


def _exercise_item(
    item_id: str, template: ExerciseTemplate, sort_order: int
) -> ContentItem:
    return ContentItem(
        id=item_id,
        kind=ContentKind.EXERCISE,
        title=template.title,
        subtitle=template.description,
        icon_ref=template.icon,
        source=ContentSource.EPHEMERAL,
        sort_order=sort_order,
        calories=template.calories,
        duration=template.duration,
    )


def _carry_ephemeral_state(previous: DailyBoard, board: DailyBoard) -> None:
    completed = {
        item.id
        for item in previous.items()
        if item.source is ContentSource.EPHEMERAL and item.completed
    }
    for item in board.items():
        if item.source is ContentSource.EPHEMERAL and item.id in completed:
            item.completed = True


def display_order(items: list[ContentItem]) -> list[ContentItem]:
    """Return items with unchecked first, ties broken by sort order."""
    return sorted(items, key=lambda item: (item.completed, item.sort_order))


def checklist_stats(items: list[ContentItem]) -> ChecklistStats:
    """Return completion counts and the rounded progress percentage."""
    completed = sum(1 for item in items if item.completed)
    total = len(items)
    percent = round_half_up(completed / total * 100) if total else 0
    return ChecklistStats(
        completed_count=completed, total_count=total, progress_percent=percent
    )


def burned_calories(exercises: list[ContentItem]) -> int:
    """Return calories burned by completed exercises."""
    return sum(item.calories for item in exercises if item.completed)


def deletion_warning(item: ContentItem) -> str | None:
    """Return a confirmation warning for deleting a recurring item."""
    if item.is_durable and item.recurring:
        return (
            f'"{item.title}" repeats every day. Deleting it removes it from '
            "future days as well."
        )
    return None
