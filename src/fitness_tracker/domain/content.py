"""Domain models for daily content (habits and exercises)."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from uuid import UUID


class ContentSource(str, Enum):
    """Where a content item comes from."""

    EPHEMERAL = "ephemeral"
    DURABLE = "durable"


class ContentKind(str, Enum):
    """Type of daily content."""

    HABIT = "habit"
    EXERCISE = "exercise"


class ToggleState(str, Enum):
    """Lifecycle of an optimistic completion toggle."""

    PENDING = "pending"
    COMMITTED = "committed"
    REVERTED = "reverted"


@dataclass(frozen=True)
class HabitTemplate:
    """Habit entry in the daily rotation pool."""

    key: str
    title: str
    subtitle: str
    icon: str
    icon_color: str


@dataclass(frozen=True)
class ExerciseTemplate:
    """Exercise entry in a daily rotation sub-pool."""

    key: str
    title: str
    description: str
    duration: str
    calories: int
    icon: str


@dataclass
class ContentItem:
    """A habit or exercise shown on the daily board."""

    id: str
    kind: ContentKind
    title: str
    subtitle: str
    icon_ref: str
    source: ContentSource
    completed: bool = False
    completion_record_id: str | None = None
    recurring: bool = False
    sort_order: int = 0
    calories: int = 0
    duration: str | None = None
    toggle_state: ToggleState | None = None

    @property
    def is_durable(self) -> bool:
        return self.source is ContentSource.DURABLE


@dataclass
class DailyBoard:
    """Content items assembled for one user and one calendar day."""

    user_id: UUID
    day: date
    difficulty: str
    habits: list[ContentItem] = field(default_factory=list)
    exercises: list[ContentItem] = field(default_factory=list)
    discarded: bool = False

    def items(self) -> list[ContentItem]:
        """Return all items on the board."""
        return [*self.habits, *self.exercises]

    def find(self, item_id: str) -> ContentItem | None:
        """Return the item with the given id, if present."""
        for item in self.items():
            if item.id == item_id:
                return item
        return None

    def remove(self, item_id: str) -> bool:
        """Remove an item by id and return True when something was removed."""
        for items in (self.habits, self.exercises):
            for index, item in enumerate(items):
                if item.id == item_id:
                    del items[index]
                    return True
        return False


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of a completion toggle."""

    item_id: str
    completed: bool
    state: ToggleState
    completion_record_id: str | None


@dataclass(frozen=True)
class ChecklistStats:
    """Completion progress for a list of items."""

    completed_count: int
    total_count: int
    progress_percent: int
