"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from fitness_tracker.catalog import (
    BODY_FAT_LOSS_HABITS,
    CARDIO_EXERCISES,
    STRENGTH_EXERCISES,
)
from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.content import ContentItem, ContentKind, ContentSource
from fitness_tracker.domain.meals import MealRecord
from fitness_tracker.services.completion import CompletionTracker
from fitness_tracker.services.content import ContentRepository, DailyContentService
from fitness_tracker.services.meals import MealLogService, MealRepository
from fitness_tracker.services.profiles import ProfileRepository, ProfileService
from fitness_tracker.services.stats import StatsRepository, StatsService
from fitness_tracker.services.vision import FoodAnalysisService, VisionClient


@dataclass
class InMemoryContentRepository(ContentRepository):
    """In-memory store for durable items and completions."""

    items: dict[ContentKind, list[ContentItem]] = field(
        default_factory=lambda: {ContentKind.HABIT: [], ContentKind.EXERCISE: []}
    )
    completions: dict[str, dict[str, object]] = field(default_factory=dict)
    fail_saves: bool = False
    fail_loads: bool = False
    on_save: Callable[[str], None] | None = None
    saved: list[tuple[str, bool, str | None]] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)

    def add(self, kind: ContentKind, title: str, **kwargs: object) -> ContentItem:
        item = ContentItem(
            id=str(uuid4()),
            kind=kind,
            title=title,
            subtitle="",
            icon_ref="checkbox",
            source=ContentSource.DURABLE,
            **kwargs,  # type: ignore[arg-type]
        )
        self.items[kind].append(item)
        return item

    def list_items(
        self, user_id: UUID, kind: ContentKind, day: date
    ) -> list[ContentItem]:
        if self.fail_loads:
            raise RuntimeError("store offline")
        result = []
        for item in self.items[kind]:
            completion = self.completions.get(f"{item.id}:{day.isoformat()}")
            result.append(
                replace(
                    item,
                    completed=bool(completion and completion["completed"]),
                    completion_record_id=(
                        str(completion["id"]) if completion else None
                    ),
                )
            )
        return result

    def create_item(
        self, user_id: UUID, kind: ContentKind, day: date, payload: dict[str, object]
    ) -> ContentItem:
        if self.fail_saves:
            raise RuntimeError("store offline")
        return self.add(
            kind,
            str(payload["title"]),
            recurring=bool(payload["is_recurring"]),
            sort_order=int(payload["sort_order"]),  # type: ignore[arg-type]
        )

    def save_completion(  # noqa: PLR0913
        self,
        user_id: UUID,
        kind: ContentKind,
        item_id: str,
        day: date,
        completed: bool,
        completion_record_id: str | None,
    ) -> str:
        if self.on_save is not None:
            self.on_save(item_id)
        if self.fail_saves:
            raise RuntimeError("store offline")
        self.saved.append((item_id, completed, completion_record_id))
        key = f"{item_id}:{day.isoformat()}"
        record_id = completion_record_id or str(uuid4())
        self.completions[key] = {"id": record_id, "completed": completed}
        return record_id

    def delete_item(self, kind: ContentKind, item_id: str) -> None:
        if self.fail_saves:
            raise RuntimeError("store offline")
        self.deleted.append(item_id)
        self.items[kind] = [item for item in self.items[kind] if item.id != item_id]


@dataclass
class InMemoryMealRepository(MealRepository, StatsRepository):
    """In-memory meal store."""

    meals: dict[UUID, tuple[UUID, MealRecord]] = field(default_factory=dict)
    fail_saves: bool = False

    def create_meal(self, user_id: UUID, record: MealRecord) -> MealRecord:
        if self.fail_saves:
            raise RuntimeError("store offline")
        stored = replace(record, id=uuid4(), user_id=user_id)
        self.meals[stored.id] = (user_id, stored)  # type: ignore[index]
        return stored

    def update_meal(self, record: MealRecord) -> MealRecord:
        if self.fail_saves:
            raise RuntimeError("store offline")
        user_id, _ = self.meals[record.id]  # type: ignore[index]
        if record.user_id is not None and record.user_id != user_id:
            raise RuntimeError("Failed to update meal log")
        self.meals[record.id] = (user_id, record)  # type: ignore[index]
        return record

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        entry = self.meals.get(meal_id)
        return entry[1] if entry else None

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[MealRecord]:
        return [
            record
            for owner, record in self.meals.values()
            if owner == user_id and start <= _stored_date(record) <= end
        ]


def _stored_date(record: MealRecord) -> date:
    """Same rule as the meal_logs.date column."""
    return record.logged_at.date()


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile store."""

    difficulties: dict[UUID, str] = field(default_factory=dict)
    timezones: dict[UUID, str] = field(default_factory=dict)
    fail: bool = False

    def get_difficulty(self, user_id: UUID) -> str | None:
        if self.fail:
            raise RuntimeError("store offline")
        return self.difficulties.get(user_id)

    def set_difficulty(self, user_id: UUID, difficulty: str) -> None:
        if self.fail:
            raise RuntimeError("store offline")
        self.difficulties[user_id] = difficulty

    def get_timezone(self, user_id: UUID) -> str | None:
        if self.fail:
            raise RuntimeError("store offline")
        return self.timezones.get(user_id)


@dataclass
class FakeVisionClient(VisionClient):
    """Vision client returning a canned payload."""

    payload: dict[str, object] = field(default_factory=dict)
    error: Exception | None = None
    requests: list[dict[str, object]] = field(default_factory=list)

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.requests.append({"model": model, "image_data_url": image_data_url})
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        openai_api_key="openai-key",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def content_repository() -> InMemoryContentRepository:
    return InMemoryContentRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def content_service(
    content_repository: InMemoryContentRepository,
) -> DailyContentService:
    return DailyContentService(
        repository=content_repository,
        habit_pool=BODY_FAT_LOSS_HABITS,
        cardio_pool=CARDIO_EXERCISES,
        strength_pool=STRENGTH_EXERCISES,
    )


@pytest.fixture
def completion_tracker(
    content_repository: InMemoryContentRepository,
) -> CompletionTracker:
    return CompletionTracker(content_repository)


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    content_service: DailyContentService,
    completion_tracker: CompletionTracker,
    meal_repository: InMemoryMealRepository,
    profile_repository: InMemoryProfileRepository,
    vision_client: FakeVisionClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        content_service=content_service,
        completion_tracker=completion_tracker,
        meal_log_service=MealLogService(meal_repository),
        stats_service=StatsService(meal_repository),
        profile_service=ProfileService(
            profile_repository,
            default_difficulty=settings.default_difficulty,
            default_timezone=settings.default_timezone,
        ),
        food_analysis_service=FoodAnalysisService(
            client=vision_client,
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        close_resources=close_resources,
    )
