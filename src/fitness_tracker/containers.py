"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.openai_vision_client import OpenAIVisionClient
from fitness_tracker.adapters.supabase_content_repository import (
    SupabaseContentRepository,
)
from fitness_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_tracker.catalog import (
    BODY_FAT_LOSS_HABITS,
    CARDIO_EXERCISES,
    STRENGTH_EXERCISES,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.completion import CompletionTracker
from fitness_tracker.services.content import DailyContentService
from fitness_tracker.services.meals import MealLogService
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.stats import StatsService
from fitness_tracker.services.vision import FoodAnalysisService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    content_service: DailyContentService
    completion_tracker: CompletionTracker
    meal_log_service: MealLogService
    stats_service: StatsService
    profile_service: ProfileService
    food_analysis_service: FoodAnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    content_repository = SupabaseContentRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)

    content_service = DailyContentService(
        repository=content_repository,
        habit_pool=BODY_FAT_LOSS_HABITS,
        cardio_pool=CARDIO_EXERCISES,
        strength_pool=STRENGTH_EXERCISES,
        habits_per_day=resolved_settings.habits_per_day,
    )
    vision_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
    food_analysis_service = FoodAnalysisService(
        client=vision_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        await vision_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        content_service=content_service,
        completion_tracker=CompletionTracker(content_repository),
        meal_log_service=MealLogService(meal_repository),
        stats_service=StatsService(meal_repository),
        profile_service=ProfileService(
            profile_repository,
            default_difficulty=resolved_settings.default_difficulty,
            default_timezone=resolved_settings.default_timezone,
        ),
        food_analysis_service=food_analysis_service,
        close_resources=close_resources,
    )
