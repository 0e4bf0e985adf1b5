"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from fitness_tracker.domain.nutrition import NutritionAnalysis


@dataclass(frozen=True)
class MealRecord:
    """Persisted meal with its base analysis and serving adjustments."""

    id: UUID | None
    name: str
    logged_at: datetime
    analysis: NutritionAnalysis
    servings: float = 1.0
    calorie_override: int | None = None
    meal_type: str = "snack"
    photo_ref: str | None = None
    user_id: UUID | None = None
