"""Models for food photo analysis results."""

from dataclasses import dataclass

from pydantic import BaseModel, Field

from fitness_tracker.domain.nutrition import NutritionAnalysis


class VisionIngredient(BaseModel):
    """Ingredient detected in a food photo."""

    name: str
    portion: str
    calories: int = Field(ge=0)


class VisionMacros(BaseModel):
    """Macro estimates for a single serving."""

    protein_g: float = Field(ge=0)
    carbs_g: float = Field(ge=0)
    fat_g: float = Field(ge=0)
    fiber_g: float = Field(ge=0)
    sugar_g: float = Field(ge=0)
    sodium_mg: float = Field(ge=0)


class VisionMealExtract(BaseModel):
    """Structured output for food photo analysis."""

    is_food: bool
    meal_name: str | None = None
    meal_type: str | None = None
    total_calories: float | None = Field(default=None, ge=0)
    macros: VisionMacros | None = None
    ingredients: list[VisionIngredient] = Field(default_factory=list)
    notes: str | None = None


@dataclass(frozen=True)
class AnalyzedMeal:
    """A recognised meal ready to be edited and logged."""

    name: str
    meal_type: str
    analysis: NutritionAnalysis


@dataclass(frozen=True)
class NotFood:
    """Signal that the photo does not show food."""

    reason: str
