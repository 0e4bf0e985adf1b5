"""Pydantic request models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field

from fitness_tracker.domain.content import ContentKind
from fitness_tracker.domain.nutrition import Ingredient, NutritionAnalysis


class CreateItemRequest(BaseModel):
    """User-created habit or exercise."""

    kind: ContentKind
    title: str
    subtitle: str | None = None
    icon: str | None = None
    recurring: bool = False


class DifficultyRequest(BaseModel):
    """Workout difficulty update."""

    difficulty: str = Field(min_length=1)


class IngredientInput(BaseModel):
    """Raw ingredient form input, validated by the ledger."""

    name: str = ""
    portion_label: str = ""
    calories: int | float | str | None = None


class IngredientEdit(IngredientInput):
    """Ingredient form input targeting an existing row."""

    index: int


class MealDraft(BaseModel):
    """Meal as edited on the client before saving."""

    name: str = "Unknown Meal"
    meal_type: str = "snack"
    analysis: NutritionAnalysis
    servings: float | str = 1.0
    calorie_override: int | float | str | None = None
    add_ingredients: list[IngredientInput] = Field(default_factory=list)
    edit_ingredients: list[IngredientEdit] = Field(default_factory=list)
    remove_ingredients: list[int] = Field(default_factory=list)
    photo_ref: str | None = None
    logged_at: datetime | None = None


class MealTotalsResponse(BaseModel):
    """Scaled meal values shown to the user."""

    servings: float
    calorie_override: int | None
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    fiber_g: int
    sugar_g: int
    sodium_mg: int
    ingredients: list[Ingredient]
