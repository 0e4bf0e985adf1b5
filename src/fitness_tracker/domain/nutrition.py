"""Nutrition domain models."""

from dataclasses import dataclass

from pydantic import BaseModel, Field


class Ingredient(BaseModel):
    """Named, portioned line item of a meal."""

    name: str = Field(min_length=1)
    portion_label: str = Field(min_length=1)
    calories: int = Field(ge=0)


class NutritionAnalysis(BaseModel):
    """Unscaled nutrition values for a single serving of a meal."""

    calories: float = Field(default=0.0, ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    carbs_g: float = Field(default=0.0, ge=0)
    fat_g: float = Field(default=0.0, ge=0)
    fiber_g: float = Field(default=0.0, ge=0)
    sugar_g: float = Field(default=0.0, ge=0)
    sodium_mg: float = Field(default=0.0, ge=0)
    ingredients: list[Ingredient] = Field(default_factory=list)


@dataclass(frozen=True)
class ScaledTotals:
    """Nutrition values multiplied by servings and rounded per field."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    fiber_g: int
    sugar_g: int
    sodium_mg: int
