"""Ordered ingredient list of a meal being edited."""

from dataclasses import dataclass, field

from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.domain.nutrition import Ingredient
from fitness_tracker.services.scaling import parse_calories, round_half_up


def build_ingredient(name: str, portion_label: str, calories: object) -> Ingredient:
    """Validate raw form input and return an ingredient."""
    cleaned_name = (name or "").strip()
    cleaned_portion = (portion_label or "").strip()
    if not cleaned_name or not cleaned_portion:
        raise InvalidInputError("Please fill in all fields correctly.")
    try:
        parsed = parse_calories(calories)
    except InvalidInputError as exc:
        raise InvalidInputError("Please fill in all fields correctly.") from exc
    return Ingredient(
        name=cleaned_name, portion_label=cleaned_portion, calories=parsed
    )


@dataclass
class IngredientLedger:
    """Ingredient line items whose calorie sum drives the meal override.

    Only total calories follow ingredient edits; macro fields of the meal are
    not recomputed from ingredients.
    """

    ingredients: list[Ingredient] = field(default_factory=list)

    def add(self, name: str, portion_label: str, calories: object) -> Ingredient:
        """Append a validated ingredient."""
        ingredient = build_ingredient(name, portion_label, calories)
        self.ingredients.append(ingredient)
        return ingredient

    def edit(
        self, index: int, name: str, portion_label: str, calories: object
    ) -> Ingredient | None:
        """Replace the ingredient at ``index``; None when the index is gone."""
        ingredient = build_ingredient(name, portion_label, calories)
        if not 0 <= index < len(self.ingredients):
            return None
        self.ingredients[index] = ingredient
        return ingredient

    def remove(self, index: int) -> Ingredient | None:
        """Remove the ingredient at ``index``; None when the index is gone."""
        if not 0 <= index < len(self.ingredients):
            return None
        return self.ingredients.pop(index)

    def total_calories(self) -> int:
        return sum(ingredient.calories for ingredient in self.ingredients)

    def calorie_override(self, servings: float) -> int:
        """Return the meal calorie override implied by the ingredients."""
        return round_half_up(self.total_calories() * servings)
