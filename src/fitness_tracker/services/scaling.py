"""Serving-based scaling of nutrition values."""

import math
import re

from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.domain.nutrition import NutritionAnalysis, ScaledTotals

SERVING_STEP = 0.5

_WHOLE_NUMBER = re.compile(r"-?[0-9]+")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def scale(base: NutritionAnalysis, servings: float) -> ScaledTotals:
    """Multiply every field by servings and round each one independently."""
    return ScaledTotals(
        calories=round_half_up(base.calories * servings),
        protein_g=round_half_up(base.protein_g * servings),
        carbs_g=round_half_up(base.carbs_g * servings),
        fat_g=round_half_up(base.fat_g * servings),
        fiber_g=round_half_up(base.fiber_g * servings),
        sugar_g=round_half_up(base.sugar_g * servings),
        sodium_mg=round_half_up(base.sodium_mg * servings),
    )


def display_calories(
    base: NutritionAnalysis, servings: float, override: int | None
) -> int:
    """Return the override when set, otherwise the scaled base calories."""
    if override is not None:
        return override
    return round_half_up(base.calories * servings)


def parse_servings(raw: object) -> float:
    """Validate user-entered servings as a positive number."""
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidInputError("Servings must be a number.") from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError("Servings must be greater than zero.")
    return value


def parse_calories(raw: object) -> int:
    """Validate a user-entered calorie value as a non-negative integer."""
    if isinstance(raw, bool):
        raise InvalidInputError("Calories must be a whole number.")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and raw.is_integer():
        value = int(raw)
    elif isinstance(raw, str) and _WHOLE_NUMBER.fullmatch(raw.strip()):
        value = int(raw.strip())
    else:
        raise InvalidInputError("Calories must be a whole number.")
    if value < 0:
        raise InvalidInputError("Calories can't be negative.")
    return value


def step_servings(current: float, direction: int) -> float:
    """Move servings one step up or down; never steps below one step."""
    if direction > 0:
        return current + SERVING_STEP
    if current > SERVING_STEP:
        return current - SERVING_STEP
    return current
