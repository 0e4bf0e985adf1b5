"""Food photo analysis using LLM vision."""

import base64
from dataclasses import dataclass
from typing import Protocol

from fitness_tracker.domain.nutrition import Ingredient, NutritionAnalysis
from fitness_tracker.domain.vision import AnalyzedMeal, NotFood, VisionMealExtract

_NUMBER = {"type": "number", "minimum": 0}

MEAL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "is_food": {"type": "boolean"},
        "meal_name": {"anyOf": [{"type": "string"}, {"type": "null"}]},
        "meal_type": {
            "anyOf": [
                {"type": "string", "enum": ["breakfast", "lunch", "dinner", "snack"]},
                {"type": "null"},
            ]
        },
        "total_calories": {"anyOf": [_NUMBER, {"type": "null"}]},
        "macros": {
            "anyOf": [
                {
                    "type": "object",
                    "properties": {
                        "protein_g": _NUMBER,
                        "carbs_g": _NUMBER,
                        "fat_g": _NUMBER,
                        "fiber_g": _NUMBER,
                        "sugar_g": _NUMBER,
                        "sodium_mg": _NUMBER,
                    },
                    "required": [
                        "protein_g",
                        "carbs_g",
                        "fat_g",
                        "fiber_g",
                        "sugar_g",
                        "sodium_mg",
                    ],
                    "additionalProperties": False,
                },
                {"type": "null"},
            ]
        },
        "ingredients": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "portion": {"type": "string"},
                    "calories": {"type": "integer", "minimum": 0},
                },
                "required": ["name", "portion", "calories"],
                "additionalProperties": False,
            },
        },
        "notes": {"anyOf": [{"type": "string"}, {"type": "null"}]},
    },
    "required": [
        "is_food",
        "meal_name",
        "meal_type",
        "total_calories",
        "macros",
        "ingredients",
        "notes",
    ],
    "additionalProperties": False,
}

MEAL_PROMPT = (
    "Analyze the food in this photo. If it does not show food, set is_food to "
    "false and explain why in notes. Otherwise estimate calories and macros "
    "for one serving and list the visible ingredients with a portion and "
    "calories for each."
)


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

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
        """Return structured vision extraction data."""


@dataclass
class FoodAnalysisService:
    """Turns a food photo into a nutrition analysis or a not-food signal."""

    client: VisionClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze(self, image_bytes: bytes) -> AnalyzedMeal | NotFood:
        """Analyze a meal photo via the configured client."""
        raw = await self.client.extract(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            image_data_url=_to_data_url(image_bytes),
            schema=MEAL_SCHEMA,
            prompt=MEAL_PROMPT,
        )
        return to_analyzed_meal(VisionMealExtract.model_validate(raw))


def to_analyzed_meal(extract: VisionMealExtract) -> AnalyzedMeal | NotFood:
    """Convert a validated extraction into the engine's meal input."""
    if not extract.is_food:
        return NotFood(reason=extract.notes or "No food detected in the photo.")
    macros = extract.macros
    analysis = NutritionAnalysis(
        calories=extract.total_calories or 0.0,
        protein_g=macros.protein_g if macros else 0.0,
        carbs_g=macros.carbs_g if macros else 0.0,
        fat_g=macros.fat_g if macros else 0.0,
        fiber_g=macros.fiber_g if macros else 0.0,
        sugar_g=macros.sugar_g if macros else 0.0,
        sodium_mg=macros.sodium_mg if macros else 0.0,
        ingredients=[
            Ingredient(
                name=item.name,
                portion_label=item.portion,
                calories=item.calories,
            )
            for item in extract.ingredients
            if item.name.strip() and item.portion.strip()
        ],
    )
    return AnalyzedMeal(
        name=extract.meal_name or "Unknown Meal",
        meal_type=extract.meal_type or "snack",
        analysis=analysis,
    )


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{_detect_mime_type(image_bytes)};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[4:12] in {b"ftypheic", b"ftypheix", b"ftypmif1"}:
        return "image/heic"
    return "image/jpeg"
