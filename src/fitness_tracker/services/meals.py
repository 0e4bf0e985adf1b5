"""Meal editing and persistence."""

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, tzinfo
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import PersistenceError
from fitness_tracker.domain.meals import MealRecord
from fitness_tracker.domain.nutrition import Ingredient, NutritionAnalysis, ScaledTotals
from fitness_tracker.domain.vision import AnalyzedMeal
from fitness_tracker.services.ledger import IngredientLedger
from fitness_tracker.services.scaling import (
    display_calories,
    parse_calories,
    parse_servings,
    scale,
    step_servings,
)

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal records."""

    def create_meal(self, user_id: UUID, record: MealRecord) -> MealRecord:
        """Insert a meal and return it with its id."""

    def update_meal(self, record: MealRecord) -> MealRecord:
        """Update servings, override and analysis of a meal."""

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id, if present."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal by id."""


def record_totals(record: MealRecord) -> ScaledTotals:
    """Return the scaled values shown for a stored meal."""
    totals = scale(record.analysis, record.servings)
    return replace(
        totals,
        calories=display_calories(
            record.analysis, record.servings, record.calorie_override
        ),
    )


@dataclass
class MealEditor:
    """In-progress meal: servings, calorie override and ingredient ledger."""

    name: str
    base: NutritionAnalysis
    servings: float = 1.0
    calorie_override: int | None = None
    meal_type: str = "snack"
    photo_ref: str | None = None
    meal_id: UUID | None = None
    logged_at: datetime | None = None
    ledger: IngredientLedger = field(default_factory=IngredientLedger)

    @classmethod
    def from_analysis(
        cls, meal: AnalyzedMeal, photo_ref: str | None = None
    ) -> "MealEditor":
        """Start editing a freshly analysed meal."""
        return cls(
            name=meal.name,
            base=meal.analysis,
            meal_type=meal.meal_type,
            photo_ref=photo_ref,
            ledger=IngredientLedger(list(meal.analysis.ingredients)),
        )

    @classmethod
    def from_record(cls, record: MealRecord) -> "MealEditor":
        """Start editing a stored meal."""
        return cls(
            name=record.name,
            base=record.analysis,
            servings=record.servings,
            calorie_override=record.calorie_override,
            meal_type=record.meal_type,
            photo_ref=record.photo_ref,
            meal_id=record.id,
            logged_at=record.logged_at,
            ledger=IngredientLedger(list(record.analysis.ingredients)),
        )

    @property
    def displayed_calories(self) -> int:
        return display_calories(self.base, self.servings, self.calorie_override)

    def totals(self) -> ScaledTotals:
        """Return scaled macros with the displayed calorie value."""
        return replace(
            scale(self.base, self.servings), calories=self.displayed_calories
        )

    def set_servings(self, raw: object) -> float:
        """Apply user-entered servings; any calorie override becomes stale."""
        self.servings = parse_servings(raw)
        self.calorie_override = None
        return self.servings

    def step_servings(self, direction: int) -> float:
        """Step servings by half a serving up or down."""
        stepped = step_servings(self.servings, direction)
        if stepped != self.servings:
            self.servings = stepped
            self.calorie_override = None
        return self.servings

    def adjust_calories(self, raw: object) -> int:
        """Set a manual calorie override."""
        self.calorie_override = parse_calories(raw)
        return self.calorie_override

    def add_ingredient(self, name: str, portion_label: str, calories: object) -> None:
        self.ledger.add(name, portion_label, calories)
        self._apply_ledger()

    def edit_ingredient(
        self, index: int, name: str, portion_label: str, calories: object
    ) -> None:
        if self.ledger.edit(index, name, portion_label, calories) is not None:
            self._apply_ledger()

    def remove_ingredient(self, index: int) -> None:
        if self.ledger.remove(index) is not None:
            self._apply_ledger()

    @property
    def ingredients(self) -> list[Ingredient]:
        return list(self.ledger.ingredients)

    def to_record(self, logged_at: datetime) -> MealRecord:
        """Return the meal as a record ready to persist."""
        analysis = self.base.model_copy(
            update={"ingredients": list(self.ledger.ingredients)}
        )
        return MealRecord(
            id=self.meal_id,
            name=self.name,
            logged_at=logged_at,
            analysis=analysis,
            servings=self.servings,
            calorie_override=self.calorie_override,
            meal_type=self.meal_type,
            photo_ref=self.photo_ref,
        )

    def _apply_ledger(self) -> None:
        self.calorie_override = self.ledger.calorie_override(self.servings)


@dataclass
class MealLogService:
    """Service that persists edited meals."""

    repository: MealRepository

    async def save(
        self,
        user_id: UUID,
        editor: MealEditor,
        logged_at: datetime | None = None,
        tz: tzinfo | None = None,
    ) -> MealRecord:
        """Insert a new meal or update the one being edited.

        With ``tz`` the timestamp is stored in the user's local offset, so the
        stored calendar date is the user's local day.
        """
        when = logged_at or editor.logged_at or datetime.now(tz).astimezone(tz)
        if tz is not None and when.tzinfo is not None:
            when = when.astimezone(tz)
        record = replace(editor.to_record(when), user_id=user_id)
        try:
            if editor.meal_id is None:
                saved = await asyncio.to_thread(
                    self.repository.create_meal, user_id, record
                )
            else:
                saved = await asyncio.to_thread(self.repository.update_meal, record)
        except Exception as exc:
            _logger.exception("Failed to save meal %s", editor.meal_id)
            raise PersistenceError("Couldn't save your meal. Please try again.") from exc
        editor.meal_id = saved.id
        editor.logged_at = saved.logged_at
        return saved

    async def get(self, meal_id: UUID) -> MealRecord | None:
        """Return a stored meal."""
        return await asyncio.to_thread(self.repository.get_meal, meal_id)

    async def delete(self, meal_id: UUID) -> None:
        """Delete a stored meal."""
        try:
            await asyncio.to_thread(self.repository.delete_meal, meal_id)
        except Exception as exc:
            _logger.exception("Failed to delete meal %s", meal_id)
            raise PersistenceError(
                "Couldn't delete your meal. Please try again."
            ) from exc
