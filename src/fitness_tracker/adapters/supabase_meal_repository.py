"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.meals import MealRecord
from fitness_tracker.domain.nutrition import NutritionAnalysis
from fitness_tracker.services.meals import MealRepository, record_totals
from fitness_tracker.services.stats import StatsRepository

_COLUMNS = (
    "id, user_id, meal_name, meal_type, logged_at, servings, calorie_override, "
    "ai_analysis, image_path"
)


@dataclass
class SupabaseMealRepository(MealRepository, StatsRepository):
    """Supabase implementation for meal logs and weekly queries."""

    client: Client

    def create_meal(self, user_id: UUID, record: MealRecord) -> MealRecord:
        """Insert a meal row and return the stored record."""
        payload = {"user_id": str(user_id), **_to_row(record)}
        response = self.client.table("meal_logs").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return _parse_row(response.data[0])

    def update_meal(self, record: MealRecord) -> MealRecord:
        """Update a meal row and return the stored record."""
        if record.id is None:
            raise ValueError("Cannot update a meal without an id")
        query = (
            self.client.table("meal_logs")
            .update(_to_row(record))
            .eq("id", str(record.id))
        )
        if record.user_id is not None:
            query = query.eq("user_id", str(record.user_id))
        response = query.execute()
        if not response.data:
            raise RuntimeError("Failed to update meal log")
        return _parse_row(response.data[0])

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table("meal_logs").delete().eq("id", str(meal_id)).execute()

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[MealRecord]:
        """Return meals whose local date falls within the range."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _to_row(record: MealRecord) -> dict[str, object]:
    totals = record_totals(record)
    return {
        "meal_name": record.name,
        "meal_type": record.meal_type,
        "date": record.logged_at.date().isoformat(),
        "logged_at": record.logged_at.isoformat(),
        "servings": record.servings,
        "calorie_override": record.calorie_override,
        "calories": totals.calories,
        "protein_g": totals.protein_g,
        "carbs_g": totals.carbs_g,
        "fat_g": totals.fat_g,
        "fiber_g": totals.fiber_g,
        "sugar_g": totals.sugar_g,
        "sodium_mg": totals.sodium_mg,
        "ai_analysis": record.analysis.model_dump(mode="json"),
        "image_path": record.photo_ref,
    }


def _parse_row(row: dict[str, object]) -> MealRecord:
    override = row.get("calorie_override")
    return MealRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("meal_name") or "Unknown Meal"),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        analysis=NutritionAnalysis.model_validate(row.get("ai_analysis") or {}),
        servings=float(row.get("servings") or 1),
        calorie_override=int(override) if override is not None else None,
        meal_type=str(row.get("meal_type") or "snack"),
        photo_ref=row.get("image_path"),
        user_id=UUID(str(row["user_id"])) if row.get("user_id") else None,
    )
