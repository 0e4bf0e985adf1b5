"""Meal editing, analysis and logging endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from fitness_tracker.api.models import MealDraft, MealTotalsResponse
from fitness_tracker.config import resolve_timezone
from fitness_tracker.domain.errors import InvalidInputError
from fitness_tracker.domain.vision import NotFood
from fitness_tracker.services.ledger import IngredientLedger
from fitness_tracker.services.meals import MealEditor, record_totals

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.meals import MealRecord

_logger = logging.getLogger(__name__)

router = APIRouter(tags=["meals"])


@router.post("/meals/preview")
async def preview_meal(draft: MealDraft) -> MealTotalsResponse:
    """Apply servings, overrides and ingredient edits without saving."""
    editor = editor_from_draft(draft)
    return _totals_response(editor)


@router.post("/meals/analyze")
async def analyze_meal(request: Request) -> dict[str, object]:
    """Analyze a raw meal photo sent as the request body."""
    container: AppContainer = request.app.state.container
    image_bytes = await request.body()
    if not image_bytes:
        raise InvalidInputError("Please attach a photo of your meal.")
    try:
        result = await container.food_analysis_service.analyze(image_bytes)
    except Exception as exc:
        _logger.exception("Food analysis failed")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Couldn't analyze the photo. Please try again.",
        ) from exc
    if isinstance(result, NotFood):
        return {"status": "not_food", "reason": result.reason}
    return {
        "status": "food",
        "name": result.name,
        "meal_type": result.meal_type,
        "analysis": result.analysis.model_dump(mode="json"),
    }


@router.post("/users/{user_id}/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(
    user_id: UUID, draft: MealDraft, request: Request
) -> dict[str, object]:
    """Save a new meal for a user."""
    container: AppContainer = request.app.state.container
    editor = editor_from_draft(draft)
    record = await container.meal_log_service.save(
        user_id, editor, draft.logged_at, tz=_user_timezone(container, user_id)
    )
    return _record_payload(record)


@router.put("/users/{user_id}/meals/{meal_id}")
async def update_meal(
    user_id: UUID, meal_id: UUID, draft: MealDraft, request: Request
) -> dict[str, object]:
    """Save edits to an existing meal."""
    container: AppContainer = request.app.state.container
    existing = await _owned_meal(container, user_id, meal_id)
    editor = editor_from_draft(draft, meal_id=meal_id)
    editor.logged_at = draft.logged_at or existing.logged_at
    record = await container.meal_log_service.save(
        user_id, editor, tz=_user_timezone(container, user_id)
    )
    return _record_payload(record)


@router.get("/users/{user_id}/meals/{meal_id}")
async def get_meal(
    user_id: UUID, meal_id: UUID, request: Request
) -> dict[str, object]:
    """Return a stored meal with its displayed values."""
    container: AppContainer = request.app.state.container
    record = await _owned_meal(container, user_id, meal_id)
    return _record_payload(record)


@router.delete("/users/{user_id}/meals/{meal_id}")
async def delete_meal(
    user_id: UUID, meal_id: UUID, request: Request
) -> dict[str, str]:
    """Delete a stored meal."""
    container: AppContainer = request.app.state.container
    await _owned_meal(container, user_id, meal_id)
    await container.meal_log_service.delete(meal_id)
    return {"status": "ok"}


async def _owned_meal(
    container: AppContainer, user_id: UUID, meal_id: UUID
) -> MealRecord:
    record = await container.meal_log_service.get(meal_id)
    if record is None or record.user_id != user_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return record


def _user_timezone(container: AppContainer, user_id: UUID) -> ZoneInfo:
    return resolve_timezone(
        container.profile_service.get_timezone(user_id),
        container.settings.default_timezone,
    )


def editor_from_draft(draft: MealDraft, meal_id: UUID | None = None) -> MealEditor:
    """Replay client-side edits on a fresh editor.

    Servings are applied first, then the manual override, then ingredient
    edits, removals and additions, so ingredient changes win over a manual
    calorie value sent in the same request.
    """
    editor = MealEditor(
        name=draft.name,
        base=draft.analysis,
        meal_type=draft.meal_type,
        photo_ref=draft.photo_ref,
        meal_id=meal_id,
        logged_at=draft.logged_at,
        ledger=IngredientLedger(list(draft.analysis.ingredients)),
    )
    editor.set_servings(draft.servings)
    if draft.calorie_override is not None:
        editor.adjust_calories(draft.calorie_override)
    for edit in draft.edit_ingredients:
        editor.edit_ingredient(edit.index, edit.name, edit.portion_label, edit.calories)
    for index in sorted(set(draft.remove_ingredients), reverse=True):
        editor.remove_ingredient(index)
    for item in draft.add_ingredients:
        editor.add_ingredient(item.name, item.portion_label, item.calories)
    return editor


def _totals_response(editor: MealEditor) -> MealTotalsResponse:
    return MealTotalsResponse(
        servings=editor.servings,
        calorie_override=editor.calorie_override,
        ingredients=editor.ingredients,
        **asdict(editor.totals()),
    )


def _record_payload(record: MealRecord) -> dict[str, object]:
    return {
        "id": str(record.id) if record.id else None,
        "name": record.name,
        "meal_type": record.meal_type,
        "logged_at": record.logged_at.isoformat(),
        "servings": record.servings,
        "calorie_override": record.calorie_override,
        "photo_ref": record.photo_ref,
        "totals": asdict(record_totals(record)),
        "analysis": record.analysis.model_dump(mode="json"),
    }
