"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import date, datetime
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fitness_tracker.api.meals import router as meals_router
from fitness_tracker.api.models import CreateItemRequest, DifficultyRequest
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.config import resolve_timezone
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.content import ContentItem, DailyBoard
from fitness_tracker.domain.errors import InvalidInputError, PersistenceError
from fitness_tracker.domain.stats import WeeklySummary, WeeklyTrend
from fitness_tracker.services.content import (
    burned_calories,
    checklist_stats,
    deletion_warning,
    display_order,
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)

    @app.exception_handler(InvalidInputError)
    async def invalid_input(_: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": exc.user_message},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_failed(_: Request, exc: PersistenceError) -> JSONResponse:
        logger.warning("Store unavailable: %s", exc.__cause__)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": exc.user_message},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/users/{user_id}/board")
    async def get_board(
        user_id: UUID,
        request: Request,
        day: date | None = None,
        difficulty: str | None = None,
    ) -> dict[str, object]:
        """Load the daily board for the user's local calendar day."""
        state_container: AppContainer = request.app.state.container
        profiles = state_container.profile_service
        resolved_day = day or _local_today(state_container, user_id)
        resolved_difficulty = (
            difficulty.lower() if difficulty else profiles.get_difficulty(user_id)
        )
        board = await state_container.content_service.load_board(
            user_id, resolved_day, resolved_difficulty
        )
        return _board_payload(board)

    @app.post("/users/{user_id}/board/items", status_code=status.HTTP_201_CREATED)
    async def create_item(
        user_id: UUID, payload: CreateItemRequest, request: Request
    ) -> dict[str, object]:
        """Create a durable habit or exercise on the current board."""
        state_container: AppContainer = request.app.state.container
        board = await _current_board(state_container, user_id)
        item = await state_container.content_service.add_item(
            board,
            payload.kind,
            payload.title,
            subtitle=payload.subtitle,
            icon=payload.icon,
            recurring=payload.recurring,
        )
        return _item_payload(item)

    @app.post("/users/{user_id}/board/items/{item_id}/toggle")
    async def toggle_item(
        user_id: UUID, item_id: str, request: Request
    ) -> dict[str, object]:
        """Toggle completion of a board item."""
        state_container: AppContainer = request.app.state.container
        board = await _current_board(state_container, user_id)
        result = await state_container.completion_tracker.toggle(board, item_id)
        if result is None:
            return {"status": "ignored"}
        return {"status": "ok", **asdict(result)}

    @app.delete("/users/{user_id}/board/items/{item_id}")
    async def delete_item(
        user_id: UUID, item_id: str, request: Request, confirmed: bool = False
    ) -> dict[str, object]:
        """Delete a durable item once the user has confirmed."""
        state_container: AppContainer = request.app.state.container
        board = await _current_board(state_container, user_id)
        deleted = await state_container.completion_tracker.delete(
            board, item_id, confirmed=confirmed
        )
        return {"status": "ok" if deleted else "ignored"}

    @app.put("/users/{user_id}/difficulty")
    async def set_difficulty(
        user_id: UUID, payload: DifficultyRequest, request: Request
    ) -> dict[str, str]:
        """Update the user's workout difficulty."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.set_difficulty(user_id, payload.difficulty)
        return {"status": "ok"}

    @app.get("/users/{user_id}/stats/weekly")
    async def weekly_stats(
        user_id: UUID,
        request: Request,
        weeks_ago: int = 0,
        today: date | None = None,
    ) -> dict[str, object]:
        """Return a week of nutrition totals compared with the week before."""
        state_container: AppContainer = request.app.state.container
        if weeks_ago < 0:
            raise InvalidInputError("Cannot navigate to future weeks.")
        tz = resolve_timezone(
            state_container.profile_service.get_timezone(user_id),
            state_container.settings.default_timezone,
        )
        resolved_today = today or datetime.now(tz).date()
        trend = await state_container.stats_service.get_trend(
            user_id, resolved_today, weeks_ago, tz
        )
        return _trend_payload(trend)

    return app


def _local_today(container: AppContainer, user_id: UUID) -> date:
    tz = resolve_timezone(
        container.profile_service.get_timezone(user_id),
        container.settings.default_timezone,
    )
    return datetime.now(tz).date()


async def _current_board(container: AppContainer, user_id: UUID) -> DailyBoard:
    board = container.content_service.current_board(user_id)
    if board is not None:
        return board
    return await container.content_service.load_board(
        user_id,
        _local_today(container, user_id),
        container.profile_service.get_difficulty(user_id),
    )


def _item_payload(item: ContentItem) -> dict[str, object]:
    return {
        "id": item.id,
        "kind": item.kind.value,
        "title": item.title,
        "subtitle": item.subtitle,
        "icon": item.icon_ref,
        "source": item.source.value,
        "completed": item.completed,
        "recurring": item.recurring,
        "sort_order": item.sort_order,
        "calories": item.calories,
        "duration": item.duration,
        "deletion_warning": deletion_warning(item),
    }


def _board_payload(board: DailyBoard) -> dict[str, object]:
    return {
        "day": board.day.isoformat(),
        "difficulty": board.difficulty,
        "habits": [_item_payload(item) for item in display_order(board.habits)],
        "exercises": [
            _item_payload(item) for item in display_order(board.exercises)
        ],
        "habit_stats": asdict(checklist_stats(board.habits)),
        "exercise_stats": asdict(checklist_stats(board.exercises)),
        "burned_calories": burned_calories(board.exercises),
    }


def _summary_payload(summary: WeeklySummary) -> dict[str, object]:
    return {
        "buckets": [
            {**asdict(bucket), "date": bucket.date.isoformat()}
            for bucket in summary.buckets
        ],
        "total_calories": summary.total_calories,
        "average_calories": summary.average_calories,
        "days_with_data": summary.days_with_data,
    }


def _trend_payload(trend: WeeklyTrend) -> dict[str, object]:
    return {
        "week_start": trend.week_start.isoformat(),
        "current": _summary_payload(trend.current),
        "previous": _summary_payload(trend.previous),
        "change": asdict(trend.change),
    }
