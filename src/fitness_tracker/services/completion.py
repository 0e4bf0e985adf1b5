"""Optimistic completion toggling for daily content."""

import asyncio
import logging
from dataclasses import dataclass

from fitness_tracker.domain.content import (
    ContentSource,
    DailyBoard,
    ToggleResult,
    ToggleState,
)
from fitness_tracker.domain.errors import InvalidInputError, PersistenceError
from fitness_tracker.services.content import ContentRepository

_logger = logging.getLogger(__name__)


@dataclass
class CompletionTracker:
    """Flips completion locally first and reconciles durable items with the store.

    Every toggle moves the item through ``PENDING`` to either ``COMMITTED``
    or ``REVERTED``. Ephemeral items commit immediately; durable items commit
    once the store confirms, and are rolled back when it fails.
    """

    repository: ContentRepository

    async def toggle(self, board: DailyBoard, item_id: str) -> ToggleResult | None:
        """Toggle an item's completion; returns None when the item is gone."""
        item = board.find(item_id)
        if item is None:
            _logger.debug("Toggle ignored, item %s not on board", item_id)
            return None
        if item.toggle_state is ToggleState.PENDING:
            _logger.warning("Concurrent toggle issued for item %s", item_id)

        previous = item.completed
        item.completed = not previous
        item.toggle_state = ToggleState.PENDING

        if item.source is ContentSource.EPHEMERAL:
            item.toggle_state = ToggleState.COMMITTED
            return _result(item.id, item.completed, item.toggle_state, None)

        try:
            record_id = await asyncio.to_thread(
                self.repository.save_completion,
                board.user_id,
                item.kind,
                item.id,
                board.day,
                item.completed,
                item.completion_record_id,
            )
        except Exception as exc:
            _logger.exception("Failed to save completion for item %s", item.id)
            item.completed = previous
            item.toggle_state = ToggleState.REVERTED
            raise PersistenceError(
                "Couldn't update your progress. Please try again."
            ) from exc

        if board.discarded:
            _logger.debug("Toggle result for %s arrived after reload", item.id)
            return _result(item.id, item.completed, ToggleState.COMMITTED, record_id)
        if item.completion_record_id is None:
            item.completion_record_id = record_id
        item.toggle_state = ToggleState.COMMITTED
        return _result(item.id, item.completed, item.toggle_state, record_id)

    async def delete(
        self, board: DailyBoard, item_id: str, *, confirmed: bool
    ) -> bool:
        """Delete a durable item after confirmation.

        Ephemeral items and unknown ids are left alone and return False.
        """
        item = board.find(item_id)
        if item is None or item.source is ContentSource.EPHEMERAL:
            _logger.debug("Delete ignored for item %s", item_id)
            return False
        if not confirmed:
            raise InvalidInputError("Please confirm that you want to delete this item.")
        try:
            await asyncio.to_thread(self.repository.delete_item, item.kind, item.id)
        except Exception as exc:
            _logger.exception("Failed to delete item %s", item.id)
            raise PersistenceError(
                "Couldn't delete the item. Please try again."
            ) from exc
        return board.remove(item.id)


def _result(
    item_id: str, completed: bool, state: ToggleState, record_id: str | None
) -> ToggleResult:
    return ToggleResult(
        item_id=item_id,
        completed=completed,
        state=state,
        completion_record_id=record_id,
    )
