"""Per-user profile preferences used by the daily engine."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.catalog import DEFAULT_DIFFICULTY, EXERCISES_PER_DIFFICULTY
from fitness_tracker.domain.errors import InvalidInputError, PersistenceError

_logger = logging.getLogger(__name__)

_LOAD_FAILED = "Couldn't load your settings. Please try again."


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_difficulty(self, user_id: UUID) -> str | None:
        """Return the user's workout difficulty if set."""

    def set_difficulty(self, user_id: UUID, difficulty: str) -> None:
        """Update the user's workout difficulty."""

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the user's timezone if set."""


@dataclass
class ProfileService:
    """Service for profile preferences with defaults."""

    repository: ProfileRepository
    default_difficulty: str = DEFAULT_DIFFICULTY
    default_timezone: str = "UTC"

    def get_difficulty(self, user_id: UUID) -> str:
        """Return the user's difficulty or the default when unset or unknown."""
        try:
            stored = self.repository.get_difficulty(user_id)
        except Exception as exc:
            _logger.exception("Failed to load difficulty for %s", user_id)
            raise PersistenceError(_LOAD_FAILED) from exc
        difficulty = (stored or "").lower()
        if difficulty in EXERCISES_PER_DIFFICULTY:
            return difficulty
        return self.default_difficulty

    def set_difficulty(self, user_id: UUID, difficulty: str) -> None:
        """Persist a user's difficulty level."""
        normalized = difficulty.strip().lower()
        if normalized not in EXERCISES_PER_DIFFICULTY:
            raise InvalidInputError("Please choose easy, medium or hard.")
        try:
            self.repository.set_difficulty(user_id, normalized)
        except Exception as exc:
            _logger.exception("Failed to save difficulty for %s", user_id)
            raise PersistenceError(
                "Couldn't save your settings. Please try again."
            ) from exc

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user's timezone or the default if unset."""
        try:
            stored = self.repository.get_timezone(user_id)
        except Exception as exc:
            _logger.exception("Failed to load timezone for %s", user_id)
            raise PersistenceError(_LOAD_FAILED) from exc
        return stored or self.default_timezone
