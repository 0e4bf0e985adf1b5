"""Domain errors surfaced to the UI layer."""


class TrackerError(Exception):
    """Base error carrying a user-facing message."""

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class InvalidInputError(TrackerError, ValueError):
    """Raised when user input is rejected before any state change."""


class PersistenceError(TrackerError):
    """Raised when the external store fails and local state was reverted."""
