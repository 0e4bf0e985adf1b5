"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile preferences."""

    client: Client

    def get_difficulty(self, user_id: UUID) -> str | None:
        """Return the stored difficulty for a user."""
        return self._get_field(user_id, "difficulty")

    def set_difficulty(self, user_id: UUID, difficulty: str) -> None:
        """Update the user's difficulty."""
        self.client.table("profiles").update(
            {
                "difficulty": difficulty,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).eq("id", str(user_id)).execute()

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the stored timezone for a user."""
        return self._get_field(user_id, "timezone")

    def _get_field(self, user_id: UUID, column: str) -> str | None:
        response = (
            self.client.table("profiles")
            .select(column)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get(column)
