"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from food_tracker.domain.models import UserRecord
from food_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select("id, username")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            row = response.data[0]
            return UserRecord(id=UUID(row["id"]), username=str(row["username"]))
        return None
