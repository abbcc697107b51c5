"""User lookup port."""

from typing import Protocol
from uuid import UUID

from food_tracker.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
