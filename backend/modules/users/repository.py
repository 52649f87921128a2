"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import UserProfile


class UserRepository(BaseRepository[UserProfile]):
    """
    Repository for user profile data access.

    Profiles are keyed by the identity provider's subject identifier;
    the database enforces its uniqueness.
    """

    def sync_profile(
        self,
        subject_id: str,
        username: str,
        name: str,
        email: str,
    ) -> UserProfile:
        """
        Insert the profile or refresh last_login, atomically.

        Calls the ``sync_user_profile`` database function, which performs
        ``INSERT ... ON CONFLICT (subject_id) DO UPDATE SET last_login = now()``.
        The claim-derived defaults are only used when the row is created.
        """
        query = self._db.rpc(
            "sync_user_profile",
            {
                "p_subject_id": subject_id,
                "p_username": username,
                "p_name": name,
                "p_email": email,
            },
        )
        data = self._execute(query, "sync profile").data
        row = data[0] if isinstance(data, list) else data
        return self._map_to_profile(row)

    def update_contact(
        self,
        subject_id: str,
        changes: dict[str, Any],
    ) -> Optional[UserProfile]:
        """
        Update contact fields and last_login.

        Returns:
            The updated profile, or None if no profile matched.
        """
        data = {
            **changes,
            "last_login": datetime.now(timezone.utc).isoformat(),
        }
        query = (
            self._db.table("users")
            .update(data)
            .eq("subject_id", subject_id)
        )
        result = self._execute(query, "update profile")
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        return UserProfile(
            id=str(data["id"]),
            subject_id=data["subject_id"],
            username=data["username"],
            name=data["name"],
            email=data.get("email") or "",
            contact_number=data.get("contact_number"),
            country=data.get("country"),
            created_at=data["created_at"],
            last_login=data["last_login"],
        )
