"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from checkin_tracker.domain.models import UserRecord
from checkin_tracker.services.users import UserRepository

_USER_COLUMNS = "id, email, username, password_hash, first_name, last_name, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        return self._first("id", str(user_id))

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with this email, if present."""
        return self._first("email", email)

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with this username, if present."""
        return self._first("username", username)

    def _first(self, column: str, value: str) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    created_raw = row.get("created_at")
    return UserRecord(
        id=UUID(str(row["id"])),
        email=str(row["email"]),
        username=str(row["username"]),
        password_hash=str(row.get("password_hash") or ""),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
