"""Supabase-backed checkin repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from checkin_tracker.domain.checkins import CheckinRecord
from checkin_tracker.services.checkins import CheckinRepository

_COLUMNS = "id, user_id, venue_id, checkin_time, checkout_time, created_at, updated_at"


@dataclass
class SupabaseCheckinRepository(CheckinRepository):
    """Supabase implementation for venue checkins."""

    client: Client

    def get_checkin(self, checkin_id: UUID) -> CheckinRecord | None:
        """Return a checkin by id, if present."""
        response = (
            self.client.table("checkins")
            .select(_COLUMNS)
            .eq("id", str(checkin_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_checkin(response.data[0])

    def get_last_for_user_and_venue(
        self, user_id: UUID, venue_id: UUID
    ) -> CheckinRecord | None:
        """Return the most recent checkin for a user at a venue."""
        response = (
            self.client.table("checkins")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("venue_id", str(venue_id))
            .order("checkin_time", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_checkin(response.data[0])

    def list_active_for_user(self, user_id: UUID) -> list[CheckinRecord]:
        """Return open checkins for a user."""
        response = (
            self.client.table("checkins")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .is_("checkout_time", "null")
            .execute()
        )
        return [_parse_checkin(row) for row in response.data or []]

    def list_active_for_venue(self, venue_id: UUID) -> list[CheckinRecord]:
        """Return open checkins at a venue."""
        response = (
            self.client.table("checkins")
            .select(_COLUMNS)
            .eq("venue_id", str(venue_id))
            .is_("checkout_time", "null")
            .order("checkin_time")
            .execute()
        )
        return [_parse_checkin(row) for row in response.data or []]

    def list_history_for_user(self, user_id: UUID) -> list[CheckinRecord]:
        """Return all checkins for a user, newest first."""
        response = (
            self.client.table("checkins")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("checkin_time", desc=True)
            .execute()
        )
        return [_parse_checkin(row) for row in response.data or []]

    def list_expired(self, cutoff: datetime) -> list[CheckinRecord]:
        """Return open checkins that started before the cutoff."""
        response = (
            self.client.table("checkins")
            .select(_COLUMNS)
            .is_("checkout_time", "null")
            .lt("checkin_time", cutoff.isoformat())
            .execute()
        )
        return [_parse_checkin(row) for row in response.data or []]

    def create_checkin(
        self, user_id: UUID, venue_id: UUID, checkin_time: datetime
    ) -> CheckinRecord:
        """Insert an open checkin row and return it."""
        stamp = checkin_time.isoformat()
        response = (
            self.client.table("checkins")
            .insert(
                {
                    "user_id": str(user_id),
                    "venue_id": str(venue_id),
                    "checkin_time": stamp,
                    "checkout_time": None,
                    "created_at": stamp,
                    "updated_at": stamp,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create checkin")
        return _parse_checkin(response.data[0])

    def close_checkin(
        self, checkin_id: UUID, checkout_time: datetime
    ) -> CheckinRecord | None:
        """Set checkout_time on a row that is still open."""
        stamp = checkout_time.isoformat()
        response = (
            self.client.table("checkins")
            .update({"checkout_time": stamp, "updated_at": stamp})
            .eq("id", str(checkin_id))
            .is_("checkout_time", "null")
            .execute()
        )
        if not response.data:
            return None
        return _parse_checkin(response.data[0])

    def delete_checkin(self, checkin_id: UUID) -> None:
        """Delete a checkin row."""
        self.client.table("checkins").delete().eq("id", str(checkin_id)).execute()


def _parse_checkin(row: dict[str, object]) -> CheckinRecord:
    """Parse a checkin row into a domain model."""
    checkout_raw = row.get("checkout_time")
    return CheckinRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        venue_id=UUID(str(row["venue_id"])),
        checkin_time=datetime.fromisoformat(str(row["checkin_time"])),
        checkout_time=(
            datetime.fromisoformat(checkout_raw)
            if isinstance(checkout_raw, str) and checkout_raw
            else None
        ),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
