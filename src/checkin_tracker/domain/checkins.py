"""Domain models for venue checkins."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CheckinRecord:
    """A single stay of a user at a venue.

    ``checkout_time`` is ``None`` while the user is still checked in. Once set it
    never goes back to ``None``.
    """

    id: UUID
    user_id: UUID
    venue_id: UUID
    checkin_time: datetime
    checkout_time: datetime | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_active(self) -> bool:
        return self.checkout_time is None


@dataclass(frozen=True)
class CheckinDetail:
    """Checkin joined with the username and venue name for display."""

    id: UUID
    user_id: UUID
    username: str | None
    venue_id: UUID
    venue_name: str | None
    checkin_time: datetime
    checkout_time: datetime | None
    created_at: datetime
