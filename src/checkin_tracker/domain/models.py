"""Domain models for users."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    email: str
    username: str
    password_hash: str = field(default="", repr=False)
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class UserProfile:
    """Public view of a user without credential material."""

    id: UUID
    email: str
    username: str
    first_name: str | None
    last_name: str | None
    created_at: datetime | None

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserProfile":
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
        )
