"""User lookups for the checkin flows."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from checkin_tracker.domain.errors import NotFoundError
from checkin_tracker.domain.models import UserProfile, UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with this email, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with this username, if present."""


@dataclass
class UserService:
    """Application service for user lookups."""

    repository: UserRepository

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the public profile of a user."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserProfile.from_record(user)

    def find_by_email(self, email: str) -> UserProfile | None:
        """Return the profile for an email, if a user has it."""
        user = self.repository.get_by_email(email.strip())
        return UserProfile.from_record(user) if user else None

    def find_by_username(self, username: str) -> UserProfile | None:
        """Return the profile for a username, if a user has it."""
        user = self.repository.get_by_username(username.strip())
        return UserProfile.from_record(user) if user else None
