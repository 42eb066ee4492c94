"""User profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request

from checkin_tracker.api.models import UserOut
from checkin_tracker.domain.errors import InvalidInputError, NotFoundError

if TYPE_CHECKING:
    from checkin_tracker.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/lookup")
def lookup_user(
    request: Request, email: str | None = None, username: str | None = None
) -> UserOut:
    """Find a user by email or username."""
    container: AppContainer = request.app.state.container
    if email:
        profile = container.user_service.find_by_email(email)
    elif username:
        profile = container.user_service.find_by_username(username)
    else:
        raise InvalidInputError("Email or username is required")
    if profile is None:
        raise NotFoundError("User not found")
    return UserOut.from_profile(profile)


@router.get("/{user_id}")
def get_user(user_id: UUID, request: Request) -> UserOut:
    """Return a user's public profile."""
    container: AppContainer = request.app.state.container
    return UserOut.from_profile(container.user_service.get_profile(user_id))
