"""Checkin endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse  # noqa: TC002

from checkin_tracker.api.errors import error_response, status_for
from checkin_tracker.api.models import ActiveCheckinsOut, CheckinOut, CheckinRequest
from checkin_tracker.domain.errors import CheckinTrackerError

if TYPE_CHECKING:
    from checkin_tracker.containers import AppContainer

router = APIRouter(prefix="/api/checkins", tags=["checkins"])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CheckinOut)
def check_in(payload: CheckinRequest, request: Request) -> CheckinOut | JSONResponse:
    """Check a user into a venue."""
    container: AppContainer = request.app.state.container
    if payload.user_id is None:
        return error_response(status.HTTP_400_BAD_REQUEST, "User ID is required")
    if payload.venue_id is None:
        return error_response(status.HTTP_400_BAD_REQUEST, "Venue ID is required")
    service = container.checkin_service
    try:
        checkin = service.check_in(payload.user_id, payload.venue_id)
    except CheckinTrackerError as exc:
        logger.info(
            "Checkin rejected: %s",
            exc.message,
            extra={"user_id": str(payload.user_id), "venue_id": str(payload.venue_id)},
        )
        return error_response(status.HTTP_400_BAD_REQUEST, exc.message)
    return CheckinOut.from_detail(service.describe([checkin])[0])


@router.put("/{checkin_id}/checkout", response_model=CheckinOut)
def check_out(checkin_id: UUID, request: Request) -> CheckinOut | JSONResponse:
    """Close an open checkin."""
    container: AppContainer = request.app.state.container
    service = container.checkin_service
    try:
        checkin = service.check_out(checkin_id)
    except CheckinTrackerError as exc:
        logger.info(
            "Checkout rejected: %s",
            exc.message,
            extra={"checkin_id": str(checkin_id)},
        )
        if container.settings.legacy_checkout_errors:
            return error_response(status.HTTP_404_NOT_FOUND, exc.message)
        return error_response(status_for(exc), exc.message)
    return CheckinOut.from_detail(service.describe([checkin])[0])


@router.get("/venue/{venue_id}")
def active_checkins_for_venue(venue_id: UUID, request: Request) -> ActiveCheckinsOut:
    """Return who is currently checked in at a venue."""
    container: AppContainer = request.app.state.container
    service = container.checkin_service
    details = service.describe(service.active_for_venue(venue_id))
    return ActiveCheckinsOut(
        count=len(details),
        checkins=[CheckinOut.from_detail(detail) for detail in details],
    )


@router.get("/user/{user_id}")
def checkin_history_for_user(user_id: UUID, request: Request) -> list[CheckinOut]:
    """Return a user's checkins, newest first."""
    container: AppContainer = request.app.state.container
    service = container.checkin_service
    details = service.describe(service.history_for_user(user_id))
    return [CheckinOut.from_detail(detail) for detail in details]


@router.delete("/{checkin_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_checkin(checkin_id: UUID, request: Request) -> Response:
    """Delete a checkin record."""
    container: AppContainer = request.app.state.container
    container.checkin_service.delete_checkin(checkin_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
