"""Venue endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request, Response, status

from checkin_tracker.api.models import VenueIn, VenueOut

if TYPE_CHECKING:
    from checkin_tracker.containers import AppContainer

router = APIRouter(prefix="/api/venues", tags=["venues"])


@router.get("")
def list_venues(request: Request) -> list[VenueOut]:
    """Return all venues."""
    container: AppContainer = request.app.state.container
    return [VenueOut.from_venue(v) for v in container.venue_service.list_venues()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_venue(payload: VenueIn, request: Request) -> VenueOut:
    """Create a venue."""
    container: AppContainer = request.app.state.container
    venue = container.venue_service.create_venue(payload.to_payload())
    return VenueOut.from_venue(venue)


@router.get("/nearby")
def nearby_venues(
    request: Request,
    lat: float = Query(ge=-90, le=90),
    lon: float = Query(ge=-180, le=180),
    radius_mi: float = Query(alias="radiusMi", gt=0),
) -> list[VenueOut]:
    """Return venues inside the bounding box of a radius in miles."""
    container: AppContainer = request.app.state.container
    venues = container.venue_service.nearby(lat, lon, radius_mi)
    return [VenueOut.from_venue(venue) for venue in venues]


@router.get("/search")
def search_venues(
    request: Request, query: str, prefix: bool = False
) -> list[VenueOut]:
    """Search venues by name."""
    container: AppContainer = request.app.state.container
    venues = container.venue_service.search(query, prefix=prefix)
    return [VenueOut.from_venue(venue) for venue in venues]


@router.get("/category/{category}")
def venues_by_category(category: str, request: Request) -> list[VenueOut]:
    """Return venues in a category."""
    container: AppContainer = request.app.state.container
    venues = container.venue_service.list_by_category(category)
    return [VenueOut.from_venue(venue) for venue in venues]


@router.get("/{venue_id}")
def get_venue(venue_id: UUID, request: Request) -> VenueOut:
    """Return a venue by id."""
    container: AppContainer = request.app.state.container
    return VenueOut.from_venue(container.venue_service.get_venue(venue_id))


@router.put("/{venue_id}")
def update_venue(venue_id: UUID, payload: VenueIn, request: Request) -> VenueOut:
    """Replace a venue's attributes."""
    container: AppContainer = request.app.state.container
    venue = container.venue_service.update_venue(venue_id, payload.to_payload())
    return VenueOut.from_venue(venue)


@router.delete("/{venue_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_venue(venue_id: UUID, request: Request) -> Response:
    """Delete a venue."""
    container: AppContainer = request.app.state.container
    container.venue_service.delete_venue(venue_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
