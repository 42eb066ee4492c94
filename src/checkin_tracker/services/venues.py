"""Venue catalogue and proximity search."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from checkin_tracker.domain.errors import NotFoundError
from checkin_tracker.domain.venues import BoundingBox, Venue
from checkin_tracker.services.geo import bounding_box

logger = logging.getLogger(__name__)


class VenueRepository(Protocol):
    """Persistence interface for venues."""

    def get_venue(self, venue_id: UUID) -> Venue | None:
        """Return a venue by id, if present."""

    def list_venues(self) -> list[Venue]:
        """Return every venue."""

    def create_venue(self, payload: dict[str, object]) -> Venue:
        """Create a venue and return it."""

    def update_venue(self, venue_id: UUID, payload: dict[str, object]) -> Venue | None:
        """Update a venue and return it, or None when it does not exist."""

    def delete_venue(self, venue_id: UUID) -> None:
        """Delete a venue."""

    def list_by_category(self, category: str) -> list[Venue]:
        """Return venues in a category."""

    def list_in_bounds(self, box: BoundingBox) -> list[Venue]:
        """Return venues whose coordinates fall inside the box."""

    def search_by_name(self, query: str, prefix: bool = False) -> list[Venue]:
        """Case-insensitive name search, by substring or by prefix."""


@dataclass
class VenueService:
    """Application service for venues."""

    repository: VenueRepository

    def list_venues(self) -> list[Venue]:
        """Return all venues."""
        return self.repository.list_venues()

    def get_venue(self, venue_id: UUID) -> Venue:
        """Return a venue or raise when it does not exist."""
        venue = self.repository.get_venue(venue_id)
        if venue is None:
            raise NotFoundError("Venue not found")
        return venue

    def create_venue(self, payload: dict[str, object]) -> Venue:
        """Create a venue from validated attributes."""
        venue = self.repository.create_venue(payload)
        logger.info("Venue created", extra={"venue_id": str(venue.id)})
        return venue

    def update_venue(self, venue_id: UUID, payload: dict[str, object]) -> Venue:
        """Replace the attributes of an existing venue."""
        venue = self.repository.update_venue(venue_id, payload)
        if venue is None:
            raise NotFoundError("Venue not found")
        return venue

    def delete_venue(self, venue_id: UUID) -> None:
        """Delete a venue; missing ids are ignored."""
        self.repository.delete_venue(venue_id)

    def list_by_category(self, category: str) -> list[Venue]:
        """Return venues in a category."""
        return self.repository.list_by_category(category)

    def search(self, query: str, prefix: bool = False) -> list[Venue]:
        """Search venues by name."""
        cleaned = query.strip()
        if not cleaned:
            return []
        return self.repository.search_by_name(cleaned, prefix=prefix)

    def nearby(self, lat: float, lon: float, radius_miles: float) -> list[Venue]:
        """Return venues inside the bounding box of a radius around a point."""
        box = bounding_box(lat, lon, radius_miles)
        return [
            venue
            for venue in self.repository.list_in_bounds(box)
            if box.contains(venue.latitude, venue.longitude)
        ]
