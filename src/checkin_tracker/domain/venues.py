"""Domain models for venues and location queries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Venue:
    """Represents a venue stored in the database."""

    id: UUID
    name: str
    latitude: float
    longitude: float
    address: str | None = None
    category: str | None = None
    phone_number: str | None = None
    website: str | None = None
    age_restriction: int | None = None
    cover_charge: str | None = None
    description: str | None = None
    photo_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive latitude/longitude rectangle."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, latitude: float, longitude: float) -> bool:
        """Return true when the point lies inside the box, edges included."""
        return (
            self.min_lat <= latitude <= self.max_lat
            and self.min_lon <= longitude <= self.max_lon
        )
