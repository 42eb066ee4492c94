"""Supabase implementation for venues."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from checkin_tracker.domain.venues import BoundingBox, Venue
from checkin_tracker.services.venues import VenueRepository


@dataclass
class SupabaseVenueRepository(VenueRepository):
    """Supabase-backed repository for venues."""

    client: Client

    def get_venue(self, venue_id: UUID) -> Venue | None:
        """Return a venue by id, if present."""
        response = (
            self.client.table("venues")
            .select("*")
            .eq("id", str(venue_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_venue(response.data[0])

    def list_venues(self) -> list[Venue]:
        """Return every venue ordered by name."""
        response = self.client.table("venues").select("*").order("name").execute()
        return [_parse_venue(row) for row in response.data or []]

    def create_venue(self, payload: dict[str, object]) -> Venue:
        """Create a venue row and return it."""
        response = self.client.table("venues").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create venue")
        return _parse_venue(response.data[0])

    def update_venue(self, venue_id: UUID, payload: dict[str, object]) -> Venue | None:
        """Update a venue row and return it."""
        response = (
            self.client.table("venues")
            .update(payload)
            .eq("id", str(venue_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_venue(response.data[0])

    def delete_venue(self, venue_id: UUID) -> None:
        """Delete a venue row."""
        self.client.table("venues").delete().eq("id", str(venue_id)).execute()

    def list_by_category(self, category: str) -> list[Venue]:
        """Return venues in a category."""
        response = (
            self.client.table("venues").select("*").eq("category", category).execute()
        )
        return [_parse_venue(row) for row in response.data or []]

    def list_in_bounds(self, box: BoundingBox) -> list[Venue]:
        """Return venues inside a latitude/longitude rectangle."""
        response = (
            self.client.table("venues")
            .select("*")
            .gte("latitude", box.min_lat)
            .lte("latitude", box.max_lat)
            .gte("longitude", box.min_lon)
            .lte("longitude", box.max_lon)
            .execute()
        )
        return [_parse_venue(row) for row in response.data or []]

    def search_by_name(self, query: str, prefix: bool = False) -> list[Venue]:
        """Search venues by name, case-insensitively."""
        pattern = f"{query}%" if prefix else f"%{query}%"
        response = (
            self.client.table("venues").select("*").ilike("name", pattern).execute()
        )
        return [_parse_venue(row) for row in response.data or []]


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def _parse_venue(row: dict[str, object]) -> Venue:
    """Parse a venue row into a domain model."""
    age_restriction = row.get("age_restriction")
    return Venue(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        latitude=float(row["latitude"]),
        longitude=float(row["longitude"]),
        address=row.get("address"),
        category=row.get("category"),
        phone_number=row.get("phone_number"),
        website=row.get("website"),
        age_restriction=int(age_restriction) if age_restriction is not None else None,
        cover_charge=row.get("cover_charge"),
        description=row.get("description"),
        photo_url=row.get("photo_url"),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )
