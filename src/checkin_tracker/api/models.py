"""Pydantic models for the JSON API."""

from dataclasses import asdict
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from checkin_tracker.domain.checkins import CheckinDetail
from checkin_tracker.domain.models import UserProfile
from checkin_tracker.domain.venues import Venue


class ApiModel(BaseModel):
    """Base model that speaks camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CheckinRequest(ApiModel):
    """Body of a checkin request; ids are validated by the route."""

    user_id: UUID | None = None
    venue_id: UUID | None = None


class CheckinOut(ApiModel):
    """Checkin with the username and venue name joined in."""

    id: UUID
    user_id: UUID
    username: str | None
    venue_id: UUID
    venue_name: str | None
    checkin_time: datetime
    checkout_time: datetime | None
    created_at: datetime

    @classmethod
    def from_detail(cls, detail: CheckinDetail) -> "CheckinOut":
        return cls(
            id=detail.id,
            user_id=detail.user_id,
            username=detail.username,
            venue_id=detail.venue_id,
            venue_name=detail.venue_name,
            checkin_time=detail.checkin_time,
            checkout_time=detail.checkout_time,
            created_at=detail.created_at,
        )


class ActiveCheckinsOut(ApiModel):
    """Currently open checkins at a venue."""

    count: int
    checkins: list[CheckinOut]


class VenueIn(ApiModel):
    """Attributes accepted when creating or updating a venue."""

    name: str = Field(min_length=1)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    address: str | None = None
    category: str | None = None
    phone_number: str | None = None
    website: str | None = None
    age_restriction: int | None = Field(default=None, ge=0)
    cover_charge: str | None = None
    description: str | None = None
    photo_url: str | None = None

    def to_payload(self) -> dict[str, object]:
        """Return column values for the venue store."""
        return self.model_dump(by_alias=False)


class VenueOut(ApiModel):
    """Venue as returned by the API."""

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

    @classmethod
    def from_venue(cls, venue: Venue) -> "VenueOut":
        return cls(**asdict(venue))


class UserOut(ApiModel):
    """Public user profile; never carries the password hash."""

    id: UUID
    email: str
    username: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserOut":
        return cls(**asdict(profile))
