"""Checkin state machine for venue presence."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Protocol
from uuid import UUID

from checkin_tracker.domain.checkins import CheckinDetail, CheckinRecord
from checkin_tracker.domain.errors import ConflictError, NotFoundError
from checkin_tracker.services.clock import Clock, SystemClock
from checkin_tracker.services.locks import KeyedLocks
from checkin_tracker.services.users import UserRepository
from checkin_tracker.services.venues import VenueRepository

COOLDOWN_MINUTES = 20
MAX_DWELL = timedelta(hours=2)

logger = logging.getLogger(__name__)


class CheckinRepository(Protocol):
    """Persistence interface for checkins."""

    def get_checkin(self, checkin_id: UUID) -> CheckinRecord | None:
        """Return a checkin by id, if present."""

    def get_last_for_user_and_venue(
        self, user_id: UUID, venue_id: UUID
    ) -> CheckinRecord | None:
        """Return the checkin with the latest checkin_time for the pair."""

    def list_active_for_user(self, user_id: UUID) -> list[CheckinRecord]:
        """Return the user's checkins without a checkout time."""

    def list_active_for_venue(self, venue_id: UUID) -> list[CheckinRecord]:
        """Return the venue's checkins without a checkout time."""

    def list_history_for_user(self, user_id: UUID) -> list[CheckinRecord]:
        """Return all checkins of a user, newest checkin_time first."""

    def list_expired(self, cutoff: datetime) -> list[CheckinRecord]:
        """Return active checkins whose checkin_time is before the cutoff."""

    def create_checkin(
        self, user_id: UUID, venue_id: UUID, checkin_time: datetime
    ) -> CheckinRecord:
        """Create an active checkin and return it."""

    def close_checkin(
        self, checkin_id: UUID, checkout_time: datetime
    ) -> CheckinRecord | None:
        """Stamp the checkout time on an active checkin.

        Returns None when the checkin is missing or already closed.
        """

    def delete_checkin(self, checkin_id: UUID) -> None:
        """Delete a checkin."""


@dataclass
class CheckinService:
    """Validates and applies checkins, checkouts and expiry sweeps.

    Every write for a user happens while holding that user's lock, so two
    concurrent checkins cannot both pass the duplicate and cooldown checks.
    """

    user_repository: UserRepository
    venue_repository: VenueRepository
    checkin_repository: CheckinRepository
    clock: Clock = field(default_factory=SystemClock)
    locks: KeyedLocks = field(default_factory=KeyedLocks)
    cooldown_minutes: int = COOLDOWN_MINUTES
    max_dwell: timedelta = MAX_DWELL

    def check_in(
        self, user_id: UUID, venue_id: UUID, now: datetime | None = None
    ) -> CheckinRecord:
        """Check a user into a venue, closing their other active checkins."""
        with self.locks.hold(user_id):
            now = now if now is not None else self.clock.now()
            if self.user_repository.get_user(user_id) is None:
                raise NotFoundError("User not found")
            if self.venue_repository.get_venue(venue_id) is None:
                raise NotFoundError("Venue not found")

            previous = self.checkin_repository.get_last_for_user_and_venue(
                user_id, venue_id
            )
            if previous is not None:
                self._ensure_can_return(previous, now)

            for active in self.checkin_repository.list_active_for_user(user_id):
                if self.checkin_repository.close_checkin(active.id, now) is None:
                    continue
                logger.info(
                    "Auto checkout on new checkin",
                    extra={"checkin_id": str(active.id), "user_id": str(user_id)},
                )

            checkin = self.checkin_repository.create_checkin(user_id, venue_id, now)
        logger.info(
            "User checked in",
            extra={"user_id": str(user_id), "venue_id": str(venue_id)},
        )
        return checkin

    def check_out(
        self, checkin_id: UUID, now: datetime | None = None
    ) -> CheckinRecord:
        """Close an active checkin."""
        checkin = self._require_checkin(checkin_id)
        with self.locks.hold(checkin.user_id):
            now = now if now is not None else self.clock.now()
            checkin = self._require_checkin(checkin_id)
            if not checkin.is_active:
                raise ConflictError("User already checked out from this venue")
            closed = self.checkin_repository.close_checkin(checkin_id, now)
        if closed is None:
            raise ConflictError("User already checked out from this venue")
        logger.info("User checked out", extra={"checkin_id": str(checkin_id)})
        return closed

    def active_for_venue(self, venue_id: UUID) -> list[CheckinRecord]:
        """Return checkins at a venue that are still open."""
        return self.checkin_repository.list_active_for_venue(venue_id)

    def history_for_user(self, user_id: UUID) -> list[CheckinRecord]:
        """Return a user's checkins, newest first."""
        return self.checkin_repository.list_history_for_user(user_id)

    def sweep_expired(
        self, now: datetime | None = None, max_dwell: timedelta | None = None
    ) -> int:
        """Close checkins older than the maximum dwell time.

        The checkout is stamped with ``now``, not with the moment the dwell time
        ran out. Returns how many checkins were closed by this call.
        """
        now = now if now is not None else self.clock.now()
        cutoff = now - (max_dwell if max_dwell is not None else self.max_dwell)
        closed = 0
        for checkin in self.checkin_repository.list_expired(cutoff):
            with self.locks.hold(checkin.user_id):
                if self.checkin_repository.close_checkin(checkin.id, now) is not None:
                    closed += 1
        if closed:
            logger.info("Auto checked out expired checkins", extra={"count": closed})
        return closed

    def delete_checkin(self, checkin_id: UUID) -> None:
        """Delete a checkin record."""
        self._require_checkin(checkin_id)
        self.checkin_repository.delete_checkin(checkin_id)
        logger.info("Checkin deleted", extra={"checkin_id": str(checkin_id)})

    def describe(self, checkins: list[CheckinRecord]) -> list[CheckinDetail]:
        """Join usernames and venue names onto checkins."""
        usernames: dict[UUID, str | None] = {}
        venue_names: dict[UUID, str | None] = {}
        details = []
        for checkin in checkins:
            if checkin.user_id not in usernames:
                user = self.user_repository.get_user(checkin.user_id)
                usernames[checkin.user_id] = user.username if user else None
            if checkin.venue_id not in venue_names:
                venue = self.venue_repository.get_venue(checkin.venue_id)
                venue_names[checkin.venue_id] = venue.name if venue else None
            details.append(
                CheckinDetail(
                    id=checkin.id,
                    user_id=checkin.user_id,
                    username=usernames[checkin.user_id],
                    venue_id=checkin.venue_id,
                    venue_name=venue_names[checkin.venue_id],
                    checkin_time=checkin.checkin_time,
                    checkout_time=checkin.checkout_time,
                    created_at=checkin.created_at,
                )
            )
        return details

    def _require_checkin(self, checkin_id: UUID) -> CheckinRecord:
        checkin = self.checkin_repository.get_checkin(checkin_id)
        if checkin is None:
            raise NotFoundError("Checkin not found")
        return checkin

    def _ensure_can_return(self, previous: CheckinRecord, now: datetime) -> None:
        if previous.checkout_time is None:
            raise ConflictError("User is already checked in to this venue")
        minutes_ago = _whole_minutes_between(previous.checkout_time, now)
        if minutes_ago < self.cooldown_minutes:
            remaining = self.cooldown_minutes - minutes_ago
            raise ConflictError(
                f"User is in Cooldown. Try again in {remaining} minutes.",
                remaining_minutes=remaining,
            )


def _whole_minutes_between(start: datetime, end: datetime) -> int:
    """Count complete minutes between two instants, truncating toward zero."""
    return int((end - start).total_seconds() / 60)
