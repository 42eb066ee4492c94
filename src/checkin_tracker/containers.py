"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from checkin_tracker.adapters.supabase_checkin_repository import (
    SupabaseCheckinRepository,
)
from checkin_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from checkin_tracker.adapters.supabase_venue_repository import (
    SupabaseVenueRepository,
)
from checkin_tracker.config import Settings
from checkin_tracker.services.checkins import CheckinService
from checkin_tracker.services.clock import SystemClock
from checkin_tracker.services.sweeper import ExpirySweeper
from checkin_tracker.services.users import UserService
from checkin_tracker.services.venues import VenueService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    venue_service: VenueService
    checkin_service: CheckinService
    sweeper: ExpirySweeper
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    venue_repository = SupabaseVenueRepository(supabase_client)
    checkin_repository = SupabaseCheckinRepository(supabase_client)
    checkin_service = CheckinService(
        user_repository=user_repository,
        venue_repository=venue_repository,
        checkin_repository=checkin_repository,
        clock=SystemClock(),
        cooldown_minutes=resolved_settings.checkin_cooldown_minutes,
        max_dwell=timedelta(minutes=resolved_settings.max_dwell_minutes),
    )
    sweeper = ExpirySweeper(
        checkin_service=checkin_service,
        interval_seconds=resolved_settings.sweep_interval_seconds,
    )

    async def close_resources() -> None:
        await sweeper.stop()

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        venue_service=VenueService(venue_repository),
        checkin_service=checkin_service,
        sweeper=sweeper,
        close_resources=close_resources,
    )
