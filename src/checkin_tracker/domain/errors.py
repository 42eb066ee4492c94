"""Domain errors raised by the checkin services."""


class CheckinTrackerError(Exception):
    """Base class for expected, per-request failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CheckinTrackerError):
    """A user, venue or checkin id does not resolve."""


class ConflictError(CheckinTrackerError):
    """A business rule rejected the request."""

    def __init__(self, message: str, remaining_minutes: int | None = None) -> None:
        super().__init__(message)
        self.remaining_minutes = remaining_minutes


class InvalidInputError(CheckinTrackerError):
    """Request input is missing or out of range."""
