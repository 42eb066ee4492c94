"""Background loop that periodically closes expired checkins."""

import asyncio
import logging
from dataclasses import dataclass, field

from checkin_tracker.services.checkins import CheckinService

logger = logging.getLogger(__name__)


@dataclass
class ExpirySweeper:
    """Runs ``CheckinService.sweep_expired`` on a fixed interval."""

    checkin_service: CheckinService
    interval_seconds: float = 3600
    _task: asyncio.Task[None] | None = field(default=None, init=False, repr=False)

    async def run_once(self) -> int:
        """Sweep once in a worker thread and return the number closed."""
        return await asyncio.to_thread(self.checkin_service.sweep_expired)

    async def run_forever(self) -> None:
        """Sweep, sleep, repeat until cancelled."""
        while True:
            try:
                await self.run_once()
            except Exception:
                logger.exception("Expired checkin sweep failed")
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        """Schedule the loop on the running event loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run_forever())

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()
