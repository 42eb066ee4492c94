"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from checkin_tracker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health(request: Request) -> dict[str, object]:
    """Admin health check including the sweeper state."""
    container: AppContainer = request.app.state.container
    return {"status": "ok", "sweeper_running": container.sweeper.running}


@router.post("/checkins/sweep", dependencies=[Depends(require_admin)])
async def sweep_expired_checkins(request: Request) -> dict[str, int]:
    """Close expired checkins now instead of waiting for the next interval."""
    container: AppContainer = request.app.state.container
    closed = await container.sweeper.run_once()
    return {"closed": closed}
