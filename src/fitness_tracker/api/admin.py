"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

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
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/tables", dependencies=[Depends(require_admin)])
async def table_counts(request: Request) -> dict[str, object]:
    """Return the row count of every table."""
    container: AppContainer = request.app.state.container
    return {"tables": container.admin_service.table_counts()}


@router.post("/seed", dependencies=[Depends(require_admin)])
async def seed_exercises(request: Request) -> dict[str, object]:
    """Load missing default exercise templates."""
    container: AppContainer = request.app.state.container
    created = container.seed_service.seed_exercises()
    return {"seeded_exercises": len(created)}


@router.post("/reset", dependencies=[Depends(require_admin)])
async def reset(request: Request, reseed: bool = True) -> dict[str, object]:
    """Delete all stored data and reload the exercise catalogue."""
    container: AppContainer = request.app.state.container
    return container.admin_service.reset(reseed=reseed)
