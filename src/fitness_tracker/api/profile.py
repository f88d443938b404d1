"""Profile and body weight endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from fitness_tracker.api.schemas import ProfilePayload, WeightPayload  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(tags=["profile"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/profile")
async def get_profile(request: Request) -> dict[str, object]:
    profile = _container(request).profile_service.get_profile()
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not set")
    return {"profile": profile}


@router.put("/profile")
async def save_profile(payload: ProfilePayload, request: Request) -> dict[str, object]:
    """Save biometric inputs and recompute daily targets."""
    try:
        profile = _container(request).profile_service.save_profile(
            payload.model_dump()
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"profile": profile}


@router.post("/weight", status_code=status.HTTP_201_CREATED)
async def add_weight(payload: WeightPayload, request: Request) -> dict[str, object]:
    try:
        entry = _container(request).weight_service.add_weight(
            payload.weight, payload.date
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"weight": entry}


@router.get("/weight")
async def list_weights(request: Request, limit: int = 30) -> dict[str, object]:
    """Recent weight samples, newest first."""
    return {"weights": _container(request).weight_service.list_weights(limit)}
