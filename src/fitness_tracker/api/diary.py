"""Food diary endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from fitness_tracker.api.schemas import FoodEntryPayload  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/diary", tags=["diary"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("/entries", status_code=status.HTTP_201_CREATED)
async def log_food(payload: FoodEntryPayload, request: Request) -> dict[str, object]:
    """Log a portion of a food for a day and meal."""
    try:
        entry = _container(request).diary_service.log_food(
            food_id=payload.food_id,
            quantity=payload.quantity,
            date=payload.date,
            meal_type=payload.meal_type,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if entry is None:
        raise HTTPException(status_code=404, detail="Food not found")
    return {"entry": entry}


@router.delete("/entries/{entry_id}")
async def delete_entry(entry_id: UUID, request: Request) -> dict[str, str]:
    if not _container(request).diary_service.delete_entry(entry_id):
        raise HTTPException(status_code=404, detail="Entry not found")
    return {"status": "deleted"}


@router.get("/{date}")
async def day_summary(date: str, request: Request) -> dict[str, object]:
    """Totals per meal and for the day, with calories burned and net calories."""
    try:
        summary = _container(request).diary_service.day_summary(date)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"summary": summary}


@router.get("/{date}/entries")
async def list_entries(date: str, request: Request) -> dict[str, object]:
    return {"entries": _container(request).diary_service.list_entries(date)}


@router.get("/{date}/dashboard")
async def dashboard(date: str, request: Request) -> dict[str, object]:
    """Remaining calories, macro targets and the day's activity feed."""
    try:
        overview = _container(request).diary_service.dashboard(date)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"dashboard": overview}
