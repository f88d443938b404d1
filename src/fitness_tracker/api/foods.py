"""Food catalogue endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from fitness_tracker.api.schemas import FoodPayload, FoodUpdatePayload  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(payload: FoodPayload, request: Request) -> dict[str, object]:
    """Create a user-defined food."""
    try:
        food = _container(request).food_service.create_food(payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"food": food}


@router.get("")
async def search_foods(
    request: Request,
    query: str | None = None,
    category: str | None = None,
    limit: int = 20,
) -> dict[str, object]:
    """Search foods by name, verified foods first."""
    foods = _container(request).food_service.search(query, category, limit)
    return {"foods": foods}


@router.get("/fdc/search")
async def search_fdc(request: Request, query: str, limit: int = 10) -> dict[str, object]:
    """Search FoodData Central."""
    try:
        results = await _container(request).nutrition_service.search(query, limit)
    except httpx.HTTPError as exc:
        raise HTTPException(status_code=502, detail="Food database unavailable") from exc
    return {"results": results}


@router.post("/import/{fdc_id}", status_code=status.HTTP_201_CREATED)
async def import_fdc_food(fdc_id: int, request: Request) -> dict[str, object]:
    """Import a FoodData Central food as a verified per-100g food."""
    try:
        food = await _container(request).food_service.import_fdc_food(fdc_id)
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code == status.HTTP_404_NOT_FOUND:
            raise HTTPException(status_code=404, detail="Food not found") from exc
        raise HTTPException(status_code=502, detail="Food database unavailable") from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"food": food}


@router.get("/barcode/{code}")
async def lookup_barcode(code: str, request: Request) -> dict[str, object]:
    """Find a food by barcode, importing it from FoodData Central when needed."""
    try:
        food = await _container(request).food_service.lookup_barcode(code)
    except httpx.HTTPError as exc:
        raise HTTPException(status_code=502, detail="Food database unavailable") from exc
    if food is None:
        raise HTTPException(status_code=404, detail="Food not found")
    return {"food": food}


@router.get("/{food_id}")
async def get_food(food_id: UUID, request: Request) -> dict[str, object]:
    food = _container(request).food_service.get_food(food_id)
    if food is None:
        raise HTTPException(status_code=404, detail="Food not found")
    return {"food": food}


@router.put("/{food_id}")
async def update_food(
    food_id: UUID, payload: FoodUpdatePayload, request: Request
) -> dict[str, object]:
    """Update a food; existing diary entries keep their totals."""
    try:
        food = _container(request).food_service.update_food(
            food_id, payload.model_dump(exclude_none=True)
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if food is None:
        raise HTTPException(status_code=404, detail="Food not found")
    return {"food": food}
