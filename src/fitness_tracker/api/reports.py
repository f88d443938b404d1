"""Report endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.stats import ExerciseProgressPoint

router = APIRouter(prefix="/reports", tags=["reports"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/calories")
async def calorie_analysis(
    request: Request, start: str | None = None, end: str | None = None
) -> dict[str, object]:
    """Daily intake against target plus period statistics."""
    try:
        analysis = _container(request).stats_service.get_calorie_analysis(start, end)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"analysis": analysis}


@router.get("/exercises/{exercise_template_id}")
async def exercise_progression(
    exercise_template_id: UUID, request: Request, limit: int = 30
) -> dict[str, object]:
    """Per-workout sets of one exercise with intensity per set."""
    points = _container(request).stats_service.get_exercise_progression(
        exercise_template_id, limit
    )
    return {"progression": [_serialize_point(point) for point in points]}


@router.get("/weight")
async def weight_series(request: Request, limit: int = 30) -> dict[str, object]:
    return {"weights": _container(request).stats_service.weight_series(limit)}


def _serialize_point(point: ExerciseProgressPoint) -> dict[str, object]:
    return {
        "workout_entry_id": str(point.workout_entry_id),
        "date": point.date,
        "sets": [
            {
                "set_number": number,
                "weight": workout_set.weight,
                "reps": workout_set.reps,
                "intensity": intensity,
                "completed": workout_set.completed,
            }
            for number, (workout_set, intensity) in enumerate(
                zip(point.sets, point.intensities, strict=True), start=1
            )
        ],
    }
