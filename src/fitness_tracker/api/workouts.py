"""Workout template, session and history endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from fitness_tracker.api.schemas import (  # noqa: TC001
    ExerciseTemplatePayload,
    FinishSessionPayload,
    RestExtensionPayload,
    SetUpdatePayload,
    StartSessionPayload,
    WorkoutEntryUpdatePayload,
    WorkoutTemplatePayload,
)

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.workouts import SessionState

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _session_response(state: SessionState | None) -> dict[str, object]:
    if state is None:
        raise HTTPException(status_code=404, detail="No active workout session")
    return {"state": state}


@router.post("/exercises", status_code=status.HTTP_201_CREATED)
async def create_exercise(
    payload: ExerciseTemplatePayload, request: Request
) -> dict[str, object]:
    """Create an exercise template."""
    try:
        exercise = _container(request).workout_service.create_exercise(
            payload.name,
            [target.model_dump() for target in payload.default_set_targets],
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"exercise": exercise}


@router.get("/exercises")
async def list_exercises(request: Request) -> dict[str, object]:
    return {"exercises": _container(request).workout_service.list_exercises()}


@router.post("/templates", status_code=status.HTTP_201_CREATED)
async def create_template(
    payload: WorkoutTemplatePayload, request: Request
) -> dict[str, object]:
    """Create a workout template from ordered exercises."""
    exercises = [
        {
            "exercise_template_id": item.exercise_template_id,
            "set_targets": (
                [target.model_dump() for target in item.set_targets]
                if item.set_targets
                else None
            ),
        }
        for item in payload.exercises
    ]
    try:
        detail = _container(request).workout_service.create_template(
            payload.name, exercises
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"template": detail}


@router.get("/templates")
async def list_templates(request: Request) -> dict[str, object]:
    return {"templates": _container(request).workout_service.list_templates()}


@router.get("/templates/{template_id}")
async def get_template(template_id: UUID, request: Request) -> dict[str, object]:
    detail = _container(request).workout_service.get_template(template_id)
    if detail is None:
        raise HTTPException(status_code=404, detail="Workout template not found")
    return {"template": detail}


@router.post("/session", status_code=status.HTTP_201_CREATED)
async def start_session(
    payload: StartSessionPayload, request: Request
) -> dict[str, object]:
    """Start a session, replacing any active one."""
    try:
        state = _container(request).session_service.start(
            payload.workout_template_id, payload.date
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if state is None:
        raise HTTPException(status_code=404, detail="Workout template not found")
    return {"state": state}


@router.get("/session")
async def get_session(request: Request) -> dict[str, object]:
    """Return the active session with cursor, rest timer and progress."""
    return _session_response(_container(request).session_service.get_state())


@router.patch("/session/sets/{set_id}")
async def update_set(
    set_id: UUID, payload: SetUpdatePayload, request: Request
) -> dict[str, object]:
    """Edit weight, reps or completed on one set."""
    try:
        state = _container(request).session_service.update_set(
            set_id, payload.field, payload.value
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _session_response(state)


@router.post("/session/sets/{set_id}/complete")
async def complete_set(set_id: UUID, request: Request) -> dict[str, object]:
    return _session_response(
        _container(request).session_service.complete_set(set_id)
    )


@router.post("/session/exercises/{exercise_id}/switch")
async def switch_exercise(exercise_id: UUID, request: Request) -> dict[str, object]:
    return _session_response(
        _container(request).session_service.switch_exercise(exercise_id)
    )


@router.post("/session/rest/tick")
async def tick_rest(request: Request) -> dict[str, object]:
    return _session_response(_container(request).session_service.tick_rest())


@router.post("/session/rest/skip")
async def skip_rest(request: Request) -> dict[str, object]:
    return _session_response(_container(request).session_service.skip_rest())


@router.post("/session/rest/add")
async def add_rest_time(
    request: Request, payload: RestExtensionPayload | None = None
) -> dict[str, object]:
    service = _container(request).session_service
    if payload is None:
        return _session_response(service.add_rest_time())
    return _session_response(service.add_rest_time(payload.seconds))


@router.post("/session/finish")
async def finish_session(
    request: Request, payload: FinishSessionPayload | None = None
) -> dict[str, object]:
    """Save the active session as a workout entry."""
    calories = payload.calories_burned if payload else 0
    entry = _container(request).session_service.finish(calories)
    if entry is None:
        raise HTTPException(status_code=404, detail="No active workout session")
    return {"entry": entry}


@router.get("/entries")
async def list_entries(request: Request, date: str | None = None) -> dict[str, object]:
    return {"entries": _container(request).workout_service.list_entries(date)}


@router.get("/entries/{entry_id}")
async def get_entry(entry_id: UUID, request: Request) -> dict[str, object]:
    entry = _container(request).workout_service.get_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Workout entry not found")
    return {"entry": entry}


@router.patch("/entries/{entry_id}")
async def update_entry(
    entry_id: UUID, payload: WorkoutEntryUpdatePayload, request: Request
) -> dict[str, object]:
    """Edit duration and calories burned of a finished workout."""
    entry = _container(request).workout_service.update_entry(
        entry_id,
        duration=payload.duration,
        calories_burned=payload.calories_burned,
    )
    if entry is None:
        raise HTTPException(status_code=404, detail="Workout entry not found")
    return {"entry": entry}


@router.delete("/entries/{entry_id}")
async def delete_entry(entry_id: UUID, request: Request) -> dict[str, str]:
    if not _container(request).workout_service.delete_entry(entry_id):
        raise HTTPException(status_code=404, detail="Workout entry not found")
    return {"status": "deleted"}
