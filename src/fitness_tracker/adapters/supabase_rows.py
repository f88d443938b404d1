"""Row conversions shared by the Supabase repositories."""

from datetime import datetime
from uuid import UUID

from fitness_tracker.domain.workouts import SetTarget, WorkoutSet


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO timestamp column."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def set_target_to_json(target: SetTarget) -> dict[str, object]:
    return {"reps": target.reps, "weight": target.weight}


def set_target_from_json(data: dict[str, object]) -> SetTarget:
    return SetTarget(reps=int(data.get("reps", 0)), weight=float(data.get("weight", 0)))


def workout_set_to_json(workout_set: WorkoutSet) -> dict[str, object]:
    """Serialize a set with the stored key names."""
    return {
        "id": str(workout_set.id),
        "workout_template_exercise_id": str(workout_set.workout_template_exercise_id),
        "weight": workout_set.weight,
        "reps": workout_set.reps,
        "target_reps": workout_set.target_reps,
        "target_weight": workout_set.target_weight,
        "completed": workout_set.completed,
    }


def workout_set_from_json(data: dict[str, object]) -> WorkoutSet:
    return WorkoutSet(
        id=UUID(str(data["id"])),
        workout_template_exercise_id=UUID(str(data["workout_template_exercise_id"])),
        weight=float(data.get("weight", 0)),
        reps=int(data.get("reps", 0)),
        target_reps=int(data.get("target_reps", 0)),
        target_weight=float(data.get("target_weight", 0)),
        completed=bool(data.get("completed", False)),
    )
