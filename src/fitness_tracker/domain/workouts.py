"""Domain models for workout templates, sessions and history."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SetTarget:
    """Prescribed reps and weight for one set."""

    reps: int
    weight: float


@dataclass(frozen=True)
class ExerciseTemplate:
    """Named exercise with its default prescription."""

    id: UUID
    name: str
    default_set_targets: list[SetTarget]


@dataclass(frozen=True)
class WorkoutTemplate:
    """Named blueprint for a workout."""

    id: UUID
    name: str


@dataclass(frozen=True)
class WorkoutTemplateExercise:
    """Exercise slot inside a workout template."""

    id: UUID
    workout_template_id: UUID
    exercise_template_id: UUID
    set_targets: list[SetTarget]
    order: int


@dataclass(frozen=True)
class WorkoutSet:
    """Target and actual values for one set of a session."""

    id: UUID
    workout_template_exercise_id: UUID
    weight: float
    reps: int
    target_reps: int
    target_weight: float
    completed: bool


@dataclass(frozen=True)
class ActiveWorkoutSession:
    """The single in-progress workout."""

    id: UUID
    workout_template_id: UUID
    start_time: datetime
    date: str
    sets: list[WorkoutSet]


@dataclass(frozen=True)
class WorkoutEntry:
    """Finished workout."""

    id: UUID
    workout_template_id: UUID
    date: str
    duration: int
    calories_burned: float
    sets: list[WorkoutSet]
    created_at: datetime | None = None


@dataclass(frozen=True)
class SessionProgress:
    """Completed set counts for a session."""

    completed_sets: int
    total_sets: int
    percentage: int


@dataclass(frozen=True)
class SessionState:
    """Active session plus the cursor and timers callers render from."""

    session: ActiveWorkoutSession
    current_set_id: UUID | None
    current_exercise_id: UUID | None
    recommended_exercise_id: UUID | None
    resting: bool
    rest_remaining: int
    elapsed_seconds: int
    progress: SessionProgress


@dataclass(frozen=True)
class WorkoutTemplateDetail:
    """Workout template with its exercises in order."""

    template: WorkoutTemplate
    exercises: list[WorkoutTemplateExercise]
