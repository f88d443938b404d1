"""Exercise and workout templates plus finished workout history."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import InvalidWorkoutTemplate
from fitness_tracker.domain.workouts import (
    ExerciseTemplate,
    SetTarget,
    WorkoutEntry,
    WorkoutSet,
    WorkoutTemplate,
    WorkoutTemplateDetail,
    WorkoutTemplateExercise,
)
from fitness_tracker.services.inputs import parse_count, parse_number

_logger = logging.getLogger(__name__)


class ExerciseTemplateRepository(Protocol):
    """Persistence interface for exercise templates."""

    def create_exercise(
        self, name: str, default_set_targets: list[SetTarget]
    ) -> ExerciseTemplate:
        """Create an exercise template and return it."""

    def get_exercise(self, exercise_id: UUID) -> ExerciseTemplate | None:
        """Return an exercise template by id."""

    def list_exercises(self) -> list[ExerciseTemplate]:
        """Return every exercise template ordered by name."""


class WorkoutTemplateRepository(Protocol):
    """Persistence interface for workout templates."""

    def create_template(self, name: str) -> WorkoutTemplate:
        """Create a workout template and return it."""

    def add_template_exercise(
        self,
        workout_template_id: UUID,
        exercise_template_id: UUID,
        set_targets: list[SetTarget],
        order: int,
    ) -> WorkoutTemplateExercise:
        """Attach an exercise to a workout template."""

    def get_template(self, template_id: UUID) -> WorkoutTemplate | None:
        """Return a workout template by id."""

    def list_templates(self) -> list[WorkoutTemplate]:
        """Return every workout template."""

    def list_template_exercises(
        self, template_id: UUID
    ) -> list[WorkoutTemplateExercise]:
        """Return the exercises of a template ordered by ``order``."""


class WorkoutEntryRepository(Protocol):
    """Persistence interface for finished workouts."""

    def create_entry(
        self,
        workout_template_id: UUID,
        date: str,
        duration: int,
        calories_burned: float,
        sets: list[WorkoutSet],
    ) -> WorkoutEntry:
        """Store a finished workout and return it."""

    def get_entry(self, entry_id: UUID) -> WorkoutEntry | None:
        """Return a workout entry by id."""

    def list_entries(self, date: str | None = None) -> list[WorkoutEntry]:
        """Return workout entries, optionally for a single day."""

    def list_entries_between(self, start: str, end: str) -> list[WorkoutEntry]:
        """Return workout entries with day keys in ``[start, end]``."""

    def list_recent_entries(self, limit: int) -> list[WorkoutEntry]:
        """Return the most recent workout entries, newest first."""

    def update_entry(
        self, entry_id: UUID, duration: int, calories_burned: float
    ) -> WorkoutEntry:
        """Update the editable fields of a workout entry."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a workout entry."""


@dataclass
class WorkoutService:
    """Manage templates and the history of finished workouts."""

    exercise_repository: ExerciseTemplateRepository
    template_repository: WorkoutTemplateRepository
    entry_repository: WorkoutEntryRepository

    def create_exercise(
        self, name: str, default_set_targets: list[object]
    ) -> ExerciseTemplate:
        """Create an exercise template."""
        cleaned = name.strip()
        if not cleaned:
            raise InvalidWorkoutTemplate("Exercise name is required")
        targets = [parse_set_target(target) for target in default_set_targets]
        exercise = self.exercise_repository.create_exercise(cleaned, targets)
        _logger.info("Created exercise template %s (%s)", exercise.id, exercise.name)
        return exercise

    def list_exercises(self) -> list[ExerciseTemplate]:
        """Return every exercise template."""
        return self.exercise_repository.list_exercises()

    def create_template(
        self, name: str, exercises: list[dict[str, object]]
    ) -> WorkoutTemplateDetail:
        """Create a workout template from ordered exercise references.

        Each reference needs ``exercise_template_id``; ``set_targets`` default
        to the exercise's own defaults.
        """
        cleaned = name.strip()
        if not cleaned:
            raise InvalidWorkoutTemplate("Workout name is required")
        resolved: list[tuple[ExerciseTemplate, list[SetTarget]]] = []
        for item in exercises:
            exercise_id = _parse_uuid(item.get("exercise_template_id"))
            exercise = (
                self.exercise_repository.get_exercise(exercise_id)
                if exercise_id
                else None
            )
            if exercise is None:
                raise InvalidWorkoutTemplate(
                    f"Unknown exercise template: {item.get('exercise_template_id')}"
                )
            raw_targets = item.get("set_targets")
            if raw_targets:
                targets = [parse_set_target(target) for target in raw_targets]
            else:
                targets = list(exercise.default_set_targets)
            resolved.append((exercise, targets))

        template = self.template_repository.create_template(cleaned)
        template_exercises = [
            self.template_repository.add_template_exercise(
                workout_template_id=template.id,
                exercise_template_id=exercise.id,
                set_targets=targets,
                order=order,
            )
            for order, (exercise, targets) in enumerate(resolved)
        ]
        return WorkoutTemplateDetail(template=template, exercises=template_exercises)

    def list_templates(self) -> list[WorkoutTemplate]:
        """Return every workout template."""
        return self.template_repository.list_templates()

    def get_template(self, template_id: UUID) -> WorkoutTemplateDetail | None:
        """Return a workout template with its ordered exercises."""
        template = self.template_repository.get_template(template_id)
        if template is None:
            return None
        exercises = self.template_repository.list_template_exercises(template_id)
        return WorkoutTemplateDetail(
            template=template,
            exercises=sorted(exercises, key=lambda exercise: exercise.order),
        )

    def list_entries(self, date: str | None = None) -> list[WorkoutEntry]:
        """Return finished workouts, optionally for one day."""
        return self.entry_repository.list_entries(date)

    def get_entry(self, entry_id: UUID) -> WorkoutEntry | None:
        """Return a finished workout."""
        return self.entry_repository.get_entry(entry_id)

    def update_entry(
        self,
        entry_id: UUID,
        duration: object = None,
        calories_burned: object = None,
    ) -> WorkoutEntry | None:
        """Edit duration and calories; the recorded sets never change."""
        entry = self.entry_repository.get_entry(entry_id)
        if entry is None:
            return None
        new_duration = (
            entry.duration if duration is None else int(parse_number(duration))
        )
        new_calories = (
            entry.calories_burned
            if calories_burned is None
            else parse_number(calories_burned)
        )
        return self.entry_repository.update_entry(entry_id, new_duration, new_calories)

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete a finished workout, returning False when it does not exist."""
        if self.entry_repository.get_entry(entry_id) is None:
            return False
        self.entry_repository.delete_entry(entry_id)
        return True


def parse_set_target(value: object) -> SetTarget:
    """Coerce a mapping or SetTarget into a SetTarget."""
    if isinstance(value, SetTarget):
        return value
    if isinstance(value, dict):
        return SetTarget(
            reps=parse_count(value.get("reps")),
            weight=parse_number(value.get("weight")),
        )
    raise InvalidWorkoutTemplate("Set targets need reps and weight")


def _parse_uuid(value: object) -> UUID | None:
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        try:
            return UUID(value)
        except ValueError:
            return None
    return None
