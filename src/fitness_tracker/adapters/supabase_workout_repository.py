"""Supabase repositories for exercise and workout templates."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import (
    set_target_from_json,
    set_target_to_json,
)
from fitness_tracker.domain.workouts import (
    ExerciseTemplate,
    SetTarget,
    WorkoutTemplate,
    WorkoutTemplateExercise,
)
from fitness_tracker.services.workouts import (
    ExerciseTemplateRepository,
    WorkoutTemplateRepository,
)


@dataclass
class SupabaseExerciseTemplateRepository(ExerciseTemplateRepository):
    """Supabase implementation for exercise templates."""

    client: Client

    def create_exercise(
        self, name: str, default_set_targets: list[SetTarget]
    ) -> ExerciseTemplate:
        response = (
            self.client.table("exercise_templates")
            .insert(
                {
                    "name": name,
                    "default_set_targets": [
                        set_target_to_json(target) for target in default_set_targets
                    ],
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create exercise template")
        return _parse_exercise(response.data[0])

    def get_exercise(self, exercise_id: UUID) -> ExerciseTemplate | None:
        response = (
            self.client.table("exercise_templates")
            .select("*")
            .eq("id", str(exercise_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_exercise(response.data[0])

    def list_exercises(self) -> list[ExerciseTemplate]:
        response = (
            self.client.table("exercise_templates").select("*").order("name").execute()
        )
        return [_parse_exercise(row) for row in response.data or []]


@dataclass
class SupabaseWorkoutTemplateRepository(WorkoutTemplateRepository):
    """Supabase implementation for workout templates and their exercises."""

    client: Client

    def create_template(self, name: str) -> WorkoutTemplate:
        response = (
            self.client.table("workout_templates").insert({"name": name}).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout template")
        return _parse_template(response.data[0])

    def add_template_exercise(
        self,
        workout_template_id: UUID,
        exercise_template_id: UUID,
        set_targets: list[SetTarget],
        order: int,
    ) -> WorkoutTemplateExercise:
        response = (
            self.client.table("workout_template_exercises")
            .insert(
                {
                    "workout_template_id": str(workout_template_id),
                    "exercise_template_id": str(exercise_template_id),
                    "set_targets": [
                        set_target_to_json(target) for target in set_targets
                    ],
                    "order": order,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to add exercise to workout template")
        return _parse_template_exercise(response.data[0])

    def get_template(self, template_id: UUID) -> WorkoutTemplate | None:
        response = (
            self.client.table("workout_templates")
            .select("*")
            .eq("id", str(template_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_template(response.data[0])

    def list_templates(self) -> list[WorkoutTemplate]:
        response = (
            self.client.table("workout_templates").select("*").order("name").execute()
        )
        return [_parse_template(row) for row in response.data or []]

    def list_template_exercises(
        self, template_id: UUID
    ) -> list[WorkoutTemplateExercise]:
        response = (
            self.client.table("workout_template_exercises")
            .select("*")
            .eq("workout_template_id", str(template_id))
            .order("order")
            .execute()
        )
        return [_parse_template_exercise(row) for row in response.data or []]


def _parse_exercise(row: dict[str, object]) -> ExerciseTemplate:
    return ExerciseTemplate(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        default_set_targets=[
            set_target_from_json(target)
            for target in row.get("default_set_targets") or []
        ],
    )


def _parse_template(row: dict[str, object]) -> WorkoutTemplate:
    return WorkoutTemplate(id=UUID(row["id"]), name=str(row.get("name", "")))


def _parse_template_exercise(row: dict[str, object]) -> WorkoutTemplateExercise:
    return WorkoutTemplateExercise(
        id=UUID(row["id"]),
        workout_template_id=UUID(row["workout_template_id"]),
        exercise_template_id=UUID(row["exercise_template_id"]),
        set_targets=[
            set_target_from_json(target) for target in row.get("set_targets") or []
        ],
        order=int(row.get("order", 0)),
    )
