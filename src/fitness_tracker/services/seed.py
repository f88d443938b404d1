"""Default exercise catalogue for an empty store."""

import logging
from dataclasses import dataclass

from fitness_tracker.domain.workouts import ExerciseTemplate, SetTarget
from fitness_tracker.services.workouts import ExerciseTemplateRepository

# name, sets, reps, weight
DEFAULT_EXERCISES: tuple[tuple[str, int, int, float], ...] = (
    ("Bench Press", 4, 8, 60),
    ("Incline Bench Press", 3, 10, 50),
    ("Dumbbell Flyes", 3, 12, 20),
    ("Push-ups", 3, 15, 0),
    ("Deadlift", 3, 5, 100),
    ("Pull-ups", 3, 8, 0),
    ("Barbell Row", 3, 8, 60),
    ("Lat Pulldown", 3, 10, 50),
    ("Squat", 4, 8, 80),
    ("Leg Press", 3, 10, 120),
    ("Lunges", 3, 12, 20),
    ("Leg Curl", 3, 12, 40),
    ("Overhead Press", 3, 8, 40),
    ("Lateral Raises", 3, 12, 10),
    ("Front Raises", 3, 12, 10),
    ("Bicep Curl", 3, 10, 15),
    ("Hammer Curl", 3, 10, 15),
    ("Tricep Extension", 3, 12, 20),
    ("Tricep Dips", 3, 10, 0),
    ("Plank", 3, 60, 0),
    ("Crunches", 3, 20, 0),
    ("Russian Twists", 3, 20, 10),
)

_logger = logging.getLogger(__name__)


@dataclass
class SeedService:
    """Load the default exercise catalogue."""

    repository: ExerciseTemplateRepository

    def seed_exercises(self) -> list[ExerciseTemplate]:
        """Create missing default exercises; existing names are skipped."""
        existing = {exercise.name for exercise in self.repository.list_exercises()}
        created = [
            self.repository.create_exercise(
                name, [SetTarget(reps=reps, weight=float(weight))] * sets
            )
            for name, sets, reps, weight in DEFAULT_EXERCISES
            if name not in existing
        ]
        _logger.info("Seeded %s exercise templates", len(created))
        return created
