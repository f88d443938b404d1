"""Domain models for statistics."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID

from fitness_tracker.domain.foods import FoodEntry, MealType
from fitness_tracker.domain.nutrition import NutrientTotals
from fitness_tracker.domain.profile import NutritionTargets
from fitness_tracker.domain.workouts import WorkoutEntry, WorkoutSet

Trend = Literal["increasing", "decreasing", "stable"]
ActivityKind = Literal["food", "workout"]


@dataclass(frozen=True)
class DaySummary:
    """Totals for one calendar day."""

    date: str
    totals: NutrientTotals
    meals: dict[MealType, NutrientTotals]
    calories_burned: float
    net_calories: float


@dataclass(frozen=True)
class Activity:
    """A food or workout entry in the day's activity feed."""

    kind: ActivityKind
    entry: FoodEntry | WorkoutEntry
    created_at: datetime | None


@dataclass(frozen=True)
class Dashboard:
    """Day totals against the daily targets, with recent activity."""

    summary: DaySummary
    targets: NutritionTargets
    remaining_calories: float
    activities: list[Activity] = field(default_factory=list)


@dataclass(frozen=True)
class DailyCalories:
    """Calorie intake against target for one day."""

    date: str
    total_calories: float
    target_calories: float


@dataclass(frozen=True)
class PeriodStats:
    """Derived statistics over a date range."""

    avg_calories: float = 0.0
    avg_target: float = 0.0
    avg_difference: float = 0.0
    days_over: int = 0
    days_under: int = 0
    days_on_target: int = 0
    consistency: float = 0.0
    trend: Trend = "stable"


@dataclass(frozen=True)
class CalorieAnalysis:
    """Daily rows for a range plus their statistics."""

    start: str
    end: str
    days: list[DailyCalories]
    stats: PeriodStats


@dataclass(frozen=True)
class ExerciseProgressPoint:
    """Sets of one exercise performed in one finished workout."""

    workout_entry_id: UUID
    date: str
    sets: list[WorkoutSet] = field(default_factory=list)

    @property
    def intensities(self) -> list[float]:
        """Weight times reps for each set."""
        return [s.weight * s.reps for s in self.sets]
