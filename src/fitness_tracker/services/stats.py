"""Calorie, exercise and weight reports."""

import math
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from fitness_tracker.domain.dates import (
    is_day_key,
    iter_day_keys,
    parse_day_key,
    shift_day_key,
    today_key,
)
from fitness_tracker.domain.profile import WeightEntry
from fitness_tracker.domain.stats import (
    CalorieAnalysis,
    DailyCalories,
    ExerciseProgressPoint,
    PeriodStats,
    Trend,
)
from fitness_tracker.services.diary import FoodEntryRepository
from fitness_tracker.services.profile import ProfileRepository
from fitness_tracker.services.weights import RECENT_WEIGHTS_LIMIT, WeightRepository
from fitness_tracker.services.workouts import (
    WorkoutEntryRepository,
    WorkoutTemplateRepository,
)

TARGET_BAND = 100
TREND_THRESHOLD = 100
MIN_TREND_DAYS = 3
DEFAULT_PERIOD_DAYS = 7
MAX_PERIOD_DAYS = 366
PROGRESSION_WORKOUTS = 30


def compute_period_stats(days: list[DailyCalories]) -> PeriodStats:
    """Averages, target band counts, consistency and trend for a range.

    ``days`` must be date ordered. For an odd count the first half takes the
    middle day, so three days compare days 1-2 against day 3.
    """
    if not days:
        return PeriodStats()
    count = len(days)
    avg_calories = sum(day.total_calories for day in days) / count
    avg_target = sum(day.target_calories for day in days) / count

    days_over = sum(
        1 for day in days if day.total_calories > day.target_calories + TARGET_BAND
    )
    days_under = sum(
        1 for day in days if day.total_calories < day.target_calories - TARGET_BAND
    )

    consistency = 0.0
    if avg_target != 0:
        avg_deviation = (
            sum(abs(day.total_calories - day.target_calories) for day in days) / count
        )
        consistency = max(0.0, 100 - avg_deviation / avg_target * 100)

    return PeriodStats(
        avg_calories=avg_calories,
        avg_target=avg_target,
        avg_difference=avg_calories - avg_target,
        days_over=days_over,
        days_under=days_under,
        days_on_target=count - days_over - days_under,
        consistency=consistency,
        trend=calorie_trend([day.total_calories for day in days]),
    )


def calorie_trend(values: list[float]) -> Trend:
    """Compare the mean of the second half of a series with the first."""
    if len(values) < MIN_TREND_DAYS:
        return "stable"
    half = math.ceil(len(values) / 2)
    first, second = values[:half], values[half:]
    change = sum(second) / len(second) - sum(first) / len(first)
    if change > TREND_THRESHOLD:
        return "increasing"
    if change < -TREND_THRESHOLD:
        return "decreasing"
    return "stable"


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class StatsService:
    """Build report data from diary, workout and weight history."""

    food_entry_repository: FoodEntryRepository
    workout_entry_repository: WorkoutEntryRepository
    template_repository: WorkoutTemplateRepository
    profile_repository: ProfileRepository
    weight_repository: WeightRepository
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = _utc_now

    def get_calorie_analysis(
        self, start: str | None = None, end: str | None = None
    ) -> CalorieAnalysis:
        """Daily intake against target for ``[start, end]``.

        Defaults to the seven days ending today. The target is the profile's
        current calorie target, or 0 without a profile.
        """
        for key in (start, end):
            if key is not None and not is_day_key(key):
                raise ValueError(f"Invalid day key: {key}")
        end = end or today_key(self.timezone_name, now=self.clock())
        start = start or shift_day_key(end, -(DEFAULT_PERIOD_DAYS - 1))
        span = (parse_day_key(end) - parse_day_key(start)).days + 1
        if span < 1:
            raise ValueError("Start date must not be after end date")
        if span > MAX_PERIOD_DAYS:
            raise ValueError(f"Range must not exceed {MAX_PERIOD_DAYS} days")
        day_keys = iter_day_keys(start, end)

        profile = self.profile_repository.get_profile()
        target = profile.target_calories if profile else 0.0
        calories_by_day: dict[str, float] = defaultdict(float)
        for entry in self.food_entry_repository.list_entries_between(start, end):
            calories_by_day[entry.date] += entry.total_calories

        days = [
            DailyCalories(
                date=key,
                total_calories=calories_by_day.get(key, 0.0),
                target_calories=target,
            )
            for key in day_keys
        ]
        return CalorieAnalysis(
            start=start, end=end, days=days, stats=compute_period_stats(days)
        )

    def get_exercise_progression(
        self, exercise_template_id: UUID, limit: int = PROGRESSION_WORKOUTS
    ) -> list[ExerciseProgressPoint]:
        """Sets of one exercise across the recent workouts, oldest first."""
        points: list[ExerciseProgressPoint] = []
        slots_by_template: dict[UUID, set[UUID]] = {}
        for entry in self.workout_entry_repository.list_recent_entries(limit):
            if entry.workout_template_id not in slots_by_template:
                slots_by_template[entry.workout_template_id] = {
                    slot.id
                    for slot in self.template_repository.list_template_exercises(
                        entry.workout_template_id
                    )
                    if slot.exercise_template_id == exercise_template_id
                }
            slot_ids = slots_by_template[entry.workout_template_id]
            sets = [s for s in entry.sets if s.workout_template_exercise_id in slot_ids]
            if sets:
                points.append(
                    ExerciseProgressPoint(
                        workout_entry_id=entry.id, date=entry.date, sets=sets
                    )
                )
        return sorted(points, key=lambda point: point.date)

    def weight_series(self, limit: int = RECENT_WEIGHTS_LIMIT) -> list[WeightEntry]:
        """Recent weight samples, oldest first."""
        weights = self.weight_repository.list_weights(limit)
        return sorted(weights, key=lambda weight: weight.date)
