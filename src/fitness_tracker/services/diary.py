"""Food diary logging and daily summaries."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.dates import is_day_key
from fitness_tracker.domain.foods import MEAL_TYPES, FoodEntry, MealType
from fitness_tracker.domain.nutrition import NutrientTotals
from fitness_tracker.domain.profile import NutritionTargets
from fitness_tracker.domain.stats import Activity, Dashboard, DaySummary
from fitness_tracker.services.calculations import scale_nutrients, sum_entries
from fitness_tracker.services.foods import FoodRepository
from fitness_tracker.services.inputs import parse_quantity
from fitness_tracker.services.profile import ProfileRepository
from fitness_tracker.services.workouts import WorkoutEntryRepository

_logger = logging.getLogger(__name__)

# Targets shown before a profile has been saved.
DEFAULT_TARGETS = NutritionTargets(calories=2000, protein=100, carbs=200, fat=50)

_OLDEST = datetime.min.replace(tzinfo=UTC)


class FoodEntryRepository(Protocol):
    """Persistence interface for food entries."""

    def create_entry(
        self,
        food_id: UUID,
        date: str,
        meal_type: MealType,
        quantity: float,
        unit: str,
        totals: NutrientTotals,
    ) -> FoodEntry:
        """Store a food entry with its totals snapshot."""

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return a food entry by id."""

    def list_entries(self, date: str) -> list[FoodEntry]:
        """Return the entries of a single day."""

    def list_entries_between(self, start: str, end: str) -> list[FoodEntry]:
        """Return entries with day keys in ``[start, end]``."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a food entry."""


@dataclass
class DiaryService:
    """Log foods against a day and summarize the day."""

    food_repository: FoodRepository
    entry_repository: FoodEntryRepository
    workout_entry_repository: WorkoutEntryRepository
    profile_repository: ProfileRepository

    def log_food(
        self, food_id: UUID, quantity: object, date: str, meal_type: str
    ) -> FoodEntry | None:
        """Log a portion of a food, snapshotting its scaled totals.

        Returns None when the food does not exist.
        """
        if not is_day_key(date):
            raise ValueError(f"Invalid day key: {date}")
        if meal_type not in MEAL_TYPES:
            raise ValueError(f"Invalid meal type: {meal_type}")
        amount = parse_quantity(quantity)
        food = self.food_repository.get_food(food_id)
        if food is None:
            return None
        totals = scale_nutrients(food, amount)
        entry = self.entry_repository.create_entry(
            food_id=food.id,
            date=date,
            meal_type=meal_type,
            quantity=amount,
            unit=food.serving_unit,
            totals=totals,
        )
        _logger.info(
            "Logged %s%s of %s for %s %s",
            amount,
            food.serving_unit,
            food.id,
            date,
            meal_type,
        )
        return entry

    def list_entries(self, date: str) -> list[FoodEntry]:
        """Return the entries of a day."""
        return self.entry_repository.list_entries(date)

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry, returning False when it does not exist."""
        if self.entry_repository.get_entry(entry_id) is None:
            return False
        self.entry_repository.delete_entry(entry_id)
        return True

    def day_summary(self, date: str) -> DaySummary:
        """Per-meal and whole-day totals plus calories burned in workouts."""
        if not is_day_key(date):
            raise ValueError(f"Invalid day key: {date}")
        entries = self.entry_repository.list_entries(date)
        totals = sum_entries(entries, date=date)
        meals = {
            meal_type: sum_entries(entries, date=date, meal_type=meal_type)
            for meal_type in MEAL_TYPES
        }
        burned = sum(
            workout.calories_burned
            for workout in self.workout_entry_repository.list_entries(date)
        )
        return DaySummary(
            date=date,
            totals=totals,
            meals=meals,
            calories_burned=burned,
            net_calories=totals.calories - burned,
        )

    def dashboard(self, date: str) -> Dashboard:
        """Day summary against the profile targets plus the day's activity.

        Remaining calories are ``target - eaten + burned``. Activities merge
        food and workout entries, newest first.
        """
        summary = self.day_summary(date)
        profile = self.profile_repository.get_profile()
        targets = (
            NutritionTargets(
                calories=profile.target_calories,
                protein=profile.target_protein,
                carbs=profile.target_carbs,
                fat=profile.target_fat,
            )
            if profile
            else DEFAULT_TARGETS
        )
        activities = [
            Activity(kind="food", entry=entry, created_at=entry.created_at)
            for entry in self.entry_repository.list_entries(date)
        ] + [
            Activity(kind="workout", entry=entry, created_at=entry.created_at)
            for entry in self.workout_entry_repository.list_entries(date)
        ]
        activities.sort(
            key=lambda item: (item.created_at is not None, item.created_at or _OLDEST),
            reverse=True,
        )
        return Dashboard(
            summary=summary,
            targets=targets,
            remaining_calories=(
                targets.calories - summary.totals.calories + summary.calories_burned
            ),
            activities=activities,
        )
