"""User profile storage and derived daily targets."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol, get_args

from fitness_tracker.domain.dates import is_day_key, parse_day_key, today_key
from fitness_tracker.domain.errors import InvalidProfile
from fitness_tracker.domain.profile import (
    ActivityLevel,
    Gender,
    GoalType,
    NutritionTargets,
    ProfileInput,
    UserProfile,
)
from fitness_tracker.services.inputs import parse_number

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "lightly-active": 1.375,
    "moderately-active": 1.55,
    "very-active": 1.725,
    "extremely-active": 1.9,
}

GOAL_ADJUSTMENTS: dict[str, float] = {
    "lose-weight": -500.0,
    "gain-weight": 500.0,
}

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for the single user profile."""

    def get_profile(self) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, payload: dict[str, object]) -> UserProfile:
        """Create or replace the profile and return it."""


def age_in_years(birthdate: date, today: date) -> int:
    """Return completed years between birthdate and today."""
    years = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        years -= 1
    return max(0, years)


def compute_targets(profile: ProfileInput, today: date) -> NutritionTargets:
    """Daily calorie and macro targets from the revised Harris-Benedict BMR."""
    age = age_in_years(parse_day_key(profile.birthdate), today)
    if profile.gender == "male":
        bmr = 88.362 + 13.397 * profile.weight + 4.799 * profile.height - 5.677 * age
    else:
        bmr = 447.593 + 9.247 * profile.weight + 3.098 * profile.height - 4.330 * age
    calories = bmr * ACTIVITY_MULTIPLIERS[profile.activity_level]
    calories += GOAL_ADJUSTMENTS.get(profile.goal_type, 0.0)
    return NutritionTargets(
        calories=calories,
        protein=calories * 0.3 / 4,
        carbs=calories * 0.4 / 4,
        fat=calories * 0.3 / 9,
    )


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ProfileService:
    """Validate profile inputs and store them with computed targets."""

    repository: ProfileRepository
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = _utc_now

    def get_profile(self) -> UserProfile | None:
        """Return the stored profile."""
        return self.repository.get_profile()

    def save_profile(self, data: dict[str, object]) -> UserProfile:
        """Validate inputs, compute targets and persist the profile."""
        profile_input = parse_profile_input(data)
        today = parse_day_key(today_key(self.timezone_name, now=self.clock()))
        if parse_day_key(profile_input.birthdate) > today:
            raise InvalidProfile("Birthdate cannot be in the future")
        targets = compute_targets(profile_input, today)
        profile = self.repository.save_profile(
            {
                "birthdate": profile_input.birthdate,
                "gender": profile_input.gender,
                "height": profile_input.height,
                "weight": profile_input.weight,
                "activity_level": profile_input.activity_level,
                "goal_type": profile_input.goal_type,
                "target_weight": profile_input.target_weight,
                "target_calories": targets.calories,
                "target_protein": targets.protein,
                "target_carbs": targets.carbs,
                "target_fat": targets.fat,
            }
        )
        _logger.info("Saved profile with %.0f kcal target", targets.calories)
        return profile


def parse_profile_input(data: dict[str, object]) -> ProfileInput:
    """Build a ProfileInput from raw values, raising InvalidProfile."""
    birthdate = str(data.get("birthdate") or "").strip()
    missing = [key for key in ("height", "weight") if data.get(key) in (None, "")]
    if not birthdate or missing:
        raise InvalidProfile("Birthdate, height and weight are required")
    if not is_day_key(birthdate):
        raise InvalidProfile(f"Invalid birthdate: {birthdate}")
    height = parse_number(data.get("height"))
    weight = parse_number(data.get("weight"))
    if height <= 0 or weight <= 0:
        raise InvalidProfile("Height and weight must be greater than 0")

    gender = str(data.get("gender") or "male")
    if gender not in get_args(Gender):
        raise InvalidProfile(f"Invalid gender: {gender}")
    activity_level = str(data.get("activity_level") or "sedentary")
    if activity_level not in get_args(ActivityLevel):
        raise InvalidProfile(f"Invalid activity level: {activity_level}")
    goal_type = str(data.get("goal_type") or "maintain-weight")
    if goal_type not in get_args(GoalType):
        raise InvalidProfile(f"Invalid goal: {goal_type}")

    raw_target = data.get("target_weight")
    target_weight = None
    if raw_target not in (None, ""):
        target_weight = parse_number(raw_target) or None

    return ProfileInput(
        birthdate=birthdate,
        gender=gender,
        height=height,
        weight=weight,
        activity_level=activity_level,
        goal_type=goal_type,
        target_weight=target_weight,
    )
