"""Domain models for the user profile and body weight."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from uuid import UUID

Gender = Literal["male", "female"]

ActivityLevel = Literal[
    "sedentary",
    "lightly-active",
    "moderately-active",
    "very-active",
    "extremely-active",
]

GoalType = Literal[
    "lose-weight",
    "maintain-weight",
    "gain-weight",
    "build-muscle",
    "improve-fitness",
]


@dataclass(frozen=True)
class ProfileInput:
    """Biometric inputs a user enters."""

    birthdate: str
    gender: Gender
    height: float
    weight: float
    activity_level: ActivityLevel
    goal_type: GoalType
    target_weight: float | None = None


@dataclass(frozen=True)
class NutritionTargets:
    """Daily targets derived from a profile."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class UserProfile:
    """Stored profile with targets computed at save time."""

    id: UUID
    birthdate: str
    gender: Gender
    height: float
    weight: float
    activity_level: ActivityLevel
    goal_type: GoalType
    target_weight: float | None
    target_calories: float
    target_protein: float
    target_carbs: float
    target_fat: float
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class WeightEntry:
    """Body weight sample for a day."""

    id: UUID
    weight: float
    date: str
    created_at: datetime | None = None
