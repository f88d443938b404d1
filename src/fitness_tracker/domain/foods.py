"""Domain models for the food catalogue and the food diary."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID

MealType = Literal["breakfast", "lunch", "dinner", "snack"]

MEAL_TYPES: tuple[MealType, ...] = ("breakfast", "lunch", "dinner", "snack")

FOOD_CATEGORIES = (
    "vegetables",
    "fruits",
    "grains",
    "proteins",
    "dairy",
    "fats",
    "beverages",
    "snacks",
    "prepared",
    "supplements",
    "condiments",
    "other",
)


@dataclass(frozen=True)
class FoodItem:
    """Per-serving nutrient profile of a food."""

    id: UUID
    name: str
    brand: str | None
    barcode: str | None
    category: str
    serving_size: float
    serving_unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    micronutrients: dict[str, float] = field(default_factory=dict)
    is_verified: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class FoodEntry:
    """A logged portion with totals snapshotted at log time."""

    id: UUID
    food_id: UUID
    date: str
    meal_type: MealType
    quantity: float
    unit: str
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    total_fiber: float
    total_micronutrients: dict[str, float] = field(default_factory=dict)
    created_at: datetime | None = None
