"""Services for managing the food catalogue."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import InvalidFoodDefinition
from fitness_tracker.domain.foods import FOOD_CATEGORIES, FoodItem
from fitness_tracker.domain.nutrition import MACRO_FIELDS, MICRONUTRIENT_FIELDS
from fitness_tracker.services.nutrition import NutritionService

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for food items."""

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food item and return it."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food item and return it."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""

    def search_foods(
        self, query: str, category: str | None, limit: int
    ) -> list[FoodItem]:
        """Search food items by name."""

    def find_by_barcode(self, barcode: str) -> FoodItem | None:
        """Return the food item with a barcode, if present."""


@dataclass
class FoodService:
    """Application service for the food catalogue."""

    repository: FoodRepository
    nutrition_service: NutritionService

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Validate and store a user-defined food."""
        normalized = normalize_food_payload(payload)
        errors = validate_food_payload(normalized)
        if errors:
            raise InvalidFoodDefinition(errors)
        food = self.repository.create_food(normalized)
        _logger.info("Created food %s (%s)", food.id, food.name)
        return food

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem | None:
        """Update a food; logged entries keep their stored totals."""
        current = self.repository.get_food(food_id)
        if current is None:
            return None
        merged = {**food_to_payload(current), **payload}
        merged["micronutrients"] = {
            **current.micronutrients,
            **(payload.get("micronutrients") or {}),
        }
        normalized = normalize_food_payload(merged)
        errors = validate_food_payload(normalized)
        if errors:
            raise InvalidFoodDefinition(errors)
        return self.repository.update_food(food_id, normalized)

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id."""
        return self.repository.get_food(food_id)

    def search(
        self, query: str | None, category: str | None = None, limit: int = 20
    ) -> list[FoodItem]:
        """Search foods by name, verified foods first."""
        foods = self.repository.search_foods(query or "", category, limit)
        return sorted(foods, key=lambda food: (not food.is_verified, food.name.lower()))

    async def lookup_barcode(self, barcode: str) -> FoodItem | None:
        """Return the food for a barcode, importing it from FDC when unknown."""
        existing = self.repository.find_by_barcode(barcode)
        if existing:
            return existing
        summary = await self.nutrition_service.find_by_barcode(barcode)
        if summary is None:
            return None
        return await self.import_fdc_food(summary.fdc_id, barcode=barcode)

    async def import_fdc_food(
        self, fdc_id: int, barcode: str | None = None
    ) -> FoodItem:
        """Create a verified per-100g food from an FDC record."""
        details = await self.nutrition_service.get_food(fdc_id)
        nutrients = details.nutrients
        payload: dict[str, object] = {
            "name": details.summary.description,
            "brand": details.summary.brand_name or details.summary.brand_owner,
            "barcode": barcode or details.summary.gtin_upc,
            "category": "other",
            "serving_size": 100.0,
            "serving_unit": "g",
            "calories": nutrients.calories,
            "protein": nutrients.protein,
            "carbs": nutrients.carbs,
            "fat": nutrients.fat,
            "fiber": nutrients.fiber,
            "micronutrients": dict(nutrients.micronutrients),
            "is_verified": True,
        }
        return self.create_food(payload)


def normalize_food_payload(payload: dict[str, object]) -> dict[str, object]:
    """Coerce a raw food payload into the stored field set."""
    normalized: dict[str, object] = {
        "name": str(payload.get("name") or "").strip(),
        "brand": _optional_text(payload.get("brand")),
        "barcode": _optional_text(payload.get("barcode")),
        "category": str(payload.get("category") or "other"),
        "serving_size": _to_float(payload.get("serving_size")),
        "serving_unit": str(payload.get("serving_unit") or "").strip(),
        "is_verified": bool(payload.get("is_verified", False)),
    }
    for key in MACRO_FIELDS:
        normalized[key] = _to_float(payload.get(key))
    micronutrients = payload.get("micronutrients") or {}
    if isinstance(micronutrients, dict):
        normalized["micronutrients"] = {
            key: float(value)
            for key, value in micronutrients.items()
            if key in MICRONUTRIENT_FIELDS and isinstance(value, int | float)
        }
    else:
        normalized["micronutrients"] = {}
    if normalized["category"] not in FOOD_CATEGORIES:
        normalized["category"] = "other"
    return normalized


def validate_food_payload(payload: dict[str, object]) -> list[str]:
    """Return validation errors for a normalized food payload."""
    errors: list[str] = []
    if not payload["name"]:
        errors.append("Name is required")
    if payload["calories"] < 0:
        errors.append("Calories cannot be negative")
    if payload["serving_size"] <= 0:
        errors.append("Serving size must be greater than 0")
    if not payload["serving_unit"]:
        errors.append("Serving unit is required")
    if any(payload[key] < 0 for key in ("protein", "carbs", "fat", "fiber")):
        errors.append("Macronutrients cannot be negative")
    if any(value < 0 for value in payload["micronutrients"].values()):
        errors.append("Micronutrients cannot be negative")
    numbers = [
        payload["serving_size"],
        *(payload[key] for key in MACRO_FIELDS),
        *payload["micronutrients"].values(),
    ]
    if not all(math.isfinite(value) for value in numbers):
        errors.append("Nutrient values must be finite numbers")
    return errors


def food_to_payload(food: FoodItem) -> dict[str, object]:
    """Return the editable fields of a food as a payload."""
    return {
        "name": food.name,
        "brand": food.brand,
        "barcode": food.barcode,
        "category": food.category,
        "serving_size": food.serving_size,
        "serving_unit": food.serving_unit,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fat": food.fat,
        "fiber": food.fiber,
        "micronutrients": dict(food.micronutrients),
        "is_verified": food.is_verified,
    }


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _to_float(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
