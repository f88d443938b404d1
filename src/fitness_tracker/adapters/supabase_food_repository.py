"""Supabase implementation for the food catalogue."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import parse_timestamp
from fitness_tracker.domain.foods import FoodItem
from fitness_tracker.domain.nutrition import MICRONUTRIENT_FIELDS
from fitness_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for food items.

    Micronutrients are stored as one nullable column each.
    """

    client: Client

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food item and return it."""
        response = self.client.table("food_items").insert(_to_row(payload)).execute()
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return _parse_food(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food item and return it."""
        response = (
            self.client.table("food_items")
            .update(_to_row(payload))
            .eq("id", str(food_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food item")
        return _parse_food(response.data[0])

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def search_foods(
        self, query: str, category: str | None, limit: int
    ) -> list[FoodItem]:
        """Search foods by name, verified first."""
        request = self.client.table("food_items").select("*")
        if query:
            request = request.ilike("name", f"%{query}%")
        if category:
            request = request.eq("category", category)
        response = (
            request.order("is_verified", desc=True)
            .order("name")
            .limit(limit)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def find_by_barcode(self, barcode: str) -> FoodItem | None:
        """Return the food with a barcode, if present."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("barcode", barcode)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    row = {key: value for key, value in payload.items() if key != "micronutrients"}
    micronutrients = payload.get("micronutrients") or {}
    for key in MICRONUTRIENT_FIELDS:
        row[key] = micronutrients.get(key)
    return row


def _parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a food_items row into a domain model."""
    return FoodItem(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        brand=row.get("brand"),
        barcode=row.get("barcode"),
        category=str(row.get("category") or "other"),
        serving_size=float(row.get("serving_size", 0.0)),
        serving_unit=str(row.get("serving_unit", "")),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        fiber=float(row.get("fiber", 0.0)),
        micronutrients={
            key: float(row[key])
            for key in MICRONUTRIENT_FIELDS
            if row.get(key) is not None
        },
        is_verified=bool(row.get("is_verified", False)),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
