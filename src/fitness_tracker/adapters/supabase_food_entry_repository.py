"""Supabase repository for food diary entries."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import parse_timestamp
from fitness_tracker.domain.foods import FoodEntry, MealType
from fitness_tracker.domain.nutrition import NutrientTotals
from fitness_tracker.services.diary import FoodEntryRepository


@dataclass
class SupabaseFoodEntryRepository(FoodEntryRepository):
    """Supabase implementation for food entries."""

    client: Client

    def create_entry(  # noqa: PLR0913
        self,
        food_id: UUID,
        date: str,
        meal_type: MealType,
        quantity: float,
        unit: str,
        totals: NutrientTotals,
    ) -> FoodEntry:
        """Insert an entry with its totals snapshot."""
        response = (
            self.client.table("food_entries")
            .insert(
                {
                    "food_id": str(food_id),
                    "date": date,
                    "meal_type": meal_type,
                    "quantity": quantity,
                    "unit": unit,
                    "total_calories": totals.calories,
                    "total_protein": totals.protein,
                    "total_carbs": totals.carbs,
                    "total_fat": totals.fat,
                    "total_fiber": totals.fiber,
                    "total_micronutrients": totals.micronutrients,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_entry(response.data[0])

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        response = (
            self.client.table("food_entries")
            .select("*")
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(self, date: str) -> list[FoodEntry]:
        """Return entries for one day key."""
        response = (
            self.client.table("food_entries")
            .select("*")
            .eq("date", date)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def list_entries_between(self, start: str, end: str) -> list[FoodEntry]:
        """Return entries with day keys in the inclusive range."""
        response = (
            self.client.table("food_entries")
            .select("*")
            .gte("date", start)
            .lte("date", end)
            .order("date", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def delete_entry(self, entry_id: UUID) -> None:
        self.client.table("food_entries").delete().eq("id", str(entry_id)).execute()


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        id=UUID(row["id"]),
        food_id=UUID(row["food_id"]),
        date=str(row["date"]),
        meal_type=row["meal_type"],
        quantity=float(row.get("quantity", 0.0)),
        unit=str(row.get("unit", "")),
        total_calories=float(row.get("total_calories", 0.0)),
        total_protein=float(row.get("total_protein", 0.0)),
        total_carbs=float(row.get("total_carbs", 0.0)),
        total_fat=float(row.get("total_fat", 0.0)),
        total_fiber=float(row.get("total_fiber", 0.0)),
        total_micronutrients={
            key: float(value)
            for key, value in (row.get("total_micronutrients") or {}).items()
        },
        created_at=parse_timestamp(row.get("created_at")),
    )
