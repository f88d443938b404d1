"""Supabase repositories for the user profile and weight samples."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import parse_timestamp
from fitness_tracker.domain.profile import UserProfile, WeightEntry
from fitness_tracker.services.profile import ProfileRepository
from fitness_tracker.services.weights import WeightRepository

_SLOT = "profile"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Single profile row keyed by ``slot``."""

    client: Client

    def get_profile(self) -> UserProfile | None:
        response = (
            self.client.table("user_profile")
            .select("*")
            .eq("slot", _SLOT)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, payload: dict[str, object]) -> UserProfile:
        response = (
            self.client.table("user_profile")
            .upsert({"slot": _SLOT, **payload}, on_conflict="slot")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile")
        return _parse_profile(response.data[0])


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight samples."""

    client: Client

    def add_weight(self, weight: float, date: str) -> WeightEntry:
        response = (
            self.client.table("weight_entries")
            .insert({"weight": weight, "date": date})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight entry")
        return _parse_weight(response.data[0])

    def list_weights(self, limit: int) -> list[WeightEntry]:
        response = (
            self.client.table("weight_entries")
            .select("*")
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_weight(row) for row in response.data or []]


def _parse_profile(row: dict[str, object]) -> UserProfile:
    target_weight = row.get("target_weight")
    return UserProfile(
        id=UUID(row["id"]),
        birthdate=str(row["birthdate"]),
        gender=row["gender"],
        height=float(row["height"]),
        weight=float(row["weight"]),
        activity_level=row["activity_level"],
        goal_type=row["goal_type"],
        target_weight=float(target_weight) if target_weight is not None else None,
        target_calories=float(row.get("target_calories", 0.0)),
        target_protein=float(row.get("target_protein", 0.0)),
        target_carbs=float(row.get("target_carbs", 0.0)),
        target_fat=float(row.get("target_fat", 0.0)),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )


def _parse_weight(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=UUID(row["id"]),
        weight=float(row["weight"]),
        date=str(row["date"]),
        created_at=parse_timestamp(row.get("created_at")),
    )
