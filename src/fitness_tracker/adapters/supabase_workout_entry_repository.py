"""Supabase repository for finished workouts."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import (
    parse_timestamp,
    workout_set_from_json,
    workout_set_to_json,
)
from fitness_tracker.domain.workouts import WorkoutEntry, WorkoutSet
from fitness_tracker.services.workouts import WorkoutEntryRepository


@dataclass
class SupabaseWorkoutEntryRepository(WorkoutEntryRepository):
    """Supabase implementation for workout entries.

    Sets are stored as a JSON array in the ``sets`` column.
    """

    client: Client

    def create_entry(
        self,
        workout_template_id: UUID,
        date: str,
        duration: int,
        calories_burned: float,
        sets: list[WorkoutSet],
    ) -> WorkoutEntry:
        response = (
            self.client.table("workout_entries")
            .insert(
                {
                    "workout_template_id": str(workout_template_id),
                    "date": date,
                    "duration": duration,
                    "calories_burned": calories_burned,
                    "sets": [workout_set_to_json(s) for s in sets],
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout entry")
        return _parse_entry(response.data[0])

    def get_entry(self, entry_id: UUID) -> WorkoutEntry | None:
        response = (
            self.client.table("workout_entries")
            .select("*")
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(self, date: str | None = None) -> list[WorkoutEntry]:
        request = self.client.table("workout_entries").select("*")
        if date is not None:
            request = request.eq("date", date)
        response = request.order("date", desc=True).execute()
        return [_parse_entry(row) for row in response.data or []]

    def list_entries_between(self, start: str, end: str) -> list[WorkoutEntry]:
        response = (
            self.client.table("workout_entries")
            .select("*")
            .gte("date", start)
            .lte("date", end)
            .order("date", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def list_recent_entries(self, limit: int) -> list[WorkoutEntry]:
        response = (
            self.client.table("workout_entries")
            .select("*")
            .order("date", desc=True)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def update_entry(
        self, entry_id: UUID, duration: int, calories_burned: float
    ) -> WorkoutEntry:
        response = (
            self.client.table("workout_entries")
            .update({"duration": duration, "calories_burned": calories_burned})
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update workout entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        self.client.table("workout_entries").delete().eq("id", str(entry_id)).execute()


def _parse_entry(row: dict[str, object]) -> WorkoutEntry:
    return WorkoutEntry(
        id=UUID(row["id"]),
        workout_template_id=UUID(row["workout_template_id"]),
        date=str(row["date"]),
        duration=int(row.get("duration", 0)),
        calories_burned=float(row.get("calories_burned") or 0.0),
        sets=[workout_set_from_json(s) for s in row.get("sets") or []],
        created_at=parse_timestamp(row.get("created_at")),
    )
