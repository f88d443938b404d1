"""Supabase-backed slot for the active workout session."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import (
    workout_set_from_json,
    workout_set_to_json,
)
from fitness_tracker.domain.workouts import ActiveWorkoutSession
from fitness_tracker.services.sessions import ActiveSessionRepository

_SLOT = "active"


@dataclass
class SupabaseActiveSessionRepository(ActiveSessionRepository):
    """Single row keyed by ``slot``; saving replaces the whole session."""

    client: Client

    def get_active_session(self) -> ActiveWorkoutSession | None:
        response = (
            self.client.table("active_workout_session")
            .select("*")
            .eq("slot", _SLOT)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return ActiveWorkoutSession(
            id=UUID(row["id"]),
            workout_template_id=UUID(row["workout_template_id"]),
            start_time=datetime.fromisoformat(row["start_time"]),
            date=str(row["date"]),
            sets=[workout_set_from_json(s) for s in row.get("sets") or []],
        )

    def save_active_session(self, session: ActiveWorkoutSession) -> None:
        self.client.table("active_workout_session").upsert(
            {
                "slot": _SLOT,
                "id": str(session.id),
                "workout_template_id": str(session.workout_template_id),
                "start_time": session.start_time.isoformat(),
                "date": session.date,
                "sets": [workout_set_to_json(s) for s in session.sets],
            },
            on_conflict="slot",
        ).execute()

    def clear_active_session(self) -> None:
        self.client.table("active_workout_session").delete().eq(
            "slot", _SLOT
        ).execute()
