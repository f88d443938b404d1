"""Supabase store-wide operations."""

from dataclasses import dataclass

from supabase import Client

from fitness_tracker.services.admin import AdminRepository

# Children before parents; the second value is a column every row has.
_TABLES: tuple[tuple[str, str], ...] = (
    ("food_entries", "id"),
    ("workout_entries", "id"),
    ("active_workout_session", "slot"),
    ("workout_template_exercises", "id"),
    ("workout_templates", "id"),
    ("exercise_templates", "id"),
    ("food_items", "id"),
    ("weight_entries", "id"),
    ("user_profile", "slot"),
)


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for admin operations."""

    client: Client

    def reset_all(self) -> list[str]:
        """Delete every row; PostgREST needs a filter, so match all non-null keys."""
        cleared = []
        for table, key in _TABLES:
            self.client.table(table).delete().not_.is_(key, "null").execute()
            cleared.append(table)
        return cleared

    def count_rows(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for table, key in _TABLES:
            response = (
                self.client.table(table).select(key, count="exact").limit(1).execute()
            )
            counts[table] = int(response.count or 0)
        return counts
