"""Admin operations."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fitness_tracker.services.cache import Cache
from fitness_tracker.services.seed import SeedService
from fitness_tracker.services.sessions import WorkoutSessionService


class AdminRepository(Protocol):
    """Persistence interface for store-wide operations."""

    def reset_all(self) -> list[str]:
        """Delete every row of every table and return the cleared table names."""

    def count_rows(self) -> dict[str, int]:
        """Return the row count of each table."""


_logger = logging.getLogger(__name__)


@dataclass
class AdminService:
    """Store-wide maintenance."""

    admin_repository: AdminRepository
    seed_service: SeedService
    session_service: WorkoutSessionService
    cache: Cache

    def table_counts(self) -> dict[str, int]:
        """Return the row count of each table."""
        return self.admin_repository.count_rows()

    def reset(self, reseed: bool = True) -> dict[str, object]:
        """Wipe all stored data, optionally reloading the exercise catalogue."""
        _logger.warning("Resetting all stored data")
        cleared = self.admin_repository.reset_all()
        self.session_service.rest_timer.skip()
        self.cache.clear()
        seeded = self.seed_service.seed_exercises() if reseed else []
        return {"cleared_tables": cleared, "seeded_exercises": len(seeded)}
