"""Body weight tracking."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from fitness_tracker.domain.dates import is_day_key, today_key
from fitness_tracker.domain.errors import InvalidWeight
from fitness_tracker.domain.profile import WeightEntry
from fitness_tracker.services.inputs import parse_number

RECENT_WEIGHTS_LIMIT = 30


class WeightRepository(Protocol):
    """Persistence interface for weight samples."""

    def add_weight(self, weight: float, date: str) -> WeightEntry:
        """Append a weight sample and return it."""

    def list_weights(self, limit: int) -> list[WeightEntry]:
        """Return the most recent samples, newest day first."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class WeightService:
    """Append-only body weight log."""

    repository: WeightRepository
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = _utc_now

    def add_weight(self, weight: object, date: str | None = None) -> WeightEntry:
        value = parse_number(weight)
        if value <= 0:
            raise InvalidWeight("Weight must be greater than 0")
        day = date or today_key(self.timezone_name, now=self.clock())
        if not is_day_key(day):
            raise ValueError(f"Invalid day key: {day}")
        return self.repository.add_weight(value, day)

    def list_weights(self, limit: int = RECENT_WEIGHTS_LIMIT) -> list[WeightEntry]:
        return self.repository.list_weights(limit)
