"""State machine for the active workout session."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from fitness_tracker.domain.dates import is_day_key, today_key
from fitness_tracker.domain.errors import InvalidSetField
from fitness_tracker.domain.workouts import (
    ActiveWorkoutSession,
    SessionProgress,
    SessionState,
    WorkoutEntry,
    WorkoutSet,
)
from fitness_tracker.services.inputs import parse_count, parse_flag, parse_number
from fitness_tracker.services.workouts import (
    WorkoutEntryRepository,
    WorkoutTemplateRepository,
)

REST_SECONDS = 90
REST_EXTENSION_SECONDS = 30

_SET_FIELDS = {
    "weight": parse_number,
    "reps": parse_count,
    "completed": parse_flag,
}

_logger = logging.getLogger(__name__)


class ActiveSessionRepository(Protocol):
    """Persistence interface for the single active session slot."""

    def get_active_session(self) -> ActiveWorkoutSession | None:
        """Return the active session, if any."""

    def save_active_session(self, session: ActiveWorkoutSession) -> None:
        """Create or replace the active session."""

    def clear_active_session(self) -> None:
        """Empty the active session slot."""


@dataclass
class RestTimer:
    """Countdown driven one second at a time by ``tick``."""

    remaining: int = 0

    @property
    def resting(self) -> bool:
        return self.remaining > 0

    def start(self, seconds: int = REST_SECONDS) -> None:
        self.remaining = seconds

    def tick(self) -> None:
        if self.remaining > 0:
            self.remaining -= 1

    def skip(self) -> None:
        self.remaining = 0

    def add(self, seconds: int = REST_EXTENSION_SECONDS) -> None:
        if self.resting and seconds > 0:
            self.remaining += seconds


@dataclass
class _Cursor:
    session_id: UUID
    current_set_id: UUID | None
    current_exercise_id: UUID | None


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class WorkoutSessionService:
    """Owns the active session; callers never mutate sets directly."""

    session_repository: ActiveSessionRepository
    template_repository: WorkoutTemplateRepository
    entry_repository: WorkoutEntryRepository
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = _utc_now
    rest_timer: RestTimer = field(default_factory=RestTimer)
    _cursor: _Cursor | None = field(default=None, init=False, repr=False)

    def start(
        self, workout_template_id: UUID, date: str | None = None
    ) -> SessionState | None:
        """Start a session from a template, replacing any active one."""
        if date is not None and not is_day_key(date):
            raise ValueError(f"Invalid day key: {date}")
        template = self.template_repository.get_template(workout_template_id)
        if template is None:
            return None
        exercises = sorted(
            self.template_repository.list_template_exercises(workout_template_id),
            key=lambda exercise: exercise.order,
        )
        sets = [
            WorkoutSet(
                id=uuid4(),
                workout_template_exercise_id=exercise.id,
                weight=0.0,
                reps=0,
                target_reps=target.reps,
                target_weight=target.weight,
                completed=False,
            )
            for exercise in exercises
            for target in exercise.set_targets
        ]
        now = self.clock()
        session = ActiveWorkoutSession(
            id=uuid4(),
            workout_template_id=workout_template_id,
            start_time=now,
            date=date or today_key(self.timezone_name, now=now),
            sets=sets,
        )
        self.session_repository.save_active_session(session)
        first = sets[0] if sets else None
        self._cursor = _Cursor(
            session_id=session.id,
            current_set_id=first.id if first else None,
            current_exercise_id=first.workout_template_exercise_id if first else None,
        )
        self.rest_timer.skip()
        _logger.info(
            "Started workout session %s from template %s with %s sets",
            session.id,
            workout_template_id,
            len(sets),
        )
        return self._state(session)

    def get_state(self) -> SessionState | None:
        """Return the active session with its cursor, resuming if needed."""
        session = self.session_repository.get_active_session()
        if session is None:
            return None
        return self._state(session)

    def update_set(
        self, set_id: UUID, field_name: str, value: object
    ) -> SessionState | None:
        """Set one field of a set and persist the whole session immediately."""
        parser = _SET_FIELDS.get(field_name)
        if parser is None:
            raise InvalidSetField(f"Unknown set field: {field_name}")
        session = self.session_repository.get_active_session()
        if session is None or _find_set(session, set_id) is None:
            return None
        sets = [
            replace(s, **{field_name: parser(value)}) if s.id == set_id else s
            for s in session.sets
        ]
        session = replace(session, sets=sets)
        self.session_repository.save_active_session(session)
        return self._state(session)

    def complete_set(self, set_id: UUID) -> SessionState | None:
        """Mark a set completed and move to the next open set with a rest."""
        session = self.session_repository.get_active_session()
        if session is None:
            return None
        index = _find_set(session, set_id)
        if index is None or session.sets[index].completed:
            return self._state(session)
        sets = list(session.sets)
        sets[index] = replace(sets[index], completed=True)
        session = replace(session, sets=sets)
        self.session_repository.save_active_session(session)

        cursor = self._ensure_cursor(session)
        next_set = next(
            (s for s in sets[index + 1 :] if not s.completed),
            None,
        )
        if next_set is None:
            cursor.current_set_id = None
            self.rest_timer.skip()
        else:
            cursor.current_set_id = next_set.id
            cursor.current_exercise_id = next_set.workout_template_exercise_id
            self.rest_timer.start(REST_SECONDS)
        return self._state(session)

    def switch_exercise(self, exercise_id: UUID) -> SessionState | None:
        """Focus an exercise and its first open set."""
        session = self.session_repository.get_active_session()
        if session is None:
            return None
        exercise_sets = [
            s for s in session.sets if s.workout_template_exercise_id == exercise_id
        ]
        if not exercise_sets:
            return self._state(session)
        cursor = self._ensure_cursor(session)
        cursor.current_exercise_id = exercise_id
        first_open = next((s for s in exercise_sets if not s.completed), None)
        if first_open is not None:
            cursor.current_set_id = first_open.id
        return self._state(session)

    def tick_rest(self) -> SessionState | None:
        """Advance the rest countdown by one second."""
        self.rest_timer.tick()
        return self.get_state()

    def skip_rest(self) -> SessionState | None:
        """End the rest immediately."""
        self.rest_timer.skip()
        return self.get_state()

    def add_rest_time(
        self, seconds: int = REST_EXTENSION_SECONDS
    ) -> SessionState | None:
        """Extend a running rest."""
        self.rest_timer.add(seconds)
        return self.get_state()

    def finish(self, calories_burned: object = 0) -> WorkoutEntry | None:
        """Turn the active session into a workout entry and clear the slot."""
        session = self.session_repository.get_active_session()
        if session is None:
            return None
        duration = self._elapsed_seconds(session) // 60
        entry = self.entry_repository.create_entry(
            workout_template_id=session.workout_template_id,
            date=session.date,
            duration=duration,
            calories_burned=parse_number(calories_burned),
            sets=list(session.sets),
        )
        self.session_repository.clear_active_session()
        self._cursor = None
        self.rest_timer.skip()
        _logger.info(
            "Finished workout session %s as entry %s (%s min)",
            session.id,
            entry.id,
            duration,
        )
        return entry

    def _ensure_cursor(self, session: ActiveWorkoutSession) -> _Cursor:
        if self._cursor is None or self._cursor.session_id != session.id:
            first_open = next((s for s in session.sets if not s.completed), None)
            self._cursor = _Cursor(
                session_id=session.id,
                current_set_id=first_open.id if first_open else None,
                current_exercise_id=(
                    first_open.workout_template_exercise_id
                    if first_open
                    else recommended_exercise(session)
                ),
            )
            self.rest_timer.skip()
        return self._cursor

    def _elapsed_seconds(self, session: ActiveWorkoutSession) -> int:
        elapsed = (self.clock() - session.start_time).total_seconds()
        return max(0, math.floor(elapsed))

    def _state(self, session: ActiveWorkoutSession) -> SessionState:
        cursor = self._ensure_cursor(session)
        return SessionState(
            session=session,
            current_set_id=cursor.current_set_id,
            current_exercise_id=cursor.current_exercise_id,
            recommended_exercise_id=recommended_exercise(session),
            resting=self.rest_timer.resting,
            rest_remaining=self.rest_timer.remaining,
            elapsed_seconds=self._elapsed_seconds(session),
            progress=session_progress(session),
        )


def recommended_exercise(session: ActiveWorkoutSession) -> UUID | None:
    """Return the first exercise, in template order, with an open set."""
    for workout_set in session.sets:
        if not workout_set.completed:
            return workout_set.workout_template_exercise_id
    return None


def session_progress(session: ActiveWorkoutSession) -> SessionProgress:
    """Return completed set counts and the rounded percentage."""
    total = len(session.sets)
    completed = sum(1 for s in session.sets if s.completed)
    if total == 0:
        return SessionProgress(completed_sets=0, total_sets=0, percentage=0)
    return SessionProgress(
        completed_sets=completed,
        total_sets=total,
        percentage=math.floor(completed / total * 100 + 0.5),
    )


def _find_set(session: ActiveWorkoutSession, set_id: UUID) -> int | None:
    for index, workout_set in enumerate(session.sets):
        if workout_set.id == set_id:
            return index
    return None
