"""Tests for the active workout session state machine."""

from uuid import uuid4

import pytest

from fitness_tracker.domain.errors import InvalidSetField
from fitness_tracker.services.sessions import (
    REST_EXTENSION_SECONDS,
    REST_SECONDS,
    RestTimer,
    WorkoutSessionService,
    session_progress,
)
from tests.conftest import build_template


def test_start_expands_targets_in_template_order(container, repositories) -> None:
    template = build_template(repositories, [3, 4])
    first_slot, second_slot = repositories.templates.list_template_exercises(
        template.id
    )

    state = container.session_service.start(template.id)

    sets = state.session.sets
    assert len(sets) == 7
    assert [s.workout_template_exercise_id for s in sets] == [first_slot.id] * 3 + [
        second_slot.id
    ] * 4
    assert [s.target_reps for s in sets[:3]] == [10, 9, 8]
    assert all(s.weight == 0 and s.reps == 0 and not s.completed for s in sets)
    assert state.session.date == "2024-03-15"
    assert state.current_set_id == sets[0].id
    assert state.current_exercise_id == first_slot.id
    assert state.resting is False
    assert state.progress.percentage == 0


def test_start_with_unknown_template_returns_none(container) -> None:
    assert container.session_service.start(uuid4()) is None
    assert container.session_service.get_state() is None


def test_start_replaces_active_session(container, repositories) -> None:
    template = build_template(repositories, [1])
    first = container.session_service.start(template.id)
    second = container.session_service.start(template.id)

    assert first.session.id != second.session.id
    assert repositories.active_session.session.id == second.session.id


def test_complete_set_starts_rest_and_advances(container, repositories) -> None:
    template = build_template(repositories, [2, 1])
    service = container.session_service
    sets = service.start(template.id).session.sets

    state = service.complete_set(sets[0].id)

    assert state.session.sets[0].completed is True
    assert state.current_set_id == sets[1].id
    assert state.resting is True
    assert state.rest_remaining == REST_SECONDS
    assert state.progress.completed_sets == 1


def test_rest_timer_tick_add_and_skip(container, repositories) -> None:
    template = build_template(repositories, [2])
    service = container.session_service
    sets = service.start(template.id).session.sets
    service.complete_set(sets[0].id)

    assert service.tick_rest().rest_remaining == REST_SECONDS - 1
    assert (
        service.add_rest_time().rest_remaining
        == REST_SECONDS - 1 + REST_EXTENSION_SECONDS
    )
    state = service.skip_rest()
    assert state.resting is False
    assert state.rest_remaining == 0


def test_rest_timer_extension_ignored_when_idle() -> None:
    timer = RestTimer()

    timer.add()
    timer.tick()

    assert timer.remaining == 0
    assert timer.resting is False


def test_rest_timer_ignores_non_positive_extension() -> None:
    timer = RestTimer()
    timer.start(REST_SECONDS)

    timer.add(-500)
    timer.add(0)

    assert timer.remaining == REST_SECONDS
    assert timer.resting is True


def test_start_rejects_malformed_date(container, repositories) -> None:
    template = build_template(repositories, [1])

    with pytest.raises(ValueError, match="day key"):
        container.session_service.start(template.id, "not-a-date")
    with pytest.raises(ValueError, match="day key"):
        container.session_service.start(template.id, "2024-3-5")

    assert repositories.active_session.session is None


def test_start_uses_given_date(container, repositories) -> None:
    template = build_template(repositories, [1])

    state = container.session_service.start(template.id, "2024-03-01")
    entry = container.session_service.finish()

    assert state.session.date == "2024-03-01"
    assert entry.date == "2024-03-01"


def test_completing_last_set_clears_cursor_without_rest(
    container, repositories
) -> None:
    template = build_template(repositories, [1, 1])
    service = container.session_service
    sets = service.start(template.id).session.sets

    service.complete_set(sets[0].id)
    state = service.complete_set(sets[1].id)

    assert state.current_set_id is None
    assert state.resting is False
    assert state.recommended_exercise_id is None
    assert state.progress.percentage == 100


def test_complete_set_skips_already_completed_sets(container, repositories) -> None:
    template = build_template(repositories, [3])
    service = container.session_service
    sets = service.start(template.id).session.sets
    service.complete_set(sets[1].id)

    state = service.complete_set(sets[0].id)

    assert state.current_set_id == sets[2].id


def test_complete_set_twice_keeps_state(container, repositories) -> None:
    template = build_template(repositories, [2])
    service = container.session_service
    sets = service.start(template.id).session.sets
    service.complete_set(sets[0].id)
    saves = repositories.active_session.saves

    state = service.complete_set(sets[0].id)

    assert repositories.active_session.saves == saves
    assert state.progress.completed_sets == 1


def test_operations_without_session_return_none(container) -> None:
    service = container.session_service

    assert service.complete_set(uuid4()) is None
    assert service.update_set(uuid4(), "reps", 5) is None
    assert service.switch_exercise(uuid4()) is None
    assert service.finish() is None


def test_update_set_writes_through(container, repositories) -> None:
    template = build_template(repositories, [2])
    service = container.session_service
    sets = service.start(template.id).session.sets
    assert repositories.active_session.saves == 1

    service.update_set(sets[0].id, "weight", "62.5")
    service.update_set(sets[0].id, "reps", "abc")

    assert repositories.active_session.saves == 3
    stored = repositories.active_session.session.sets[0]
    assert stored.weight == 62.5
    assert stored.reps == 0


def test_update_set_rejects_unknown_field(container, repositories) -> None:
    template = build_template(repositories, [1])
    sets = container.session_service.start(template.id).session.sets

    with pytest.raises(InvalidSetField):
        container.session_service.update_set(sets[0].id, "target_reps", 12)


def test_switch_exercise_focuses_first_open_set(container, repositories) -> None:
    template = build_template(repositories, [2, 2])
    _, second_slot = repositories.templates.list_template_exercises(template.id)
    service = container.session_service
    sets = service.start(template.id).session.sets
    service.complete_set(sets[2].id)

    state = service.switch_exercise(second_slot.id)

    assert state.current_exercise_id == second_slot.id
    assert state.current_set_id == sets[3].id
    assert state.recommended_exercise_id == sets[0].workout_template_exercise_id


def test_recommended_exercise_moves_past_finished_exercise(
    container, repositories
) -> None:
    template = build_template(repositories, [1, 2])
    _, second_slot = repositories.templates.list_template_exercises(template.id)
    service = container.session_service
    sets = service.start(template.id).session.sets

    state = service.complete_set(sets[0].id)

    assert state.recommended_exercise_id == second_slot.id


def test_progress_rounds_half_up(container, repositories) -> None:
    template = build_template(repositories, [3])
    service = container.session_service
    sets = service.start(template.id).session.sets

    state = service.complete_set(sets[0].id)
    assert state.progress.percentage == 33
    state = service.complete_set(sets[1].id)
    assert state.progress.percentage == 67


def test_progress_of_empty_session(container, repositories) -> None:
    template = build_template(repositories, [0])
    state = container.session_service.start(template.id)

    assert session_progress(state.session).percentage == 0
    assert state.current_set_id is None


def test_finish_records_entry_and_clears_slot(
    container, repositories, clock
) -> None:
    template = build_template(repositories, [2])
    service = container.session_service
    sets = service.start(template.id).session.sets
    service.update_set(sets[0].id, "weight", 50)
    service.complete_set(sets[0].id)
    clock.advance(179)

    assert service.get_state().elapsed_seconds == 179
    entry = service.finish(calories_burned="250")

    assert entry.duration == 2
    assert entry.calories_burned == 250
    assert entry.date == "2024-03-15"
    assert [s.completed for s in entry.sets] == [True, False]
    assert entry.sets[0].weight == 50
    assert repositories.active_session.session is None
    assert service.get_state() is None
    assert service.rest_timer.resting is False


def test_resume_derives_cursor_from_first_open_set(
    container, repositories, clock
) -> None:
    template = build_template(repositories, [3])
    sets = container.session_service.start(template.id).session.sets
    container.session_service.complete_set(sets[0].id)

    restarted = WorkoutSessionService(
        session_repository=repositories.active_session,
        template_repository=repositories.templates,
        entry_repository=repositories.workout_entries,
        clock=clock,
    )
    state = restarted.get_state()

    assert state.current_set_id == sets[1].id
    assert state.resting is False
    assert state.progress.completed_sets == 1
