"""Tests for the task timer state machine"""
import pytest

from logidesk.infra.storage import InMemoryKeyValueStore
from logidesk.models.timer import TimerStatus
from logidesk.services.timer import TIMER_STORAGE_KEY, TimerManager
from logidesk.utils.datetime_helper import format_elapsed

from .conftest import make_task


@pytest.fixture
def timer(store, clock):
    return TimerManager(store, clock=clock)


class TestFormatElapsed:
    def test_hours_minutes_seconds(self):
        assert format_elapsed(3661) == "01:01:01"

    def test_zero(self):
        assert format_elapsed(0) == "00:00:00"

    def test_hours_not_bounded(self):
        assert format_elapsed(100 * 3600) == "100:00:00"


class TestTimerTransitions:
    def test_starts_idle(self, timer):
        assert timer.state.status == TimerStatus.IDLE
        assert timer.get_elapsed_formatted() == "00:00:00"

    def test_running_counts_wall_clock(self, timer, clock):
        timer.start_timer(make_task("a"))
        clock.advance(65.4)

        assert timer.state.status == TimerStatus.RUNNING
        assert timer.get_elapsed_formatted() == "00:01:05"

    def test_sub_second_remainder_is_kept(self, timer, clock):
        timer.start_timer(make_task("a"))
        clock.advance(0.6)
        assert timer.tick() == 0
        clock.advance(0.6)
        assert timer.tick() == 1

    def test_stop_pauses_and_flushes(self, timer, clock):
        timer.start_timer(make_task("a"))
        clock.advance(5)
        timer.stop_timer()

        assert timer.state.status == TimerStatus.PAUSED
        assert timer.state.elapsed_seconds == 5
        assert timer.state.task_history == {"a": 5}

        clock.advance(30)
        assert timer.tick() == 5

    def test_stop_when_not_running_is_noop(self, timer):
        timer.stop_timer()
        assert timer.state.status == TimerStatus.IDLE
        assert timer.state.task_history == {}

    def test_resume_same_task_does_not_double_count(self, timer, clock):
        task = make_task("a")
        timer.start_timer(task)
        clock.advance(5)
        timer.stop_timer()

        timer.start_timer(task)
        clock.advance(3)
        assert timer.time_spent("a") == 8
        assert timer.state.elapsed_seconds == 8

        timer.stop_timer()
        assert timer.state.task_history == {"a": 8}

    def test_restart_running_task_keeps_segment(self, timer, clock):
        task = make_task("a")
        timer.start_timer(task)
        clock.advance(4)
        timer.start_timer(task)
        clock.advance(2)
        timer.stop_timer()

        assert timer.state.task_history == {"a": 6}

    def test_switch_task_flushes_previous(self, timer, clock):
        timer.start_timer(make_task("a"))
        clock.advance(7)
        timer.start_timer(make_task("b"))

        assert timer.state.task_history == {"a": 7}
        assert timer.active_task.id == "b"
        assert timer.state.elapsed_seconds == 0

        clock.advance(2)
        assert timer.time_spent("a") == 7
        assert timer.time_spent("b") == 2

    def test_switch_from_paused_task_does_not_recount(self, timer, clock):
        timer.start_timer(make_task("a"))
        clock.advance(4)
        timer.stop_timer()
        timer.start_timer(make_task("b"))

        assert timer.state.task_history == {"a": 4}


class TestCompleteTask:
    def test_complete_active_task_clears_timer(self, timer, clock):
        timer.start_timer(make_task("a"))
        clock.advance(12)

        assert timer.complete_task("a") is True
        assert timer.state.status == TimerStatus.IDLE
        assert timer.state.elapsed_seconds == 0
        assert timer.state.start_time_epoch_ms is None
        assert timer.state.task_history == {"a": 12}

    def test_complete_paused_task_keeps_flushed_history(self, timer, clock):
        timer.start_timer(make_task("a"))
        clock.advance(3)
        timer.stop_timer()

        assert timer.complete_task("a") is True
        assert timer.state.task_history == {"a": 3}

    def test_complete_other_task_leaves_timer_untouched(self, timer, clock):
        timer.start_timer(make_task("a"))
        clock.advance(3)

        assert timer.complete_task("b") is False
        assert timer.active_task.id == "a"
        assert timer.state.status == TimerStatus.RUNNING
        assert timer.state.task_history == {}


class TestPersistence:
    def test_state_written_with_client_field_names(self, timer, store, clock):
        timer.start_timer(make_task("a"))

        data = store.get_json(TIMER_STORAGE_KEY)
        assert data["activeTask"]["id"] == "a"
        assert data["startTime"] == clock.now_ms
        assert data["elapsedTime"] == 0
        assert data["taskHistory"] == {}

    def test_rehydrate_adds_gap_while_closed(self, store, clock):
        store.set_json(TIMER_STORAGE_KEY, {
            "activeTask": {"id": "a", "name": "Task a"},
            "startTime": clock.now_ms - 10_000,
            "elapsedTime": 5,
            "taskHistory": {},
        })

        timer = TimerManager(store, clock=clock)

        assert timer.state.elapsed_seconds == 15
        assert timer.state.start_time_epoch_ms == clock.now_ms
        assert timer.time_spent("a") == 15

    def test_rehydrate_paused_state_keeps_elapsed(self, store, clock):
        store.set_json(TIMER_STORAGE_KEY, {
            "activeTask": {"id": "a", "name": "Task a"},
            "startTime": None,
            "elapsedTime": 40,
            "taskHistory": {"a": 40},
        })

        timer = TimerManager(store, clock=clock)
        clock.advance(100)

        assert timer.state.status == TimerStatus.PAUSED
        assert timer.tick() == 40
        assert timer.time_spent("a") == 40

    def test_survives_restart_without_losing_time(self, store, clock):
        timer = TimerManager(store, clock=clock)
        timer.start_timer(make_task("a"))
        clock.advance(20)

        reopened = TimerManager(store, clock=clock)
        clock.advance(5)
        reopened.stop_timer()

        assert reopened.state.task_history == {"a": 25}

    def test_corrupt_state_falls_back_to_idle(self, store, clock):
        store.set("taskTimer", "{not json")
        timer = TimerManager(store, clock=clock)
        assert timer.state.status == TimerStatus.IDLE

    def test_quota_overflow_keeps_state_in_memory(self, clock):
        store = InMemoryKeyValueStore(quota_bytes=10)
        timer = TimerManager(store, clock=clock)

        timer.start_timer(make_task("a"))

        assert timer.state.status == TimerStatus.RUNNING
        assert timer.last_notice is not None
        assert store.get(TIMER_STORAGE_KEY) is None
