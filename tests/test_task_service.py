"""Tests for the task list and its timer wiring"""
import pytest

from logidesk.errors import ValidationError
from logidesk.models.task import TaskCreate, TaskStatus
from logidesk.models.timer import TimerStatus
from logidesk.services.tasks import INITIAL_TASKS, TASKS_STORAGE_KEY, TaskService
from logidesk.services.timer import TimerManager


@pytest.fixture
def timer(store, clock):
    return TimerManager(store, clock=clock)


@pytest.fixture
def tasks(store, timer):
    return TaskService(store, timer)


def test_seeds_initial_tasks(tasks):
    listed = tasks.list_tasks()
    assert [t.id for t in listed] == [t.id for t in INITIAL_TASKS]
    assert all(t.time_spent == 0 for t in listed)


def test_add_task_persists(tasks, store, timer):
    task = tasks.add_task(TaskCreate(name="Book container", assignee="Olena"))

    assert task.status == TaskStatus.NOT_STARTED
    reloaded = TaskService(store, timer)
    assert reloaded.get_task(task.id).name == "Book container"
    assert all("timeSpent" not in item for item in store.get_json(TASKS_STORAGE_KEY))


def test_add_task_requires_name(tasks):
    with pytest.raises(ValidationError):
        tasks.add_task(TaskCreate(name="   "))


def test_get_unknown_task_raises(tasks):
    with pytest.raises(KeyError):
        tasks.get_task("missing")


def test_start_task_starts_timer(tasks, timer):
    task = tasks.start_task("2")

    assert task.status == TaskStatus.IN_PROGRESS
    assert timer.active_task.id == "2"
    assert timer.state.status == TimerStatus.RUNNING


def test_start_running_task_is_noop(tasks, timer, clock):
    tasks.start_task("2")
    clock.advance(4)

    tasks.start_task("2")
    clock.advance(1)

    assert timer.state.task_history == {}
    assert timer.time_spent("2") == 5


def test_complete_task_reports_time_spent(tasks, timer, clock):
    tasks.start_task("2")
    clock.advance(3661)

    assert tasks.complete_task("2") == "01:01:01"
    assert tasks.get_task("2").status == TaskStatus.COMPLETED
    assert tasks.get_task("2").time_spent == 3661
    assert timer.state.status == TimerStatus.IDLE


def test_complete_inactive_task_keeps_timer_running(tasks, timer, clock):
    tasks.start_task("2")
    clock.advance(10)

    tasks.complete_task("5")

    assert timer.active_task.id == "2"
    assert timer.state.status == TimerStatus.RUNNING
