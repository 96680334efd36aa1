"""Shared fixtures: in-memory store and controllable clocks"""
from datetime import datetime, timedelta, timezone

import pytest

from logidesk.infra.storage import InMemoryKeyValueStore
from logidesk.models.task import Task


class FakeClock:
    """Epoch-millisecond clock advanced by hand"""

    def __init__(self, start_ms: int = 1_700_000_000_000):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, seconds: float) -> None:
        self.now_ms += int(seconds * 1000)


class FakeDateTimeClock:
    """UTC datetime clock; each call moves one second forward"""

    def __init__(self, start: datetime = datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def dt_clock():
    return FakeDateTimeClock()


def make_task(task_id: str, name: str = "") -> Task:
    return Task(id=task_id, name=name or f"Task {task_id}")
