"""Pytest configuration and fixtures for taskplan tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

import pytest

from taskplan.logger import reset_logger
from taskplan.models import Dependency, Task
from taskplan.scheduler.config import ALL_ALGORITHMS, AlgorithmType
from taskplan.unified_config import set_config_path

ALGORITHM_IDS = [algorithm.value for algorithm in ALL_ALGORITHMS]

# Algorithms that re-sort the topological seed order
REORDERING_ALGORITHMS = [
    AlgorithmType.PRIORITY_SELECTION,
    AlgorithmType.GREEDY,
    AlgorithmType.SHORTEST_DURATION,
]


@pytest.fixture(params=ALL_ALGORITHMS, ids=ALGORITHM_IDS)
def algorithm(request: pytest.FixtureRequest) -> AlgorithmType:
    """Current algorithm being tested."""
    return request.param  # type: ignore[return-value]


@pytest.fixture(
    params=REORDERING_ALGORITHMS, ids=[algorithm.value for algorithm in REORDERING_ALGORITHMS]
)
def reordering_algorithm(request: pytest.FixtureRequest) -> AlgorithmType:
    """Algorithm layered on top of the topological order."""
    return request.param  # type: ignore[return-value]


@pytest.fixture
def start_time() -> datetime:
    return datetime(2025, 1, 6, 9, 0)


@pytest.fixture
def abc_tasks() -> list[Task]:
    """A(30, P3), B(60, P5), C(15, P1)."""
    return [
        Task(id="A", duration=30, priority=3, title="Task A"),
        Task(id="B", duration=60, priority=5, title="Task B"),
        Task(id="C", duration=15, priority=1, title="Task C"),
    ]


@pytest.fixture
def abc_dependencies() -> list[Dependency]:
    """C depends on A."""
    return [Dependency(task_id="C", depends_on_task_id="A")]


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset logger and the CLI config path after each test for isolation."""
    yield
    reset_logger()
    set_config_path(None)


def task(task_id: str, duration: int = 30, priority: int = 3, **kwargs: object) -> Task:
    """Shorthand for building a Task in tests."""
    return Task(id=task_id, duration=duration, priority=priority, **kwargs)  # type: ignore[arg-type]


def dep(task_id: str, depends_on_task_id: str) -> Dependency:
    """Shorthand for "task_id depends on depends_on_task_id"."""
    return Dependency(task_id=task_id, depends_on_task_id=depends_on_task_id)


def assert_contiguous(scheduled: tuple, start_time: datetime) -> None:  # type: ignore[type-arg]
    """Assert tasks run back to back from start_time with durations honored."""
    if not scheduled:
        return
    assert scheduled[0].start_time == start_time
    for st in scheduled:
        assert (st.end_time - st.start_time).total_seconds() == st.duration * 60
    for current, following in zip(scheduled, scheduled[1:]):
        assert current.end_time == following.start_time
