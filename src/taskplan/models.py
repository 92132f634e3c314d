"""Data models for taskplan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from .exceptions import TaskValidationError

if TYPE_CHECKING:
    from .scheduler.config import AlgorithmType
    from .scheduler.core import ScheduledTask, ScheduleMetrics

# Task field limits
MIN_PRIORITY = 1
MAX_PRIORITY = 5
MIN_DURATION_MINUTES = 1
MAX_DURATION_MINUTES = 7 * 24 * 60  # One week


def _default_tasks() -> tuple[ScheduledTask, ...]:
    return ()


@dataclass(frozen=True)
class Task:
    """A unit of work to be scheduled.

    Tasks are immutable inputs to the schedulers. Edits happen in the store
    layer, which replaces the whole value.
    """

    id: str
    duration: int  # Minutes
    priority: int  # 1-5, 5 = most urgent
    deadline: datetime | None = None
    title: str = ""
    description: str | None = None

    @property
    def label(self) -> str:
        """Human-readable name, falling back to the ID."""
        return self.title or self.id


@dataclass(frozen=True)
class Dependency:
    """An edge meaning ``task_id`` cannot start before ``depends_on_task_id`` finishes."""

    task_id: str
    depends_on_task_id: str
    id: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.task_id} -> {self.depends_on_task_id}"


@dataclass(frozen=True)
class Schedule:
    """A named, persisted scheduling result."""

    id: str
    name: str
    algorithm: AlgorithmType
    start_time: datetime
    tasks: tuple[ScheduledTask, ...] = field(default_factory=_default_tasks)
    metrics: ScheduleMetrics | None = None
    created_at: datetime | None = None


def is_timezone_aware(value: datetime) -> bool:
    return value.utcoffset() is not None


def validate_task(task: Task) -> Task:
    """Check duration and priority bounds.

    Returns:
        The same task, for chaining

    Raises:
        TaskValidationError: If the duration or priority is out of range
    """
    if not task.id:
        raise TaskValidationError("Task ID must not be empty")
    if not MIN_DURATION_MINUTES <= task.duration <= MAX_DURATION_MINUTES:
        raise TaskValidationError(
            f"Task '{task.id}' duration must be between {MIN_DURATION_MINUTES} and "
            f"{MAX_DURATION_MINUTES} minutes, got {task.duration}"
        )
    if not MIN_PRIORITY <= task.priority <= MAX_PRIORITY:
        raise TaskValidationError(
            f"Task '{task.id}' priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}, "
            f"got {task.priority}"
        )
    return task
