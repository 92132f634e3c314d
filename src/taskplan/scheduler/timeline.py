"""Sequential time assignment for single-resource schedules."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from taskplan.models import Task

from .core import ScheduledTask


def task_end_time(task: Task, start_time: datetime) -> datetime:
    """Return when a task started at ``start_time`` finishes."""
    return start_time + timedelta(minutes=task.duration)


def assign_sequential_times(
    tasks: Iterable[Task], start_time: datetime
) -> tuple[ScheduledTask, ...]:
    """Place tasks back to back starting at ``start_time``.

    Each task starts exactly when the previous one ends, so a schedule never
    has idle gaps or overlaps.
    """
    scheduled: list[ScheduledTask] = []
    current_time = start_time
    for task in tasks:
        end_time = task_end_time(task, current_time)
        scheduled.append(ScheduledTask(task=task, start_time=current_time, end_time=end_time))
        current_time = end_time
    return tuple(scheduled)
