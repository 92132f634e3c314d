"""Shortest-duration-first scheduling."""

from __future__ import annotations

from taskplan.models import Task

from .base import ReorderingScheduler


class ShortestDurationScheduler(ReorderingScheduler):
    """Places the shortest task next (stable for equal durations)."""

    algorithm_name = "shortest_duration"

    def reorder(self, tasks: list[Task]) -> list[Task]:
        return sorted(tasks, key=lambda task: task.duration)
