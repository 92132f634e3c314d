"""Greedy priority-first scheduling."""

from __future__ import annotations

from functools import cmp_to_key

from taskplan.models import Task

from .base import ReorderingScheduler


def compare_priority_deadline(a: Task, b: Task) -> int:
    """Higher priority first, then earlier deadline.

    Two equal-priority tasks compare equal unless both have a deadline, so
    their relative order is left to the stable sort.
    """
    if a.priority != b.priority:
        return b.priority - a.priority
    if a.deadline is not None and b.deadline is not None:
        if a.deadline < b.deadline:
            return -1
        if a.deadline > b.deadline:
            return 1
    return 0


class GreedyScheduler(ReorderingScheduler):
    """Places the most urgent task next, breaking ties by deadline."""

    algorithm_name = "greedy"

    def reorder(self, tasks: list[Task]) -> list[Task]:
        return sorted(tasks, key=cmp_to_key(compare_priority_deadline))
