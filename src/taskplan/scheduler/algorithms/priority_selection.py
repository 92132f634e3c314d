"""Priority-maximizing selection over the topological order."""

from __future__ import annotations

from typing import Any

from taskplan.logger import checks_enabled, get_logger
from taskplan.models import Task

from .base import ReorderingScheduler

logger = get_logger()


class PrioritySelectionScheduler(ReorderingScheduler):
    """Selects tasks maximizing cumulative priority.

    The topological order is stable-sorted by priority (highest first), then
    a one-dimensional selection walks that order keeping a running best
    total. A task is included whenever adding its priority beats carrying
    the previous best forward, which holds for every positive priority.
    Included tasks are placed in priority order, not dependency order.
    """

    algorithm_name = "priority_selection"

    def reorder(self, tasks: list[Task]) -> list[Task]:
        return sorted(tasks, key=lambda task: -task.priority)

    def select(self, ordered: list[Task]) -> tuple[list[Task], dict[str, Any]]:
        best = [0] * (len(ordered) + 1)
        included = [False] * len(ordered)

        for i, task in enumerate(ordered, start=1):
            best[i] = best[i - 1]
            include_value = best[i - 1] + task.priority
            if include_value > best[i]:
                best[i] = include_value
                included[i - 1] = True
            elif checks_enabled():
                logger.checks(f"  {task.id} skipped (priority {task.priority})")

        selected = [task for task, keep in zip(ordered, included) if keep]
        return selected, {"total_priority": best[-1], "skipped": len(ordered) - len(selected)}
