"""Shared machinery for schedulers that re-order the topological seed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from taskplan.logger import checks_enabled, get_logger
from taskplan.models import Dependency, Task

from ..config import OrderingMode, SchedulingConfig
from ..core import AlgorithmResult
from ..graph import topological_levels
from ..timeline import assign_sequential_times
from .topological import TopologicalScheduler

logger = get_logger()


class ReorderingScheduler(ABC):
    """Base class for schedulers layered on top of the topological order.

    Subclasses implement ``reorder()``. With ``OrderingMode.RESORT`` the whole
    topological order is re-sorted, so a dependent task may end up ahead of
    its prerequisite. With ``OrderingMode.LEVELED`` each dependency level is
    re-sorted on its own and the levels keep their order.
    """

    algorithm_name = "reordering"

    def __init__(
        self,
        tasks: Sequence[Task],
        dependencies: Sequence[Dependency],
        start_time: datetime,
        *,
        config: SchedulingConfig | None = None,
    ):
        """Initialize the scheduler.

        Args:
            tasks: Tasks to schedule, with unique IDs
            dependencies: Dependency edges between those tasks
            start_time: When the first task starts
            config: Optional scheduling configuration
        """
        self.tasks = tuple(tasks)
        self.dependencies = tuple(dependencies)
        self.start_time = start_time
        self.config = config or SchedulingConfig()

    @abstractmethod
    def reorder(self, tasks: list[Task]) -> list[Task]:
        """Return ``tasks`` in this algorithm's preferred order."""

    def select(self, ordered: list[Task]) -> tuple[list[Task], dict[str, Any]]:
        """Choose which ordered tasks to place. Default keeps all of them."""
        return ordered, {}

    def schedule(self) -> AlgorithmResult:
        """Run the topological pass, re-order, and place tasks sequentially.

        Returns:
            AlgorithmResult with scheduled tasks and excluded task IDs
        """
        seed = TopologicalScheduler(
            self.tasks, self.dependencies, self.start_time, config=self.config
        ).schedule()
        seed_order = [st.task for st in seed.scheduled_tasks]

        if self.config.ordering == OrderingMode.LEVELED:
            ordered: list[Task] = []
            for level in topological_levels(seed_order, self.dependencies):
                ordered.extend(self.reorder(level))
        else:
            ordered = self.reorder(seed_order)

        if checks_enabled():
            logger.checks(f"{self.algorithm_name} order: {[task.id for task in ordered]}")

        selected, metadata = self.select(ordered)
        scheduled = assign_sequential_times(selected, self.start_time)

        return AlgorithmResult(
            scheduled_tasks=scheduled,
            excluded_task_ids=seed.excluded_task_ids,
            algorithm_metadata={
                "algorithm": self.algorithm_name,
                "ordering": self.config.ordering.value,
                **metadata,
            },
        )
