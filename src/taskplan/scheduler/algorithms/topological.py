"""Topological scheduling with Kahn's algorithm."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from datetime import datetime

from taskplan.logger import changes_enabled, checks_enabled, debug_enabled, get_logger
from taskplan.models import Dependency, Task

from ..config import SchedulingConfig
from ..core import AlgorithmResult, ScheduledTask
from ..graph import build_graph
from ..timeline import task_end_time

logger = get_logger()


class TopologicalScheduler:
    """Orders tasks so every prerequisite runs before its dependents.

    This scheduler:
    1. Seeds a FIFO queue with every task that has no prerequisites, in task-list order
    2. Pops the queue head and places it at the running clock
    3. Releases dependents whose last prerequisite just finished

    Ties between ready tasks follow input order, not priority. Tasks that
    never become ready are left out of the schedule and reported in
    ``excluded_task_ids``; this is not treated as an error.
    """

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

    def schedule(self) -> AlgorithmResult:
        """Schedule tasks in dependency order.

        Returns:
            AlgorithmResult with scheduled tasks and excluded task IDs
        """
        graph = build_graph(self.tasks, self.dependencies)
        task_map = {task.id: task for task in self.tasks}
        in_degree = dict(graph.in_degree)

        queue = deque(task.id for task in self.tasks if in_degree[task.id] == 0)
        if checks_enabled():
            logger.checks(f"Ready at start: {list(queue)}")

        scheduled: list[ScheduledTask] = []
        current_time = self.start_time

        while queue:
            task_id = queue.popleft()
            task = task_map[task_id]
            end_time = task_end_time(task, current_time)
            scheduled.append(ScheduledTask(task=task, start_time=current_time, end_time=end_time))
            if changes_enabled():
                logger.changes(
                    f"  {task_id}: {current_time.isoformat()} -> {end_time.isoformat()}"
                )
            current_time = end_time

            for dependent_id in graph.dependents_of(task_id):
                in_degree[dependent_id] -= 1
                if in_degree[dependent_id] == 0:
                    if dependent_id not in task_map:
                        continue
                    queue.append(dependent_id)
                    if checks_enabled():
                        logger.checks(f"  {dependent_id} unblocked by {task_id}")

        scheduled_ids = {st.id for st in scheduled}
        excluded = tuple(task.id for task in self.tasks if task.id not in scheduled_ids)
        if excluded and debug_enabled():
            logger.debug(f"Never unblocked: {list(excluded)}")

        return AlgorithmResult(
            scheduled_tasks=tuple(scheduled),
            excluded_task_ids=excluded,
            algorithm_metadata={"algorithm": "topological"},
        )
