"""High-level scheduling entry points."""

from __future__ import annotations

import time
from collections.abc import Sequence
from datetime import datetime

from taskplan.logger import changes_enabled, get_logger
from taskplan.models import Dependency, Task

from .algorithms import create_algorithm
from .config import ALL_ALGORITHMS, AlgorithmType, SchedulingConfig
from .core import ComparisonResult, SchedulingResult
from .metrics import calculate_metrics, rank_algorithms

logger = get_logger()


class SchedulingService:
    """Runs scheduling algorithms over task snapshots and scores the output.

    Every call copies its inputs into tuples of frozen values, so separate
    runs never share mutable state and repeated runs on the same input give
    the same schedule.
    """

    def __init__(self, config: SchedulingConfig | None = None):
        self.config = config or SchedulingConfig()

    def schedule(
        self,
        tasks: Sequence[Task],
        dependencies: Sequence[Dependency],
        start_time: datetime,
        algorithm: AlgorithmType | str | None = None,
    ) -> SchedulingResult:
        """Schedule tasks with one algorithm and compute metrics.

        Args:
            tasks: Tasks to schedule
            dependencies: Dependency edges between those tasks
            start_time: When the first task starts
            algorithm: Algorithm to run (defaults to the configured one)

        Returns:
            SchedulingResult with scheduled tasks, metrics and excluded task IDs

        Raises:
            ValueError: If the algorithm is unknown
        """
        algorithm_type = AlgorithmType.parse(algorithm or self.config.algorithm)
        task_snapshot = tuple(tasks)
        dependency_snapshot = tuple(dependencies)

        started = time.perf_counter()
        scheduler = create_algorithm(
            algorithm_type, task_snapshot, dependency_snapshot, start_time, config=self.config
        )
        algorithm_result = scheduler.schedule()
        execution_time_ms = (time.perf_counter() - started) * 1000

        metrics = calculate_metrics(algorithm_result.scheduled_tasks, execution_time_ms)
        if changes_enabled():
            logger.changes(
                f"{algorithm_type.value}: {metrics.tasks_scheduled}/{len(task_snapshot)} tasks "
                f"in {execution_time_ms:.3f}ms"
            )

        return SchedulingResult(
            algorithm=algorithm_type,
            scheduled_tasks=algorithm_result.scheduled_tasks,
            metrics=metrics,
            excluded_task_ids=algorithm_result.excluded_task_ids,
            algorithm_metadata=algorithm_result.algorithm_metadata,
        )

    def compare(
        self,
        tasks: Sequence[Task],
        dependencies: Sequence[Dependency],
        start_time: datetime,
        algorithms: Sequence[AlgorithmType] = ALL_ALGORITHMS,
    ) -> ComparisonResult:
        """Run several algorithms on the same snapshot and rank them.

        Returns:
            ComparisonResult with per-algorithm results and rankings, best first
        """
        task_snapshot = tuple(tasks)
        dependency_snapshot = tuple(dependencies)

        results: dict[AlgorithmType, SchedulingResult] = {}
        for algorithm in algorithms:
            algorithm_type = AlgorithmType.parse(algorithm)
            results[algorithm_type] = self.schedule(
                task_snapshot, dependency_snapshot, start_time, algorithm_type
            )

        rankings = rank_algorithms(
            {algorithm: result.metrics for algorithm, result in results.items()},
            self.config.ranking,
        )
        return ComparisonResult(results=results, rankings=rankings)


def schedule(
    algorithm: AlgorithmType | str,
    tasks: Sequence[Task],
    dependencies: Sequence[Dependency],
    start_time: datetime,
    *,
    config: SchedulingConfig | None = None,
) -> SchedulingResult:
    """Schedule tasks with the named algorithm.

    Convenience wrapper around ``SchedulingService.schedule``.
    """
    return SchedulingService(config).schedule(tasks, dependencies, start_time, algorithm)
