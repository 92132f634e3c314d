"""Algorithm factory and exports."""

from collections.abc import Sequence
from datetime import datetime

from taskplan.models import Dependency, Task

from ..config import AlgorithmType, SchedulingConfig
from ..protocols import SchedulingAlgorithm
from .base import ReorderingScheduler
from .greedy import GreedyScheduler
from .priority_selection import PrioritySelectionScheduler
from .shortest_duration import ShortestDurationScheduler
from .topological import TopologicalScheduler


def create_algorithm(
    algorithm_type: AlgorithmType | str,
    tasks: Sequence[Task],
    dependencies: Sequence[Dependency],
    start_time: datetime,
    *,
    config: SchedulingConfig | None = None,
) -> SchedulingAlgorithm:
    """Create a scheduling algorithm instance.

    Args:
        algorithm_type: Algorithm to create (enum member or its name)
        tasks: Tasks to schedule
        dependencies: Dependency edges between those tasks
        start_time: When the first task starts
        config: Optional scheduling configuration

    Returns:
        Algorithm instance ready to schedule

    Raises:
        ValueError: If the algorithm is unknown
    """
    algorithm_type = AlgorithmType.parse(algorithm_type)

    if algorithm_type == AlgorithmType.TOPOLOGICAL:
        return TopologicalScheduler(tasks, dependencies, start_time, config=config)

    if algorithm_type == AlgorithmType.PRIORITY_SELECTION:
        return PrioritySelectionScheduler(tasks, dependencies, start_time, config=config)

    if algorithm_type == AlgorithmType.GREEDY:
        return GreedyScheduler(tasks, dependencies, start_time, config=config)

    if algorithm_type == AlgorithmType.SHORTEST_DURATION:
        return ShortestDurationScheduler(tasks, dependencies, start_time, config=config)

    msg = f"Unknown algorithm type: {algorithm_type}"
    raise ValueError(msg)


__all__ = [
    "GreedyScheduler",
    "PrioritySelectionScheduler",
    "ReorderingScheduler",
    "ShortestDurationScheduler",
    "TopologicalScheduler",
    "create_algorithm",
]
