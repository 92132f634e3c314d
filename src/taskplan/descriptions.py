"""Human-readable descriptions of the scheduling algorithms."""

from __future__ import annotations

from dataclasses import dataclass

from .scheduler.config import AlgorithmType


@dataclass(frozen=True)
class AlgorithmInfo:
    name: str
    description: str
    time_complexity: str
    space_complexity: str
    best_for: str


ALGORITHM_INFO: dict[AlgorithmType, AlgorithmInfo] = {
    AlgorithmType.TOPOLOGICAL: AlgorithmInfo(
        name="Topological Sort (Kahn)",
        description=(
            "Orders tasks so prerequisites always run first. Tasks without "
            "prerequisites go first, then each task as soon as it is unblocked."
        ),
        time_complexity="O(V + E)",
        space_complexity="O(V)",
        best_for="Task sets with complex dependencies that must run in a strict order",
    ),
    AlgorithmType.PRIORITY_SELECTION: AlgorithmInfo(
        name="Priority Selection",
        description=(
            "Sorts the dependency order by priority and selects the combination "
            "of tasks with the highest total priority."
        ),
        time_complexity="O(n log n)",
        space_complexity="O(n)",
        best_for="Maximizing the total value of completed tasks",
    ),
    AlgorithmType.GREEDY: AlgorithmInfo(
        name="Greedy (Priority First)",
        description=(
            "Always picks the most urgent task next, breaking ties by the "
            "earliest deadline. Fast, but not always optimal."
        ),
        time_complexity="O(n log n)",
        space_complexity="O(n)",
        best_for="Getting high-priority work done first",
    ),
    AlgorithmType.SHORTEST_DURATION: AlgorithmInfo(
        name="Shortest Duration First",
        description=(
            "Always runs the shortest task next, finishing small tasks quickly "
            "and minimizing average waiting time."
        ),
        time_complexity="O(n log n)",
        space_complexity="O(n)",
        best_for="Minimizing average completion and waiting time",
    ),
}


def describe(algorithm: AlgorithmType | str) -> AlgorithmInfo:
    return ALGORITHM_INFO[AlgorithmType.parse(algorithm)]
