"""Protocol definitions for the scheduling system."""

from typing import Protocol

from .core import AlgorithmResult


class SchedulingAlgorithm(Protocol):
    """Protocol for scheduling algorithms."""

    def schedule(self) -> AlgorithmResult:
        """Run the scheduling algorithm.

        Returns:
            AlgorithmResult with scheduled tasks, excluded task IDs and metadata
        """
        ...
