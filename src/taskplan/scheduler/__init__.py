"""Scheduler package - dependency-aware sequential scheduling.

This package provides:
- Four interchangeable algorithms sharing a topological seed order
- Metrics and composite-score ranking for comparing them
- SchedulingService / schedule() as the entry points

Configuration:
- SchedulingConfig: algorithm, ordering mode and ranking weights
"""

# Algorithms
from .algorithms import (
    GreedyScheduler,
    PrioritySelectionScheduler,
    ShortestDurationScheduler,
    TopologicalScheduler,
    create_algorithm,
)

# Configuration
from .config import ALL_ALGORITHMS, AlgorithmType, OrderingMode, RankingConfig, SchedulingConfig

# Core dataclasses
from .core import (
    AlgorithmRanking,
    AlgorithmResult,
    ComparisonResult,
    ScheduledTask,
    ScheduleMetrics,
    SchedulingResult,
)

# Graph helpers
from .graph import DependencyGraph, build_graph, topological_levels, would_create_cycle

# Metrics
from .metrics import calculate_metrics, rank_algorithms

# Protocols
from .protocols import SchedulingAlgorithm

# Entry points
from .service import SchedulingService, schedule
from .timeline import assign_sequential_times

__all__ = [
    # Core dataclasses
    "ScheduledTask",
    "ScheduleMetrics",
    "SchedulingResult",
    "AlgorithmResult",
    "AlgorithmRanking",
    "ComparisonResult",
    # Configuration
    "SchedulingConfig",
    "AlgorithmType",
    "OrderingMode",
    "RankingConfig",
    "ALL_ALGORITHMS",
    # Protocols
    "SchedulingAlgorithm",
    # Graph
    "DependencyGraph",
    "build_graph",
    "topological_levels",
    "would_create_cycle",
    # Timeline and metrics
    "assign_sequential_times",
    "calculate_metrics",
    "rank_algorithms",
    # Entry points
    "SchedulingService",
    "schedule",
    # Algorithms
    "TopologicalScheduler",
    "PrioritySelectionScheduler",
    "GreedyScheduler",
    "ShortestDurationScheduler",
    "create_algorithm",
]
