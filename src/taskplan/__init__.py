"""taskplan - dependency-aware sequential task scheduling.

Main entry points:
- schedule(): run one algorithm over a task snapshot
- SchedulingService: run or compare algorithms with a shared configuration
- TaskStore: per-user task/dependency/schedule repository
"""

from .models import Dependency, Schedule, Task
from .scheduler import (
    AlgorithmType,
    SchedulingConfig,
    SchedulingResult,
    SchedulingService,
    schedule,
)
from .store import TaskStore

__version__ = "0.1.0"

__all__ = [
    "AlgorithmType",
    "Dependency",
    "Schedule",
    "SchedulingConfig",
    "SchedulingResult",
    "SchedulingService",
    "Task",
    "TaskStore",
    "schedule",
]
