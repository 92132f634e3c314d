"""Core dataclasses for the scheduling system."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from taskplan.models import Task

    from .config import AlgorithmType


def _default_dict() -> dict[str, Any]:
    return {}


def _default_str_tuple() -> tuple[str, ...]:
    return ()


@dataclass(frozen=True)
class ScheduledTask:
    """A task with a concrete place on the timeline."""

    task: Task
    start_time: datetime
    end_time: datetime

    @property
    def id(self) -> str:
        return self.task.id

    @property
    def duration(self) -> int:
        return self.task.duration

    @property
    def priority(self) -> int:
        return self.task.priority

    @property
    def deadline(self) -> datetime | None:
        return self.task.deadline

    @property
    def title(self) -> str:
        return self.task.title

    @property
    def met_deadline(self) -> bool | None:
        """Whether the task ends by its deadline, or None without one."""
        if self.task.deadline is None:
            return None
        return self.end_time <= self.task.deadline


@dataclass(frozen=True)
class ScheduleMetrics:
    """Summary statistics for one produced schedule."""

    execution_time_ms: float = 0.0
    total_duration: int = 0  # Minutes
    tasks_scheduled: int = 0
    average_idle_time: float = 0.0  # Always 0 for sequential schedules
    deadlines_met: int = 0
    deadlines_missed: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AlgorithmResult:
    """Result from a scheduling algorithm."""

    scheduled_tasks: tuple[ScheduledTask, ...]
    excluded_task_ids: tuple[str, ...] = field(default_factory=_default_str_tuple)
    algorithm_metadata: dict[str, Any] = field(default_factory=_default_dict)


@dataclass(frozen=True)
class SchedulingResult:
    """Complete result of one scheduling call.

    ``excluded_task_ids`` lists tasks the topological pass could never
    unblock (unknown prerequisites or an undetected cycle). It is purely
    diagnostic: those tasks are absent from ``scheduled_tasks`` and are
    not reflected in ``metrics``.
    """

    algorithm: AlgorithmType
    scheduled_tasks: tuple[ScheduledTask, ...]
    metrics: ScheduleMetrics
    excluded_task_ids: tuple[str, ...] = field(default_factory=_default_str_tuple)
    algorithm_metadata: dict[str, Any] = field(default_factory=_default_dict)


@dataclass(frozen=True)
class AlgorithmRanking:
    """Score of one algorithm within a comparison."""

    rank: int  # 1-based
    algorithm: AlgorithmType
    metrics: ScheduleMetrics
    success_rate: float  # Percent of scheduled tasks meeting their deadline
    speed_score: float  # Percent faster than the slowest algorithm in the set
    score: float


@dataclass(frozen=True)
class ComparisonResult:
    """All algorithms run on the same snapshot, plus their ranking."""

    results: dict[AlgorithmType, SchedulingResult]
    rankings: list[AlgorithmRanking]

    @property
    def best(self) -> AlgorithmRanking | None:
        return self.rankings[0] if self.rankings else None
