"""Schedule metrics and algorithm ranking."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .config import AlgorithmType, RankingConfig
from .core import AlgorithmRanking, ScheduledTask, ScheduleMetrics


def calculate_metrics(
    scheduled_tasks: Iterable[ScheduledTask], execution_time_ms: float
) -> ScheduleMetrics:
    """Summarize a produced schedule.

    Deadlines are checked against each task's end time. Tasks without a
    deadline count toward neither ``deadlines_met`` nor ``deadlines_missed``.
    An empty schedule yields zeros for everything but the execution time.
    """
    scheduled = list(scheduled_tasks)
    if not scheduled:
        return ScheduleMetrics(execution_time_ms=execution_time_ms)

    deadlines_met = 0
    deadlines_missed = 0
    for st in scheduled:
        if st.deadline is None:
            continue
        if st.end_time <= st.deadline:
            deadlines_met += 1
        else:
            deadlines_missed += 1

    return ScheduleMetrics(
        execution_time_ms=execution_time_ms,
        total_duration=sum(st.duration for st in scheduled),
        tasks_scheduled=len(scheduled),
        # Sequential placement leaves no gaps
        average_idle_time=0.0,
        deadlines_met=deadlines_met,
        deadlines_missed=deadlines_missed,
    )


def success_rate(metrics: ScheduleMetrics) -> float:
    """Percentage of scheduled tasks that met their deadline (0 with no tasks)."""
    if metrics.tasks_scheduled == 0:
        return 0.0
    return metrics.deadlines_met / metrics.tasks_scheduled * 100


def speed_score(metrics: ScheduleMetrics, max_execution_time_ms: float) -> float:
    """How much faster than the slowest run this one was, in percent (0 if the max is 0)."""
    if max_execution_time_ms <= 0:
        return 0.0
    return (1 - metrics.execution_time_ms / max_execution_time_ms) * 100


def rank_algorithms(
    results: Mapping[AlgorithmType, ScheduleMetrics],
    weights: RankingConfig | None = None,
) -> list[AlgorithmRanking]:
    """Rank algorithms run on identical input by composite score.

    ``score = success_rate * success_weight + speed_score * speed_weight``.
    Sorting is stable, so equal scores keep the mapping's order.
    """
    if not results:
        return []
    weights = weights or RankingConfig()
    max_execution_time_ms = max(m.execution_time_ms for m in results.values())

    scored: list[tuple[AlgorithmType, ScheduleMetrics, float, float, float]] = []
    for algorithm, metrics in results.items():
        rate = success_rate(metrics)
        speed = speed_score(metrics, max_execution_time_ms)
        score = rate * weights.success_weight + speed * weights.speed_weight
        scored.append((algorithm, metrics, rate, speed, score))

    scored.sort(key=lambda entry: entry[4], reverse=True)
    return [
        AlgorithmRanking(
            rank=position,
            algorithm=algorithm,
            metrics=metrics,
            success_rate=rate,
            speed_score=speed,
            score=score,
        )
        for position, (algorithm, metrics, rate, speed, score) in enumerate(scored, start=1)
    ]
