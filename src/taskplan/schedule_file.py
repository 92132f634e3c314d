"""Schedule files: named scheduling results saved as YAML.

A schedule file records the algorithm, the start time, each placed task with
its start and end, and the metrics of the run, so a schedule can be reviewed
or shared without re-running the scheduler.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, cast

import yaml

from .models import Schedule, Task
from .scheduler.config import AlgorithmType
from .scheduler.core import ScheduledTask, ScheduleMetrics

SCHEDULE_FILE_VERSION = 1


def _task_to_dict(st: ScheduledTask) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "id": st.id,
        "title": st.title,
        "duration": st.duration,
        "priority": st.priority,
        "start_time": st.start_time.isoformat(),
        "end_time": st.end_time.isoformat(),
    }
    if st.task.description:
        entry["description"] = st.task.description
    if st.deadline is not None:
        entry["deadline"] = st.deadline.isoformat()
    return entry


def write_schedule_file(path: Path, schedule: Schedule) -> None:
    """Export a named schedule to a YAML file.

    Args:
        path: Path to write the schedule file
        schedule: Schedule record to export
    """
    output: dict[str, Any] = {
        "version": SCHEDULE_FILE_VERSION,
        "id": schedule.id,
        "name": schedule.name,
        "algorithm": schedule.algorithm.value,
        "start_time": schedule.start_time.isoformat(),
        "tasks": [_task_to_dict(st) for st in schedule.tasks],
    }
    if schedule.created_at is not None:
        output["created_at"] = schedule.created_at.isoformat()
    if schedule.metrics is not None:
        output["metrics"] = schedule.metrics.to_dict()

    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(output, f, default_flow_style=False, sort_keys=False)


def _parse_datetime(value: Any, what: str) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as e:
        raise ValueError(f"Invalid {what}: {e}") from e


def _parse_task(raw: Any) -> ScheduledTask:
    if not isinstance(raw, dict):
        raise ValueError(f"Scheduled task entry must be a dict, got {type(raw)}")
    data = cast(dict[str, Any], raw)

    task_id = data.get("id")
    if not task_id:
        raise ValueError("Scheduled task entry missing 'id'")
    if "start_time" not in data or "end_time" not in data:
        raise ValueError(f"Scheduled task '{task_id}' missing start_time or end_time")

    deadline = data.get("deadline")
    task = Task(
        id=str(task_id),
        duration=int(data.get("duration", 0)),
        priority=int(data.get("priority", 0)),
        deadline=_parse_datetime(deadline, f"deadline for '{task_id}'") if deadline else None,
        title=str(data.get("title", "")),
        description=data.get("description"),
    )
    return ScheduledTask(
        task=task,
        start_time=_parse_datetime(data["start_time"], f"start_time for '{task_id}'"),
        end_time=_parse_datetime(data["end_time"], f"end_time for '{task_id}'"),
    )


def read_schedule_file(path: Path) -> Schedule:
    """Load a schedule file.

    Raises:
        ValueError: If the file format is invalid or the version is unsupported
    """
    with path.open(encoding="utf-8") as f:
        raw_data: Any = yaml.safe_load(f)

    if not isinstance(raw_data, dict):
        raise ValueError(f"Invalid schedule file format: expected dict, got {type(raw_data)}")

    data = cast(dict[str, Any], raw_data)

    version = data.get("version")
    if version is None:
        raise ValueError("Schedule file missing 'version' field")
    if not isinstance(version, int):
        raise ValueError(f"Schedule file version must be int, got {type(version)}")
    if version != SCHEDULE_FILE_VERSION:
        raise ValueError(
            f"Unsupported schedule file version {version}, expected {SCHEDULE_FILE_VERSION}"
        )

    if "start_time" not in data:
        raise ValueError("Schedule file missing 'start_time' field")

    raw_tasks = data.get("tasks") or []
    if not isinstance(raw_tasks, list):
        raise ValueError("Schedule file 'tasks' field must be a list")

    metrics = None
    raw_metrics = data.get("metrics")
    if raw_metrics is not None:
        if not isinstance(raw_metrics, dict):
            raise ValueError("Schedule file 'metrics' field must be a dict")
        try:
            metrics = ScheduleMetrics(**cast(dict[str, Any], raw_metrics))
        except TypeError as e:
            raise ValueError(f"Invalid metrics: {e}") from e

    created_at = data.get("created_at")
    return Schedule(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        algorithm=AlgorithmType.parse(str(data.get("algorithm", AlgorithmType.TOPOLOGICAL.value))),
        start_time=_parse_datetime(data["start_time"], "start_time"),
        tasks=tuple(_parse_task(raw) for raw in cast(list[Any], raw_tasks)),
        metrics=metrics,
        created_at=_parse_datetime(created_at, "created_at") if created_at else None,
    )
