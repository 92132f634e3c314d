"""YAML task file loading with boundary validation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .logger import get_logger
from .models import Dependency, Task, is_timezone_aware
from .schemas import TaskFileSchema
from .store import UserWorkspace

logger = get_logger()


@dataclass(frozen=True)
class TaskFile:
    """Validated contents of a task file."""

    tasks: tuple[Task, ...]
    dependencies: tuple[Dependency, ...]
    start_time: datetime | None = None
    name: str | None = None

    @property
    def deadlines_timezone_aware(self) -> bool | None:
        """Whether deadlines carry a timezone offset, or None without deadlines."""
        for task in self.tasks:
            if task.deadline is not None:
                return is_timezone_aware(task.deadline)
        return None


def parse_task_data(data: dict[str, Any]) -> TaskFile:
    """Validate raw task file data and build a task snapshot.

    Edges go through the same checks as interactive edits, so unknown
    references, self-dependencies, duplicates and cycles are rejected here
    and never reach the schedulers.

    Raises:
        ParseError: If the data does not match the task file schema
        ValidationError: If the dependency graph is invalid
    """
    try:
        schema = TaskFileSchema.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid task file: {e}") from e

    workspace = UserWorkspace(user_id="file")
    for task_id, task_data in schema.tasks.items():
        workspace.add_task(
            Task(
                id=task_id,
                duration=task_data.duration,
                priority=task_data.priority,
                deadline=task_data.deadline,
                title=task_data.title,
                description=task_data.description,
            )
        )

    for task_id, task_data in schema.tasks.items():
        for required_id in task_data.requires:
            workspace.add_dependency(task_id, required_id)

    tasks, dependencies = workspace.snapshot()
    logger.checks(f"Loaded {len(tasks)} tasks and {len(dependencies)} dependencies")
    return TaskFile(
        tasks=tasks,
        dependencies=dependencies,
        start_time=schema.start_time,
        name=schema.name,
    )


def load_task_file(path: Path | str) -> TaskFile:
    """Load and validate a YAML task file.

    Raises:
        ParseError: If the file cannot be read as YAML or fails schema validation
        ValidationError: If the dependency graph is invalid
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ParseError(f"Task file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError(f"Task file must be a mapping, got {type(data).__name__}")

    return parse_task_data(data)  # type: ignore[arg-type]
