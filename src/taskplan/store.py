"""In-memory task repository partitioned by user.

The store owns everything the schedulers assume about their input: unique
task IDs, valid durations and priorities, and an acyclic dependency graph
with no self-edges or duplicates. The scheduler only ever receives the
plain snapshot of one user's workspace.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from .exceptions import (
    CircularDependencyError,
    DuplicateDependencyError,
    MissingReferenceError,
    SelfDependencyError,
)
from .logger import get_logger
from .models import Dependency, Schedule, Task, validate_task
from .scheduler.graph import would_create_cycle

logger = get_logger()


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class UserWorkspace:
    """Tasks, dependencies and saved schedules belonging to one user."""

    user_id: str
    tasks: list[Task] = field(default_factory=list[Task])
    dependencies: list[Dependency] = field(default_factory=list[Dependency])
    schedules: list[Schedule] = field(default_factory=list[Schedule])

    # Tasks

    def get_task(self, task_id: str) -> Task | None:
        return next((task for task in self.tasks if task.id == task_id), None)

    def add_task(self, task: Task) -> Task:
        """Add a validated task, assigning an ID when it has none.

        Raises:
            TaskValidationError: If duration or priority is out of range
            ValueError: If a task with the same ID already exists
        """
        if not task.id:
            task = replace(task, id=_new_id())
        validate_task(task)
        if self.get_task(task.id) is not None:
            raise ValueError(f"Task '{task.id}' already exists")
        self.tasks.append(task)
        logger.changes(f"Added task {task.id}")
        return task

    def update_task(self, task_id: str, **changes: Any) -> Task:
        """Replace a task with an edited copy.

        Raises:
            MissingReferenceError: If the task does not exist
            TaskValidationError: If the edited task is invalid
        """
        changes.pop("id", None)  # IDs are immutable
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                updated = validate_task(replace(task, **changes, id=task_id))
                self.tasks[index] = updated
                return updated
        raise MissingReferenceError(f"Task '{task_id}' not found")

    def delete_task(self, task_id: str) -> None:
        """Delete a task together with every edge that mentions it."""
        if self.get_task(task_id) is None:
            raise MissingReferenceError(f"Task '{task_id}' not found")
        self.tasks = [task for task in self.tasks if task.id != task_id]
        self.dependencies = [
            dep
            for dep in self.dependencies
            if task_id not in (dep.task_id, dep.depends_on_task_id)
        ]

    # Dependencies

    def add_dependency(self, task_id: str, depends_on_task_id: str) -> Dependency:
        """Record that ``task_id`` requires ``depends_on_task_id`` to finish first.

        Raises:
            MissingReferenceError: If either task does not exist
            SelfDependencyError: If both IDs are the same
            DuplicateDependencyError: If the edge already exists
            CircularDependencyError: If the edge would close a cycle
        """
        for ref in (task_id, depends_on_task_id):
            if self.get_task(ref) is None:
                raise MissingReferenceError(f"Task '{ref}' not found")
        if task_id == depends_on_task_id:
            raise SelfDependencyError(f"Task '{task_id}' cannot depend on itself")

        dependency = Dependency(task_id=task_id, depends_on_task_id=depends_on_task_id)
        if dependency in self.dependencies:
            raise DuplicateDependencyError(f"Dependency {dependency} already exists")
        if would_create_cycle(self.dependencies, task_id, depends_on_task_id):
            raise CircularDependencyError(
                f"Dependency {dependency} would create a cycle: "
                f"'{depends_on_task_id}' already depends on '{task_id}'"
            )

        dependency = replace(dependency, id=_new_id())
        self.dependencies.append(dependency)
        logger.changes(f"Added dependency {dependency}")
        return dependency

    def remove_dependency(self, dependency_id: str) -> None:
        before = len(self.dependencies)
        self.dependencies = [dep for dep in self.dependencies if dep.id != dependency_id]
        if len(self.dependencies) == before:
            raise MissingReferenceError(f"Dependency '{dependency_id}' not found")

    # Schedules

    def add_schedule(self, schedule: Schedule) -> Schedule:
        if not schedule.id:
            schedule = replace(schedule, id=_new_id())
        if schedule.created_at is None:
            schedule = replace(schedule, created_at=datetime.now())  # noqa: DTZ005
        self.schedules.append(schedule)
        return schedule

    def delete_schedule(self, schedule_id: str) -> None:
        before = len(self.schedules)
        self.schedules = [s for s in self.schedules if s.id != schedule_id]
        if len(self.schedules) == before:
            raise MissingReferenceError(f"Schedule '{schedule_id}' not found")

    def clear(self) -> None:
        self.tasks.clear()
        self.dependencies.clear()
        self.schedules.clear()

    def snapshot(self) -> tuple[tuple[Task, ...], tuple[Dependency, ...]]:
        """Immutable copy of tasks and dependencies for the scheduler."""
        return tuple(self.tasks), tuple(self.dependencies)


class TaskStore:
    """Repository of workspaces keyed by user ID."""

    def __init__(self) -> None:
        self._workspaces: dict[str, UserWorkspace] = {}

    def for_user(self, user_id: str) -> UserWorkspace:
        """Get the workspace for a user, creating an empty one on first use."""
        if user_id not in self._workspaces:
            self._workspaces[user_id] = UserWorkspace(user_id=user_id)
        return self._workspaces[user_id]

    def users(self) -> list[str]:
        return list(self._workspaces)

    def drop_user(self, user_id: str) -> None:
        self._workspaces.pop(user_id, None)
