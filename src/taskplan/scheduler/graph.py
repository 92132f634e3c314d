"""Dependency graph construction and traversal helpers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from taskplan.models import Dependency, Task


@dataclass
class DependencyGraph:
    """Adjacency and in-degree view of a task snapshot.

    ``adjacency`` maps a prerequisite to the tasks it unblocks, in input edge
    order. ``in_degree`` counts unmet prerequisite edges per task. Both start
    with an entry for every task, even isolated ones.
    """

    adjacency: dict[str, list[str]]
    in_degree: dict[str, int]

    def dependents_of(self, task_id: str) -> list[str]:
        return self.adjacency.get(task_id, [])


def build_graph(tasks: Sequence[Task], dependencies: Iterable[Dependency]) -> DependencyGraph:
    """Build adjacency and in-degree mappings.

    Edges that mention unknown task IDs are kept as-is. An unknown dependent
    gets an in-degree entry but is never scheduled; a known task waiting on
    an unknown prerequisite never reaches in-degree zero.
    """
    adjacency: dict[str, list[str]] = {task.id: [] for task in tasks}
    in_degree: dict[str, int] = dict.fromkeys(adjacency, 0)

    for dep in dependencies:
        adjacency.setdefault(dep.depends_on_task_id, []).append(dep.task_id)
        in_degree[dep.task_id] = in_degree.get(dep.task_id, 0) + 1

    return DependencyGraph(adjacency=adjacency, in_degree=in_degree)


def topological_levels(
    tasks: Sequence[Task], dependencies: Iterable[Dependency]
) -> list[list[Task]]:
    """Group tasks into dependency levels using in-degree reduction.

    Level 0 holds tasks with no prerequisites, in task-list order. Each later
    level holds the tasks whose last prerequisite was in the previous level,
    in the order they were unblocked. Concatenating the levels gives the
    same order as a FIFO Kahn traversal. Tasks that never reach in-degree
    zero appear in no level.
    """
    graph = build_graph(tasks, dependencies)
    task_map = {task.id: task for task in tasks}
    in_degree = dict(graph.in_degree)

    current = [task for task in tasks if in_degree[task.id] == 0]
    levels: list[list[Task]] = []
    while current:
        levels.append(current)
        next_level: list[Task] = []
        for task in current:
            for dependent_id in graph.dependents_of(task.id):
                in_degree[dependent_id] -= 1
                if in_degree[dependent_id] == 0 and dependent_id in task_map:
                    next_level.append(task_map[dependent_id])
        current = next_level
    return levels


def would_create_cycle(
    dependencies: Iterable[Dependency], task_id: str, depends_on_task_id: str
) -> bool:
    """Check whether adding ``task_id -> depends_on_task_id`` would close a cycle.

    Walks the "depends on" relation from ``depends_on_task_id``; if
    ``task_id`` is reachable, the new edge would make it depend on itself.
    A self-edge counts as a cycle.
    """
    requires: dict[str, list[str]] = {}
    for dep in dependencies:
        requires.setdefault(dep.task_id, []).append(dep.depends_on_task_id)

    visited: set[str] = set()
    stack = deque([depends_on_task_id])
    while stack:
        current = stack.pop()
        if current == task_id:
            return True
        if current in visited:
            continue
        visited.add(current)
        stack.extend(requires.get(current, []))
    return False
