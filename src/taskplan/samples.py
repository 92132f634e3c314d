"""Built-in sample task sets for trying out the schedulers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

import yaml


@dataclass(frozen=True)
class SampleTask:
    id: str
    title: str
    duration: int
    priority: int
    deadline_hours: float | None = None  # Offset from the sample start time
    requires: tuple[str, ...] = ()


@dataclass(frozen=True)
class SampleCategory:
    name: str
    description: str
    tasks: tuple[SampleTask, ...]


SAMPLE_CATEGORIES: dict[str, SampleCategory] = {
    "software": SampleCategory(
        name="Software Project",
        description="Ship a small feature: design, build, test and release.",
        tasks=(
            SampleTask("requirements", "Gather requirements", 60, 5, deadline_hours=2),
            SampleTask("design", "Design the API", 90, 4, 4, ("requirements",)),
            SampleTask("backend", "Implement backend", 240, 4, 9, ("design",)),
            SampleTask("frontend", "Implement frontend", 180, 3, 10, ("design",)),
            SampleTask("tests", "Write tests", 120, 3, 12, ("backend", "frontend")),
            SampleTask("docs", "Update documentation", 45, 2, None, ("design",)),
            SampleTask("release", "Release", 30, 5, 14, ("tests", "docs")),
        ),
    ),
    "study": SampleCategory(
        name="Study Plan",
        description="Prepare for an exam with reading, practice and review.",
        tasks=(
            SampleTask("syllabus", "Review the syllabus", 20, 3),
            SampleTask("chapter1", "Read chapter 1", 60, 4, 3, ("syllabus",)),
            SampleTask("chapter2", "Read chapter 2", 75, 4, 5, ("syllabus",)),
            SampleTask("exercises", "Solve exercises", 90, 5, 7, ("chapter1", "chapter2")),
            SampleTask("flashcards", "Make flashcards", 30, 2, None, ("chapter1",)),
            SampleTask("mock_exam", "Take a mock exam", 120, 5, 10, ("exercises",)),
        ),
    ),
    "event": SampleCategory(
        name="Event Planning",
        description="Organize a small party from budget to cleanup.",
        tasks=(
            SampleTask("budget", "Set the budget", 30, 5, 1),
            SampleTask("guests", "Write the guest list", 30, 4, 2),
            SampleTask("venue", "Book the venue", 45, 5, 3, ("budget",)),
            SampleTask("invites", "Send invitations", 40, 4, 4, ("guests", "venue")),
            SampleTask("food", "Order food", 50, 3, 6, ("budget", "guests")),
            SampleTask("decor", "Buy decorations", 60, 2, None, ("budget",)),
            SampleTask("setup", "Set up the venue", 90, 3, 9, ("venue", "decor")),
        ),
    ),
}


def sample_task_data(category: str, start_time: datetime) -> dict[str, Any]:
    """Build task file data for a sample category.

    Raises:
        KeyError: If the category does not exist
    """
    sample = SAMPLE_CATEGORIES[category]
    tasks: dict[str, Any] = {}
    for task in sample.tasks:
        entry: dict[str, Any] = {
            "title": task.title,
            "duration": task.duration,
            "priority": task.priority,
        }
        if task.deadline_hours is not None:
            entry["deadline"] = start_time + timedelta(hours=task.deadline_hours)
        if task.requires:
            entry["requires"] = list(task.requires)
        tasks[task.id] = entry
    return {"name": sample.name, "start_time": start_time, "tasks": tasks}


def sample_task_file(category: str, start_time: datetime) -> str:
    """Render a sample category as a YAML task file."""
    return yaml.safe_dump(
        sample_task_data(category, start_time), default_flow_style=False, sort_keys=False
    )
