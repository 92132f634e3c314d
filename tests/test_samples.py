"""Tests for built-in sample task sets."""

from datetime import datetime, timedelta

import pytest

from taskplan.loader import parse_task_data
from taskplan.samples import SAMPLE_CATEGORIES, sample_task_data
from taskplan.scheduler import AlgorithmType, schedule


@pytest.mark.parametrize("category", sorted(SAMPLE_CATEGORIES))
def test_sample_is_valid_and_acyclic(category: str) -> None:
    """Every sample passes boundary validation and schedules completely."""
    start = datetime(2025, 1, 6, 9, 0)
    task_file = parse_task_data(sample_task_data(category, start))

    assert len(task_file.tasks) == len(SAMPLE_CATEGORIES[category].tasks)
    result = schedule(AlgorithmType.TOPOLOGICAL, task_file.tasks, task_file.dependencies, start)
    assert result.metrics.tasks_scheduled == len(task_file.tasks)
    assert result.excluded_task_ids == ()


def test_deadlines_relative_to_start() -> None:
    start = datetime(2025, 1, 6, 9, 0)
    data = sample_task_data("software", start)
    assert data["tasks"]["requirements"]["deadline"] == start + timedelta(hours=2)
    assert "deadline" not in data["tasks"]["docs"]


def test_unknown_category() -> None:
    with pytest.raises(KeyError):
        sample_task_data("gardening", datetime(2025, 1, 6))
