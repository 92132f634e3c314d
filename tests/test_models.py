"""Tests for data models."""

from datetime import datetime

import pytest

from taskplan.exceptions import TaskValidationError
from taskplan.models import MAX_DURATION_MINUTES, Dependency, Task, validate_task
from taskplan.scheduler.config import AlgorithmType
from taskplan.scheduler.core import ScheduledTask


class TestTask:
    """Test the Task model."""

    def test_label_falls_back_to_id(self) -> None:
        assert Task(id="a", duration=5, priority=1).label == "a"
        assert Task(id="a", duration=5, priority=1, title="Alpha").label == "Alpha"

    def test_frozen(self) -> None:
        t = Task(id="a", duration=5, priority=1)
        with pytest.raises(AttributeError):
            t.priority = 3  # type: ignore[misc]


class TestValidateTask:
    """Test boundary validation of tasks."""

    def test_valid(self) -> None:
        t = Task(id="a", duration=MAX_DURATION_MINUTES, priority=5)
        assert validate_task(t) is t

    @pytest.mark.parametrize("duration", [0, -5, MAX_DURATION_MINUTES + 1])
    def test_bad_duration(self, duration: int) -> None:
        with pytest.raises(TaskValidationError, match="duration"):
            validate_task(Task(id="a", duration=duration, priority=3))

    @pytest.mark.parametrize("priority", [0, 6])
    def test_bad_priority(self, priority: int) -> None:
        with pytest.raises(TaskValidationError, match="priority"):
            validate_task(Task(id="a", duration=10, priority=priority))

    def test_empty_id(self) -> None:
        with pytest.raises(TaskValidationError):
            validate_task(Task(id="", duration=10, priority=3))


class TestDependency:
    """Test the Dependency model."""

    def test_equality_ignores_id(self) -> None:
        assert Dependency("b", "a", id="x") == Dependency("b", "a", id="y")
        assert Dependency("b", "a") != Dependency("a", "b")

    def test_str(self) -> None:
        assert str(Dependency("b", "a")) == "b -> a"


class TestScheduledTask:
    """Test scheduled task accessors."""

    def test_met_deadline(self) -> None:
        t = Task(id="a", duration=30, priority=2, deadline=datetime(2025, 1, 6, 9, 30))
        on_time = ScheduledTask(t, datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 9, 30))
        late = ScheduledTask(t, datetime(2025, 1, 6, 9, 1), datetime(2025, 1, 6, 9, 31))
        assert on_time.met_deadline is True
        assert late.met_deadline is False
        assert on_time.id == "a"
        assert on_time.duration == 30

    def test_no_deadline(self) -> None:
        t = Task(id="a", duration=30, priority=2)
        st = ScheduledTask(t, datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 9, 30))
        assert st.met_deadline is None


class TestAlgorithmType:
    """Test algorithm selector parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("topological", AlgorithmType.TOPOLOGICAL),
            ("kahn", AlgorithmType.TOPOLOGICAL),
            ("priority-selection", AlgorithmType.PRIORITY_SELECTION),
            ("DP", AlgorithmType.PRIORITY_SELECTION),
            ("greedy", AlgorithmType.GREEDY),
            ("heap", AlgorithmType.SHORTEST_DURATION),
            (AlgorithmType.GREEDY, AlgorithmType.GREEDY),
        ],
    )
    def test_parse(self, value: str, expected: AlgorithmType) -> None:
        assert AlgorithmType.parse(value) == expected

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Valid values"):
            AlgorithmType.parse("bogus")
