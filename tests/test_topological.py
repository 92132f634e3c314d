"""Tests for the topological (Kahn's algorithm) scheduler."""

from datetime import datetime, timedelta

from taskplan.models import Task
from taskplan.scheduler.algorithms import TopologicalScheduler
from tests.conftest import assert_contiguous, dep, task


class TestTopologicalScheduler:
    """Test dependency-respecting ordering."""

    def test_abc_scenario(
        self, abc_tasks: list[Task], abc_dependencies: list, start_time: datetime
    ) -> None:
        """A and B are ready first in input order; C follows once A is done."""
        result = TopologicalScheduler(abc_tasks, abc_dependencies, start_time).schedule()

        assert [st.id for st in result.scheduled_tasks] == ["A", "B", "C"]
        a, b, c = result.scheduled_tasks
        assert (a.start_time, a.end_time) == (datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 9, 30))
        assert (b.start_time, b.end_time) == (datetime(2025, 1, 6, 9, 30), datetime(2025, 1, 6, 10, 30))
        assert (c.start_time, c.end_time) == (datetime(2025, 1, 6, 10, 30), datetime(2025, 1, 6, 10, 45))
        assert result.excluded_task_ids == ()

    def test_ties_follow_input_order_not_priority(self, start_time: datetime) -> None:
        tasks = [task("low", priority=1), task("high", priority=5), task("mid", priority=3)]
        result = TopologicalScheduler(tasks, [], start_time).schedule()
        assert [st.id for st in result.scheduled_tasks] == ["low", "high", "mid"]

    def test_fifo_breadth_first(self, start_time: datetime) -> None:
        """Newly unblocked tasks queue behind tasks that were already ready."""
        tasks = [task("a"), task("b"), task("a2"), task("b2")]
        deps = [dep("a2", "a"), dep("b2", "b")]
        result = TopologicalScheduler(tasks, deps, start_time).schedule()
        assert [st.id for st in result.scheduled_tasks] == ["a", "b", "a2", "b2"]

    def test_dependents_released_in_edge_order(self, start_time: datetime) -> None:
        tasks = [task("root"), task("x"), task("y")]
        deps = [dep("y", "root"), dep("x", "root")]
        result = TopologicalScheduler(tasks, deps, start_time).schedule()
        assert [st.id for st in result.scheduled_tasks] == ["root", "y", "x"]

    def test_dependency_order_respected(self, start_time: datetime) -> None:
        tasks = [task(name, duration=10 * (i + 1)) for i, name in enumerate("fedcba")]
        deps = [dep("f", "e"), dep("e", "d"), dep("d", "c"), dep("c", "b"), dep("b", "a")]
        result = TopologicalScheduler(tasks, deps, start_time).schedule()

        position = {st.id: i for i, st in enumerate(result.scheduled_tasks)}
        for edge in deps:
            assert position[edge.depends_on_task_id] < position[edge.task_id]
        assert len(result.scheduled_tasks) == len(tasks)
        assert_contiguous(result.scheduled_tasks, start_time)

    def test_cycle_silently_omitted(self, start_time: datetime) -> None:
        """Tasks in a cycle are left out without raising."""
        tasks = [task("a"), task("b"), task("c")]
        deps = [dep("b", "c"), dep("c", "b")]
        result = TopologicalScheduler(tasks, deps, start_time).schedule()
        assert [st.id for st in result.scheduled_tasks] == ["a"]
        assert result.excluded_task_ids == ("b", "c")

    def test_missing_prerequisite_omitted(self, start_time: datetime) -> None:
        tasks = [task("a"), task("b")]
        result = TopologicalScheduler(tasks, [dep("b", "ghost")], start_time).schedule()
        assert [st.id for st in result.scheduled_tasks] == ["a"]
        assert result.excluded_task_ids == ("b",)

    def test_unknown_dependent_ignored(self, start_time: datetime) -> None:
        """An edge to an unknown dependent does not add anything to the schedule."""
        result = TopologicalScheduler([task("a")], [dep("ghost", "a")], start_time).schedule()
        assert [st.id for st in result.scheduled_tasks] == ["a"]
        assert result.excluded_task_ids == ()

    def test_omission_does_not_leave_gaps(self, start_time: datetime) -> None:
        tasks = [task("a", duration=20), task("blocked"), task("b", duration=40)]
        result = TopologicalScheduler(tasks, [dep("blocked", "nope")], start_time).schedule()
        assert [st.id for st in result.scheduled_tasks] == ["a", "b"]
        assert result.scheduled_tasks[1].start_time == start_time + timedelta(minutes=20)

    def test_empty(self, start_time: datetime) -> None:
        result = TopologicalScheduler([], [], start_time).schedule()
        assert result.scheduled_tasks == ()
        assert result.excluded_task_ids == ()

    def test_metadata(self, start_time: datetime) -> None:
        result = TopologicalScheduler([task("a")], [], start_time).schedule()
        assert result.algorithm_metadata["algorithm"] == "topological"
