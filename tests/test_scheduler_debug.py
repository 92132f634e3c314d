"""Tests for scheduler trace output at different verbosity levels."""

from datetime import datetime
from io import StringIO

import pytest

from taskplan.logger import get_logger, reset_logger, setup_logger
from taskplan.scheduler import AlgorithmType, schedule
from tests.conftest import dep, task


def _run(verbosity: int, algorithm: AlgorithmType = AlgorithmType.TOPOLOGICAL) -> str:
    output_stream = StringIO()
    setup_logger(verbosity, stream=output_stream)
    try:
        schedule(
            algorithm,
            [task("a"), task("b"), task("orphan")],
            [dep("b", "a"), dep("orphan", "ghost")],
            datetime(2025, 1, 6, 9, 0),
        )
        return output_stream.getvalue()
    finally:
        reset_logger()


def test_verbosity_0_silent() -> None:
    """Verbosity 0 produces no output, even when tasks are left out."""
    assert _run(0) == ""


def test_verbosity_1_shows_placements() -> None:
    output = _run(1)
    assert "a: 2025-01-06T09:00:00 -> 2025-01-06T09:30:00" in output
    assert "topological: 2/3 tasks" in output
    assert "unblocked" not in output


def test_verbosity_2_shows_queue() -> None:
    output = _run(2)
    assert "Ready at start: ['a']" in output
    assert "b unblocked by a" in output
    assert "Never unblocked" not in output


def test_verbosity_2_shows_reordering() -> None:
    output = _run(2, AlgorithmType.SHORTEST_DURATION)
    assert "shortest_duration order: ['a', 'b']" in output


def test_verbosity_3_shows_excluded() -> None:
    assert "Never unblocked: ['orphan']" in _run(3)


def test_verbosity_0_skips_trace_calls(
    algorithm: AlgorithmType, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Trace messages are not even built when their level is disabled."""

    def fail(msg: str, *args: object, **kwargs: object) -> None:
        raise AssertionError(f"unexpected trace call: {msg}")

    setup_logger(0, stream=StringIO())
    monkeypatch.setattr(get_logger(), "changes", fail)
    monkeypatch.setattr(get_logger(), "checks", fail)
    result = schedule(
        algorithm,
        [task("a"), task("b"), task("c")],
        [dep("b", "a")],
        datetime(2025, 1, 6, 9, 0),
    )
    assert result.metrics.tasks_scheduled == 3
