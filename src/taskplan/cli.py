"""Command-line interface for taskplan."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer

from .descriptions import ALGORITHM_INFO
from .exceptions import TaskplanError
from .loader import TaskFile, load_task_file
from .logger import setup_logger
from .models import Schedule, is_timezone_aware
from .samples import SAMPLE_CATEGORIES, sample_task_file
from .schedule_file import write_schedule_file
from .scheduler import (
    ComparisonResult,
    SchedulingConfig,
    SchedulingResult,
    SchedulingService,
)
from .unified_config import discover_config, set_config_path

app = typer.Typer(
    name="taskplan",
    help="Dependency-aware sequential task scheduling",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show placements, 2=show checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: taskplan_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for taskplan commands."""
    setup_logger(verbose)
    set_config_path(config)


def _parse_start_time(value: str | None, task_file: TaskFile) -> datetime:
    """Pick the start time: --start, then the task file, then now.

    The start time must agree with the deadlines on whether it has a
    timezone offset, otherwise deadlines cannot be compared.
    """
    aware = task_file.deadlines_timezone_aware
    if value is None:
        if task_file.start_time is not None:
            return task_file.start_time
        now = datetime.now().replace(second=0, microsecond=0)  # noqa: DTZ005
        return now.astimezone() if aware else now
    try:
        start_time = datetime.fromisoformat(value)
    except ValueError:
        typer.echo(
            f"Error: Invalid start time '{value}'. Use ISO format, e.g. 2025-01-06T09:00",
            err=True,
        )
        raise typer.Exit(1) from None
    if aware is not None and is_timezone_aware(start_time) != aware:
        expected = "with" if aware else "without"
        typer.echo(
            f"Error: Start time '{value}' must be given {expected} a timezone offset "
            "to match the task deadlines",
            err=True,
        )
        raise typer.Exit(1)
    return start_time


def _load_inputs(file: Path) -> tuple[TaskFile, SchedulingConfig]:
    try:
        task_file = load_task_file(file)
        config = discover_config(file).scheduling
    except (TaskplanError, FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    return task_file, config


def _format_schedule(result: SchedulingResult) -> str:
    lines = [f"Algorithm: {ALGORITHM_INFO[result.algorithm].name}"]
    for st in result.scheduled_tasks:
        marker = ""
        if st.met_deadline is False:
            marker = "  (late)"
        lines.append(
            f"  {st.start_time:%Y-%m-%d %H:%M} - {st.end_time:%H:%M}  "
            f"[P{st.priority}] {st.task.label} ({st.duration} min){marker}"
        )
    metrics = result.metrics
    lines.append("")
    lines.append(f"Tasks scheduled: {metrics.tasks_scheduled}")
    lines.append(f"Total duration: {metrics.total_duration} min")
    lines.append(f"Deadlines met: {metrics.deadlines_met}")
    lines.append(f"Deadlines missed: {metrics.deadlines_missed}")
    lines.append(f"Execution time: {metrics.execution_time_ms:.3f} ms")
    if result.excluded_task_ids:
        lines.append(f"Not scheduled: {', '.join(result.excluded_task_ids)}")
    return "\n".join(lines)


def _format_comparison(comparison: ComparisonResult) -> str:
    header = f"{'#':<3}{'Algorithm':<28}{'Score':>8}{'Success':>9}{'Speed':>8}{'Time ms':>10}"
    lines = [header, "-" * len(header)]
    for ranking in comparison.rankings:
        name = ALGORITHM_INFO[ranking.algorithm].name
        lines.append(
            f"{ranking.rank:<3}{name:<28}{ranking.score:>8.1f}{ranking.success_rate:>8.1f}%"
            f"{ranking.speed_score:>7.1f}%{ranking.metrics.execution_time_ms:>10.3f}"
        )
    return "\n".join(lines)


@app.command()
def schedule(  # noqa: PLR0913 - CLI command needs multiple options
    file: Annotated[Path, typer.Argument(help="Path to the YAML task file")] = Path("tasks.yaml"),
    *,
    algorithm: Annotated[
        str | None,
        typer.Option(
            "--algorithm",
            "-a",
            help="topological, priority_selection, greedy or shortest_duration",
        ),
    ] = None,
    start: Annotated[
        str | None, typer.Option("--start", help="Start time in ISO format")
    ] = None,
    name: Annotated[
        str | None, typer.Option("--name", help="Name for the saved schedule")
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the schedule to a YAML file")
    ] = None,
) -> None:
    """Schedule tasks from a YAML file with one algorithm."""
    task_file, config = _load_inputs(file)
    start_time = _parse_start_time(start, task_file)

    service = SchedulingService(config)
    try:
        result = service.schedule(
            task_file.tasks, task_file.dependencies, start_time, algorithm
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(_format_schedule(result))

    if output:
        record = Schedule(
            id=str(uuid.uuid4()),
            name=name or task_file.name or file.stem,
            algorithm=result.algorithm,
            start_time=start_time,
            tasks=result.scheduled_tasks,
            metrics=result.metrics,
            created_at=datetime.now(),  # noqa: DTZ005
        )
        write_schedule_file(output, record)
        typer.echo(f"Schedule written to {output}")


@app.command()
def compare(
    file: Annotated[Path, typer.Argument(help="Path to the YAML task file")] = Path("tasks.yaml"),
    *,
    start: Annotated[
        str | None, typer.Option("--start", help="Start time in ISO format")
    ] = None,
) -> None:
    """Run every algorithm on the same tasks and rank them."""
    task_file, config = _load_inputs(file)
    start_time = _parse_start_time(start, task_file)

    if not task_file.tasks:
        typer.echo("No tasks to compare.")
        return

    comparison = SchedulingService(config).compare(
        task_file.tasks, task_file.dependencies, start_time
    )
    typer.echo(_format_comparison(comparison))
    if comparison.best is not None:
        typer.echo(f"\nBest: {ALGORITHM_INFO[comparison.best.algorithm].name}")


@app.command()
def algorithms() -> None:
    """Describe the available algorithms."""
    for algorithm, info in ALGORITHM_INFO.items():
        typer.echo(f"{algorithm.value}: {info.name}")
        typer.echo(f"  {info.description}")
        typer.echo(f"  Time: {info.time_complexity}  Space: {info.space_complexity}")
        typer.echo(f"  Best for: {info.best_for}")


@app.command()
def sample(
    category: Annotated[str, typer.Argument(help="software, study or event")],
    *,
    start: Annotated[
        str | None, typer.Option("--start", help="Start time in ISO format")
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Print or write a sample task file."""
    if category not in SAMPLE_CATEGORIES:
        valid = ", ".join(SAMPLE_CATEGORIES)
        typer.echo(f"Error: Unknown sample '{category}'. Valid values: {valid}", err=True)
        raise typer.Exit(1)

    start_time = _parse_start_time(start, TaskFile(tasks=(), dependencies=()))
    content = sample_task_file(category, start_time)

    if output:
        output.write_text(content, encoding="utf-8")
        typer.echo(f"Sample written to {output}")
    else:
        typer.echo(content, nl=False)


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
