"""
Command line interface powered by Typer.
"""

from __future__ import annotations

import time
from pathlib import Path

import typer

from split_timer import __version__, config
from split_timer.core.models import ReportSink
from split_timer.core.timer import SplitTimer, logger_sink
from split_timer.logging import configure_logging, get_logger

app = typer.Typer(
    help=f"{config.APP_NAME}: record labelled timing splits and report the elapsed time.",
    no_args_is_help=True,
)

logger = get_logger("split_timer.cli")

DEFAULT_STEPS = ["work A:9", "work B:1", "work C:6"]


def _echo_and_log(tag: str) -> ReportSink:
    report_logger = logger_sink(tag)

    def emit(line: str) -> None:
        typer.echo(line)
        report_logger(line)

    return emit


def _parse_step(raw: str) -> tuple[str, int]:
    name, sep, millis = raw.rpartition(":")
    if not sep or not name:
        raise typer.BadParameter(f"Expected NAME:MS, got {raw!r}", param_hint="--step")
    try:
        duration = int(millis)
    except ValueError as exc:
        raise typer.BadParameter(f"Duration must be an integer, got {millis!r}", param_hint="--step") from exc
    if duration < 0:
        raise typer.BadParameter(f"Duration must not be negative, got {duration}", param_hint="--step")
    return name, duration


@app.callback(invoke_without_command=True)
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Display package version and exit.",
        is_eager=True,
    ),
) -> None:
    """Global options for the CLI."""
    if version:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def demo(
    tag: str = typer.Option("TAG", "--tag", "-t", help="Tag used to route the report.", show_default=True),
    label: str = typer.Option("methodA", "--label", "-l", help="Name of the timed operation.", show_default=True),
    steps: list[str] = typer.Option(
        [],
        "--step",
        "-s",
        help="Simulated work as NAME:MS; sleeps MS milliseconds then records a split. Repeatable.",
    ),
    disabled: bool = typer.Option(False, "--disabled", help="Force timing off for this run."),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Write log output, including the timing report, to this file.",
    ),
) -> None:
    """Time a sequence of simulated work steps and print the report."""
    parsed = [_parse_step(step) for step in (steps or DEFAULT_STEPS)]

    sink: ReportSink = typer.echo
    if log_file is not None:
        log_path = configure_logging(log_file)
        typer.echo(f"[*] Logs saved to: {log_path}", err=True)
        sink = _echo_and_log(tag)

    gating = (lambda: False) if disabled else None
    timings = SplitTimer(tag, label, sink=sink, gating_policy=gating)
    if not timings.enabled:
        typer.echo("[!] Timing is disabled; no report will be produced.", err=True)

    for name, duration in parsed:
        logger.info("Running step %s (%d ms)", name, duration)
        time.sleep(duration / 1000)
        timings.add_split(name)

    timings.dump_report()


if __name__ == "__main__":
    app()
