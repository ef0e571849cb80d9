"""lift CLI - plain text workout log."""

import logging
import sys
from pathlib import Path

import click

from .adapters.file_log import LogFileError
from .config import Config, load_config
from .core.entries import DownEntry, Entry, MaxEntry, MyoEntry, SetEntry
from .core.ranges import DateRange
from .workflows import get_log, record_entry, search_log

COUNT = click.IntRange(min=0)
LOG_PATH = click.Path(dir_okay=False, path_type=Path)


@click.group()
@click.version_option(package_name="lift-log")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """A plain text workout log that saves to human-readable .md"""
    config = load_config()
    if debug or config.debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = config


@main.command(no_args_is_help=True)
@click.argument("path", type=LOG_PATH)
@click.argument("pattern", required=False)
@click.option(
    "--range", "-r", "range_name",
    type=click.Choice([r.value for r in DateRange]),
    default=None,
    help="Only show entries from this period",
)
def scan(path: Path, pattern: str | None, range_name: str | None):
    """Search the log at PATH for lines containing PATTERN."""
    selector = DateRange(range_name) if range_name else None
    try:
        for line in search_log(get_log(path), selector, pattern):
            click.echo(line)
    except LogFileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _resolve_path(path: Path | None) -> Path:
    """Explicit path, else LOG_FILE from lift.conf."""
    if path is not None:
        return path
    config = click.get_current_context().find_object(Config)
    configured = config.log_path() if config else None
    if configured is None:
        raise click.UsageError("No log file given and LOG_FILE is not set in lift.conf")
    return configured


def _log_entry(entry: Entry, path: Path | None) -> None:
    """Shared write logic for the logging commands."""
    target = _resolve_path(path)
    click.echo(f"logging '{entry.to_line()}'")
    try:
        record_entry(get_log(target), entry)
    except LogFileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("set")
@click.argument("exercise")
@click.argument("sets", type=COUNT)
@click.argument("reps", type=COUNT)
@click.argument("weight", type=COUNT)
@click.argument("rir", type=COUNT)
@click.argument("path", type=LOG_PATH, required=False)
def set_cmd(exercise: str, sets: int, reps: int, weight: int, rir: int, path: Path | None):
    """Log straight sets: REPS for each of SETS sets, RIR reps left in reserve."""
    _log_entry(SetEntry(exercise, sets, reps, weight, rir), path)


@main.command("max")
@click.argument("exercise")
@click.argument("weight", type=COUNT)
@click.argument("path", type=LOG_PATH, required=False)
def max_cmd(exercise: str, weight: int, path: Path | None):
    """Log a one-rep max."""
    _log_entry(MaxEntry(exercise, weight), path)


@main.command("myo")
@click.argument("exercise")
@click.argument("sets", type=COUNT)
@click.argument("reps", type=COUNT)
@click.argument("rests", type=COUNT)
@click.argument("weight", type=COUNT)
@click.argument("path", type=LOG_PATH, required=False)
def myo_cmd(exercise: str, sets: int, reps: int, rests: int, weight: int, path: Path | None):
    """Log myo-rep match sets, with the average RESTS rest-pauses per set."""
    _log_entry(MyoEntry(exercise, sets, reps, rests, weight), path)


@main.command("down")
@click.argument("exercise")
@click.argument("starting_reps", type=COUNT)
@click.argument("weight", type=COUNT)
@click.argument("path", type=LOG_PATH, required=False)
def down_cmd(exercise: str, starting_reps: int, weight: int, path: Path | None):
    """Log a down set, starting at STARTING_REPS and dropping one rep per set."""
    _log_entry(DownEntry(exercise, starting_reps, weight), path)


if __name__ == "__main__":
    main()
