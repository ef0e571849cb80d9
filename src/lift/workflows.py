"""Shared workflow layer behind the CLI.

Each workflow resolves the log, runs the core logic against it, and returns
what the CLI should show.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Iterator

from .adapters.file_log import FileWorkoutLog
from .core.entries import Entry
from .core.ranges import DateRange, derive_bounds
from .ports.log_store import WorkoutLog

logger = logging.getLogger(__name__)


def get_log(path: Path | str) -> FileWorkoutLog:
    """Open the workout log at path."""
    return FileWorkoutLog(path)


def record_entry(log: WorkoutLog, entry: Entry, today: date | None = None) -> str:
    """
    Write entry under today's header and return the entry line.

    Checking for the header and appending the entry are two separate writes.
    Nothing else is expected to touch the file in between.
    """
    today = today or date.today()
    line = entry.to_line()
    log.ensure_header(today)
    log.append_entry(line)
    return line


def search_log(
    log: WorkoutLog,
    selector: DateRange | None = None,
    pattern: str | None = None,
    today: date | None = None,
) -> Iterator[str]:
    """Yield the log lines within selector's range that match pattern."""
    bounds = derive_bounds(selector, today)
    logger.debug(f"Scanning {bounds[0]}..{bounds[1]} for {pattern!r}")
    return log.scan(bounds, pattern)
