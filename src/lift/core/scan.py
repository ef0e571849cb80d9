"""Pure log scanning logic - no I/O dependencies."""

from datetime import date, datetime
from typing import Iterable, Iterator

HEADER_FORMAT = "%Y-%m-%d"


def format_header(day: date) -> str:
    """Render the date header line for a day."""
    return day.strftime(HEADER_FORMAT)


def parse_header(line: str) -> date | None:
    """Parse a date header line. Returns None for any other line."""
    try:
        return datetime.strptime(line, HEADER_FORMAT).date()
    except ValueError:
        return None


def has_header(lines: Iterable[str], day: date) -> bool:
    """Check whether a header for day is already present, as scan_lines would see it."""
    return any(parse_header(line) == day for line in lines)


def scan_lines(
    lines: Iterable[str],
    bounds: tuple[date, date],
    pattern: str | None = None,
) -> Iterator[str]:
    """
    Yield the lines that fall inside bounds and match pattern.

    Headers are always yielded so every match keeps its date context. Other
    lines are attributed to the most recent header; lines before the first
    header have no date and are never yielded. A line matches when there is
    no pattern, when it contains the pattern, or when it mentions its own
    date.
    """
    start, end = bounds
    current_date: date | None = None

    for line in lines:
        parsed = parse_header(line)
        if parsed is not None:
            current_date = parsed
            yield line
            continue

        if current_date is None or not (start <= current_date <= end):
            continue

        if pattern is None or pattern in line or str(current_date) in line:
            yield line
