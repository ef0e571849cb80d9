"""Workout log storage interface."""

from datetime import date
from typing import Iterator, Protocol


class WorkoutLog(Protocol):
    """Interface for appending to and scanning a date-partitioned workout log."""

    def ensure_header(self, target_date: date) -> bool:
        """Append a date header for target_date unless one exists. Returns True if written."""
        ...

    def append_entry(self, text: str) -> None:
        """Append one entry line under the latest header."""
        ...

    def scan(self, bounds: tuple[date, date], pattern: str | None = None) -> Iterator[str]:
        """Yield headers and the entry lines inside bounds that match pattern."""
        ...
