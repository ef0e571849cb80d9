"""File-based workout log adapter."""

import logging
from datetime import date
from pathlib import Path
from typing import Iterator

from ..core.scan import format_header, has_header, scan_lines

logger = logging.getLogger(__name__)

ENTRY_INDENT = "    "


class LogFileError(RuntimeError):
    """Raised when the log file cannot be read or appended to."""


class FileWorkoutLog:
    """
    Plain text workout log.

    Implements WorkoutLog protocol. One file holds every day; each day starts
    with a bare YYYY-MM-DD header line and its entries follow, indented.

    The file must already exist. It is never created here, and no locking is
    done, so two invocations writing the same file at once can both add a
    header for the same day.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {self.path}: {e}")
            reason = getattr(e, "strerror", None) or e
            raise LogFileError(f"Could not read file {self.path}: {reason}") from e

    def _append(self, text: str) -> None:
        # Mode "r+" keeps a missing file an error instead of creating it.
        try:
            with self.path.open("r+", encoding="utf-8") as f:
                f.seek(0, 2)
                f.write(text)
        except OSError as e:
            logger.debug(f"Could not append to {self.path}: {e}")
            raise LogFileError(f"Could not open file {self.path}: {e.strerror or e}") from e

    def ensure_header(self, target_date: date) -> bool:
        """Append a date header for target_date unless one exists. Returns True if written."""
        if has_header(self._read().splitlines(), target_date):
            logger.debug(f"Header for {target_date} already present in {self.path}")
            return False

        self._append(f"\n{format_header(target_date)}\n")
        logger.info(f"Started {target_date} in {self.path}")
        return True

    def append_entry(self, text: str) -> None:
        """Append one entry line under the latest header."""
        self._append(f"{ENTRY_INDENT}{text}\n")
        logger.debug(f"Appended '{text}' to {self.path}")

    def scan(self, bounds: tuple[date, date], pattern: str | None = None) -> Iterator[str]:
        """
        Yield headers and the entry lines inside bounds that match pattern.

        The file is read up front, so a missing file fails here rather than
        on first iteration.
        """
        return scan_lines(self._read().splitlines(), bounds, pattern)
