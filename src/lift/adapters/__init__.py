"""Adapters - I/O implementations of ports."""

from .file_log import FileWorkoutLog, LogFileError

__all__ = [
    "FileWorkoutLog",
    "LogFileError",
]
