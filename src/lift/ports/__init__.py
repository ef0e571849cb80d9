"""Ports - interfaces/protocols for external dependencies."""

from .log_store import WorkoutLog

__all__ = [
    "WorkoutLog",
]
