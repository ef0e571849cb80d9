"""Functional core - pure business logic with no I/O."""

from .entries import Entry, SetEntry, MaxEntry, MyoEntry, DownEntry, triangular
from .ranges import DateRange, UNBOUNDED, derive_bounds, month_bounds, week_bounds
from .scan import format_header, parse_header, has_header, scan_lines

__all__ = [
    # Entries
    "Entry",
    "SetEntry",
    "MaxEntry",
    "MyoEntry",
    "DownEntry",
    "triangular",
    # Ranges
    "DateRange",
    "UNBOUNDED",
    "derive_bounds",
    "month_bounds",
    "week_bounds",
    # Scanning
    "format_header",
    "parse_header",
    "has_header",
    "scan_lines",
]
