"""Date range selectors and bound derivation - no I/O dependencies."""

from datetime import date, timedelta
from enum import Enum


class DateRange(Enum):
    """Named date range a scan can be limited to."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "this-week"
    LAST_WEEK = "last-week"
    THIS_MONTH = "this-month"
    LAST_MONTH = "last-month"


UNBOUNDED = (date.min, date.max)


def week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing day."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of the given month."""
    first = date(year, month, 1)
    if month == 12:
        next_first = date(year + 1, 1, 1)
    else:
        next_first = date(year, month + 1, 1)
    return first, next_first - timedelta(days=1)


def derive_bounds(
    selector: DateRange | None, today: date | None = None
) -> tuple[date, date]:
    """
    Inclusive (start, end) dates for a selector.

    No selector means unbounded. LAST_WEEK is anchored six days back, so a
    Monday resolves to the previous week while a Sunday still resolves to
    the current one.
    """
    if selector is None:
        return UNBOUNDED

    today = today or date.today()

    match selector:
        case DateRange.TODAY:
            return today, today
        case DateRange.YESTERDAY:
            yesterday = today - timedelta(days=1)
            return yesterday, yesterday
        case DateRange.THIS_WEEK:
            return week_bounds(today)
        case DateRange.LAST_WEEK:
            return week_bounds(today - timedelta(days=6))
        case DateRange.THIS_MONTH:
            return month_bounds(today.year, today.month)
        case DateRange.LAST_MONTH:
            if today.month == 1:
                return month_bounds(today.year - 1, 12)
            return month_bounds(today.year, today.month - 1)

    raise ValueError(f"Unknown date range: {selector}")
