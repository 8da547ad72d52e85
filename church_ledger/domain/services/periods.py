"""Calendar helpers for report windows and month boundaries."""

import calendar
from datetime import date, datetime, time, tzinfo

from church_ledger.domain.constants import (
    MONTH_ABBREVIATIONS_ES,
    TRAILING_MONTHS,
)
from church_ledger.domain.models.reports import BalanceWindow


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Return the (year, month) pair ``offset`` months away."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_start(year: int, month: int, tz: tzinfo | None = None) -> datetime:
    """Return the first instant of a calendar month."""
    return datetime(year, month, 1, tzinfo=tz)


def month_end(year: int, month: int, tz: tzinfo | None = None) -> datetime:
    """Return the last representable instant of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, last_day, 23, 59, 59, 999999, tzinfo=tz)


def month_label(year: int, month: int) -> str:
    """Return a short Spanish label such as ``"ene 2025"``."""
    return f"{MONTH_ABBREVIATIONS_ES[month - 1]} {year}"


def year_bounds(
    year: int,
    tz: tzinfo | None = None,
) -> tuple[datetime, datetime]:
    """Return ``[start, end)`` instants for a calendar year."""
    return month_start(year, 1, tz), month_start(year + 1, 1, tz)


def month_bounds(
    year: int,
    month: int,
    tz: tzinfo | None = None,
) -> tuple[datetime, datetime]:
    """Return ``[start, end)`` instants for a calendar month."""
    next_year, next_month = shift_month(year, month, 1)
    return month_start(year, month, tz), month_start(next_year, next_month, tz)


def build_balance_window(
    as_of: datetime,
    months: int = TRAILING_MONTHS,
) -> BalanceWindow:
    """Build the trailing window of months ending at ``as_of``'s month.

    Args:
        as_of: Reference instant; its timezone is reused for boundaries.
        months: Number of calendar months in the window.

    Returns:
        BalanceWindow: Window start, months (oldest first) and boundaries.
    """
    tz = as_of.tzinfo
    pairs = [
        shift_month(as_of.year, as_of.month, offset)
        for offset in range(-(months - 1), 1)
    ]
    first_year, first_month = pairs[0]
    return BalanceWindow(
        start=month_start(first_year, first_month, tz),
        months=pairs,
        boundaries=[month_end(year, month, tz) for year, month in pairs],
    )


def to_timezone(value: datetime | date, tz: tzinfo) -> datetime:
    """Express a stored timestamp in the organization timezone.

    Naive datetimes are assumed to already be wall-clock time in ``tz``;
    plain dates become midnight.
    """
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=tz)
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


__all__ = [
    "shift_month",
    "month_start",
    "month_end",
    "month_label",
    "year_bounds",
    "month_bounds",
    "build_balance_window",
    "to_timezone",
]
