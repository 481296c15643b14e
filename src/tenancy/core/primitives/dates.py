# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar-day helpers shared by status derivation, the booking calendar and
contract progress reporting.

Every helper works on date-only values. Datetimes are truncated to midnight
before comparison so that time-of-day (and the timezone it was captured in)
can never shift a result by one day.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import List, Union

from dateutil.relativedelta import relativedelta

from .model import Model

DayLike = Union[date, datetime, str]


def as_day(value: DayLike) -> date:
    """Normalize a date, datetime or ISO string (``YYYY-MM-DD...``) to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Cannot interpret {value!r} as a calendar day")


def day_overlap(start: DayLike, end: DayLike, day: DayLike) -> bool:
    """
    True iff ``day`` falls in the half-open range ``[start, end)``.

    The end day is excluded, so a stay checking out on a given day never
    conflicts with one checking in that same day.
    """
    d = as_day(day)
    return as_day(start) <= d < as_day(end)


def ranges_intersect(
    a_start: DayLike, a_end: DayLike, b_start: DayLike, b_end: DayLike
) -> bool:
    """True iff two half-open day ranges share at least one day."""
    return as_day(a_start) < as_day(b_end) and as_day(b_start) < as_day(a_end)


def days_between(a: DayLike, b: DayLike) -> int:
    """Whole calendar days from ``a`` to ``b`` (negative when ``b`` precedes ``a``)."""
    return (as_day(b) - as_day(a)).days


def add_days(day: DayLike, days: int) -> date:
    return as_day(day) + timedelta(days=days)


def add_months(day: DayLike, months: int) -> date:
    """
    Shift a date by calendar months.

    Month-end dates clamp to the last valid day of the target month:

        >>> add_months(date(2024, 1, 31), 1)
        datetime.date(2024, 2, 29)
        >>> add_months(date(2024, 1, 31), 12)
        datetime.date(2025, 1, 31)
    """
    return as_day(day) + relativedelta(months=months)


def month_days(year: int, month: int) -> List[date]:
    """Every date of a calendar month, in order."""
    _, last = calendar.monthrange(year, month)
    return [date(year, month, d) for d in range(1, last + 1)]


def month_key(day: DayLike) -> str:
    """Billing-period key (``YYYY-MM``) for a date."""
    return as_day(day).strftime("%Y-%m")


class ContractProgress(Model):
    """Elapsed share of a contract window as of a given day."""

    total_days: int
    days_passed: int
    days_left: int
    progress: int  # percent, 0..100


def contract_progress(start: DayLike, end: DayLike, now: DayLike) -> ContractProgress:
    """
    Progress through the window ``[start, end]`` as of ``now``.

    ``total_days`` is floored at 1 so a same-day contract never divides by
    zero. ``days_left`` goes negative once the contract has expired.

    Example:
        >>> p = contract_progress(date(2024, 1, 1), date(2024, 1, 11), date(2024, 1, 6))
        >>> (p.total_days, p.progress, p.days_left)
        (10, 50, 5)
    """
    total_days = max(1, days_between(start, end))
    passed = max(0, days_between(start, now))
    # round-half-up on the percentage, clamped to [0, 100]
    pct = int((passed * 100 + total_days / 2) // total_days)
    return ContractProgress(
        total_days=total_days,
        days_passed=passed,
        days_left=days_between(now, end),
        progress=min(max(pct, 0), 100),
    )
