# src/study_planner/planner/date_range.py

"""
Calendar ranges.

Two ranges exist and must not be mixed up:
- exact month range (1st .. last day) - used by statistics,
- display grid range (month padded to full weeks) - presentation only.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta


def month_bounds(reference: date) -> tuple[date, date]:
    first = reference.replace(day=1)
    last_day = calendar.monthrange(reference.year, reference.month)[1]
    return first, reference.replace(day=last_day)


def days_between(start: date, end: date) -> list[date]:
    """Inclusive, ascending. Empty when end < start."""
    n = (end - start).days
    return [start + timedelta(days=i) for i in range(n + 1)]


def month_days(reference: date) -> list[date]:
    first, last = month_bounds(reference)
    return days_between(first, last)


def display_grid_days(reference: date, *, week_start: int = 0) -> list[date]:
    """
    Month range padded outward to full weeks.

    `week_start` follows date.weekday() numbering (0 = Monday).
    """
    if not 0 <= week_start <= 6:
        raise ValueError("week_start must be in 0..6")
    first, last = month_bounds(reference)
    start = first - timedelta(days=(first.weekday() - week_start) % 7)
    week_end = (week_start + 6) % 7
    end = last + timedelta(days=(week_end - last.weekday()) % 7)
    return days_between(start, end)


def shift_month(reference: date, months: int) -> date:
    """First day of the month `months` away from `reference`."""
    idx = reference.year * 12 + (reference.month - 1) + months
    return date(idx // 12, idx % 12 + 1, 1)


def days_until(target: date, today: date) -> int:
    return (target - today).days
