# src/study_planner/planner/stats.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .date_range import month_days
from .models import Snapshot, date_key

DEFAULT_LOCALE = "tr"

# Turkish dotted/dotless i do not round-trip through str.upper().
_TR_UPPER = str.maketrans({"i": "İ", "ı": "I"})


@dataclass(frozen=True, slots=True)
class MonthlyStats:
    total: int
    completed: int
    percent: int


@dataclass(frozen=True, slots=True)
class SubjectStats:
    name: str
    total: int
    completed: int
    percent: int


def percent(completed: int, total: int) -> int:
    """completed/total as a percentage rounded half-up; 0 when total is 0."""
    if total <= 0:
        return 0
    # floor(100 * c / t + 1/2) without floats
    return (200 * completed + total) // (2 * total)


def bucket_key(name: str, locale: str = DEFAULT_LOCALE) -> str:
    clean = name.strip()
    if locale.lower().startswith("tr"):
        clean = clean.translate(_TR_UPPER)
    return clean.upper()


def monthly_stats(snapshot: Snapshot, reference: date) -> MonthlyStats:
    total = 0
    completed = 0
    for day in month_days(reference):
        for subject in snapshot.get(date_key(day), ()):
            total += len(subject.topics)
            completed += subject.completed_count
    return MonthlyStats(total=total, completed=completed, percent=percent(completed, total))


def subject_stats(
    snapshot: Snapshot, reference: date, *, locale: str = DEFAULT_LOCALE
) -> list[SubjectStats]:
    """
    Per-subject totals for the month of `reference`, grouped by bucket key.

    Ordered by percent descending. sorted() is stable, so ties keep the
    order in which buckets were first seen (days ascending, subjects in
    stored order).
    """
    buckets: dict[str, list[int]] = {}
    for day in month_days(reference):
        for subject in snapshot.get(date_key(day), ()):
            acc = buckets.setdefault(bucket_key(subject.name, locale), [0, 0])
            acc[0] += len(subject.topics)
            acc[1] += subject.completed_count

    rows = [
        SubjectStats(name=name, total=total, completed=done, percent=percent(done, total))
        for name, (total, done) in buckets.items()
    ]
    return sorted(rows, key=lambda r: r.percent, reverse=True)
