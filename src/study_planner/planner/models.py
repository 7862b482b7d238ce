# src/study_planner/planner/models.py

from __future__ import annotations

import re
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date

from ..errors import InvalidDateKeyError

_DATE_KEY_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

IdFactory = Callable[[], str]


def new_id() -> str:
    """Random process-unique identifier for subjects and topics."""
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Topic:
    id: str
    text: str
    completed: bool = False


@dataclass(frozen=True, slots=True)
class Subject:
    """
    A named group of topics planned for one day.

    `name` is kept exactly as entered; grouping by normalized name only
    happens in statistics.
    """

    id: str
    name: str
    topics: tuple[Topic, ...] = field(default_factory=tuple)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self.topics if t.completed)


# DateKey -> subjects in insertion order. Treated as read-only: mutations
# build a new mapping and share untouched entries.
Snapshot = Mapping[str, tuple[Subject, ...]]


def date_key(day: date) -> str:
    """Canonical YYYY-MM-DD key built from the calendar fields of `day`."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_date_key(raw: str) -> date:
    m = _DATE_KEY_RE.fullmatch(raw or "")
    if not m:
        raise InvalidDateKeyError(f"not a YYYY-MM-DD date key: {raw!r}")
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as e:
        raise InvalidDateKeyError(f"invalid calendar date: {raw!r}") from e


def is_date_key(raw: str) -> bool:
    try:
        parse_date_key(raw)
    except InvalidDateKeyError:
        return False
    return True
