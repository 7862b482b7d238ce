# src/study_planner/errors.py

from __future__ import annotations


class PlannerError(Exception):
    """Base class for planner errors."""


class SnapshotFormatError(PlannerError, ValueError):
    """Persisted data is not valid JSON of the expected shape."""


class InvalidDateKeyError(PlannerError, ValueError):
    """A string is not a canonical YYYY-MM-DD date key."""
