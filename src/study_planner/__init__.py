"""Study planner: date-keyed subjects/topics with completion statistics."""

__version__ = "0.1.0"
