# src/study_planner/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..planner.models import date_key
from ..planner.task_store import TaskStore
from .ports import KeyValueStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same fields).
    settings: Any

    kv: KeyValueStore
    store: TaskStore

    # First day of the month being viewed.
    current_month: date = field(default_factory=lambda: date.today().replace(day=1))
    selected_date: date = field(default_factory=date.today)

    @property
    def selected_key(self) -> str:
        return date_key(self.selected_date)
