# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from study_planner.core.state import AppState
from study_planner.planner.models import Subject, Topic
from study_planner.planner.task_store import TaskStore
from study_planner.storage.persister import SnapshotPersister

from .fakes import InMemoryKeyValueStore, SequentialIds

TASKS_KEY = "kpss-planner-tasks-v2"
LEGACY_KEY = "kpss-planner-tasks"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="study-planner-test",
        log_level="DEBUG",
        console_enabled=True,
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "planner.sqlite3",
        tasks_key=TASKS_KEY,
        legacy_tasks_key=LEGACY_KEY,
        exam_date=date(2026, 9, 6),
        week_start=0,
        stats_locale="tr",
    )


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def populated() -> dict[str, tuple[Subject, ...]]:
    """Two days in January 2025: 2 topics (1 done) and 3 topics (3 done)."""
    return {
        "2025-01-05": (
            Subject(
                id="s1",
                name="Matematik",
                topics=(Topic("t1", "Türev", True), Topic("t2", "İntegral", False)),
            ),
        ),
        "2025-01-20": (
            Subject(
                id="s2",
                name="Tarih",
                topics=(
                    Topic("t3", "Osmanlı", True),
                    Topic("t4", "Cumhuriyet", True),
                    Topic("t5", "İnkılaplar", True),
                ),
            ),
        ),
    }


@pytest.fixture()
def state(settings: SimpleNamespace, kv: InMemoryKeyValueStore, ids: SequentialIds) -> AppState:
    """AppState over an in-memory kv store, selected on 2025-01-05."""
    store = TaskStore(id_factory=ids)
    store.subscribe(SnapshotPersister(kv, settings.tasks_key))
    return AppState(
        settings=settings,
        kv=kv,
        store=store,
        current_month=date(2025, 1, 1),
        selected_date=date(2025, 1, 5),
    )
