# src/study_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads (or migrates) the snapshot and wires the store to persistence.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..planner.migrator import load_snapshot
from ..planner.task_store import TaskStore
from ..storage.kv_store import SqliteKeyValueStore
from ..storage.persister import SnapshotPersister

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the kv store) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back to
    get_settings().

    Raises SnapshotFormatError if persisted data is malformed.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = SqliteKeyValueStore(settings.db_path)

    result = load_snapshot(
        kv,
        current_key=settings.tasks_key,
        legacy_key=settings.legacy_tasks_key,
    )
    store = TaskStore(result.snapshot)
    store.subscribe(SnapshotPersister(kv, settings.tasks_key))
    logger.info("Planner state ready source=%s days=%s", result.source, len(result.snapshot))

    return AppState(settings=settings, kv=kv, store=store)
