# tests/test_storage.py

from __future__ import annotations

from pathlib import Path

from study_planner.planner.codec import decode_snapshot
from study_planner.planner.task_store import TaskStore
from study_planner.storage.kv_store import SqliteKeyValueStore
from study_planner.storage.persister import SnapshotPersister

from .fakes import FailingKeyValueStore


def test_sqlite_kv_get_set_overwrite(tmp_path: Path) -> None:
    kv = SqliteKeyValueStore(tmp_path / "nested" / "planner.sqlite3")

    assert kv.get("missing") is None
    kv.set("a", b"one")
    kv.set("a", "iki İ".encode("utf-8"))
    kv.set("b", b"")

    assert kv.get("a") == "iki İ".encode("utf-8")
    assert kv.get("b") == b""
    assert kv.keys() == ["a", "b"]


def test_sqlite_kv_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "planner.sqlite3"
    SqliteKeyValueStore(db).set("k", b"v")
    assert SqliteKeyValueStore(db).get("k") == b"v"


def test_persister_writes_full_snapshot_on_each_commit(kv, populated) -> None:
    store = TaskStore(populated)
    persister = SnapshotPersister(kv, "tasks")
    store.subscribe(persister)

    store.toggle_topic("2025-01-05", "s1", "t2")
    store.add_subject("2025-01-06", "Fizik")
    store.add_subject("2025-01-06", "  ")

    assert persister.writes == 2
    assert [k for k, _ in kv.writes] == ["tasks", "tasks"]
    assert decode_snapshot(kv.data["tasks"]) == store.snapshot


def test_persister_failure_is_logged_not_raised(populated, caplog) -> None:
    store = TaskStore(populated)
    persister = SnapshotPersister(FailingKeyValueStore(), "tasks")
    store.subscribe(persister)

    assert store.delete_subject("2025-01-05", "s1") is True
    assert persister.failures == 1
    assert persister.writes == 0
    assert "Failed to persist snapshot" in caplog.text
