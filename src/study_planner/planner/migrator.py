# src/study_planner/planner/migrator.py

"""
Initial snapshot loading with legacy-schema migration.

Order of precedence:
1. data under the current key -> used as-is,
2. data under the legacy key  -> each day becomes one "Genel" subject
   holding that day's topics verbatim (ids and completed flags kept),
3. nothing                    -> empty snapshot.

The legacy key is never written or deleted. A migrated snapshot is not
written back here; it reaches the current key with the next persisted
mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import KeyValueStore
from .codec import decode_legacy, decode_snapshot
from .models import IdFactory, Subject, new_id

logger = logging.getLogger(__name__)

LEGACY_SUBJECT_NAME = "Genel"


class SnapshotSource(StrEnum):
    CURRENT = "current"
    LEGACY = "legacy"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class MigrationResult:
    snapshot: dict[str, tuple[Subject, ...]]
    source: SnapshotSource


def migrate_legacy(raw: bytes | str, *, id_factory: IdFactory = new_id) -> dict[str, tuple[Subject, ...]]:
    legacy = decode_legacy(raw)
    return {
        key: (Subject(id=id_factory(), name=LEGACY_SUBJECT_NAME, topics=topics),)
        for key, topics in legacy.items()
    }


def load_snapshot(
    kv: KeyValueStore,
    *,
    current_key: str,
    legacy_key: str,
    id_factory: IdFactory = new_id,
) -> MigrationResult:
    """
    Build the startup snapshot. Raises SnapshotFormatError on malformed data
    (no fallback: initialization is all-or-nothing).
    """
    raw = kv.get(current_key)
    if raw:
        snapshot = decode_snapshot(raw)
        logger.info("Loaded snapshot key=%s days=%s", current_key, len(snapshot))
        return MigrationResult(snapshot=snapshot, source=SnapshotSource.CURRENT)

    raw_legacy = kv.get(legacy_key)
    if raw_legacy:
        snapshot = migrate_legacy(raw_legacy, id_factory=id_factory)
        logger.info(
            "Migrated legacy snapshot key=%s -> %s days=%s",
            legacy_key,
            current_key,
            len(snapshot),
        )
        return MigrationResult(snapshot=snapshot, source=SnapshotSource.LEGACY)

    logger.info("No saved snapshot (keys %s, %s); starting empty", current_key, legacy_key)
    return MigrationResult(snapshot={}, source=SnapshotSource.EMPTY)
