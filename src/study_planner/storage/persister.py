# src/study_planner/storage/persister.py

from __future__ import annotations

import logging

from ..core.ports import KeyValueStore
from ..planner.codec import encode_snapshot
from ..planner.models import Snapshot

logger = logging.getLogger(__name__)


class SnapshotPersister:
    """
    TaskStore listener that writes the full snapshot under one key.

    Fire-and-forget: no batching, no retry. A failed write is logged and the
    next committed mutation writes the whole snapshot again.
    """

    def __init__(self, kv: KeyValueStore, key: str) -> None:
        self._kv = kv
        self._key = key
        self.writes = 0
        self.failures = 0

    def __call__(self, snapshot: Snapshot) -> None:
        try:
            payload = encode_snapshot(snapshot)
            self._kv.set(self._key, payload)
        except Exception:
            self.failures += 1
            logger.exception("Failed to persist snapshot key=%s", self._key)
            return
        self.writes += 1
        logger.debug("Persisted snapshot key=%s days=%s bytes=%s", self._key, len(snapshot), len(payload))
