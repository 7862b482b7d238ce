# src/study_planner/planner/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable

from . import mutations
from .models import IdFactory, Snapshot, Subject, new_id

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[Snapshot], None]


class TaskStore:
    """
    In-memory holder of the current planner snapshot.

    - every operation delegates to a pure function in `mutations`,
    - a result that is a new object is committed and broadcast to listeners,
    - a no-op (same object back) commits nothing and notifies nobody.

    Listeners run synchronously after the commit. A failing listener is
    logged and never reaches the caller of the mutation.

    Single-threaded by contract: callers must not mutate concurrently.
    """

    def __init__(self, snapshot: Snapshot | None = None, *, id_factory: IdFactory = new_id) -> None:
        self._snapshot: Snapshot = dict(snapshot or {})
        self._id_factory = id_factory
        self._listeners: list[SnapshotListener] = []
        logger.info("TaskStore ready days=%s", len(self._snapshot))

    # ---- observation ----

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_snapshot: Snapshot, op: str) -> bool:
        if new_snapshot is self._snapshot:
            logger.debug("TaskStore %s: no-op", op)
            return False

        self._snapshot = new_snapshot
        logger.debug("TaskStore %s: committed days=%s", op, len(new_snapshot))
        for listener in list(self._listeners):
            try:
                listener(new_snapshot)
            except Exception:
                logger.exception("Snapshot listener failed after %s", op)
        return True

    # ---- reads ----

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def subjects_for(self, date_key: str) -> tuple[Subject, ...]:
        return tuple(self._snapshot.get(date_key, ()))

    def find_subject(self, date_key: str, subject_id: str) -> Subject | None:
        for subject in self._snapshot.get(date_key, ()):
            if subject.id == subject_id:
                return subject
        return None

    # ---- mutations ----

    def _recording_factory(self, issued: list[str]) -> IdFactory:
        def factory() -> str:
            nid = self._id_factory()
            issued.append(nid)
            return nid

        return factory

    def add_subject(self, date_key: str, name: str) -> str | None:
        """Append a subject; returns its id, or None when nothing was added."""
        issued: list[str] = []
        new = mutations.add_subject(
            self._snapshot, date_key, name, id_factory=self._recording_factory(issued)
        )
        return issued[-1] if self._commit(new, "add_subject") else None

    def add_topic(self, date_key: str, subject_id: str, text: str) -> str | None:
        """Append a topic; returns its id, or None when nothing was added."""
        issued: list[str] = []
        new = mutations.add_topic(
            self._snapshot,
            date_key,
            subject_id,
            text,
            id_factory=self._recording_factory(issued),
        )
        return issued[-1] if self._commit(new, "add_topic") else None

    def toggle_topic(self, date_key: str, subject_id: str, topic_id: str) -> bool:
        new = mutations.toggle_topic(self._snapshot, date_key, subject_id, topic_id)
        return self._commit(new, "toggle_topic")

    def update_topic(self, date_key: str, subject_id: str, topic_id: str, new_text: str) -> bool:
        new = mutations.update_topic(self._snapshot, date_key, subject_id, topic_id, new_text)
        return self._commit(new, "update_topic")

    def delete_subject(self, date_key: str, subject_id: str) -> bool:
        new = mutations.delete_subject(self._snapshot, date_key, subject_id)
        return self._commit(new, "delete_subject")

    def delete_topic(self, date_key: str, subject_id: str, topic_id: str) -> bool:
        new = mutations.delete_topic(self._snapshot, date_key, subject_id, topic_id)
        return self._commit(new, "delete_topic")
