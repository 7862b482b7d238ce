# src/study_planner/planner/mutations.py

"""
Pure snapshot mutations.

Every function takes the current snapshot and returns a snapshot. Nothing is
mutated in place: a changed result is a new mapping that shares all other
day entries with the input.

Business-rule violations are silent no-ops and return the *input object*:
- blank name/text (after trimming),
- a date key that is not canonical YYYY-MM-DD (add_subject),
- unknown subject id / topic id,
- a date key with no subject list yet.
Callers can therefore use `result is snapshot` to detect "nothing changed".
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from .models import IdFactory, Snapshot, Subject, Topic, is_date_key, new_id

SubjectFn = Callable[[Subject], Subject]
TopicFn = Callable[[Topic], Topic]


def _with_day(snapshot: Snapshot, date_key: str, subjects: tuple[Subject, ...]) -> Snapshot:
    out = dict(snapshot)
    out[date_key] = subjects
    return out


def _update_subject(snapshot: Snapshot, date_key: str, subject_id: str, fn: SubjectFn) -> Snapshot:
    subjects = snapshot.get(date_key)
    if subjects is None:
        return snapshot

    changed = False
    new_subjects: list[Subject] = []
    for subject in subjects:
        if subject.id == subject_id:
            updated = fn(subject)
            changed = changed or updated is not subject
            new_subjects.append(updated)
        else:
            new_subjects.append(subject)

    if not changed:
        return snapshot
    return _with_day(snapshot, date_key, tuple(new_subjects))


def _update_topic(
    snapshot: Snapshot, date_key: str, subject_id: str, topic_id: str, fn: TopicFn
) -> Snapshot:
    def on_subject(subject: Subject) -> Subject:
        changed = False
        topics: list[Topic] = []
        for topic in subject.topics:
            if topic.id == topic_id:
                topic = fn(topic)
                changed = True
            topics.append(topic)
        return replace(subject, topics=tuple(topics)) if changed else subject

    return _update_subject(snapshot, date_key, subject_id, on_subject)


# ---- public operations ----


def add_subject(
    snapshot: Snapshot, date_key: str, name: str, *, id_factory: IdFactory = new_id
) -> Snapshot:
    clean = name.strip()
    if not clean or not is_date_key(date_key):
        return snapshot
    subject = Subject(id=id_factory(), name=clean, topics=())
    return _with_day(snapshot, date_key, (*snapshot.get(date_key, ()), subject))


def add_topic(
    snapshot: Snapshot,
    date_key: str,
    subject_id: str,
    text: str,
    *,
    id_factory: IdFactory = new_id,
) -> Snapshot:
    clean = text.strip()
    if not clean:
        return snapshot

    def append(subject: Subject) -> Subject:
        topic = Topic(id=id_factory(), text=clean, completed=False)
        return replace(subject, topics=(*subject.topics, topic))

    return _update_subject(snapshot, date_key, subject_id, append)


def toggle_topic(snapshot: Snapshot, date_key: str, subject_id: str, topic_id: str) -> Snapshot:
    return _update_topic(
        snapshot,
        date_key,
        subject_id,
        topic_id,
        lambda t: replace(t, completed=not t.completed),
    )


def update_topic(
    snapshot: Snapshot, date_key: str, subject_id: str, topic_id: str, new_text: str
) -> Snapshot:
    clean = new_text.strip()
    if not clean:
        return snapshot
    return _update_topic(
        snapshot, date_key, subject_id, topic_id, lambda t: replace(t, text=clean)
    )


def delete_subject(snapshot: Snapshot, date_key: str, subject_id: str) -> Snapshot:
    subjects = snapshot.get(date_key)
    if subjects is None:
        return snapshot
    kept = tuple(s for s in subjects if s.id != subject_id)
    if len(kept) == len(subjects):
        return snapshot
    return _with_day(snapshot, date_key, kept)


def delete_topic(snapshot: Snapshot, date_key: str, subject_id: str, topic_id: str) -> Snapshot:
    def drop(subject: Subject) -> Subject:
        kept = tuple(t for t in subject.topics if t.id != topic_id)
        if len(kept) == len(subject.topics):
            return subject
        return replace(subject, topics=kept)

    return _update_subject(snapshot, date_key, subject_id, drop)
