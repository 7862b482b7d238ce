# src/study_planner/planner/codec.py

"""
JSON codec for persisted snapshots.

Current schema:  {DateKey: [{id, name, topics: [{id, text, completed}]}]}
Legacy schema:   {DateKey: [{id, text, completed}]}

Decoding is strict: anything that is not valid JSON of the expected shape
raises SnapshotFormatError. There is no partial recovery.
"""

from __future__ import annotations

import json
from typing import Any

from ..errors import SnapshotFormatError
from .models import Snapshot, Subject, Topic, is_date_key


def _subject_to_dict(subject: Subject) -> dict[str, Any]:
    return {
        "id": subject.id,
        "name": subject.name,
        "topics": [
            {"id": t.id, "text": t.text, "completed": t.completed} for t in subject.topics
        ],
    }


def snapshot_to_obj(snapshot: Snapshot) -> dict[str, list[dict[str, Any]]]:
    return {key: [_subject_to_dict(s) for s in subjects] for key, subjects in snapshot.items()}


def encode_snapshot(snapshot: Snapshot) -> bytes:
    return json.dumps(snapshot_to_obj(snapshot), ensure_ascii=False).encode("utf-8")


# ---- decoding ----


def _load_json(raw: bytes | str) -> Any:
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        return json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SnapshotFormatError(f"not valid JSON: {e}") from e


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise SnapshotFormatError(msg)


def _topic_from_obj(obj: Any, where: str) -> Topic:
    _require(isinstance(obj, dict), f"{where}: topic must be an object")
    tid, text, completed = obj.get("id"), obj.get("text"), obj.get("completed")
    _require(isinstance(tid, str), f"{where}: topic id must be a string")
    _require(isinstance(text, str), f"{where}: topic text must be a string")
    _require(isinstance(completed, bool), f"{where}: topic completed must be a boolean")
    return Topic(id=tid, text=text, completed=completed)


def _topics_from_list(items: Any, where: str) -> tuple[Topic, ...]:
    _require(isinstance(items, list), f"{where}: topics must be a list")
    return tuple(_topic_from_obj(t, f"{where}[{i}]") for i, t in enumerate(items))


def _subject_from_obj(obj: Any, where: str) -> Subject:
    _require(isinstance(obj, dict), f"{where}: subject must be an object")
    sid, name = obj.get("id"), obj.get("name")
    _require(isinstance(sid, str), f"{where}: subject id must be a string")
    _require(isinstance(name, str), f"{where}: subject name must be a string")
    return Subject(id=sid, name=name, topics=_topics_from_list(obj.get("topics"), where))


def _date_mapping(data: Any) -> dict[str, list[Any]]:
    _require(isinstance(data, dict), "top-level value must be an object")
    for key, items in data.items():
        _require(is_date_key(key), f"invalid date key: {key!r}")
        _require(isinstance(items, list), f"{key}: value must be a list")
    return data


def decode_snapshot(raw: bytes | str) -> dict[str, tuple[Subject, ...]]:
    data = _date_mapping(_load_json(raw))
    return {
        key: tuple(_subject_from_obj(s, f"{key}[{i}]") for i, s in enumerate(items))
        for key, items in data.items()
    }


def decode_legacy(raw: bytes | str) -> dict[str, tuple[Topic, ...]]:
    data = _date_mapping(_load_json(raw))
    return {key: _topics_from_list(items, key) for key, items in data.items()}
