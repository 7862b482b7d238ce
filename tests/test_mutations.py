# tests/test_mutations.py

from __future__ import annotations

import pytest

from study_planner.planner import mutations as m
from study_planner.planner.models import Subject, Topic

D = "2025-03-10"


def test_add_subject_appends_fresh_subject(ids) -> None:
    snap = m.add_subject({}, D, "  Matematik  ", id_factory=ids)
    snap = m.add_subject(snap, D, "Tarih", id_factory=ids)

    assert [s.name for s in snap[D]] == ["Matematik", "Tarih"]
    assert [s.id for s in snap[D]] == ["id-1", "id-2"]
    assert all(s.topics == () for s in snap[D])


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_add_subject_blank_name_is_noop(populated, name: str) -> None:
    assert m.add_subject(populated, D, name) is populated


@pytest.mark.parametrize(
    "key",
    ["2025-1-5", "2025-01-5", "not-a-date", "", "2025-02-30", "2025-01-05\n", "２０２５-01-05"],
)
def test_add_subject_non_canonical_key_is_noop(populated, key: str) -> None:
    assert m.add_subject(populated, key, "Fizik") is populated
    assert m.add_subject({}, key, "Fizik") == {}


def test_add_subject_does_not_touch_input_or_other_days(populated, ids) -> None:
    before = dict(populated)
    snap = m.add_subject(populated, "2025-01-05", "Coğrafya", id_factory=ids)

    assert populated == before
    assert len(populated["2025-01-05"]) == 1
    assert len(snap["2025-01-05"]) == 2
    assert snap["2025-01-20"] is populated["2025-01-20"]


def test_add_topic_appends_trimmed_uncompleted(populated, ids) -> None:
    snap = m.add_topic(populated, "2025-01-05", "s1", "  Limit ", id_factory=ids)
    topics = snap["2025-01-05"][0].topics

    assert topics[-1] == Topic(id="id-1", text="Limit", completed=False)
    assert topics[:2] == populated["2025-01-05"][0].topics


@pytest.mark.parametrize(
    "date_key, subject_id, text",
    [
        ("2025-01-05", "s1", "   "),
        ("2025-01-05", "missing", "Limit"),
        ("2025-02-01", "s1", "Limit"),
    ],
)
def test_add_topic_noops(populated, date_key: str, subject_id: str, text: str) -> None:
    assert m.add_topic(populated, date_key, subject_id, text) is populated


def test_toggle_topic_is_an_involution(populated) -> None:
    once = m.toggle_topic(populated, "2025-01-05", "s1", "t2")
    twice = m.toggle_topic(once, "2025-01-05", "s1", "t2")

    assert once["2025-01-05"][0].topics[1].completed is True
    assert twice == populated


def test_toggle_unknown_topic_or_day_is_noop(populated) -> None:
    assert m.toggle_topic(populated, "2025-01-05", "s1", "nope") is populated
    assert m.toggle_topic(populated, "2025-01-05", "nope", "t1") is populated
    assert m.toggle_topic(populated, "1999-01-01", "s1", "t1") is populated


def test_update_topic_replaces_text(populated) -> None:
    snap = m.update_topic(populated, "2025-01-05", "s1", "t1", "  Türev kuralları ")
    topic = snap["2025-01-05"][0].topics[0]
    assert topic.text == "Türev kuralları"
    assert topic.completed is True
    assert topic.id == "t1"


def test_update_topic_blank_text_keeps_old_text(populated) -> None:
    assert m.update_topic(populated, "2025-01-05", "s1", "t1", "  ") is populated
    assert populated["2025-01-05"][0].topics[0].text == "Türev"


def test_delete_subject(populated) -> None:
    snap = m.delete_subject(populated, "2025-01-05", "s1")
    assert snap["2025-01-05"] == ()
    assert snap["2025-01-20"] is populated["2025-01-20"]
    assert m.delete_subject(populated, "2025-01-05", "nope") is populated
    assert m.delete_subject(populated, "2030-01-01", "s1") is populated


def test_delete_topic(populated) -> None:
    snap = m.delete_topic(populated, "2025-01-20", "s2", "t4")
    assert [t.id for t in snap["2025-01-20"][0].topics] == ["t3", "t5"]
    assert m.delete_topic(populated, "2025-01-20", "s2", "nope") is populated
    assert m.delete_topic(populated, "2025-01-20", "nope", "t4") is populated


def test_mutations_on_missing_day_do_not_materialize_it() -> None:
    empty: dict[str, tuple[Subject, ...]] = {}
    for snap in (
        m.add_topic(empty, D, "s", "x"),
        m.toggle_topic(empty, D, "s", "t"),
        m.update_topic(empty, D, "s", "t", "x"),
        m.delete_subject(empty, D, "s"),
        m.delete_topic(empty, D, "s", "t"),
    ):
        assert snap is empty
        assert D not in snap


def test_only_the_target_subject_is_rebuilt(ids) -> None:
    snap = m.add_subject({}, D, "A", id_factory=ids)
    snap = m.add_subject(snap, D, "B", id_factory=ids)
    after = m.add_topic(snap, D, "id-2", "x", id_factory=ids)

    assert after[D][0] is snap[D][0]
    assert after[D][1] is not snap[D][1]
