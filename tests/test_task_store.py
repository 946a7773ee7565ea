# tests/test_task_store.py

from __future__ import annotations

import json
from datetime import date, datetime, timedelta

import pytest

from forgetful_me.tasks.errors import TaskValidationError
from forgetful_me.tasks.task_file import TaskFile
from forgetful_me.tasks.task_models import TaskStatus
from forgetful_me.tasks.task_store import TaskStore
from forgetful_me.tasks.urgency import Urgency, classify


def _saved(task_file: TaskFile) -> list[dict]:
    return json.loads(task_file.path.read_text("utf-8"))["task-list"]


def _ids(store: TaskStore) -> list[int]:
    return [t.id for t in store.list()]


def test_create_assigns_sequential_ids(store: TaskStore, today: date) -> None:
    first = store.create("a", "first")
    second = store.create("b", "second", deadline=today + timedelta(days=3))

    assert first.id == 0
    assert second.id == 1
    assert first.status is TaskStatus.INCOMPLETE
    assert first.date_posted == today
    assert first.date_deadline is None
    assert second.date_deadline == today + timedelta(days=3)


def test_create_persists_before_returning(store: TaskStore, task_file: TaskFile) -> None:
    store.create("a", "first")

    saved = _saved(task_file)
    assert len(saved) == 1
    assert saved[0]["name"] == "a"
    assert saved[0]["date_deadline"] == "0000-00-00"


def test_create_uses_max_id_plus_one(task_file: TaskFile, today: date) -> None:
    # A file written by hand with a gap: ids are renumbered on load.
    task_file.ensure_exists()
    task_file.path.write_text(
        json.dumps(
            {
                "task-list": [
                    {
                        "id": 0,
                        "name": "a",
                        "description": "",
                        "status": "Incomplete",
                        "date_posted": "2026-03-01",
                        "date_deadline": "0000-00-00",
                    },
                    {
                        "id": 5,
                        "name": "b",
                        "description": "",
                        "status": "Complete",
                        "date_posted": "2026-03-01",
                        "date_deadline": "0000-00-00",
                    },
                ]
            }
        ),
        "utf-8",
    )
    store = TaskStore(task_file, today=lambda: today)
    store.load()

    assert _ids(store) == [0, 1]
    assert store.create("c", "").id == 2


def test_delete_renumbers_remaining_tasks(store: TaskStore, task_file: TaskFile) -> None:
    for name in ("a", "b", "c"):
        store.create(name, "")

    removed = store.delete({1})

    assert removed == 1
    tasks = store.list()
    assert [t.id for t in tasks] == [0, 1]
    assert [t.name for t in tasks] == ["a", "c"]
    assert [t["id"] for t in _saved(task_file)] == [0, 1]


def test_delete_many_keeps_relative_order(store: TaskStore) -> None:
    for name in "abcdef":
        store.create(name, "")

    assert store.delete([0, 2, 5]) == 3

    assert [(t.id, t.name) for t in store.list()] == [(0, "b"), (1, "d"), (2, "e")]


def test_delete_unknown_id_is_noop(store: TaskStore) -> None:
    store.create("a", "")
    store.create("b", "")
    before = store.list()

    assert store.delete({7}) == 0
    assert store.list() == before


def test_delete_mixed_known_and_unknown_ids(store: TaskStore) -> None:
    store.create("a", "")
    store.create("b", "")

    assert store.delete({1, 9}) == 1
    assert [t.name for t in store.list()] == ["a"]


def test_create_after_deleting_last_task(store: TaskStore) -> None:
    store.create("a", "")
    store.create("b", "")
    store.delete({0, 1})

    assert store.is_empty()
    assert store.create("c", "").id == 0


def test_toggle_status_is_its_own_inverse(store: TaskStore, task_file: TaskFile) -> None:
    store.create("a", "")
    store.create("b", "")

    assert store.toggle_status({1}) == 1
    assert [t.status for t in store.list()] == [TaskStatus.INCOMPLETE, TaskStatus.COMPLETE]
    assert _saved(task_file)[1]["status"] == "Complete"

    store.toggle_status({1})
    assert [t.status for t in store.list()] == [TaskStatus.INCOMPLETE, TaskStatus.INCOMPLETE]


def test_toggle_skips_unknown_ids_without_aborting(store: TaskStore) -> None:
    store.create("a", "")
    store.create("b", "")

    assert store.toggle_status([5, 0, 42]) == 1
    assert [t.status for t in store.list()] == [TaskStatus.COMPLETE, TaskStatus.INCOMPLETE]
    assert _ids(store) == [0, 1]


def test_toggle_after_delete_targets_renumbered_task(store: TaskStore) -> None:
    for name in ("a", "b", "c"):
        store.create(name, "")
    store.delete({0})

    store.toggle_status({0})

    statuses = {t.name: t.status for t in store.list()}
    assert statuses == {"b": TaskStatus.COMPLETE, "c": TaskStatus.INCOMPLETE}


def test_list_returns_snapshot(store: TaskStore) -> None:
    store.create("a", "")

    snapshot = store.list()
    snapshot[0].name = "changed"
    snapshot[0].status = TaskStatus.COMPLETE

    fresh = store.list()[0]
    assert fresh.name == "a"
    assert fresh.status is TaskStatus.INCOMPLETE


def test_state_survives_reload(store: TaskStore, task_file: TaskFile, today: date) -> None:
    store.create("a", "x", deadline=today)
    store.create("b", "y")
    store.toggle_status({0})

    reloaded = TaskStore(task_file, today=lambda: today)
    reloaded.load()

    assert reloaded.list() == store.list()


@pytest.mark.parametrize(
    "name, description",
    [
        ("n" * 31, ""),
        ("", "d" * 101),
    ],
)
def test_create_rejects_out_of_range_fields(store: TaskStore, task_file: TaskFile, name, description) -> None:
    with pytest.raises(TaskValidationError):
        store.create(name, description)

    assert store.is_empty()
    assert _saved(task_file) == []


def test_create_accepts_fields_at_the_limit(store: TaskStore) -> None:
    task = store.create("n" * 30, "d" * 100)
    assert len(task.name) == 30


def test_create_rejects_datetime_deadline(store: TaskStore) -> None:
    with pytest.raises(TaskValidationError):
        store.create("a", "", deadline=datetime(2026, 3, 20, 12, 0))  # type: ignore[arg-type]


def test_pay_rent_scenario(store: TaskStore, today: date) -> None:
    store.create("Pay rent", "Transfer to landlord", deadline=today + timedelta(days=10))
    store.create("Call dentist", "Book a check-up")

    tasks = store.list()
    assert [t.id for t in tasks] == [0, 1]
    assert classify(tasks[0], today) is Urgency.ON_TRACK
    assert classify(tasks[1], today) is None

    store.delete({0})

    tasks = store.list()
    assert len(tasks) == 1
    assert tasks[0].id == 0
    assert tasks[0].name == "Call dentist"
