# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime

import pytest

from voicetasker.tasks.task_models import StatusFilter, TaskStatus
from voicetasker.tasks.task_store import TaskStore


def _add(store: TaskStore, title: str, hour: int = 9):
    return store.add_task(title=title, scheduled_at=datetime(2025, 1, 2, hour, 0))


def test_add_task_sets_defaults(store: TaskStore, now: datetime) -> None:
    task = store.add_task(
        title="  Buy milk ",
        scheduled_at=datetime(2025, 1, 2, 9, 0),
        now=now,
    )

    assert store.count_tasks() == 1
    assert task.title == "Buy milk"
    assert task.description == ""
    assert task.status is TaskStatus.PENDING
    assert task.created_at == now
    assert store.get_task(task.id) == task


def test_add_task_rejects_blank_title(store: TaskStore) -> None:
    with pytest.raises(ValueError):
        store.add_task(title="   ", scheduled_at=datetime(2025, 1, 2))
    assert store.count_tasks() == 0


def test_ids_are_unique(store: TaskStore) -> None:
    ids = {_add(store, f"task {i}").id for i in range(50)}
    assert len(ids) == 50


def test_listing_keeps_insertion_order(store: TaskStore) -> None:
    # Scheduled times deliberately out of order: listing must not re-sort.
    _add(store, "late", hour=20)
    _add(store, "early", hour=6)
    _add(store, "noon", hour=12)

    assert [t.title for t in store.list_tasks()] == ["late", "early", "noon"]


def test_filter_preserves_order_within_subset(store: TaskStore) -> None:
    a = _add(store, "A")
    _add(store, "B")
    c = _add(store, "C")
    store.complete_task(c.id)
    store.complete_task(a.id)

    assert [t.title for t in store.list_tasks(StatusFilter.COMPLETED)] == ["A", "C"]
    assert [t.title for t in store.list_tasks(StatusFilter.PENDING)] == ["B"]
    assert [t.title for t in store.list_tasks(StatusFilter.ALL)] == ["A", "B", "C"]


def test_complete_is_idempotent(store: TaskStore) -> None:
    task = _add(store, "Call mom")

    first = store.complete_task(task.id)
    second = store.complete_task(task.id)

    assert first is not None and first.status is TaskStatus.COMPLETED
    assert second is not None and second.status is TaskStatus.COMPLETED
    assert store.get_task(task.id).status is TaskStatus.COMPLETED


def test_complete_and_delete_unknown_id(store: TaskStore) -> None:
    _add(store, "Call mom")

    assert store.complete_task("nope") is None
    assert store.delete_task("nope") is None
    assert store.count_tasks() == 1


def test_delete_removes_permanently(store: TaskStore) -> None:
    task = _add(store, "Call mom")

    removed = store.delete_task(task.id)

    assert removed is not None and removed.title == "Call mom"
    assert store.get_task(task.id) is None
    assert store.count_tasks() == 0


def test_returned_tasks_are_snapshots(store: TaskStore) -> None:
    task = _add(store, "Call mom")

    task.status = TaskStatus.COMPLETED
    store.list_tasks()[0].title = "hacked"

    stored = store.get_task(task.id)
    assert stored.status is TaskStatus.PENDING
    assert stored.title == "Call mom"


def test_stores_are_independent() -> None:
    a, b = TaskStore(), TaskStore()
    _add(a, "only in a")

    assert a.count_tasks() == 1
    assert b.count_tasks() == 0
