# tests/test_task_resolver.py

from __future__ import annotations

from datetime import datetime

from voicetasker.tasks.task_resolver import EmptyStore, Found, NotFound, resolve_identifier
from voicetasker.tasks.task_store import TaskStore


def _store_with(*titles: str) -> TaskStore:
    store = TaskStore()
    for t in titles:
        store.add_task(title=t, scheduled_at=datetime(2025, 1, 2, 9, 0))
    return store


def test_first_match_wins() -> None:
    store = _store_with("Call mom", "Call dad")

    res = resolve_identifier("call", store.list_tasks())

    assert isinstance(res, Found)
    assert res.task.title == "Call mom"


def test_match_is_case_insensitive_substring() -> None:
    store = _store_with("Buy milk", "Call MOM tonight")

    res = resolve_identifier("call mom", store.list_tasks())

    assert isinstance(res, Found)
    assert res.task.title == "Call MOM tonight"


def test_no_match_is_not_found() -> None:
    store = _store_with("Buy milk")

    res = resolve_identifier("walk dog", store.list_tasks())

    assert res == NotFound("walk dog")


def test_empty_store_is_distinct_from_not_found() -> None:
    assert isinstance(resolve_identifier("anything", []), EmptyStore)


def test_blank_identifier_matches_nothing() -> None:
    store = _store_with("Buy milk")

    assert isinstance(resolve_identifier("", store.list_tasks()), NotFound)
    assert isinstance(resolve_identifier("   ", store.list_tasks()), NotFound)
    assert isinstance(resolve_identifier(None, store.list_tasks()), NotFound)
