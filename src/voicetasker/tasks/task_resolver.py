# src/voicetasker/tasks/task_resolver.py

"""
Identifier resolution.

Users refer to tasks with partial phrasing ("the call mom task" -> "call mom"),
so we match case-insensitively on a substring of the title.

Policy: the FIRST task in store order whose title contains the identifier wins.
There is no ranking; two titles sharing a substring resolve to the older one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .task_models import Task


@dataclass(slots=True, frozen=True)
class Found:
    task: Task


@dataclass(slots=True, frozen=True)
class NotFound:
    identifier: str


@dataclass(slots=True, frozen=True)
class EmptyStore:
    pass


Resolution = Found | NotFound | EmptyStore


def _normalize(s: str) -> str:
    return " ".join(s.lower().split())


def resolve_identifier(identifier: str | None, tasks: Iterable[Task]) -> Resolution:
    """
    Map a free-text identifier to the first task whose title contains it.

    - empty collection -> EmptyStore (whatever the identifier)
    - empty/blank identifier -> NotFound (it would otherwise match everything)
    """
    raw = identifier or ""
    items = list(tasks)
    if not items:
        return EmptyStore()

    needle = _normalize(raw)
    if not needle:
        return NotFound(raw)

    for task in items:
        if needle in _normalize(task.title):
            return Found(task)
    return NotFound(raw)
