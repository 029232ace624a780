# src/voicetasker/tasks/task_store.py

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime

from .task_models import StatusFilter, Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Volatile in-memory task store, scoped to one session.

    Ordering:
    - tasks are kept in insertion order (dict order), never re-sorted;
    - filtered listings preserve that order within the subset.

    Ownership:
    - the store owns the Task instances; every public method returns a copy,
      so callers can't mutate state behind the store's back.

    Thread-safety:
    - every mutation runs under `lock` (re-entrant). Callers doing
      read-then-write sequences (resolve, then delete) hold `lock` around
      the whole sequence.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.RLock()
        logger.info("TaskStore ready (in-memory)")

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # ---- low-level helpers ----

    def _new_id(self) -> str:
        while True:
            task_id = uuid.uuid4().hex
            if task_id not in self._tasks:
                return task_id

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def add_task(
        self,
        *,
        title: str,
        scheduled_at: datetime,
        description: str = "",
        now: datetime | None = None,
    ) -> Task:
        if not title or not title.strip():
            raise ValueError("title is required")

        created_at = now if now is not None else datetime.now().astimezone()

        with self._lock:
            task = Task(
                id=self._new_id(),
                title=title.strip(),
                scheduled_at=scheduled_at,
                created_at=created_at,
                status=TaskStatus.PENDING,
                description=(description or "").strip(),
            )
            self._tasks[task.id] = task
            logger.debug(
                "Task added id=%s title=%r scheduled_at=%s",
                task.id,
                task.title,
                task.scheduled_at.isoformat(),
            )
            return replace(task)

    def get_task(self, task_id: str) -> Task | None:
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task is not None else None

    def list_tasks(self, status_filter: StatusFilter = StatusFilter.ALL) -> list[Task]:
        """Snapshot of tasks in insertion order, optionally filtered by status."""
        with self._lock:
            return [replace(t) for t in self._tasks.values() if status_filter.matches(t.status)]

    def complete_task(self, task_id: str) -> Task | None:
        """
        Flip status to completed in place.

        Idempotent: an already completed task stays completed and is returned.
        Returns None if the id is unknown.
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            if task.status is not TaskStatus.COMPLETED:
                task.status = TaskStatus.COMPLETED
                logger.debug("Task completed id=%s", task_id)
            return replace(task)

    def delete_task(self, task_id: str) -> Task | None:
        """Remove permanently. Returns the removed task, or None if the id is unknown."""
        with self._lock:
            task = self._tasks.pop(task_id, None)
            if task is not None:
                logger.debug("Task deleted id=%s", task_id)
            return task
