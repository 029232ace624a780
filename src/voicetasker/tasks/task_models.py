# src/voicetasker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - the only transition is pending -> completed (one-way);
    - completing an already completed task is a no-op, not an error.
    """

    PENDING = "pending"
    COMPLETED = "completed"


class StatusFilter(StrEnum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: object) -> StatusFilter:
        """Lenient parse: unknown or missing values mean ALL."""
        if not isinstance(raw, str):
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALL

    def matches(self, status: TaskStatus) -> bool:
        if self is StatusFilter.ALL:
            return True
        return status.value == self.value


@dataclass(slots=True)
class Task:
    id: str
    title: str
    scheduled_at: datetime
    created_at: datetime
    status: TaskStatus = TaskStatus.PENDING
    description: str = ""

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED
