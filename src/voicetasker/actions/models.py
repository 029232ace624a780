# src/voicetasker/actions/models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from ..tasks.task_models import StatusFilter

DEFAULT_TASK_TITLE = "Untitled Task"


class ActionKind(StrEnum):
    """Discriminator values accepted in the directive's "action" field."""

    ADD_TASK = "ADD_TASK"
    LIST_TASKS = "LIST_TASKS"
    DELETE_TASK = "DELETE_TASK"
    COMPLETE_TASK = "COMPLETE_TASK"
    NONE = "NONE"


class ActionDecodeError(ValueError):
    """Directive present but unusable: bad JSON, not an object, or unknown action."""

    def __init__(self, reason: str, payload: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.payload = payload


@dataclass(slots=True, frozen=True)
class AddTask:
    kind: ClassVar[ActionKind] = ActionKind.ADD_TASK

    title: str
    scheduled_at: datetime
    description: str = ""


@dataclass(slots=True, frozen=True)
class ListTasks:
    kind: ClassVar[ActionKind] = ActionKind.LIST_TASKS

    status_filter: StatusFilter = StatusFilter.ALL


@dataclass(slots=True, frozen=True)
class DeleteTask:
    kind: ClassVar[ActionKind] = ActionKind.DELETE_TASK

    identifier: str


@dataclass(slots=True, frozen=True)
class CompleteTask:
    kind: ClassVar[ActionKind] = ActionKind.COMPLETE_TASK

    identifier: str


@dataclass(slots=True, frozen=True)
class NoOp:
    kind: ClassVar[ActionKind] = ActionKind.NONE


ActionRequest = AddTask | ListTasks | DeleteTask | CompleteTask | NoOp
