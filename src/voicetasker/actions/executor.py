# src/voicetasker/actions/executor.py

"""
Action execution.

Applies a decoded ActionRequest to a TaskStore and returns a result fragment:
short, fixed-template text meant to be appended to the assistant's reply.
Side effects are confined to the store.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..tasks.task_models import StatusFilter, Task, TaskStatus
from ..tasks.task_resolver import Found, resolve_identifier
from ..tasks.task_store import TaskStore
from .models import ActionRequest, AddTask, CompleteTask, DeleteTask, ListTasks, NoOp

logger = logging.getLogger(__name__)


def _clock(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt:%M} {dt:%p}"


def format_schedule_long(dt: datetime) -> str:
    """E.g. "Thursday, Jan 2, 9:00 AM"."""
    return f"{dt:%A}, {dt:%b} {dt.day}, {_clock(dt)}"


def format_schedule_short(dt: datetime) -> str:
    """E.g. "Thu, Jan 2, 9:00 AM"."""
    return f"{dt:%a}, {dt:%b} {dt.day}, {_clock(dt)}"


def format_task_line(task: Task) -> str:
    icon = "✅" if task.status is TaskStatus.COMPLETED else "📅"
    return (
        f"{icon} **{task.title}**\n"
        f"   📆 {format_schedule_short(task.scheduled_at)} | Status: {task.status.value}"
    )


def format_task_list(tasks: list[Task], status_filter: StatusFilter) -> str:
    if not tasks:
        if status_filter is StatusFilter.ALL:
            return "📋 You have no tasks yet."
        return f"📋 No {status_filter.value} tasks found."

    body = "\n\n".join(format_task_line(t) for t in tasks)
    return f"📋 **Your Tasks ({len(tasks)}):**\n\n{body}"


def _not_found(identifier: str) -> str:
    return f'❌ Could not find a task matching "{identifier}"'


def _add(store: TaskStore, req: AddTask, now: datetime | None) -> str:
    task = store.add_task(
        title=req.title,
        scheduled_at=req.scheduled_at,
        description=req.description,
        now=now,
    )
    logger.info("Task created id=%s title=%r", task.id, task.title)
    return (
        "✅ **Task Created:**\n"
        f"- **Title:** {task.title}\n"
        f"- **Scheduled:** {format_schedule_long(task.scheduled_at)}"
    )


def _delete(store: TaskStore, req: DeleteTask) -> str:
    with store.lock:
        res = resolve_identifier(req.identifier, store.list_tasks())
        if not isinstance(res, Found):
            logger.info("Delete: no task matches %r (%s)", req.identifier, type(res).__name__)
            return _not_found(req.identifier)
        store.delete_task(res.task.id)

    logger.info("Task deleted id=%s title=%r", res.task.id, res.task.title)
    return f'🗑️ Deleted task: "{res.task.title}"'


def _complete(store: TaskStore, req: CompleteTask) -> str:
    with store.lock:
        res = resolve_identifier(req.identifier, store.list_tasks())
        if not isinstance(res, Found):
            logger.info("Complete: no task matches %r (%s)", req.identifier, type(res).__name__)
            return _not_found(req.identifier)
        store.complete_task(res.task.id)

    logger.info("Task completed id=%s title=%r", res.task.id, res.task.title)
    return f'✅ Marked as complete: "{res.task.title}"'


def execute_action(store: TaskStore, request: ActionRequest, *, now: datetime | None = None) -> str:
    """Perform the request against the store and return the result fragment."""
    if isinstance(request, AddTask):
        return _add(store, request, now)

    if isinstance(request, ListTasks):
        tasks = store.list_tasks(request.status_filter)
        return format_task_list(tasks, request.status_filter)

    if isinstance(request, DeleteTask):
        return _delete(store, request)

    if isinstance(request, CompleteTask):
        return _complete(store, request)

    if isinstance(request, NoOp):
        return ""

    raise TypeError(f"Unsupported action request: {request!r}")
