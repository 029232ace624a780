# src/voicetasker/actions/decoder.py

"""
Directive payload decoding.

Strict on structure, lenient on fields:
- the payload must be a JSON object with a known "action" discriminator,
  otherwise ActionDecodeError is raised (never silently mapped to NONE);
- missing or malformed fields are filled with defaults, so a slightly sloppy
  model output still performs the intended action.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from ..tasks.task_models import StatusFilter
from .models import (
    DEFAULT_TASK_TITLE,
    ActionDecodeError,
    ActionKind,
    ActionRequest,
    AddTask,
    CompleteTask,
    DeleteTask,
    ListTasks,
    NoOp,
)

logger = logging.getLogger(__name__)


def parse_iso_datetime(raw: Any) -> datetime | None:
    """
    Parse an ISO-8601 timestamp. Returns None if it isn't one.

    A trailing "Z" is accepted. Naive values stay naive (local wall-clock time).
    """
    if not isinstance(raw, str):
        return None
    s = raw.strip()
    if not s:
        return None
    if s[-1] in "zZ":
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def _str_field(data: dict[str, Any], key: str) -> str:
    val = data.get(key)
    if isinstance(val, str):
        return val.strip()
    return ""


def _raw_str_field(data: dict[str, Any], key: str) -> str:
    """Like _str_field but untrimmed, so not-found messages echo the request verbatim."""
    val = data.get(key)
    return val if isinstance(val, str) else ""


def _norm_kind(raw: Any, payload: str) -> ActionKind:
    if not isinstance(raw, str) or not raw.strip():
        raise ActionDecodeError("missing 'action' discriminator", payload)
    try:
        return ActionKind(raw.strip().upper())
    except ValueError:
        raise ActionDecodeError(f"unknown action {raw!r}", payload) from None


def decode_action(payload: str, *, now: datetime | None = None) -> ActionRequest:
    """Decode a directive payload into exactly one ActionRequest variant."""
    try:
        data = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        # RecursionError: pathologically nested arrays/objects.
        raise ActionDecodeError(f"payload is not valid JSON: {e}", payload) from e

    if not isinstance(data, dict):
        raise ActionDecodeError("payload is not a JSON object", payload)

    kind = _norm_kind(data.get("action"), payload)

    if kind is ActionKind.ADD_TASK:
        title = _str_field(data, "title") or DEFAULT_TASK_TITLE
        scheduled_at = parse_iso_datetime(data.get("scheduledAt"))
        if scheduled_at is None:
            logger.debug("scheduledAt missing/unparseable (%r); using now", data.get("scheduledAt"))
            scheduled_at = now if now is not None else datetime.now().astimezone()
        return AddTask(
            title=title,
            scheduled_at=scheduled_at,
            description=_str_field(data, "description"),
        )

    if kind is ActionKind.LIST_TASKS:
        return ListTasks(status_filter=StatusFilter.parse(data.get("status")))

    if kind is ActionKind.DELETE_TASK:
        return DeleteTask(identifier=_raw_str_field(data, "taskIdentifier"))

    if kind is ActionKind.COMPLETE_TASK:
        return CompleteTask(identifier=_raw_str_field(data, "taskIdentifier"))

    return NoOp()
