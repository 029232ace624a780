# tests/test_decoder.py

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from voicetasker.actions.decoder import decode_action, parse_iso_datetime
from voicetasker.actions.models import (
    DEFAULT_TASK_TITLE,
    ActionDecodeError,
    AddTask,
    CompleteTask,
    DeleteTask,
    ListTasks,
    NoOp,
)
from voicetasker.tasks.task_models import StatusFilter


def test_add_task_full() -> None:
    req = decode_action(
        '{"action": "ADD_TASK", "title": "Buy milk", "scheduledAt": "2025-01-02T09:00:00",'
        ' "description": "2 liters"}'
    )
    assert req == AddTask(
        title="Buy milk",
        scheduled_at=datetime(2025, 1, 2, 9, 0),
        description="2 liters",
    )


def test_add_task_lenient_defaults(now: datetime) -> None:
    req = decode_action('{"action": "ADD_TASK", "title": "", "scheduledAt": "next tuesday"}', now=now)
    assert req == AddTask(title=DEFAULT_TASK_TITLE, scheduled_at=now, description="")

    req2 = decode_action('{"action": "ADD_TASK"}', now=now)
    assert req2 == AddTask(title=DEFAULT_TASK_TITLE, scheduled_at=now)


def test_list_tasks_status_filter() -> None:
    assert decode_action('{"action": "LIST_TASKS"}') == ListTasks(StatusFilter.ALL)
    assert decode_action('{"action": "LIST_TASKS", "status": "completed"}') == ListTasks(
        StatusFilter.COMPLETED
    )
    assert decode_action('{"action": "LIST_TASKS", "status": "Pending"}') == ListTasks(
        StatusFilter.PENDING
    )
    assert decode_action('{"action": "LIST_TASKS", "status": "overdue"}') == ListTasks(StatusFilter.ALL)


def test_delete_and_complete() -> None:
    assert decode_action('{"action": "DELETE_TASK", "taskIdentifier": "call mom"}') == DeleteTask(
        "call mom"
    )
    assert decode_action('{"action": "COMPLETE_TASK", "taskIdentifier": "milk"}') == CompleteTask("milk")


def test_missing_identifier_still_decodes() -> None:
    assert decode_action('{"action": "DELETE_TASK"}') == DeleteTask("")
    assert decode_action('{"action": "COMPLETE_TASK", "taskIdentifier": 42}') == CompleteTask("")


def test_none_action() -> None:
    assert decode_action('{"action": "NONE"}') == NoOp()


def test_discriminator_is_normalized() -> None:
    assert decode_action('{"action": " list_tasks "}') == ListTasks()


def test_unknown_action_is_a_failure_not_noop() -> None:
    with pytest.raises(ActionDecodeError) as ei:
        decode_action('{"action": "FROBNICATE"}')
    assert "FROBNICATE" in str(ei.value)
    assert ei.value.payload == '{"action": "FROBNICATE"}'


@pytest.mark.parametrize(
    "payload",
    [
        "not json at all",
        '{"action": "NONE"',
        '["ADD_TASK"]',
        "{}",
        '{"action": null}',
        '{"action": ""}',
    ],
)
def test_malformed_payloads_fail(payload: str) -> None:
    with pytest.raises(ActionDecodeError):
        decode_action(payload)


def test_parse_iso_datetime() -> None:
    assert parse_iso_datetime("2025-01-02T09:00:00") == datetime(2025, 1, 2, 9, 0)
    assert parse_iso_datetime("2025-01-02T09:00:00Z") == datetime(2025, 1, 2, 9, 0, tzinfo=UTC)
    assert parse_iso_datetime("tomorrow") is None
    assert parse_iso_datetime(None) is None
    assert parse_iso_datetime(20250102) is None


def test_identifier_is_kept_verbatim() -> None:
    assert decode_action('{"action": "DELETE_TASK", "taskIdentifier": "  Walk  "}') == DeleteTask(
        "  Walk  "
    )


def test_deeply_nested_payload_fails_cleanly() -> None:
    with pytest.raises(ActionDecodeError):
        decode_action("[" * 100000 + "]" * 100000)
