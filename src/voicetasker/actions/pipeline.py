# src/voicetasker/actions/pipeline.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ..tasks.task_store import TaskStore
from .decoder import decode_action
from .executor import execute_action
from .extractor import extract_directive
from .models import ActionDecodeError, ActionRequest

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class TurnResult:
    """
    Outcome of processing one model reply.

    - request is None when no directive was present or it failed to decode;
    - error is set only for decode failures (never shown to the user);
    - fragment is "" whenever nothing user-visible should be appended.
    """

    request: ActionRequest | None
    fragment: str
    error: ActionDecodeError | None = None


def process_turn(store: TaskStore, text: str, *, now: datetime | None = None) -> TurnResult:
    """
    Extract -> decode -> execute for a single reply.

    Never raises for a bad directive: the worst outcome is a turn with no action.
    """
    payload = extract_directive(text)
    if payload is None:
        logger.debug("No action directive in reply.")
        return TurnResult(request=None, fragment="")

    try:
        request = decode_action(payload, now=now)
    except ActionDecodeError as e:
        logger.warning("Action directive rejected: %s. Payload=%r", e.reason, payload[:500])
        return TurnResult(request=None, fragment="", error=e)

    fragment = execute_action(store, request, now=now)
    logger.info("Action executed: %s", request.kind.value)
    return TurnResult(request=request, fragment=fragment)
