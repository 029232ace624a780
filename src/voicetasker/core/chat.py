# src/voicetasker/core/chat.py

"""
Core chat orchestration.

This module is transport-agnostic:
- connectors provide inbound text,
- the core builds the prompt (persona + current tasks) and streams LLM output,
- connectors decide how to display the stream (console, tests, ...).

Key invariants:
- the action directive is never forwarded to the user (streaming-safe filter),
- the directive is executed only after the stream completes cleanly, against
  the RAW model text, so an interrupted reply never mutates tasks,
- history is updated only after a clean completion (no partial saves).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..actions.extractor import DirectiveStripper
from ..actions.pipeline import process_turn
from .persona import get_system_prompt
from .ports import ChatMessage
from .state import AppState

logger = logging.getLogger(__name__)


def compose_reply(visible_text: str, fragment: str) -> str:
    """Append a result fragment after the (already stripped) reply text."""
    visible_text = (visible_text or "").strip()
    if not fragment:
        return visible_text
    if not visible_text:
        return fragment
    return f"{visible_text}\n\n{fragment}"


def _separator(visible_text: str) -> str:
    """Newlines needed so the fragment starts after exactly one blank line."""
    if not visible_text.strip():
        return ""
    trailing = len(visible_text) - len(visible_text.rstrip("\n"))
    return "\n" * max(0, 2 - trailing)


def _trim_history(history: list[ChatMessage], max_msgs: int) -> None:
    if max_msgs > 0 and len(history) > max_msgs:
        del history[: len(history) - max_msgs]


def stream_reply(state: AppState, user_text: str) -> Iterable[str]:
    """
    Transport-neutral streaming API.

    - Yields visible assistant text chunks as they arrive from the LLM client.
    - After the stream completes, runs the action pipeline on the full raw text
      and yields the result fragment (if any) as the last chunk.
    - Appends the turn to history when save_history is enabled.
    """
    history: list[ChatMessage] | None = state.conversation if state.save_history else None
    user_msg: ChatMessage = {"role": "user", "content": user_text}
    messages_for_llm: list[ChatMessage] = [*(history or []), user_msg]

    system_prompt = get_system_prompt(state.task_store.list_tasks())

    raw_full = ""
    visible = ""
    stripper = DirectiveStripper()

    for piece in state.llm.stream_chat(messages_for_llm, system_prompt):
        if not piece:
            continue
        raw_full += piece
        clean = stripper.feed(piece)
        if clean:
            visible += clean
            yield clean

    tail = stripper.flush()
    if tail:
        visible += tail
        yield tail

    # Decode failures are logged inside process_turn and leave fragment empty.
    result = process_turn(state.task_store, raw_full)
    logger.debug(
        "Reply complete raw_chars=%d visible_chars=%d action=%s",
        len(raw_full),
        len(visible),
        result.request.kind.value if result.request is not None else None,
    )
    if result.fragment:
        yield _separator(visible) + result.fragment

    assistant_full = compose_reply(visible, result.fragment)
    if history is not None and assistant_full:
        history.append(user_msg)
        history.append({"role": "assistant", "content": assistant_full})
        _trim_history(history, int(getattr(state.settings, "max_dialog_messages", 40)))


def generate_reply_text(state: AppState, user_text: str) -> str:
    """
    Non-streaming helper for connectors that want a full string.
    """
    out = ""
    for piece in stream_reply(state, user_text):
        out += piece
    return out.strip()
