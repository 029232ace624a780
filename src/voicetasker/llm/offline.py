# src/voicetasker/llm/offline.py

from __future__ import annotations

import re
from collections.abc import Iterable

from ..actions.extractor import wrap_directive
from ..core.ports import ChatMessage

_LIST_RE = re.compile(r"(?i)\b(show|list|what are)\b.*\btasks?\b")


class OfflineLLMClient:
    """
    Offline deterministic LLM client used for demos when no external API is configured.

    Behavior:
    - "show/list ... tasks" -> a LIST_TASKS directive (so the pipeline still runs)
    - anything else -> a friendly offline note + a NONE directive
    """

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        user_text = ""
        for m in reversed(messages):
            if m["role"] == "user":
                user_text = m["content"]
                break

        if _LIST_RE.search(user_text):
            yield "Here are your tasks (offline mode).\n\n"
            yield wrap_directive('{"action": "LIST_TASKS"}')
            return

        yield (
            "Offline demo mode: no external LLM is configured.\n"
            "Set VOICETASKER_OPENROUTER_API_KEY (and VOICETASKER_LLM_MODELS) to enable real responses.\n\n"
            f"You said: {user_text}\n\n"
        )
        yield wrap_directive('{"action": "NONE"}')
