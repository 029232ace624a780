# src/voicetasker/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps LLM providers swappable and makes testing easier.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class LLMClient(Protocol):
    """Streaming chat completion client (OpenAI/OpenRouter-compatible)."""

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]: ...
