# src/voicetasker/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import ChatMessage, LLMClient


@dataclass
class AppState:
    """
    Everything one agent session owns.

    The task store lives here (not in a module global), so independent
    sessions never share tasks and tests get a fresh store per state.
    """

    settings: Any
    llm: LLMClient
    task_store: TaskStore
    save_history: bool = True

    conversation: list[ChatMessage] = field(default_factory=list)
    # Serializes whole turns when several connectors share one session.
    lock: threading.RLock = field(default_factory=threading.RLock)
