# src/voicetasker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires concrete implementations into AppState (LLM client + a fresh task store).

The task store is volatile: every AppState starts empty.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import LLMClient
from ..core.state import AppState
from ..llm.client import OpenRouterLLMClient
from ..llm.offline import OfflineLLMClient
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    llm_client: LLMClient
    try:
        llm_client = OpenRouterLLMClient(settings)
    except RuntimeError as e:
        # Fallback for demos / local runs without external services.
        logger.warning("LLM client unavailable (%s); using offline demo client.", e)
        llm_client = OfflineLLMClient()

    return AppState(
        settings=settings,
        llm=llm_client,
        task_store=TaskStore(),
        save_history=settings.save_history,
    )
