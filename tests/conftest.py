# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest

from voicetasker.core.state import AppState
from voicetasker.tasks.task_store import TaskStore

from .fakes import FakeLLMClient


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="VoiceTasker",
        llm_models=["fake/model"],
        save_history=True,
        max_dialog_messages=6,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def now() -> datetime:
    return datetime(2025, 1, 1, 12, 0)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a fake LLM and a fresh in-memory store."""
    return AppState(
        settings=settings,
        llm=FakeLLMClient(),
        task_store=store,
        save_history=True,
    )
