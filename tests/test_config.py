# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from voicetasker.cli.bootstrap import create_initial_state
from voicetasker.config import Settings
from voicetasker.llm.offline import OfflineLLMClient


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "VOICETASKER_OPENROUTER_API_KEY",
        "OPENROUTER_API_KEY",
        "VOICETASKER_LLM_MODELS",
        "VOICETASKER_SAVE_HISTORY",
        "VOICETASKER_MAX_DIALOG_MESSAGES",
        "VOICETASKER_LLM_FIRST_TOKEN_TIMEOUT_SECONDS",
        "VOICETASKER_LLM_READ_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_from_env(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("VOICETASKER_LLM_MODELS", "a/one, b/two")
    clean_env.setenv("VOICETASKER_SAVE_HISTORY", "no")
    clean_env.setenv("VOICETASKER_MAX_DIALOG_MESSAGES", "not-a-number")
    clean_env.setenv("VOICETASKER_DATA_DIR", str(tmp_path))
    clean_env.setenv("VOICETASKER_LLM_FIRST_TOKEN_TIMEOUT_SECONDS", "30")
    clean_env.setenv("VOICETASKER_LLM_READ_TIMEOUT_SECONDS", "10")

    s = Settings.from_env()

    assert s.llm_models == ["a/one", "b/two"]
    assert s.save_history is False
    assert s.max_dialog_messages == 40
    assert s.data_dir == tmp_path
    assert s.openrouter_api_key is None
    assert s.llm_read_timeout == 30.0


def test_bootstrap_falls_back_to_offline_client(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("VOICETASKER_DATA_DIR", str(tmp_path / "data"))

    state = create_initial_state(settings=Settings.from_env())

    assert isinstance(state.llm, OfflineLLMClient)
    assert state.task_store.count_tasks() == 0
    assert (tmp_path / "data").is_dir()
