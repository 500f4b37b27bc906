from __future__ import annotations

import pytest

from vim_textarea import EditorMode, EngineConfig, ModalEngine
from vim_textarea.config import MIN_WIDTH


def test_defaults() -> None:
    config = EngineConfig()

    assert config.width == 40
    assert config.initial_mode is EditorMode.NORMAL
    assert config.char_limit > 0


def test_width_and_height_are_clamped() -> None:
    config = EngineConfig(width=1, height=500, max_width=80, max_height=10)

    assert config.width == MIN_WIDTH
    assert config.height == 10


def test_zero_char_limit_disables_limit() -> None:
    engine = ModalEngine(EngineConfig(char_limit=0))

    assert engine.buffer.has_char_limit is False
    assert engine.buffer.insert("x" * 5000) is True
    assert engine.buffer.length() == 5000


def test_invalid_history_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        EngineConfig(history_limit=0)


def test_from_env_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIM_TEXTAREA_WIDTH", "60")
    monkeypatch.setenv("VIM_TEXTAREA_CHAR_LIMIT", "1000")
    monkeypatch.setenv("VIM_TEXTAREA_INITIAL_MODE", "Insert")

    config = EngineConfig.from_env()

    assert config.width == 60
    assert config.char_limit == 1000
    assert config.initial_mode is EditorMode.INSERT


def test_from_env_ignores_malformed_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIM_TEXTAREA_WIDTH", "wide")
    monkeypatch.setenv("VIM_TEXTAREA_INITIAL_MODE", "visual")

    config = EngineConfig.from_env(height=3)

    assert config.width == 40
    assert config.height == 3
    assert config.initial_mode is EditorMode.NORMAL
