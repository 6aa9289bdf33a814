from __future__ import annotations

import pytest

from moodly.config import load_config


def test_defaults():
    cfg = load_config()
    assert cfg.data_dir_override is None
    assert cfg.log_level == "INFO"
    assert cfg.log_enabled is True
    assert cfg.tail_default == 10
    assert cfg.tail_chunk_size == 8192


def test_env_values(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MOODLY_DIR", "  /tmp/somewhere ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("MOODLY_LOG_ENABLED", "off")
    monkeypatch.setenv("MOODLY_TAIL_DEFAULT", "3")
    monkeypatch.setenv("MOODLY_TAIL_CHUNK_SIZE", "16")

    cfg = load_config()
    assert cfg.data_dir_override == "  /tmp/somewhere "
    assert cfg.log_level == "DEBUG"
    assert cfg.log_enabled is False
    assert cfg.tail_default == 3
    assert cfg.tail_chunk_size == 16


def test_invalid_ints_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MOODLY_TAIL_DEFAULT", "ten")
    with pytest.raises(RuntimeError):
        load_config()

    monkeypatch.setenv("MOODLY_TAIL_DEFAULT", "10")
    monkeypatch.setenv("MOODLY_TAIL_CHUNK_SIZE", "0")
    with pytest.raises(RuntimeError):
        load_config()
