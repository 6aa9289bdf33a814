from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import moodly` works without an install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from moodly.utils.logger import reset_logger  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for k in ("MOODLY_DIR", "LOG_LEVEL", "MOODLY_LOG_ENABLED", "MOODLY_TAIL_DEFAULT", "MOODLY_TAIL_CHUNK_SIZE"):
        monkeypatch.delenv(k, raising=False)
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def moodly_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "home"
    monkeypatch.setenv("MOODLY_DIR", str(root))
    return root
