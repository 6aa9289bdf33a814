from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

from moodly.config import DATA_CSV_FNAME, MOODLY_DIR_NAME, Config, load_config


class DataDirNotFoundError(FileNotFoundError):
    """No override and no platform data directory to put moodly data in."""


@dataclass(frozen=True)
class RuntimePaths:
    data_dir: Path
    data_csv: Path
    logs_dir: Path


def _platform_data_dir() -> Path | None:
    # non-roaming: %LOCALAPPDATA% on Windows, ~/.local/share on Linux
    base = user_data_dir(roaming=False)
    if not base:
        return None
    return Path(base)


def resolve_data_dir(cfg: Config | None = None) -> Path:
    """Return the moodly data directory, creating it if it doesn't exist.

    Looks at the ``MOODLY_DIR`` override first, then the platform's per-user
    local data directory. The result looks something like
    ``/home/alice/.local/share/moodly``.
    """

    cfg = cfg or load_config()

    if cfg.data_dir_override is not None:
        root: Path | None = Path(cfg.data_dir_override)
    else:
        root = _platform_data_dir()

    if root is None:
        raise DataDirNotFoundError("data file could not be found.")

    d = root / MOODLY_DIR_NAME
    d.mkdir(parents=True, exist_ok=True)
    return d


def build_paths(data_dir: Path) -> RuntimePaths:
    root = Path(data_dir)
    return RuntimePaths(
        data_dir=root,
        data_csv=root / DATA_CSV_FNAME,
        logs_dir=root / "logs",
    )