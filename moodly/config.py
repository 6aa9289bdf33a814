from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv


VERSION = "0.1.0"

# Data file layout
MOODLY_DIR_NAME = "moodly"
DATA_CSV_FNAME = "moodly_data.csv"
DATA_DIR_PATH_ENV_KEY = "MOODLY_DIR"

# strftime patterns: compact forms are typed by the user, display forms are stored
DATE_FMT_IN = "%Y%m%d"
TIME_FMT_IN = "%H%M"
DATE_FMT_OUT = "%Y-%m-%d"
TIME_FMT_OUT = "%H:%M"

MOOD_CHOICES = ("1", "2", "3", "4", "5")

TAIL_CHUNK_SIZE = 0x2000


@dataclass(frozen=True)
class Config:
    # None when MOODLY_DIR is absent; any present value is used verbatim
    data_dir_override: str | None = None

    log_level: str = "INFO"
    log_enabled: bool = True

    tail_default: int = 10
    tail_chunk_size: int = TAIL_CHUNK_SIZE


def _get_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_int(name: str, default: int, *, min_value: int = 0) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        v = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer (got {raw!r})")
    if v < min_value:
        raise RuntimeError(f"{name} must be >= {min_value} (got {v})")
    return v


def load_config() -> Config:
    load_dotenv(override=False)

    return Config(
        data_dir_override=os.environ.get(DATA_DIR_PATH_ENV_KEY),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_enabled=_get_bool("MOODLY_LOG_ENABLED", True),
        tail_default=_get_int("MOODLY_TAIL_DEFAULT", 10),
        tail_chunk_size=_get_int("MOODLY_TAIL_CHUNK_SIZE", TAIL_CHUNK_SIZE, min_value=1),
    )
