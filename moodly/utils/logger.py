from __future__ import annotations

import gzip
import json
import traceback
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any


LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def _ts() -> str:
    return _utc_now().isoformat().replace("+00:00", "Z")


def _level_num(level: str) -> int:
    return LEVELS.get(level.upper(), 20)


def _safe_json(obj: dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, default=str)


@dataclass
class _RotatingFile:
    path: Path
    max_bytes: int = 1024 * 1024
    keep_days: int = 30

    def _should_rotate(self) -> bool:
        try:
            st = self.path.stat()
        except FileNotFoundError:
            return False
        if st.st_size >= self.max_bytes:
            return True
        # daily rotation: rotate if file mtime date != today
        m = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc).date()
        return m != _utc_now().date()

    def _rotate(self) -> None:
        ts = _utc_now().strftime("%Y%m%d-%H%M%S")
        rotated = self.path.with_suffix(self.path.suffix + f".{ts}")
        self.path.rename(rotated)

        gz_path = rotated.with_suffix(rotated.suffix + ".gz")
        with rotated.open("rb") as f_in, gzip.open(gz_path, "wb") as f_out:
            f_out.writelines(f_in)
        rotated.unlink(missing_ok=True)

        self._cleanup()

    def _cleanup(self) -> None:
        cutoff = _utc_now() - timedelta(days=int(self.keep_days))
        for p in self.path.parent.glob(self.path.name + ".*.gz"):
            m = datetime.fromtimestamp(p.stat().st_mtime, tz=timezone.utc)
            if m < cutoff:
                p.unlink(missing_ok=True)

    def write_line(self, line: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self._should_rotate():
            self._rotate()
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line)
            f.write("\n")


class StructuredLogger:
    """JSON-lines logger for the moodly data directory.

    Every record goes to ``moodly.log``; ERROR and CRITICAL records are also
    copied to ``errors.log``. Nothing is ever written to stdout or stderr, since
    those belong to the interactive prompts and command output.
    """

    def __init__(self, *, logs_root: Path, min_level: str = "INFO"):
        self.logs_root = logs_root
        self.min_level = min_level.upper()

        self._files = {
            "system": _RotatingFile(logs_root / "moodly.log"),
            "errors": _RotatingFile(logs_root / "errors.log"),
        }

    def log(
        self,
        *,
        level: str,
        component: str,
        event: str,
        message: str,
        details: dict[str, Any] | None = None,
        **fields: Any,
    ) -> None:
        lvl = level.upper()
        if _level_num(lvl) < _level_num(self.min_level):
            return

        rec: dict[str, Any] = {
            "timestamp": _ts(),
            "level": lvl,
            "component": component,
            "event": event,
            "message": message,
        }
        if details is not None:
            rec["details"] = details
        if fields:
            rec.update(fields)

        line = _safe_json(rec)
        try:
            self._files["system"].write_line(line)
            if lvl in {"ERROR", "CRITICAL"}:
                self._files["errors"].write_line(line)
        except OSError:
            # never crash a command on logging
            return

    def exception(
        self,
        *,
        level: str,
        component: str,
        event: str,
        message: str,
        exc: BaseException | None = None,
        **fields: Any,
    ) -> None:
        tb = traceback.format_exc() if exc is None else "".join(traceback.format_exception(exc))
        self.log(
            level=level,
            component=component,
            event=event,
            message=message,
            details={"traceback": tb},
            **fields,
        )


_LOGGER: StructuredLogger | None = None


def init_logger(*, logs_root: Path, min_level: str = "INFO") -> StructuredLogger:
    global _LOGGER
    _LOGGER = StructuredLogger(logs_root=logs_root, min_level=min_level)
    return _LOGGER


def get_logger() -> StructuredLogger | None:
    return _LOGGER


def reset_logger() -> None:
    global _LOGGER
    _LOGGER = None


def log_event(*, level: str, component: str, event: str, message: str, **fields: Any) -> None:
    lg = _LOGGER
    if lg is None:
        return
    lg.log(level=level, component=component, event=event, message=message, **fields)
