from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from moodly.config import TAIL_CHUNK_SIZE
from moodly.utils.logger import log_event


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def tail_lines(path: Path, limit: int = 10, chunk_size: int = TAIL_CHUNK_SIZE) -> list[str]:
    """Tail the last N lines of a text file without reading the whole file.

    Chunks are read backwards from the end until more than ``limit`` newlines
    have been seen (or the start of the file is reached), so the text before
    the first counted newline, which may be a partial line, is never part of
    the result when the scan stopped early. The accumulated bytes are decoded
    with replacement; a multi-byte character cut by the first chunk boundary
    can only land in that discarded partial line.
    """

    limit = int(limit)
    if limit <= 0:
        return []

    with path.open("rb") as f:
        # size from seeking, not stat(): some filesystems report st_size != readable bytes
        size = f.seek(0, os.SEEK_END)
        if size == 0:
            return []

        buf = b""
        pos = size
        newlines = 0

        while pos > 0 and newlines <= limit:
            read_size = min(chunk_size, pos)
            pos -= read_size
            f.seek(pos)
            data = f.read(read_size)
            newlines += data.count(b"\n")
            buf = data + buf

    lines = _split_lines(buf.decode("utf-8", errors="replace"))

    # Take last N lines
    return lines[-limit:]


def print_tail(path: Path, limit: int = 10, *, chunk_size: int = TAIL_CHUNK_SIZE, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    lines = tail_lines(path, limit=limit, chunk_size=chunk_size)
    for line in lines:
        out.write(line)
        out.write("\n")
    out.flush()

    log_event(level="DEBUG", component="Tail", event="tail_printed", message="printed tail", file=str(path), requested=limit, printed=len(lines))
    return len(lines)