from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, TextIO

from moodly.utils.logger import log_event


def head_lines(path: Path, limit: int | None = None) -> Iterator[str]:
    """Yield lines from the start of ``path``, stopping before index ``limit``.

    Only ``\\n`` ends a line and a trailing ``\\r`` is dropped, matching
    ``tail_lines``. One line is held in memory at a time.
    """

    with path.open("r", encoding="utf-8", errors="replace", newline="\n") as f:
        for i, line in enumerate(f):
            if limit is not None and i == limit:
                break
            line = line[:-1] if line.endswith("\n") else line
            yield line[:-1] if line.endswith("\r") else line


def print_head(path: Path, limit: int | None = None, *, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    n = 0
    # sys.stdout is already a buffered writer; flush once at the end
    for line in head_lines(path, limit=limit):
        out.write(line)
        out.write("\n")
        n += 1
    out.flush()

    log_event(level="DEBUG", component="Dump", event="head_printed", message="printed head", file=str(path), limit=limit, printed=n)
    return n
