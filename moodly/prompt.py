from __future__ import annotations

import sys
from typing import TextIO

from moodly.utils.timeparse import Parser


DEFAULT_RETRY_PROMPT = "reenter "


def _identity(s: str) -> str | None:
    return s


def _read_answer(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError("stdin closed while waiting for input")
    return line.strip()


def collect_field(
    prompt: str,
    default: str | None = None,
    retry_prompt: str | None = None,
    parser: Parser | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Prompt for one value until it parses.

    The prompt is written once, without a newline. An empty answer returns
    ``default`` as-is when one is given (the parser is not run on it);
    otherwise the answer goes through ``parser`` and a None result writes
    ``retry_prompt`` and reads again. There is no attempt limit: the loop
    ends on a valid answer, or with ``EOFError`` when stdin runs dry.
    """

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    retry_prompt = DEFAULT_RETRY_PROMPT if retry_prompt is None else retry_prompt
    parse = parser or _identity

    stdout.write(prompt)
    stdout.flush()

    while True:
        ans = _read_answer(stdin)

        if not ans and default is not None:
            return default

        parsed = parse(ans)
        if parsed is not None:
            return parsed

        stdout.write(retry_prompt)
        stdout.flush()
