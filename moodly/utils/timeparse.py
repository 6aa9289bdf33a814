from __future__ import annotations

import re
from datetime import datetime
from typing import Callable, Optional

from moodly.config import DATE_FMT_IN, DATE_FMT_OUT, MOOD_CHOICES, TIME_FMT_IN, TIME_FMT_OUT


Parser = Callable[[str], Optional[str]]

# strptime alone accepts single-digit fields ("2024115"), so pin the width first
_COMPACT_DATE_RE = re.compile(r"\d{8}")
_COMPACT_TIME_RE = re.compile(r"\d{4}")


def parse_date(s: str) -> str | None:
    """``YYYYMMDD`` -> ``YYYY-MM-DD``, or None if it isn't a real date."""

    if not _COMPACT_DATE_RE.fullmatch(s):
        return None
    try:
        d = datetime.strptime(s, DATE_FMT_IN).date()
    except ValueError:
        return None
    return d.strftime(DATE_FMT_OUT)


def parse_time(s: str) -> str | None:
    """24-hour ``HHMM`` -> ``HH:MM``, or None."""

    if not _COMPACT_TIME_RE.fullmatch(s):
        return None
    try:
        t = datetime.strptime(s, TIME_FMT_IN).time()
    except ValueError:
        return None
    return t.strftime(TIME_FMT_OUT)


def parse_mood(s: str) -> str | None:
    if s in MOOD_CHOICES:
        return s
    return None


def compact_date(now: datetime) -> str:
    return now.strftime(DATE_FMT_IN)


def compact_time(now: datetime) -> str:
    return now.strftime(TIME_FMT_IN)


def display_date(now: datetime) -> str:
    return now.strftime(DATE_FMT_OUT)


def display_time(now: datetime) -> str:
    return now.strftime(TIME_FMT_OUT)


def is_display_date(s: str) -> bool:
    try:
        return datetime.strptime(s, DATE_FMT_OUT).strftime(DATE_FMT_OUT) == s
    except ValueError:
        return False


def is_display_time(s: str) -> bool:
    try:
        return datetime.strptime(s, TIME_FMT_OUT).strftime(TIME_FMT_OUT) == s
    except ValueError:
        return False
