from __future__ import annotations

import csv
from dataclasses import astuple, dataclass
from datetime import datetime
from pathlib import Path
from typing import TextIO

from moodly.config import MOOD_CHOICES
from moodly.prompt import collect_field
from moodly.utils.logger import log_event
from moodly.utils.paths import RuntimePaths, build_paths, resolve_data_dir
from moodly.utils.timeparse import (
    compact_date,
    compact_time,
    display_date,
    display_time,
    is_display_date,
    is_display_time,
    parse_date,
    parse_mood,
    parse_time,
)


CSV_LINETERMINATOR = "\n"


@dataclass(frozen=True)
class MoodEntry:
    date: str
    time: str
    mood: str
    description: str = ""

    def to_row(self) -> list[str]:
        return list(astuple(self))

    @classmethod
    def from_row(cls, row: list[str]) -> "MoodEntry":
        if len(row) != 4:
            raise ValueError(f"expected 4 fields (date, time, mood, description), got {len(row)}")
        date, time, mood, description = row
        if not is_display_date(date):
            raise ValueError(f"invalid date: {date!r}")
        if not is_display_time(time):
            raise ValueError(f"invalid time: {time!r}")
        if mood not in MOOD_CHOICES:
            raise ValueError(f"invalid mood: {mood!r}")
        return cls(date=date, time=time, mood=mood, description=description)


def _csv_writer(f: TextIO):
    return csv.writer(f, lineterminator=CSV_LINETERMINATOR)


def write_entry(f: TextIO, entry: MoodEntry) -> None:
    _csv_writer(f).writerow(entry.to_row())
    f.flush()


def append_entry(path: Path, entry: MoodEntry) -> None:
    with path.open("a", encoding="utf-8", newline="") as f:
        write_entry(f, entry)


def read_entries(path: Path) -> list[MoodEntry]:
    with path.open("r", encoding="utf-8", newline="") as f:
        return [MoodEntry.from_row(row) for row in csv.reader(f) if row]


def prompt_entry(
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    now: datetime | None = None,
) -> MoodEntry:
    now = now or datetime.now()
    io_kw = {"stdin": stdin, "stdout": stdout}

    date = collect_field(
        f"date (default: {compact_date(now)}): ",
        default=display_date(now),
        parser=parse_date,
        **io_kw,
    )
    time = collect_field(
        f"time (default: {compact_time(now)}): ",
        default=display_time(now),
        parser=parse_time,
        **io_kw,
    )
    mood = collect_field("mood (1-5): ", parser=parse_mood, **io_kw)
    description = collect_field("description (default: empty): ", default="", **io_kw)

    return MoodEntry(date=date, time=time, mood=mood, description=description)


def record(
    paths: RuntimePaths | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    now: datetime | None = None,
) -> MoodEntry:
    """Interactively record the user's current mood.

    The data file is opened (and created) before any prompt is shown, so a
    permission or disk problem is reported before the user types anything.
    """

    paths = paths or build_paths(resolve_data_dir())

    with paths.data_csv.open("a", encoding="utf-8", newline="") as f:
        entry = prompt_entry(stdin=stdin, stdout=stdout, now=now)
        write_entry(f, entry)

    log_event(
        level="INFO",
        component="Record",
        event="entry_recorded",
        message="mood entry appended",
        file=str(paths.data_csv),
        date=entry.date,
        time=entry.time,
        mood=entry.mood,
    )
    return entry
