from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from moodly.config import VERSION
from moodly.main import build_parser, main


def _data_csv(root: Path) -> Path:
    return root / "moodly" / "moodly_data.csv"


def _seed(root: Path, n: int) -> list[str]:
    rows = [f"2024-01-{i:02d},09:30,{i % 5 + 1}," for i in range(1, n + 1)]
    p = _data_csv(root)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(r + "\n" for r in rows), encoding="utf-8")
    return rows


def test_where_prints_existing_dir(moodly_root: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["where"]) == 0

    out = capsys.readouterr().out.strip()
    assert Path(out) == moodly_root / "moodly"
    assert Path(out).is_dir()


def test_tail_default_count(moodly_root: Path, capsys: pytest.CaptureFixture[str]):
    rows = _seed(moodly_root, 15)

    assert main(["tail"]) == 0
    assert capsys.readouterr().out.splitlines() == rows[-10:]


def test_tail_with_count(moodly_root: Path, capsys: pytest.CaptureFixture[str]):
    rows = _seed(moodly_root, 15)

    assert main(["tail", "-n", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == rows[-3:]

    assert main(["tail", "-n", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_tail_default_from_env(moodly_root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    rows = _seed(moodly_root, 15)
    monkeypatch.setenv("MOODLY_TAIL_DEFAULT", "2")

    assert main(["tail"]) == 0
    assert capsys.readouterr().out.splitlines() == rows[-2:]


def test_negative_count_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["tail", "-n", "-1"])
    assert exc.value.code == 2


def test_dump_prints_everything(moodly_root: Path, capsys: pytest.CaptureFixture[str]):
    rows = _seed(moodly_root, 25)

    assert main(["dump"]) == 0
    assert capsys.readouterr().out.splitlines() == rows


def test_tail_before_first_record_is_an_error(moodly_root: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["tail"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Encountered an error:")

    errors = moodly_root / "moodly" / "logs" / "errors.log"
    rec = json.loads(errors.read_text(encoding="utf-8").splitlines()[0])
    assert rec["event"] == "command_failed"
    assert rec["command"] == "tail"


def test_dump_before_first_record_is_an_error(moodly_root: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["dump"]) == 1
    assert "Encountered an error:" in capsys.readouterr().err


def test_record_flow(moodly_root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setattr("sys.stdin", io.StringIO("20240115\n0930\n4\nfine\n"))

    assert main([]) == 0
    assert _data_csv(moodly_root).read_text(encoding="utf-8") == "2024-01-15,09:30,4,fine\n"
    assert "mood (1-5): " in capsys.readouterr().out

    log = moodly_root / "moodly" / "logs" / "moodly.log"
    events = [json.loads(line)["event"] for line in log.read_text(encoding="utf-8").splitlines()]
    assert "entry_recorded" in events


def test_record_eof_exits_cleanly(moodly_root: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("20240115\n"))

    assert main([]) == 0
    assert _data_csv(moodly_root).read_text(encoding="utf-8") == ""


def test_interrupt_exits_zero(moodly_root: Path, monkeypatch: pytest.MonkeyPatch):
    def _interrupt(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr("moodly.main.record", _interrupt)
    assert main([]) == 0


def test_missing_data_dir_is_an_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setattr("moodly.utils.paths._platform_data_dir", lambda: None)

    assert main(["where"]) == 1
    assert "data file could not be found." in capsys.readouterr().err


def test_version(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert VERSION in capsys.readouterr().out
