"""CLI entry point for moodly, a terminal mood-tracking program.

  moodly                 Record your current mood interactively
  moodly tail [-n N]     Print the most recent N entries (default 10)
  moodly dump            Print the whole mood CSV (try `moodly dump | less`)
  moodly where           Print the path to the moodly data directory
"""

from __future__ import annotations

import argparse
import os
import sys

from moodly.config import VERSION, Config, load_config
from moodly.record import record
from moodly.utils.head import print_head
from moodly.utils.logger import get_logger, init_logger, log_event, reset_logger
from moodly.utils.paths import RuntimePaths, build_paths, resolve_data_dir
from moodly.utils.tail import print_tail


def _count(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"count must be >= 0 (got {n})")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="moodly",
        description="A terminal mood-tracking program. Run with no command to track your current mood.",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    sub = ap.add_subparsers(dest="command", metavar="COMMAND")

    p_tail = sub.add_parser("tail", help="Print the most recent few entries to stdout")
    p_tail.add_argument("-n", dest="n", type=_count, default=None, help="Number of entries to print (default: 10)")

    sub.add_parser(
        "dump",
        help="Dump the entire mood recording csv file to stdout",
        description="Dump the entire mood recording csv file to stdout. Consider paging the output, e.g. with `moodly dump | less`.",
    )
    sub.add_parser("where", help="Print the path to the moodly data directory")
    return ap


def _init_runtime(cfg: Config) -> RuntimePaths:
    paths = build_paths(resolve_data_dir(cfg))
    if cfg.log_enabled:
        init_logger(logs_root=paths.logs_dir, min_level=cfg.log_level)
    return paths


def run(cfg: Config, args: argparse.Namespace) -> int:
    paths = _init_runtime(cfg)
    command = args.command or "record"
    log_event(level="DEBUG", component="Cli", event="command_start", message=command, data_dir=str(paths.data_dir))

    if command == "tail":
        n = cfg.tail_default if args.n is None else args.n
        print_tail(paths.data_csv, n, chunk_size=cfg.tail_chunk_size)
    elif command == "dump":
        print_head(paths.data_csv, None)
    elif command == "where":
        print(paths.data_dir)
    else:
        record(paths)

    return 0


def _silence_stdout() -> None:
    # the reader went away (e.g. `moodly dump | head`); keep interpreter shutdown from complaining
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config()
        return run(cfg, args)
    except (KeyboardInterrupt, EOFError):
        return 0
    except BrokenPipeError:
        _silence_stdout()
        return 0
    except (OSError, RuntimeError) as e:
        lg = get_logger()
        if lg:
            lg.exception(level="ERROR", component="Cli", event="command_failed", message=str(e), exc=e, command=args.command or "record")
        print(f"Encountered an error: {e}", file=sys.stderr)
        return 1
    finally:
        reset_logger()


if __name__ == "__main__":
    raise SystemExit(main())
