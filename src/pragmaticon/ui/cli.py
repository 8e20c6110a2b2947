from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pragmaticon.app import ingest_corpus
from pragmaticon.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ValueError(message)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = _ArgumentParser(
        prog="pragmaticon",
        description="Load the discourse-formula corpus into the database",
    )
    parser.add_argument("path", type=Path, help="CSV export of the corpus")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Where to write the per-column frequency report (defaults to config)",
    )
    return parser.parse_args(list(argv))


def _validate_path(path: Path) -> Path:
    if not path.is_file():
        raise ValueError(f"Corpus file not found: {path}")
    return path


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        path = _validate_path(parsed_args.path)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        print("Usage: pragmaticon PATH [--report REPORT]", file=sys.stderr)  # noqa: T201
        sys.exit(2)

    try:
        result = ingest_corpus(path, report_path=parsed_args.report)
    except Exception:
        log.exception("Fatal error during ingest")
        sys.exit(1)

    log.info(
        "Ingest finished: rows=%s, units=%s, failed=%s, issues=%s",
        result.counters.rows,
        result.counters.units_written,
        result.counters.units_failed,
        result.issue_counts(),
    )


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
