# int_fixtures/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .__about__ import APP_NAME, APP_TITLE, about_text
from .logic import (
    SAMPLE_WINDOW,
    STYLES,
    WIDTHS,
    check_table_args,
    write_table,
)

_LOGGER = logging.getLogger(__name__)

USAGE = "usage: write-ints [8|16|32|64]"
LOG_FORMAT = "write-ints: %(levelname)s: %(message)s"

_log_handler: logging.Handler | None = None


# ---------- helpers ----------
class FixtureArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose errors print the fixed usage line and exit with status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.exit(1, f"{USAGE}\n")

def _configure_logging(verbose: bool) -> None:
    # Package logger only; a fresh handler each run so it follows the current sys.stderr
    global _log_handler
    pkg_logger = logging.getLogger("int_fixtures")
    if _log_handler is not None:
        pkg_logger.removeHandler(_log_handler)
    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(_log_handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    # No -h/--help: anything but a width gets the usage line
    p = FixtureArgumentParser(
        prog=APP_NAME,
        description=APP_TITLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    p.add_argument("--version", action="version", version=about_text())
    p.add_argument(
        "width", choices=[str(w) for w in WIDTHS],
        help="integer width in bits",
    )
    p.add_argument(
        "-o", "--output", type=Path, default=None,
        help="write the table to a file instead of standard output",
    )
    p.add_argument(
        "--window", type=int, default=SAMPLE_WINDOW,
        help=f"values per boundary window for 32/64-bit tables (default: {SAMPLE_WINDOW})",
    )
    p.add_argument(
        "--style", choices=STYLES, default="plain",
        help="entry style: plain '0xKEY: VALUE' or bigint '[0xKEYn]: VALUEn' (default: plain)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    _configure_logging(args.verbose)

    if extra:
        _LOGGER.warning("ignoring extra arguments: %s", " ".join(extra))

    bits = int(args.width)
    try:
        check_table_args(bits, args.window, args.style)
    except ValueError as exc:
        _LOGGER.debug("invalid table options: %s", exc)
        parser.error(str(exc))

    if args.output is None:
        count = write_table(sys.stdout, bits, args.window, args.style)
        sys.stdout.flush()
        _LOGGER.info("wrote %d entries to stdout", count)
    else:
        try:
            with args.output.open("w", encoding="utf-8", newline="\n") as fh:
                count = write_table(fh, bits, args.window, args.style)
        except OSError as exc:
            _LOGGER.error("cannot write %s: %s", args.output, exc.strerror or exc)
            return 1
        _LOGGER.info("wrote %d entries to %s", count, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
