"""Command-line front door for jsonnav.

Parses CLI options, reads the document from a file or stdin, and launches
the interactive browser. Load failures exit with status 1.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .document import read_document
from .errors import DocumentLoadError
from .runtime import run_browser
from .runtime.config import resolve_settings
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(log_file: str | None) -> None:
    """Route package logs to ``log_file``; stay silent otherwise.

    The terminal belongs to the UI, so nothing is ever logged to stderr.
    Calling it again does not stack handlers. Raises ``OSError`` when
    ``log_file`` cannot be opened.
    """
    package_logger = logging.getLogger("jsonnav")
    if log_file is None:
        if not package_logger.handlers:
            package_logger.addHandler(logging.NullHandler())
        return
    target = os.path.abspath(log_file)
    for existing in package_logger.handlers:
        if isinstance(existing, logging.FileHandler) and existing.baseFilename == target:
            return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonnav",
        description="Browse a JSON document one level at a time in the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="JSON file to browse. Reads stdin when omitted or '-'.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for value colors.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--sort-keys", action="store_true", help="List object keys sorted instead of in document order.")
    parser.add_argument("--dots", action="store_true", help="Show the page indicator as dots.")
    parser.add_argument("--nopager", action="store_true", help="Print the top level once without interactive paging.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and browse the requested document."""
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_file)
    except OSError as exc:
        sys.stderr.write(f"jsonnav: cannot open log file: {exc}\n")
        raise SystemExit(1) from exc

    path = None if args.path in {None, "-"} else Path(args.path)
    settings = resolve_settings(
        theme=args.theme,
        style=args.style,
        sort_keys=args.sort_keys,
        dots=args.dots,
        no_color=args.no_color,
    )
    try:
        document = read_document(path, sys.stdin.buffer)
        run_browser(document, settings, stdin_consumed=path is None, nopager=args.nopager)
    except DocumentLoadError as exc:
        logger.error("%s", exc)
        sys.stderr.write(f"jsonnav: {exc}\n")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
