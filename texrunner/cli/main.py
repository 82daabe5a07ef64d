"""Main CLI entry point for texrunner."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from .log_cli import build_log_parser
from .measure_cli import build_box_parser, build_dimen_parser


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="texrunner",
        description="Structured diagnostics from TeX engine output",
    )
    parser.add_argument("--version", action="version", version=f"texrunner {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log parser progress to stderr",
    )
    parser.add_argument(
        "--config", default=None,
        help="YAML configuration file (default: $TEXRUNNER_CONFIG or "
             "~/.config/texrunner/config.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command")
    build_log_parser(subparsers)
    build_box_parser(subparsers)
    build_dimen_parser(subparsers)
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        return 0
    return args.func(args)


def cli_entry() -> None:
    sys.exit(main())
