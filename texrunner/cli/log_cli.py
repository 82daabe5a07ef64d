"""
CLI command for summarising an engine transcript.

Usage:
    texrunner log build/paper.log
    pdflatex -interaction=nonstopmode paper.tex | texrunner log - --json

Exit status is 0 for a clean log, 1 when errors were found and 2 when
the input or configuration could not be read.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from typing import Any

from ..config import ParserConfig
from ..exceptions import ConfigError
from ..log import format_errors, parse_log, scan_bad_boxes
from ..types import TeXError, TeXLog
from .common import config_from_args, read_input


def _error_to_dict(err: TeXError, encoding: str) -> dict[str, Any]:
    record: dict[str, Any] = {"type": type(err).__name__}
    for f in dataclasses.fields(err):  # type: ignore[arg-type]
        value = getattr(err, f.name)
        if isinstance(value, bytes):
            value = value.decode(encoding, errors="replace")
        record[f.name] = value
    record["description"] = err.describe(encoding)
    return record


def log_to_dict(
    log: TeXLog,
    config: ParserConfig,
    bad_boxes: list[TeXError] | None = None,
) -> dict[str, Any]:
    """JSON-ready representation of a parsed log."""
    enc = config.encoding
    result: dict[str, Any] = {
        "program_identity": (
            log.program_identity.decode(enc, errors="replace")
            if log.program_identity is not None else None
        ),
        "page_count": log.page_count,
        "errors": [_error_to_dict(e, enc) for e in log.errors],
    }
    if bad_boxes is not None:
        result["bad_boxes"] = [_error_to_dict(b, enc) for b in bad_boxes]
    return result


def cmd_log(args: argparse.Namespace) -> int:
    """Main handler for ``texrunner log``."""
    try:
        config = config_from_args(args)
        data = read_input(args.log_file)
    except (ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    log = parse_log(data)
    bad_boxes = None
    if args.bad_boxes or config.show_bad_boxes:
        bad_boxes = scan_bad_boxes(data)

    if args.json:
        print(json.dumps(log_to_dict(log, config, bad_boxes), indent=2))
    else:
        enc = config.encoding
        if log.program_identity is not None:
            print(f"Program: {log.program_identity.decode(enc, errors='replace')}")
        if log.page_count is not None:
            print(f"Pages:   {log.page_count}")
        print(f"Errors:  {len(log.errors)}")
        if log.errors:
            print(format_errors(log.errors, enc, limit=config.max_errors))
        if bad_boxes is not None:
            print(f"Bad boxes: {len(bad_boxes)}")
            if bad_boxes:
                print(format_errors(bad_boxes, enc, limit=config.max_errors))

    return 1 if log.has_errors else 0


def build_log_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``log`` subcommand and its arguments."""
    p = subparsers.add_parser(
        "log",
        help="Summarise errors in a TeX log",
        description="Extract the program banner, page count and classified "
                    "errors from a TeX log or captured engine output.",
    )
    p.add_argument(
        "log_file",
        help="Path to the .log file, or - to read stdin",
    )
    p.add_argument(
        "--json", action="store_true",
        help="Print the result as JSON",
    )
    p.add_argument(
        "--bad-boxes", action="store_true",
        help="Also list overfull/underfull hbox warnings",
    )
    p.set_defaults(func=cmd_log)
