"""
CLI commands for decoding measurements written by the engine.

Usage:
    texrunner box showbox-output.txt
    texrunner dimen - < showthe-output.txt

Values are printed in big points.  Exit status is 1 when no measurement
could be decoded and 2 when the input or configuration could not be read.
"""

from __future__ import annotations

import argparse
import sys

from ..dimensions import decode_box, decode_dimension
from ..exceptions import ConfigError, ParseError
from .common import config_from_args, read_input


def cmd_box(args: argparse.Namespace) -> int:
    """Main handler for ``texrunner box``."""
    try:
        config = config_from_args(args)
        data = read_input(args.input)
    except (ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        box = decode_box(data, config.number)
    except ParseError as exc:
        print(f"Error: no box report found ({exc})", file=sys.stderr)
        return 1

    print(f"height: {box.height}bp")
    print(f"depth:  {box.depth}bp")
    print(f"width:  {box.width}bp")
    return 0


def cmd_dimen(args: argparse.Namespace) -> int:
    """Main handler for ``texrunner dimen``."""
    try:
        config = config_from_args(args)
        data = read_input(args.input)
    except (ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        value = decode_dimension(data, config.number)
    except ParseError as exc:
        print(f"Error: no dimension found ({exc})", file=sys.stderr)
        return 1

    print(f"{value}bp")
    return 0


def build_box_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``box`` subcommand."""
    p = subparsers.add_parser(
        "box",
        help="Decode a \\showbox report",
        description="Read height, depth and width from a \\boxN=\\hbox(h+d)xw report.",
    )
    p.add_argument("input", help="File holding the engine output, or - for stdin")
    p.set_defaults(func=cmd_box)


def build_dimen_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``dimen`` subcommand."""
    p = subparsers.add_parser(
        "dimen",
        help="Decode a \\showthe dimension",
        description="Read the first '> <number>pt' dimension from engine output.",
    )
    p.add_argument("input", help="File holding the engine output, or - for stdin")
    p.set_defaults(func=cmd_dimen)
