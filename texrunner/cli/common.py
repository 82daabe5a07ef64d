"""Helpers shared by the CLI commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..config import ParserConfig, load_config


def read_input(name: str) -> bytes:
    """Read raw engine output from a file, or from stdin for ``-``."""
    if name == "-":
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def config_from_args(args: argparse.Namespace) -> ParserConfig:
    path = Path(args.config) if args.config else None
    return load_config(path)
