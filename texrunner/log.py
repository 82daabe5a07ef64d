"""
Whole-log scanning.

:func:`parse_log` walks a complete engine transcript (the ``.log`` file
or captured stdout) one line at a time.  At the start of each line it
looks for, in turn, the ``This is ...`` banner, an ``Output written on
... (N pages)`` summary and a ``! `` error; whatever is left of the line
is then dropped.  Each line yields a small :class:`TeXLog` that is
merged into the running result, so the scan cannot fail: text it does
not recognise simply contributes nothing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from texrunner.errors import bad_box, some_error
from texrunner.scanner import Cursor
from texrunner.types import BadBox, TeXError, TeXLog

logger = logging.getLogger(__name__)


def _program_identity(cursor: Cursor) -> bytes:
    cursor.literal(b"This is ")
    return cursor.rest_of_line()


def _page_count(cursor: Cursor) -> int:
    cursor.literal(b"Output written on ")
    cursor.skip_past(b"(")
    return cursor.decimal()


def _log_line(cursor: Cursor) -> TeXLog:
    identity = cursor.attempt(_program_identity)
    pages = cursor.attempt(_page_count)
    error = cursor.attempt(some_error)
    cursor.rest_of_line()
    return TeXLog(
        program_identity=identity,
        page_count=pages,
        errors=(error,) if error is not None else (),
    )


def parse_log(data: bytes) -> TeXLog:
    """Extract the banner, page count and errors from engine output."""
    cursor = Cursor(data)
    increments: list[TeXLog] = []
    while not cursor.at_end:
        increment = _log_line(cursor)
        if not increment.is_empty:
            increments.append(increment)
    result = TeXLog.concat(increments)
    logger.debug(
        "Parsed %d bytes of log: %d errors, %s pages.",
        len(data), len(result.errors), result.page_count,
    )
    return result


def parse_log_file(log_path: Path) -> TeXLog:
    """
    Parse a LaTeX .log file.

    Raises
    ------
    FileNotFoundError
        If ``log_path`` does not exist (the engine may have crashed
        before writing it).
    """
    return parse_log(Path(log_path).read_bytes())


def scan_bad_boxes(data: bytes) -> list[BadBox]:
    """Return every overfull/underfull/tight/loose hbox warning, in order."""
    cursor = Cursor(data)
    found: list[BadBox] = []
    while not cursor.at_end:
        warning = cursor.attempt(bad_box)
        if warning is not None:
            found.append(warning)  # type: ignore[arg-type]
        cursor.rest_of_line()
    return found


def format_errors(
    errors: Sequence[TeXError],
    encoding: str = "utf-8",
    limit: int = 0,
) -> str:
    """Format errors as a numbered, human-readable list.

    ``limit`` caps the number of entries shown; 0 shows all of them.
    """
    if not errors:
        return "No errors detected."
    shown = errors if limit <= 0 else errors[:limit]
    parts = [
        f"  [{i}] {err.describe(encoding)}"
        for i, err in enumerate(shown, 1)
    ]
    hidden = len(errors) - len(shown)
    if hidden:
        parts.append(f"  ... and {hidden} more")
    return "\n".join(parts)
