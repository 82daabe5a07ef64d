"""
Decoding of measurements reported by the engine.

Two shapes are understood:

  - A box report, as written by ``\\showbox`` with terse tracing::

        > \\box0=
        \\hbox(6.83331+0.0)x24.44446

  - A single dimension, as written by ``\\showthe``::

        > 12.0pt.

The engine reports TeX points (pt); values are returned in PostScript
big points (bp), 1bp = 1.00374pt.  Both decoders search forward for
their anchor character and skip every candidate that does not parse,
so they tolerate whatever the engine prints before the report.  They
raise :class:`~texrunner.exceptions.ParseError` when the input runs
out; a missing measurement is never turned into zero.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from texrunner.exceptions import ParseError
from texrunner.scanner import Cursor
from texrunner.types import Box

logger = logging.getLogger(__name__)

N = TypeVar("N")

PT_PER_BP = "1.00374"


def pt_to_bp(value: N, number: Callable[[str], N] = float) -> N:  # type: ignore[assignment]
    """Convert TeX points to big points in the numeric type ``number``."""
    return value / number(PT_PER_BP)  # type: ignore[operator]


# ---------------------------------------------------------------------------
# Single dimension
# ---------------------------------------------------------------------------

def read_dimension(cursor: Cursor, number: Callable[[str], N] = float) -> N:  # type: ignore[assignment]
    """
    Read the first ``>``-prefixed number at or after the cursor.

    Markers not followed by a number are skipped.

    Raises
    ------
    ParseError
        If no ``>`` followed by a number remains.
    """
    skipped = 0
    while True:
        cursor.skip_past(b">")
        cursor.skip_space()
        value = cursor.attempt(Cursor.rational, number)
        if value is not None:
            if skipped:
                logger.debug("Skipped %d '>' markers before dimension.", skipped)
            return pt_to_bp(value, number)
        skipped += 1


def decode_dimension(data: bytes, number: Callable[[str], N] = float) -> N:  # type: ignore[assignment]
    """Decode a single dimension from a buffer of engine output."""
    return read_dimension(Cursor(data), number)


# ---------------------------------------------------------------------------
# Box reports
# ---------------------------------------------------------------------------

def _box_report(cursor: Cursor, number: Callable[[str], N]) -> Box[N]:
    # Positioned just after a backslash.
    cursor.literal(b"box")
    cursor.decimal()  # register number, unused
    cursor.literal(b"=\n\\hbox(")
    height = cursor.rational(number)
    cursor.literal(b"+")
    depth = cursor.rational(number)
    cursor.literal(b")x")
    width = cursor.rational(number)
    return Box(
        height=pt_to_bp(height, number),
        depth=pt_to_bp(depth, number),
        width=pt_to_bp(width, number),
    )


def read_box(cursor: Cursor, number: Callable[[str], N] = float) -> Box[N]:  # type: ignore[assignment]
    """
    Read the first ``\\boxN=`` / ``\\hbox(h+d)xw`` report after the cursor.

    Every other control sequence in the way is skipped.

    Raises
    ------
    ParseError
        If no backslash starting a complete report remains.
    """
    skipped = 0
    while True:
        try:
            cursor.skip_past(b"\\")
        except ParseError:
            logger.debug("No box report found after %d control sequences.", skipped)
            raise
        box = cursor.attempt(_box_report, number)
        if box is not None:
            return box
        skipped += 1


def decode_box(data: bytes, number: Callable[[str], N] = float) -> Box[N]:  # type: ignore[assignment]
    """Decode a box report from a buffer of engine output."""
    return read_box(Cursor(data), number)
