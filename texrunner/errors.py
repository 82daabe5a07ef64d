"""
Classification of TeX error messages.

An error in the engine output starts with ``! `` at the beginning of a
line, followed by a fixed message and, for many errors, a few lines of
context (``<to be read again>``, ``<*>``, ``l.<n>``)::

    ! Undefined control sequence.
    l.12 \\foo
              bar

:func:`some_error` is called with the cursor on the ``! `` and tries the
matchers in :data:`ERROR_MATCHERS` in order.  Several messages share
context blocks, so the order is significant.  When nothing matches, the
line is kept verbatim as :class:`~texrunner.types.UnknownError`.

Bad-box warnings are not prefixed with ``! `` and are matched by the
separate :func:`bad_box`.
"""

from __future__ import annotations

from typing import Callable

from texrunner.scanner import WHITESPACE, Cursor
from texrunner.types import (
    BadBox,
    DimensionTooLarge,
    EmergencyStop,
    ExtraBrace,
    FatalError,
    IllegalUnit,
    LaTeXError,
    Missing,
    MissingNumber,
    NumberTooBig,
    ParagraphEnded,
    TeXError,
    TooMany,
    TooManyErrors,
    UndefinedControlSequence,
    UnknownError,
)

BAD_BOX_KINDS = (b"Underfull", b"Overfull", b"Tight", b"Loose")


# ---------------------------------------------------------------------------
# Context fragments
# ---------------------------------------------------------------------------

def line_number(cursor: Cursor) -> int:
    """Source line annotation: `` detected at line 12`` or ``l.12``."""
    if cursor.attempt(Cursor.literal, b" detected at line ") is None:
        cursor.literal(b"l.")
    return cursor.decimal()


def note_star(cursor: Cursor) -> None:
    cursor.skip_space()
    cursor.literal(b"<*>")
    cursor.skip_space()


def to_be_read_again(cursor: Cursor) -> str:
    cursor.skip_space()
    cursor.literal(b"<to be read again>")
    cursor.skip_space()
    return cursor.any_char()


def _skip_to_line_number(cursor: Cursor) -> int:
    while True:
        lineno = cursor.attempt(line_number)
        if lineno is not None:
            return lineno
        if cursor.at_end:
            raise cursor.fail("no line number in context")
        cursor.rest_of_line()


def _control_sequence(cursor: Cursor) -> bytes:
    cursor.literal(b"\\")
    return b"\\" + cursor.take_till(WHITESPACE + b"\\")


def final_control_sequence(cursor: Cursor) -> bytes:
    """The last of one or more adjacent control sequences.

    The engine may echo the offending sequence more than once; the last
    one is the one it stopped on.
    """
    last = _control_sequence(cursor)
    while True:
        name = cursor.attempt(_control_sequence)
        if name is None:
            return last
        last = name


# ---------------------------------------------------------------------------
# General errors
# ---------------------------------------------------------------------------

def undefined_control_sequence(cursor: Cursor) -> TeXError:
    cursor.literal(b"Undefined control sequence.")

    def system_context(cursor: Cursor) -> None:
        cursor.skip_space()
        cursor.literal(b"system")
        _skip_to_line_number(cursor)

    cursor.attempt(system_context)
    cursor.attempt(note_star)
    cursor.skip_space()
    cursor.attempt(line_number)
    cursor.skip_space()
    return UndefinedControlSequence(final_control_sequence(cursor))


def illegal_unit(cursor: Cursor) -> TeXError:
    cursor.literal(b"Illegal unit of measure (pt inserted).")
    cursor.attempt(to_be_read_again)
    cursor.attempt(to_be_read_again)
    return IllegalUnit()


def missing_number(cursor: Cursor) -> TeXError:
    cursor.literal(b"Missing number, treated as zero.")
    cursor.attempt(to_be_read_again)
    cursor.attempt(note_star)
    return MissingNumber()


def missing(cursor: Cursor) -> TeXError:
    cursor.literal(b"Missing ")
    char = cursor.any_char()
    cursor.literal(b" inserted.")
    cursor.attempt(line_number)
    return Missing(char)


def latex_error(cursor: Cursor) -> TeXError:
    cursor.literal(b"LaTeX Error: ")
    return LaTeXError(cursor.rest_of_line())


def emergency_stop(cursor: Cursor) -> TeXError:
    cursor.literal(b"Emergency stop.")
    return EmergencyStop()


# tex.web, line 8058
def extra_brace(cursor: Cursor) -> TeXError:
    cursor.literal(b"Argument of")
    return ExtraBrace()


# tex.web, line 8075
def paragraph_ended(cursor: Cursor) -> TeXError:
    cursor.literal(b"Paragraph ended before ")
    cursor.take_till(WHITESPACE)
    to_be_read_again(cursor)
    line_number(cursor)
    return ParagraphEnded()


def number_too_big(cursor: Cursor) -> TeXError:
    cursor.literal(b"Number too big")
    return NumberTooBig()


def too_many(cursor: Cursor) -> TeXError:
    cursor.literal(b"Too Many ")
    return TooMany(cursor.take_till(b"'"))


def dimension_too_large(cursor: Cursor) -> TeXError:
    cursor.literal(b"Dimension too large.")
    return DimensionTooLarge()


def too_many_errors(cursor: Cursor) -> TeXError:
    cursor.literal(b"That makes 100 errors; please try again.")
    return TooManyErrors()


def fatal_error(cursor: Cursor) -> TeXError:
    cursor.literal(b" ==> Fatal error occurred, ")
    return FatalError(cursor.rest_of_line())


def unknown_error(cursor: Cursor) -> TeXError:
    return UnknownError(cursor.rest_of_line())


ERROR_MATCHERS: tuple[Callable[[Cursor], TeXError], ...] = (
    undefined_control_sequence,
    illegal_unit,
    missing_number,
    missing,
    latex_error,
    emergency_stop,
    extra_brace,
    paragraph_ended,
    number_too_big,
    too_many,
    dimension_too_large,
    too_many_errors,
    fatal_error,
    unknown_error,
)


def some_error(cursor: Cursor) -> TeXError:
    """Classify the error starting at ``! ``.

    Only fails when the cursor is not on ``! ``; past that point the
    fallback always produces a result.
    """
    cursor.literal(b"! ")
    return cursor.first_of(ERROR_MATCHERS)


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------

def bad_box(cursor: Cursor) -> TeXError:
    """Match an ``Overfull \\hbox (...)`` style warning."""
    kind = cursor.one_of(BAD_BOX_KINDS)
    cursor.literal(b" \\hbox (")
    cursor.take_till(b")\n")
    cursor.literal(b")")
    cursor.attempt(line_number)
    return BadBox(kind)
