"""
Byte cursor with the primitive grammar operations shared by every parser.

A :class:`Cursor` walks an immutable ``bytes`` buffer.  Each primitive
either consumes input and returns a value, or raises
:class:`~texrunner.exceptions.ParseError` without a usable position
change.  Alternatives and optional pieces are built with
:meth:`Cursor.attempt`, which rewinds the cursor when the wrapped
matcher fails.  This gives ordered, backtracking choice the same way
the engine's output is read by eye: try the most specific shape first,
fall back to looser ones.

Character classes follow TeX's ASCII view of the log: whitespace is
space plus ``\\t \\n \\v \\f \\r``.
"""

from __future__ import annotations

import functools
import re
from typing import Callable, Sequence, TypeVar

from texrunner.exceptions import ParseError

T = TypeVar("T")

WHITESPACE = b" \t\n\r\x0b\x0c"

_RE_SPACE = re.compile(rb"[ \t\n\r\x0b\x0c]*")
_RE_DECIMAL = re.compile(rb"\d+")
_RE_RATIONAL = re.compile(rb"[+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")


@functools.lru_cache(maxsize=None)
def _till_pattern(stops: bytes) -> re.Pattern[bytes]:
    return re.compile(b"[^" + re.escape(stops) + b"]*")


class Cursor:
    """A read position inside a byte buffer."""

    __slots__ = ("data", "pos")

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self.data = data
        self.pos = pos

    def __repr__(self) -> str:
        preview = self.data[self.pos:self.pos + 20]
        return f"Cursor(pos={self.pos}, next={preview!r})"

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def fail(self, message: str) -> ParseError:
        return ParseError(f"{message} at byte {self.pos}", self.pos)

    # -- combinators -------------------------------------------------------

    def attempt(self, matcher: Callable[..., T], *args: object) -> T | None:
        """Run ``matcher(self, *args)``; rewind and return None on failure."""
        start = self.pos
        try:
            return matcher(self, *args)
        except ParseError:
            self.pos = start
            return None

    def first_of(self, matchers: Sequence[Callable[[Cursor], T]]) -> T:
        """Return the result of the first matcher that succeeds."""
        for matcher in matchers:
            result = self.attempt(matcher)
            if result is not None:
                return result
        raise self.fail("no alternative matched")

    # -- literals ----------------------------------------------------------

    def literal(self, text: bytes) -> bytes:
        if not self.data.startswith(text, self.pos):
            raise self.fail(f"expected {text!r}")
        self.pos += len(text)
        return text

    def one_of(self, options: Sequence[bytes]) -> bytes:
        for text in options:
            if self.data.startswith(text, self.pos):
                self.pos += len(text)
                return text
        raise self.fail(f"expected one of {list(options)!r}")

    def any_char(self) -> str:
        if self.at_end:
            raise self.fail("unexpected end of input")
        char = self.data[self.pos:self.pos + 1].decode("latin-1")
        self.pos += 1
        return char

    # -- skipping ----------------------------------------------------------

    def skip_space(self) -> None:
        self.pos = _RE_SPACE.match(self.data, self.pos).end()

    def skip_past(self, marker: bytes) -> None:
        """Move to just after the next occurrence of ``marker``."""
        index = self.data.find(marker, self.pos)
        if index < 0:
            self.pos = len(self.data)
            raise self.fail(f"no {marker!r} before end of input")
        self.pos = index + len(marker)

    def take_till(self, stops: bytes) -> bytes:
        """Consume and return bytes up to (not including) any of ``stops``."""
        m = _till_pattern(stops).match(self.data, self.pos)
        self.pos = m.end()
        return m.group()

    def rest_of_line(self) -> bytes:
        """Consume the rest of the current line and its newline.

        End of input terminates the last line as well.
        """
        end = self.data.find(b"\n", self.pos)
        if end < 0:
            text = self.data[self.pos:]
            self.pos = len(self.data)
            return text
        text = self.data[self.pos:end]
        self.pos = end + 1
        return text

    # -- numbers -----------------------------------------------------------

    def decimal(self) -> int:
        m = _RE_DECIMAL.match(self.data, self.pos)
        if m is None:
            raise self.fail("expected a decimal integer")
        self.pos = m.end()
        return int(m.group())

    def rational(self, number: Callable[[str], T] = float) -> T:  # type: ignore[assignment]
        """Parse a signed decimal such as ``-12.5`` or ``3e2``.

        ``number`` builds the value from its text, so ``Fraction`` or
        ``Decimal`` keep exact digits.
        """
        m = _RE_RATIONAL.match(self.data, self.pos)
        if m is None:
            raise self.fail("expected a number")
        self.pos = m.end()
        return number(m.group().decode("ascii"))
