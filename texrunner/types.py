"""
Core data structures produced by the parsers.

Byte payloads are kept as ``bytes`` exactly as the engine wrote them;
``describe()`` decodes them for display only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

N = TypeVar("N")


def _text(raw: bytes, encoding: str) -> str:
    return raw.decode(encoding, errors="replace")


# ---------------------------------------------------------------------------
# Boxes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Box(Generic[N]):
    """Dimensions of an hbox in big points (bp, 1bp = 1/72 inch)."""
    height: N   # above the baseline
    depth: N    # below the baseline
    width: N

    @property
    def total_height(self) -> N:
        return self.height + self.depth  # type: ignore[operator]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TeXError:
    """Base class for every error shape the classifier can report."""

    def describe(self, encoding: str = "utf-8") -> str:
        return type(self).__name__


@dataclass(frozen=True)
class UndefinedControlSequence(TeXError):
    name: bytes

    def describe(self, encoding: str = "utf-8") -> str:
        return f"Undefined control sequence {_text(self.name, encoding)}"


@dataclass(frozen=True)
class MissingNumber(TeXError):
    def describe(self, encoding: str = "utf-8") -> str:
        return "Missing number, treated as zero"


@dataclass(frozen=True)
class Missing(TeXError):
    char: str

    def describe(self, encoding: str = "utf-8") -> str:
        return f"Missing {self.char} inserted"


@dataclass(frozen=True)
class IllegalUnit(TeXError):
    def describe(self, encoding: str = "utf-8") -> str:
        return "Illegal unit of measure (pt inserted)"


@dataclass(frozen=True)
class PackageError(TeXError):
    # No rule produces this yet; the exact engine wording is unconfirmed.
    name: str
    message: str

    def describe(self, encoding: str = "utf-8") -> str:
        return f"Package {self.name} Error: {self.message}"


@dataclass(frozen=True)
class LaTeXError(TeXError):
    message: bytes

    def describe(self, encoding: str = "utf-8") -> str:
        return f"LaTeX Error: {_text(self.message, encoding)}"


@dataclass(frozen=True)
class BadBox(TeXError):
    kind: bytes   # Underfull, Overfull, Tight or Loose

    def describe(self, encoding: str = "utf-8") -> str:
        return f"{_text(self.kind, encoding)} \\hbox"


@dataclass(frozen=True)
class EmergencyStop(TeXError):
    def describe(self, encoding: str = "utf-8") -> str:
        return "Emergency stop"


@dataclass(frozen=True)
class ParagraphEnded(TeXError):
    def describe(self, encoding: str = "utf-8") -> str:
        return "Paragraph ended before argument was complete"


@dataclass(frozen=True)
class TooMany(TeXError):
    what: bytes

    def describe(self, encoding: str = "utf-8") -> str:
        return f"Too many {_text(self.what, encoding)}"


@dataclass(frozen=True)
class DimensionTooLarge(TeXError):
    def describe(self, encoding: str = "utf-8") -> str:
        return "Dimension too large"


@dataclass(frozen=True)
class TooManyErrors(TeXError):
    def describe(self, encoding: str = "utf-8") -> str:
        return "That makes 100 errors"


@dataclass(frozen=True)
class NumberTooBig(TeXError):
    def describe(self, encoding: str = "utf-8") -> str:
        return "Number too big"


@dataclass(frozen=True)
class ExtraBrace(TeXError):
    def describe(self, encoding: str = "utf-8") -> str:
        return "Argument has an extra }"


@dataclass(frozen=True)
class FatalError(TeXError):
    message: bytes

    def describe(self, encoding: str = "utf-8") -> str:
        return f"Fatal error occurred, {_text(self.message, encoding)}"


@dataclass(frozen=True)
class UnknownError(TeXError):
    raw_line: bytes

    def describe(self, encoding: str = "utf-8") -> str:
        return _text(self.raw_line, encoding)


# ---------------------------------------------------------------------------
# Aggregate log
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TeXLog:
    """Everything extracted from one engine run's output.

    ``TeXLog()`` is the identity for :meth:`merge`.
    """
    program_identity: bytes | None = None
    page_count: int | None = None
    errors: tuple[TeXError, ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_empty(self) -> bool:
        return (
            self.program_identity is None
            and self.page_count is None
            and not self.errors
        )

    def merge(self, other: TeXLog) -> TeXLog:
        """Combine with a log scanned later in the same stream.

        The earliest program identity is kept, the latest page count
        wins and errors are concatenated in order.
        """
        return TeXLog(
            program_identity=(
                self.program_identity
                if self.program_identity is not None
                else other.program_identity
            ),
            page_count=(
                other.page_count
                if other.page_count is not None
                else self.page_count
            ),
            errors=self.errors + other.errors,
        )

    @classmethod
    def concat(cls, logs: Iterable[TeXLog]) -> TeXLog:
        """Merge many logs left to right in one pass.

        Same result as chaining :meth:`merge`, without rebuilding the
        error tuple at every step.
        """
        identity: bytes | None = None
        pages: int | None = None
        errors: list[TeXError] = []
        for log in logs:
            if identity is None:
                identity = log.program_identity
            if log.page_count is not None:
                pages = log.page_count
            errors.extend(log.errors)
        return cls(program_identity=identity, page_count=pages, errors=tuple(errors))
