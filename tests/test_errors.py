"""
Tests for error classification.
"""

import pytest

from texrunner.errors import (
    ERROR_MATCHERS,
    bad_box,
    final_control_sequence,
    line_number,
    some_error,
    to_be_read_again,
    unknown_error,
)
from texrunner.exceptions import ParseError
from texrunner.scanner import Cursor
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
    PackageError,
    ParagraphEnded,
    TooMany,
    TooManyErrors,
    UndefinedControlSequence,
    UnknownError,
)


def classify(text: bytes):
    return some_error(Cursor(text))


class TestContextFragments:
    def test_line_number_short_form(self):
        assert line_number(Cursor(b"l.42 \\foo")) == 42

    def test_line_number_long_form(self):
        assert line_number(Cursor(b" detected at line 7")) == 7

    def test_line_number_missing(self):
        with pytest.raises(ParseError):
            line_number(Cursor(b"line 7"))

    def test_to_be_read_again(self):
        c = Cursor(b"\n<to be read again> \n                   p\n")
        assert to_be_read_again(c) == "p"

    def test_final_control_sequence_takes_last(self):
        c = Cursor(b"\\foo\\bar\\baz rest")
        assert final_control_sequence(c) == b"\\baz"

    def test_final_control_sequence_requires_one(self):
        with pytest.raises(ParseError):
            final_control_sequence(Cursor(b"foo"))


class TestUndefinedControlSequence:
    def test_bare_name(self):
        assert classify(b"! Undefined control sequence.\n\\foo\n") == \
            UndefinedControlSequence(b"\\foo")

    def test_with_line_number(self):
        assert classify(b"! Undefined control sequence.\nl.12 \\badcommand\n   x\n") == \
            UndefinedControlSequence(b"\\badcommand")

    def test_with_star_note(self):
        assert classify(b"! Undefined control sequence.\n<*> \\foo\\bar\\baz\n") == \
            UndefinedControlSequence(b"\\baz")

    def test_with_system_context(self):
        text = (
            b"! Undefined control sequence.\n"
            b"system stuff\n"
            b"more context\n"
            b"l.5 \\bar\n"
        )
        assert classify(text) == UndefinedControlSequence(b"\\bar")

    def test_without_sequence_is_unknown(self):
        assert classify(b"! Undefined control sequence.\nnothing here\n") == \
            UnknownError(b"Undefined control sequence.")


class TestGeneralErrors:
    def test_illegal_unit(self):
        text = (
            b"! Illegal unit of measure (pt inserted).\n"
            b"<to be read again> \n"
            b"                   p\n"
            b"<to be read again> \n"
            b"                   t\n"
        )
        assert classify(text) == IllegalUnit()

    def test_missing_number(self):
        text = (
            b"! Missing number, treated as zero.\n"
            b"<to be read again> \n"
            b"                   \\relax \n"
        )
        assert classify(text) == MissingNumber()

    def test_missing_number_not_missing_char(self):
        assert classify(b"! Missing number, treated as zero.\n") == MissingNumber()

    def test_missing_dollar(self):
        assert classify(b"! Missing $ inserted.\n") == Missing("$")

    def test_missing_brace(self):
        assert classify(b"! Missing } inserted.\n") == Missing("}")

    def test_latex_error(self):
        assert classify(b"! LaTeX Error: File `noexist.sty' not found.\n") == \
            LaTeXError(b"File `noexist.sty' not found.")

    def test_emergency_stop(self):
        assert classify(b"! Emergency stop.\n") == EmergencyStop()

    def test_extra_brace(self):
        assert classify(b"! Argument of \\foo has an extra }.\n") == ExtraBrace()

    def test_paragraph_ended(self):
        text = b"! Paragraph ended before \\foo <to be read again> } detected at line 12\n"
        assert classify(text) == ParagraphEnded()

    def test_paragraph_ended_without_line_is_unknown(self):
        text = b"! Paragraph ended before \\foo was complete.\n"
        assert classify(text) == UnknownError(b"Paragraph ended before \\foo was complete.")

    def test_number_too_big(self):
        assert classify(b"! Number too big.\n") == NumberTooBig()

    def test_too_many(self):
        assert classify(b"! Too Many }'s.\n") == TooMany(b"}")

    def test_dimension_too_large(self):
        assert classify(b"! Dimension too large.\n") == DimensionTooLarge()

    def test_too_many_errors(self):
        assert classify(b"! That makes 100 errors; please try again.\n") == TooManyErrors()

    def test_fatal_error(self):
        assert classify(b"!  ==> Fatal error occurred, no output PDF file produced!\n") == \
            FatalError(b"no output PDF file produced!")

    def test_unknown(self):
        assert classify(b"! I can't find file `foo'.\n") == \
            UnknownError(b"I can't find file `foo'.")

    def test_unknown_at_end_of_input(self):
        assert classify(b"! Something odd") == UnknownError(b"Something odd")

    def test_requires_marker(self):
        with pytest.raises(ParseError):
            classify(b"Undefined control sequence.\n")

    def test_cursor_after_single_line_error(self):
        c = Cursor(b"! Emergency stop.\nnext")
        some_error(c)
        assert c.data[c.pos:] == b"\nnext"


class TestMatcherTable:
    def test_fallback_is_last(self):
        assert ERROR_MATCHERS[-1] is unknown_error

    def test_every_matcher_rejects_empty_input_except_fallback(self):
        for matcher in ERROR_MATCHERS[:-1]:
            assert Cursor(b"").attempt(matcher) is None


class TestBadBox:
    def test_overfull(self):
        c = Cursor(b"Overfull \\hbox (12.3pt too wide) in paragraph at lines 5--6\n")
        assert bad_box(c) == BadBox(b"Overfull")

    @pytest.mark.parametrize("kind", [b"Underfull", b"Tight", b"Loose"])
    def test_other_kinds(self, kind):
        c = Cursor(kind + b" \\hbox (badness 10000) detected at line 31\n")
        assert bad_box(c) == BadBox(kind)
        assert c.data[c.pos:] == b"\n"

    def test_vbox_is_not_matched(self):
        with pytest.raises(ParseError):
            bad_box(Cursor(b"Overfull \\vbox (1.0pt too high)\n"))

    def test_not_an_error_line(self):
        # Warnings carry no "! " prefix and never reach the error matchers.
        assert classify(b"! Overfull \\hbox (1pt too wide)\n") == \
            UnknownError(b"Overfull \\hbox (1pt too wide)")


class TestDescriptions:
    def test_describe_decodes_payload(self):
        assert UndefinedControlSequence(b"\\foo").describe() == "Undefined control sequence \\foo"

    def test_describe_without_payload(self):
        assert EmergencyStop().describe() == "Emergency stop"

    def test_package_error_kept(self):
        err = PackageError("hyperref", "Wrong DVI mode driver option")
        assert "hyperref" in err.describe()

    def test_structural_equality(self):
        assert Missing("$") == Missing("$")
        assert Missing("$") != Missing("}")
        assert MissingNumber() != IllegalUnit()
