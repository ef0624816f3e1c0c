"""Tests for the format string tokenizer and scanning cursor."""

import pytest
from hypothesis import given

from l10nprintf.enums import ArgKind
from l10nprintf.syntax import Cursor, Directive, LiteralText, tokenize
from tests.strategies import format_templates


def _directives(template: str) -> list[Directive]:
    return [s for s in tokenize(template) if isinstance(s, Directive)]


def _join(template: str) -> str:
    return "".join(s.text if isinstance(s, LiteralText) else s.source for s in tokenize(template))


class TestCursor:
    """Immutable Cursor navigation."""

    def test_current_and_advance(self) -> None:
        """advance() returns a new cursor; the original is unchanged."""
        cursor = Cursor("ab", 0)
        moved = cursor.advance()
        assert cursor.current == "a"
        assert moved.current == "b"

    def test_current_at_eof_raises(self) -> None:
        """Reading past the end raises EOFError."""
        with pytest.raises(EOFError):
            _ = Cursor("", 0).current

    def test_advance_is_clamped(self) -> None:
        """Advancing beyond the end stops at EOF."""
        assert Cursor("ab", 1).advance(10).pos == 2

    def test_peek(self) -> None:
        """peek() returns None beyond EOF."""
        cursor = Cursor("ab", 0)
        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) is None

    def test_take_while_limit(self) -> None:
        """take_while honors the limit."""
        text, rest = Cursor("hhhd", 0).take_while("hl", limit=2)
        assert text == "hh"
        assert rest.current == "h"

    def test_find_missing_goes_to_eof(self) -> None:
        """find() for an absent character lands on EOF."""
        assert Cursor("abc", 0).find("%").is_eof

    def test_rest_and_slice(self) -> None:
        """rest and slice_to expose source substrings."""
        cursor = Cursor("hello", 1)
        assert cursor.rest == "ello"
        assert cursor.slice_to(3) == "el"


class TestTokenizeShapes:
    """Directive grammar recognition."""

    def test_plain_text(self) -> None:
        """Text without % is a single literal."""
        assert tokenize("hello") == (LiteralText("hello"),)

    def test_empty(self) -> None:
        """Empty template yields no segments."""
        assert tokenize("") == ()

    def test_sequential(self) -> None:
        """%s is sequential with conversion s."""
        (directive,) = _directives("%s")
        assert directive.kind is ArgKind.SEQUENTIAL
        assert directive.position is None
        assert directive.conversion == "s"

    def test_positional(self) -> None:
        """%2$s records the 1-based index."""
        (directive,) = _directives("%2$s")
        assert directive.kind is ArgKind.POSITIONAL
        assert directive.position == 2
        assert directive.source == "%2$s"

    def test_literal_percent(self) -> None:
        """%% is a literal percent directive."""
        segments = tokenize("100%% done")
        assert segments[0] == LiteralText("100")
        assert isinstance(segments[1], Directive)
        assert segments[1].kind is ArgKind.LITERAL_PERCENT
        assert segments[2] == LiteralText(" done")

    def test_full_directive(self) -> None:
        """Flags, width, precision, length and conversion are split out."""
        (directive,) = _directives("%3$-'08.2Lf")
        assert directive.position == 3
        assert directive.flags == "-'0"
        assert directive.width == "8"
        assert directive.precision == "2"
        assert directive.length == "L"
        assert directive.conversion == "f"

    def test_bare_precision(self) -> None:
        """A '.' without digits is an empty precision, not a missing one."""
        (with_dot,) = _directives("%.f")
        (without,) = _directives("%f")
        assert with_dot.precision == ""
        assert without.precision is None

    @pytest.mark.parametrize("length", ["hh", "h", "ll", "l", "L", "j", "z", "t"])
    def test_length_modifiers(self, length: str) -> None:
        """All length modifiers are recognized."""
        (directive,) = _directives(f"%{length}d")
        assert directive.length == length
        assert directive.conversion == "d"

    def test_flags_any_order_and_count(self) -> None:
        """Flags may repeat and appear in any order."""
        (directive,) = _directives("%#0 +-'#x")
        assert directive.flags == "#0 +-'#"
        assert directive.conversion == "x"

    def test_unknown_conversion_is_malformed(self) -> None:
        """A directive ending in an unknown character is scanned but malformed."""
        (directive,) = _directives("%q")
        assert directive.conversion == "q"
        assert not directive.is_well_formed

    def test_unknown_conversion_keeps_following_text(self) -> None:
        """Only the unknown character ends the directive; the text after it stays literal."""
        assert tokenize("%q %s")[:2] == (
            Directive(ArgKind.SEQUENTIAL, "%q", conversion="q"),
            LiteralText(" "),
        )

    @pytest.mark.parametrize(
        ("template", "source"), [("%hy z", "%hy"), ("%lq", "%lq"), ("%zk", "%zk")]
    )
    def test_length_before_unknown_conversion(self, template: str, source: str) -> None:
        """A length modifier followed by a non-conversion is one malformed directive."""
        directive = _directives(template)[0]
        assert directive.source == source
        assert directive.length == source[1]
        assert not directive.is_well_formed

    def test_empty_position(self) -> None:
        """%$s is positional with index 0."""
        (directive,) = _directives("%$s")
        assert directive.kind is ArgKind.POSITIONAL
        assert directive.position == 0

    def test_adjacent_directives(self) -> None:
        """Directives without separating text are split correctly."""
        assert [d.source for d in _directives("%s%d%%%1$x")] == ["%s", "%d", "%%", "%1$x"]


class TestTokenizeUnterminated:
    """Cut-off directives become literal text."""

    @pytest.mark.parametrize("template", ["%", "abc%", "%5", "%-0", "%1$", "%.2", "%ll"])
    def test_unterminated_is_literal(self, template: str) -> None:
        """An unterminated directive is merged into the trailing literal."""
        assert tokenize(template) == (LiteralText(template),)

    def test_unterminated_after_directive(self) -> None:
        """Earlier directives survive; only the remainder is literal."""
        segments = tokenize("%s and %")
        assert isinstance(segments[0], Directive)
        assert segments[1:] == (LiteralText(" and %"),)


class TestNativeSpec:
    """Rendering directives for the native formatter."""

    def test_positional_indicator_removed(self) -> None:
        """native_spec never carries N$."""
        (directive,) = _directives("%12$'-8.2f")
        assert directive.native_spec() == "%'-8.2f"

    def test_flag_override(self) -> None:
        """Explicit flags replace the parsed ones."""
        (directive,) = _directives("%2$'-8.2f")
        assert directive.native_spec(flags="-") == "%-8.2f"

    def test_bare_precision_kept(self) -> None:
        """A bare '.' is preserved."""
        (directive,) = _directives("%.s")
        assert directive.native_spec() == "%.s"


class TestTokenizeProperties:
    """Property tests over generated templates."""

    @given(format_templates)
    def test_lossless(self, template: str) -> None:
        """Property: concatenated segment text reproduces the template."""
        assert _join(template) == template

    @given(format_templates)
    def test_literals_are_merged(self, template: str) -> None:
        """Property: no two literals are adjacent and none is empty."""
        segments = tokenize(template)
        for left, right in zip(segments, segments[1:], strict=False):
            assert not (isinstance(left, LiteralText) and isinstance(right, LiteralText))
        assert all(s.text for s in segments if isinstance(s, LiteralText))
