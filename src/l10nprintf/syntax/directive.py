"""Format string tokenizer.

Scans a printf-style format string once into typed segments: literal runs
and Directive records. Later stages (argument reordering, classification,
the in-process printf) work on these records instead of re-scanning text.

Grammar:
    %%                                    literal percent
    % [digits $] flags* width? (. digits?)? length? conversion

State machine:
    ScanningLiteral -> AtPercent on '%'
    AtPercent -> Done on a second '%'
    AtPercent -> InFlags after an optional 'digits$' positional indicator
    InFlags -> InWidth -> InPrecision -> InLength -> Done

A directive cut off by the end of the string is not an error: the rest of
the string, starting at its '%', becomes literal text.

Zero external dependencies.
"""

from dataclasses import dataclass

from l10nprintf.constants import (
    CONVERSIONS,
    DIGITS,
    DIRECTIVE_START,
    FLAG_CHARS,
    LENGTH_CHARS,
    MAX_LENGTH_MODIFIER,
    POSITIONAL_MARKER,
    PRECISION_MARKER,
)
from l10nprintf.enums import ArgKind

from .cursor import Cursor

__all__ = [
    "Directive",
    "LiteralText",
    "Segment",
    "tokenize",
]


@dataclass(frozen=True, slots=True)
class LiteralText:
    """Run of text copied to the output unchanged."""

    text: str


@dataclass(frozen=True, slots=True)
class Directive:
    """One parsed conversion directive.

    Attributes:
        kind: How the directive names its argument
        source: Original directive text, including '%' and any 'N$'
        position: 1-based argument index for positional directives
        flags: Flag characters in source order
        width: Width digits ("" when absent)
        precision: Precision digits; None when there is no '.', "" for a bare '.'
        length: Length modifier ("" when absent)
        conversion: Conversion character
    """

    kind: ArgKind
    source: str
    position: int | None = None
    flags: str = ""
    width: str = ""
    precision: str | None = None
    length: str = ""
    conversion: str = ""

    @property
    def is_well_formed(self) -> bool:
        """True if the conversion is one the native formatters understand."""
        if self.kind is ArgKind.LITERAL_PERCENT:
            return True
        return self.conversion != "" and self.conversion in CONVERSIONS

    def native_spec(self, flags: str | None = None) -> str:
        """Render the directive without its positional indicator.

        Args:
            flags: Replacement flag text (None keeps the parsed flags)

        Example:
            >>> tokenize("%2$'-8.2f")[0].native_spec(flags="-")
            '%-8.2f'
        """
        used_flags = self.flags if flags is None else flags
        precision = "" if self.precision is None else PRECISION_MARKER + self.precision
        return (
            f"{DIRECTIVE_START}{used_flags}{self.width}{precision}"
            f"{self.length}{self.conversion}"
        )


Segment = LiteralText | Directive


def _scan_directive(start: Cursor) -> tuple[Directive | None, Cursor]:
    """Scan one directive; start points at its '%'.

    Returns:
        (directive, cursor after it), or (None, start) when the string ends
        before a conversion character.
    """
    cursor = start.advance()
    if cursor.peek() == DIRECTIVE_START:
        end = cursor.advance()
        return Directive(ArgKind.LITERAL_PERCENT, start.slice_to(end.pos), conversion="%"), end

    kind = ArgKind.SEQUENTIAL
    position: int | None = None
    digits, after_digits = cursor.take_while(DIGITS)
    if after_digits.peek() == POSITIONAL_MARKER:
        kind = ArgKind.POSITIONAL
        position = int(digits) if digits else 0
        cursor = after_digits.advance()

    flags, cursor = cursor.take_while(FLAG_CHARS)
    width, cursor = cursor.take_while(DIGITS)
    precision: str | None = None
    if cursor.peek() == PRECISION_MARKER:
        precision, cursor = cursor.advance().take_while(DIGITS)
    length, cursor = cursor.take_while(LENGTH_CHARS, limit=MAX_LENGTH_MODIFIER)

    if cursor.is_eof:
        return None, start

    conversion = cursor.current
    end = cursor.advance()
    return (
        Directive(
            kind=kind,
            source=start.slice_to(end.pos),
            position=position,
            flags=flags,
            width=width,
            precision=precision,
            length=length,
            conversion=conversion,
        ),
        end,
    )


def tokenize(template: str) -> tuple[Segment, ...]:
    """Split a format string into literal runs and directives.

    Adjacent literal text is merged into a single LiteralText.

    Example:
        >>> [type(s).__name__ for s in tokenize("%2$s has %1$d apples")]
        ['Directive', 'LiteralText', 'Directive', 'LiteralText']
        >>> tokenize("100%")
        (LiteralText(text='100%'),)
    """
    segments: list[Segment] = []
    pending: list[str] = []
    cursor = Cursor(template, 0)

    while not cursor.is_eof:
        percent = cursor.find(DIRECTIVE_START)
        pending.append(cursor.slice_to(percent.pos))
        if percent.is_eof:
            break
        directive, cursor = _scan_directive(percent)
        if directive is None:
            pending.append(percent.rest)
            break
        if pending:
            text = "".join(pending)
            if text:
                segments.append(LiteralText(text))
            pending.clear()
        segments.append(directive)

    text = "".join(pending)
    if text:
        segments.append(LiteralText(text))
    return tuple(segments)
