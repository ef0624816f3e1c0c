"""Native printf collaborators.

The directive engine never renders numbers itself: after reordering and
separator normalization it hands one printf-style template and a flat list
of text arguments to a native formatter.

Implementations:
    BabelPrintf   - in-process printf using Babel's CLDR number symbols
    CommandPrintf - external printf(1) process

Both accept the standard directive grammar without positional indicators,
treat '%%' as a literal percent, ignore surplus arguments and raise
NativeFormatError when they cannot produce output.
"""

from __future__ import annotations

import logging
import math
import subprocess
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from functools import cached_property
from typing import TYPE_CHECKING, Protocol

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from l10nprintf.constants import (
    DEFAULT_PRINTF_COMMAND,
    DIRECTIVE_START,
    ESCAPE_CHAR,
    FALLBACK_LOCALE,
    GROUPING_FLAG,
)
from l10nprintf.diagnostics import ErrorTemplate, NativeFormatError
from l10nprintf.enums import ArgKind
from l10nprintf.locale_utils import get_babel_locale
from l10nprintf.syntax import Directive, LiteralText, tokenize, unescape

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["BabelPrintf", "CommandPrintf", "NativeFormatter"]

logger = logging.getLogger(__name__)

# Unsigned conversions wrap negative values like a 64-bit C integer.
_UNSIGNED_MODULUS = 1 << 64
_INTEGER_MIN = -(1 << 63)

_INTEGER_FORMAT = {"d": "d", "i": "d", "u": "d", "o": "o", "x": "x", "X": "X"}


class NativeFormatter(Protocol):
    """Protocol for the printf primitive the engine delegates to."""

    def format(self, template: str, arguments: Sequence[str]) -> str:
        """Render template with arguments.

        Args:
            template: printf format without positional indicators
            arguments: Flat argument list in directive order

        Returns:
            Rendered text

        Raises:
            NativeFormatError: If the formatter cannot produce output
        """
        ...


def _pad(body: str, prefix: str, width: str, flags: str, *, zero_fill: bool) -> str:
    """Apply width, '-' and '0' flags to a rendered value."""
    size = int(width) if width else 0
    missing = size - len(prefix) - len(body)
    if missing <= 0:
        return prefix + body
    if "-" in flags:
        return prefix + body + " " * missing
    if zero_fill and "0" in flags:
        return prefix + "0" * missing + body
    return " " * missing + prefix + body


def _sign(negative: bool, flags: str) -> str:
    if negative:
        return "-"
    if "+" in flags:
        return "+"
    if " " in flags:
        return " "
    return ""


class BabelPrintf:
    """In-process printf with CLDR decimal and grouping symbols.

    Numeric arguments are text. Floating arguments are parsed with
    babel.numbers.parse_decimal for the formatter's locale, so the locale's
    own decimal symbol round-trips. Integer arguments accept decimal, octal
    (leading 0), hexadecimal (0x) and character constants ('c).

    Supported conversions: d i o u x X f F e E g G c s b. The grouping flag
    (') is honored for d i u f F g G using the locale group symbol.

    Example:
        >>> BabelPrintf("de_DE").format("%.2f|%'d", ["3,14159", "1234567"])
        '3,14|1.234.567'
        >>> BabelPrintf("en_US").format("%5s|%-5s|%05.1f", ["ab", "cd", "2.25"])
        '   ab|cd   |002.2'
    """

    def __init__(self, locale_code: str = FALLBACK_LOCALE) -> None:
        """Resolve the Babel locale, falling back to en_US with a warning."""
        self.locale_code = locale_code
        self.is_fallback = False
        try:
            locale = get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "%s. Falling back to %s",
                ErrorTemplate.unknown_locale(locale_code, str(e)),
                FALLBACK_LOCALE,
            )
            locale = get_babel_locale(FALLBACK_LOCALE)
            self.is_fallback = True
        self._locale: Locale = locale
        self.decimal_symbol: str = babel_numbers.get_decimal_symbol(locale)
        self.group_symbol: str = babel_numbers.get_group_symbol(locale)

    def __repr__(self) -> str:
        return f"BabelPrintf({self.locale_code!r})"

    def format(self, template: str, arguments: Sequence[str]) -> str:
        """Render template; see NativeFormatter.format."""
        values = iter(arguments)
        parts: list[str] = []
        for segment in tokenize(template):
            if isinstance(segment, LiteralText):
                parts.append(segment.text)
            elif segment.kind is ArgKind.LITERAL_PERCENT:
                parts.append(DIRECTIVE_START)
            elif segment.kind is ArgKind.POSITIONAL or not segment.is_well_formed:
                parts.append(segment.source)
            else:
                argument = next(values, "")
                try:
                    parts.append(self._convert(segment, argument))
                except NativeFormatError as e:
                    e.partial_output = "".join(parts)
                    raise
        return "".join(parts)

    def _convert(self, directive: Directive, argument: str) -> str:
        conversion = directive.conversion
        if conversion in _INTEGER_FORMAT:
            return self._render_integer(directive, self._parse_integer(argument, conversion))
        if conversion in "fFeEgG":
            return self._render_decimal(directive, self._parse_decimal(argument, conversion))
        if conversion == "c":
            return _pad(argument[:1], "", directive.width, directive.flags, zero_fill=False)
        text = unescape(argument) if conversion == "b" else argument
        if directive.precision is not None:
            text = text[: int(directive.precision or "0")]
        return _pad(text, "", directive.width, directive.flags, zero_fill=False)

    @staticmethod
    def _parse_integer(argument: str, conversion: str) -> int:
        text = argument.strip()
        if not text:
            return 0
        if text[0] in "'\"":
            return ord(text[1]) if len(text) > 1 else 0
        sign = -1 if text.startswith("-") else 1
        body = text.lstrip("+-")
        base = 10
        if body[:2].lower() == "0x":
            base, body = 16, body[2:]
        elif len(body) > 1 and body.startswith("0"):
            base = 8
        try:
            value = sign * int(body, base)
        except ValueError:
            diagnostic = ErrorTemplate.invalid_numeric_argument(argument, conversion)
            raise NativeFormatError(diagnostic) from None
        if not _INTEGER_MIN <= value < _UNSIGNED_MODULUS:
            diagnostic = ErrorTemplate.numeric_out_of_range(argument, conversion)
            raise NativeFormatError(diagnostic)
        return value

    def _parse_decimal(self, argument: str, conversion: str) -> Decimal:
        text = argument.strip()
        if not text:
            return Decimal(0)
        try:
            return babel_numbers.parse_decimal(text, locale=self._locale)
        except (babel_numbers.NumberFormatError, InvalidOperation, ValueError):
            diagnostic = ErrorTemplate.invalid_numeric_argument(argument, conversion)
            raise NativeFormatError(diagnostic) from None

    def _render_integer(self, directive: Directive, value: int) -> str:
        conversion = directive.conversion
        flags = directive.flags
        signed = conversion in "di"
        magnitude = abs(value) if signed else value % _UNSIGNED_MODULUS

        zero_precision = directive.precision is not None and int(directive.precision or "0") == 0
        if zero_precision and magnitude == 0:
            digits = ""
        elif GROUPING_FLAG in flags and conversion in "diu":
            digits = babel_numbers.format_decimal(magnitude, format="#,##0", locale=self._locale)
        else:
            digits = format(magnitude, _INTEGER_FORMAT[conversion])
            if directive.precision:
                digits = digits.rjust(int(directive.precision), "0")

        prefix = _sign(value < 0, flags) if signed else ""
        if "#" in flags:
            if conversion == "o" and not digits.startswith("0"):
                digits = "0" + digits
            elif conversion in "xX" and magnitude != 0:
                prefix += "0" + conversion
        return _pad(digits, prefix, directive.width, flags, zero_fill=directive.precision is None)

    def _render_decimal(self, directive: Directive, value: Decimal) -> str:
        conversion = directive.conversion
        flags = directive.flags
        number = float(value)
        finite = math.isfinite(number)
        negative = not math.isnan(number) and math.copysign(1.0, number) < 0
        precision = 6 if directive.precision is None else int(directive.precision or "0")

        spec = "#" if "#" in flags else ""
        if GROUPING_FLAG in flags and conversion in "fFgG":
            spec += ","
        body = format(abs(number), f"{spec}.{precision}{conversion}")
        if finite:
            body = body.translate({ord("."): self.decimal_symbol, ord(","): self.group_symbol})
        return _pad(body, _sign(negative, flags), directive.width, flags, zero_fill=finite)


class CommandPrintf:
    """printf(1) run as an external process.

    Backslashes in the template are doubled so that the tool does not expand
    escape sequences in message text. Whether the tool needs "--" before the
    template is probed on first use.

    Attributes:
        command: Executable name or path
    """

    def __init__(self, command: str = DEFAULT_PRINTF_COMMAND) -> None:
        self.command = command

    def __repr__(self) -> str:
        return f"CommandPrintf({self.command!r})"

    @cached_property
    def accepts_option_terminator(self) -> bool:
        """True if the tool prints 'x' for: printf -- x"""
        completed = self._run([self.command, "--", "x"], check=False)
        result = completed.returncode == 0 and completed.stdout == "x"
        logger.debug("%s accepts '--': %s", self.command, result)
        return result

    def format(self, template: str, arguments: Sequence[str]) -> str:
        """Render template with the external tool; see NativeFormatter.format."""
        argv = [self.command]
        if self.accepts_option_terminator:
            argv.append("--")
        argv.append(template.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2))
        argv.extend(arguments)
        return self._run(argv, check=True).stdout

    def _run(self, argv: list[str], *, check: bool) -> subprocess.CompletedProcess[str]:
        try:
            # Undecodable bytes (8-bit %b output) survive as surrogate escapes.
            completed = subprocess.run(
                argv, capture_output=True, text=True, errors="surrogateescape", check=False
            )
        except (FileNotFoundError, PermissionError) as e:
            raise NativeFormatError(ErrorTemplate.command_not_found(self.command)) from e
        if check and completed.returncode != 0:
            diagnostic = ErrorTemplate.command_failed(argv, completed.returncode, completed.stderr)
            raise NativeFormatError(diagnostic, partial_output=completed.stdout)
        return completed
