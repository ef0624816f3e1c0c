"""Shared constants for l10nprintf.

Centralizes the character classes of the directive grammar, the escape
vocabulary and the collaborator defaults. Placing them here keeps the
syntax and runtime packages free of circular imports.

Constants are grouped by domain:
- Directive grammar: flag, digit, length and conversion characters
- Escapes: named escape letters and octal ranges
- Separators: decimal separators recognized in caller input
- Collaborators: default command names and fallback locale

Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Directive grammar
    "DIRECTIVE_START",
    "POSITIONAL_MARKER",
    "FLAG_CHARS",
    "GROUPING_FLAG",
    "DIGITS",
    "PRECISION_MARKER",
    "LENGTH_CHARS",
    "MAX_LENGTH_MODIFIER",
    "DECIMAL_LENGTHS",
    "DECIMAL_CONVERSIONS",
    "INTEGER_CONVERSIONS",
    "TEXT_CONVERSIONS",
    "CONVERSIONS",
    # Escapes
    "ESCAPE_CHAR",
    "NAMED_ESCAPES",
    "MAX_OCTAL_VALUE",
    "ESCAPE_MARKER",
    # Separators
    "ARABIC_DECIMAL_SEPARATOR",
    "DECIMAL_SEPARATORS",
    "CANONICAL_DECIMAL_POINT",
    # Collaborators
    "DEFAULT_GETTEXT_COMMAND",
    "DEFAULT_NGETTEXT_COMMAND",
    "DEFAULT_PRINTF_COMMAND",
    "FALLBACK_LOCALE",
    "CONTEXT_SEPARATOR",
    "LINE_TERMINATOR",
]

# ============================================================================
# DIRECTIVE GRAMMAR
# ============================================================================
#
#   %  [digits $]  flags*  width?  (. digits?)?  length?  conversion
#
# Anything that does not fit this shape is passed through as literal text.

DIRECTIVE_START: str = "%"
POSITIONAL_MARKER: str = "$"

# Flags accepted in any order and any count.
FLAG_CHARS: str = "-+ 0'#"

# Locale digit grouping (thousands separators).
GROUPING_FLAG: str = "'"

DIGITS: str = "0123456789"
PRECISION_MARKER: str = "."

# hh, h, ll, l, L, j, z, t
LENGTH_CHARS: str = "hlLjzt"
MAX_LENGTH_MODIFIER: int = 2

# Length modifiers that keep a floating conversion numeric-decimal.
DECIMAL_LENGTHS: frozenset[str] = frozenset({"", "h", "l", "L"})

DECIMAL_CONVERSIONS: str = "fFeEgG"
INTEGER_CONVERSIONS: str = "diouxX"
TEXT_CONVERSIONS: str = "csb"

# Every conversion the native formatters understand. Anything else makes the
# directive malformed.
CONVERSIONS: str = INTEGER_CONVERSIONS + DECIMAL_CONVERSIONS + TEXT_CONVERSIONS

# ============================================================================
# ESCAPES
# ============================================================================

ESCAPE_CHAR: str = "\\"

NAMED_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

# Octal escapes decode to 7-bit characters only; NUL is never produced.
MAX_OCTAL_VALUE: int = 0o177

# Message keys starting with this marker are escape-decoded before lookup.
ESCAPE_MARKER: str = "$"

# ============================================================================
# SEPARATORS
# ============================================================================

# U+066B ARABIC DECIMAL SEPARATOR
ARABIC_DECIMAL_SEPARATOR: str = "٫"

# Priority order used when remapping a caller-supplied decimal argument.
DECIMAL_SEPARATORS: tuple[str, ...] = (ARABIC_DECIMAL_SEPARATOR, ",", ".")

CANONICAL_DECIMAL_POINT: str = "."

# ============================================================================
# COLLABORATORS
# ============================================================================

DEFAULT_GETTEXT_COMMAND: str = "gettext"
DEFAULT_NGETTEXT_COMMAND: str = "ngettext"
DEFAULT_PRINTF_COMMAND: str = "printf"

FALLBACK_LOCALE: str = "en_US"

# "Context|text" keys used by the shortcut lookups.
CONTEXT_SEPARATOR: str = "|"

LINE_TERMINATOR: str = "\n"
