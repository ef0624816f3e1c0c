"""Backslash escape decoding for message keys.

The escape table is generated once at import from a small set of
descriptors: the literal backslash, the named control letters and the
three octal widths. Lookup tries the longest token first, so a valid
3-digit octal escape is never shadowed by its 1- or 2-digit prefix.

Unknown escapes are inert: the backslash and the following character are
copied through unchanged.

Zero external dependencies.
"""

from collections.abc import Mapping
from types import MappingProxyType

from l10nprintf.constants import (
    ESCAPE_CHAR,
    ESCAPE_MARKER,
    MAX_OCTAL_VALUE,
    NAMED_ESCAPES,
)

from .cursor import Cursor

__all__ = [
    "ESCAPE_TABLE",
    "build_escape_table",
    "decode_message_key",
    "unescape",
]

# (digit count, highest value) per octal width. Three digits stay 7-bit,
# which limits the leading digit to 0 or 1.
_OCTAL_WIDTHS: tuple[tuple[int, int], ...] = (
    (3, MAX_OCTAL_VALUE),
    (2, 0o77),
    (1, 0o7),
)


def build_escape_table() -> dict[str, str]:
    """Build the token -> character table.

    Tokens exclude the leading backslash. Octal tokens start at 1: NUL
    cannot be produced by an escape.

    Example:
        >>> table = build_escape_table()
        >>> table["101"], table["t"], table["\\\\"]
        ('A', '\\t', '\\\\')
    """
    table: dict[str, str] = {ESCAPE_CHAR: ESCAPE_CHAR}
    for width, highest in _OCTAL_WIDTHS:
        for value in range(1, highest + 1):
            table[format(value, f"0{width}o")] = chr(value)
    table.update(NAMED_ESCAPES)
    return table


# Read-only: decoding is shared by every caller in the process.
ESCAPE_TABLE: Mapping[str, str] = MappingProxyType(build_escape_table())

# Longest first: matches longer in digit count are tried before shorter ones.
_TOKEN_LENGTHS: tuple[int, ...] = tuple(
    sorted({len(token) for token in ESCAPE_TABLE}, reverse=True)
)


def unescape(text: str) -> str:
    """Decode backslash escape sequences.

    Args:
        text: Raw text possibly containing escapes

    Returns:
        Text with every recognized escape replaced by its character

    Example:
        >>> unescape("a\\\\tb\\\\n")
        'a\\tb\\n'
        >>> unescape("\\\\q")
        '\\\\q'
    """
    if ESCAPE_CHAR not in text:
        return text

    parts: list[str] = []
    cursor = Cursor(text, 0)
    while not cursor.is_eof:
        backslash = cursor.find(ESCAPE_CHAR)
        parts.append(cursor.slice_to(backslash.pos))
        if backslash.is_eof:
            break
        cursor = backslash.advance()
        for length in _TOKEN_LENGTHS:
            token = cursor.slice_to(cursor.pos + length)
            if len(token) == length and token in ESCAPE_TABLE:
                parts.append(ESCAPE_TABLE[token])
                cursor = cursor.advance(length)
                break
        else:
            # Unknown escape (or trailing backslash): copy through verbatim.
            parts.append(ESCAPE_CHAR)
            if not cursor.is_eof:
                parts.append(cursor.current)
                cursor = cursor.advance()
    return "".join(parts)


def decode_message_key(key: str) -> str:
    """Decode a message key if it carries the escape marker.

    Keys starting with "$" are escape-decoded (marker removed); all other
    keys are returned untouched.

    Example:
        >>> decode_message_key("$Tab:\\\\t.")
        'Tab:\\t.'
        >>> decode_message_key("Tab:\\\\t.")
        'Tab:\\\\t.'
    """
    if key.startswith(ESCAPE_MARKER):
        return unescape(key[len(ESCAPE_MARKER) :])
    return key
