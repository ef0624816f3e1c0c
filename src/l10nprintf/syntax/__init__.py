"""Text-level syntax: escape decoding and format string tokenizing.

Zero external dependencies.
"""

from .cursor import Cursor
from .directive import Directive, LiteralText, Segment, tokenize
from .escape import ESCAPE_TABLE, build_escape_table, decode_message_key, unescape

__all__ = [
    "ESCAPE_TABLE",
    "Cursor",
    "Directive",
    "LiteralText",
    "Segment",
    "build_escape_table",
    "decode_message_key",
    "tokenize",
    "unescape",
]
