"""Output dispatch.

Joins classified segments into one native template (literal '%' doubled),
collects the arguments in directive order and calls the native formatter
exactly once.
"""

import sys
from collections.abc import Sequence
from typing import TextIO

from l10nprintf.constants import DIRECTIVE_START, LINE_TERMINATOR
from l10nprintf.enums import NewlineMode
from l10nprintf.syntax import LiteralText

from .classifier import ClassifiedDirective
from .native import NativeFormatter

__all__ = ["build_native_call", "emit", "escape_literal", "render"]


def escape_literal(text: str) -> str:
    """Double every '%' so the native formatter prints it literally."""
    return text.replace(DIRECTIVE_START, DIRECTIVE_START * 2)


def build_native_call(
    segments: Sequence[LiteralText | ClassifiedDirective],
) -> tuple[str, tuple[str, ...]]:
    """Build the (template, arguments) pair for the native formatter.

    Example:
        >>> build_native_call([LiteralText("100% of ")])
        ('100%% of ', ())
    """
    template: list[str] = []
    arguments: list[str] = []
    for segment in segments:
        if isinstance(segment, LiteralText):
            template.append(escape_literal(segment.text))
        else:
            template.append(segment.native_spec)
            arguments.append(segment.argument)
    return "".join(template), tuple(arguments)


def render(
    segments: Sequence[LiteralText | ClassifiedDirective],
    formatter: NativeFormatter,
    *,
    newline: bool = False,
) -> str:
    """Render segments through the native formatter.

    Raises:
        NativeFormatError: If the native formatter fails
    """
    template, arguments = build_native_call(segments)
    if newline:
        template += LINE_TERMINATOR
    return formatter.format(template, arguments)


def emit(text: str, mode: NewlineMode = NewlineMode.NEWLINE, file: TextIO | None = None) -> None:
    """Write text to file (default: sys.stdout), honoring the newline mode."""
    stream = sys.stdout if file is None else file
    stream.write(text if mode is NewlineMode.NO_NEWLINE else text + LINE_TERMINATOR)
