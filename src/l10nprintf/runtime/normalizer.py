"""Decimal separator normalization for numeric arguments.

Callers write decimals however their data arrives ("3.14", "3,14",
"3٫14"). Before the native formatter parses them, the first separator
found (Arabic decimal separator, then comma, then period) is replaced with
the decimal point of the active profile.
"""

from collections.abc import Sequence
from dataclasses import replace

from l10nprintf.constants import DECIMAL_SEPARATORS
from l10nprintf.enums import DirectiveClass
from l10nprintf.syntax import LiteralText

from .classifier import ClassifiedDirective
from .numeric_profile import LocaleNumericProfile

__all__ = ["normalize_arguments", "normalize_decimal"]


def normalize_decimal(text: str, decimal_point: str) -> str:
    """Replace the first decimal separator in text with decimal_point.

    Only one occurrence is replaced. Separators are tried in priority order,
    so a comma wins over a period when both are present.

    Example:
        >>> normalize_decimal("3.14", ",")
        '3,14'
        >>> normalize_decimal("1٫5", ".")
        '1.5'
        >>> normalize_decimal("42", ",")
        '42'
    """
    for separator in DECIMAL_SEPARATORS:
        head, found, tail = text.partition(separator)
        if found:
            return f"{head}{decimal_point}{tail}"
    return text


def normalize_arguments(
    segments: Sequence[LiteralText | ClassifiedDirective],
    profile: LocaleNumericProfile,
) -> tuple[LiteralText | ClassifiedDirective, ...]:
    """Rewrite the argument of every NUMERIC_DECIMAL directive."""
    return tuple(
        replace(segment, argument=normalize_decimal(segment.argument, profile.decimal_point))
        if isinstance(segment, ClassifiedDirective)
        and segment.classification is DirectiveClass.NUMERIC_DECIMAL
        else segment
        for segment in segments
    )
