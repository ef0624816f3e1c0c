"""Directive classification.

Tags each bound directive NUMERIC_DECIMAL or OTHER and renders the spec the
native formatter will see: no positional indicator, and no grouping flag
unless the formatter supports it.
"""

from dataclasses import dataclass

from l10nprintf.constants import DECIMAL_CONVERSIONS, DECIMAL_LENGTHS, GROUPING_FLAG
from l10nprintf.enums import DirectiveClass
from l10nprintf.syntax import LiteralText

from .numeric_profile import LocaleNumericProfile
from .reorder import BoundDirective, FormatPlan

__all__ = [
    "ClassifiedDirective",
    "classify",
    "classify_conversion",
    "classify_plan",
]


@dataclass(frozen=True, slots=True)
class ClassifiedDirective:
    """Bound directive ready for the native formatter.

    Attributes:
        bound: The bound directive
        classification: NUMERIC_DECIMAL or OTHER
        native_spec: Directive text passed to the native formatter
        argument: Argument text passed to the native formatter
    """

    bound: BoundDirective
    classification: DirectiveClass
    native_spec: str
    argument: str


def classify_conversion(length: str, conversion: str) -> DirectiveClass:
    """Classify by length modifier and conversion character.

    Example:
        >>> classify_conversion("L", "f")
        <DirectiveClass.NUMERIC_DECIMAL: 'numeric_decimal'>
        >>> classify_conversion("ll", "f")
        <DirectiveClass.OTHER: 'other'>
    """
    if conversion and conversion in DECIMAL_CONVERSIONS and length in DECIMAL_LENGTHS:
        return DirectiveClass.NUMERIC_DECIMAL
    return DirectiveClass.OTHER


def classify(bound: BoundDirective, *, grouping_supported: bool) -> ClassifiedDirective:
    """Classify one bound directive and build its native spec."""
    directive = bound.directive
    flags = directive.flags
    if not grouping_supported:
        flags = flags.replace(GROUPING_FLAG, "")
    return ClassifiedDirective(
        bound=bound,
        classification=classify_conversion(directive.length, directive.conversion),
        native_spec=directive.native_spec(flags=flags),
        argument=bound.argument,
    )


def classify_plan(
    plan: FormatPlan, profile: LocaleNumericProfile
) -> tuple[LiteralText | ClassifiedDirective, ...]:
    """Classify every bound directive of a plan; literals pass through."""
    return tuple(
        segment
        if isinstance(segment, LiteralText)
        else classify(segment, grouping_supported=profile.grouping_supported)
        for segment in plan.segments
    )
