"""Directive engine runtime.

Argument reordering, classification, numeric normalization, output dispatch
and the native printf collaborators. Depends on the syntax package for
tokenized directives.
"""

from .classifier import ClassifiedDirective, classify, classify_conversion, classify_plan
from .dispatcher import build_native_call, emit, escape_literal, render
from .native import BabelPrintf, CommandPrintf, NativeFormatter
from .normalizer import normalize_arguments, normalize_decimal
from .numeric_profile import (
    LocaleNumericProfile,
    NumericProfileCache,
    detect_numeric_profile,
    probe_decimal_point,
    probe_grouping,
)
from .reorder import BoundDirective, FormatPlan, reorder

__all__ = [
    "BabelPrintf",
    "BoundDirective",
    "ClassifiedDirective",
    "CommandPrintf",
    "FormatPlan",
    "LocaleNumericProfile",
    "NativeFormatter",
    "NumericProfileCache",
    "build_native_call",
    "classify",
    "classify_conversion",
    "classify_plan",
    "detect_numeric_profile",
    "emit",
    "escape_literal",
    "normalize_arguments",
    "normalize_decimal",
    "probe_decimal_point",
    "probe_grouping",
    "render",
    "reorder",
]
