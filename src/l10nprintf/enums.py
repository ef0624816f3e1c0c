"""Enumerations for l10nprintf type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.
"""

from enum import StrEnum


class ArgKind(StrEnum):
    """How a directive names its argument.

    StrEnum provides automatic string conversion: str(ArgKind.POSITIONAL) == "positional"
    """

    POSITIONAL = "positional"
    """Explicit index: %2$s"""

    SEQUENTIAL = "sequential"
    """Next unconsumed argument in scan order: %s"""

    LITERAL_PERCENT = "literal_percent"
    """Doubled percent sign, consumes nothing: %%"""


class DirectiveClass(StrEnum):
    """Classification of a bound directive by conversion type."""

    NUMERIC_DECIMAL = "numeric_decimal"
    """Floating conversion (f, F, e, E, g, G) needing separator remap"""

    OTHER = "other"
    """Integer, text and unrecognized conversions"""


class NewlineMode(StrEnum):
    """Trailing line terminator policy for print operations.

    Values mirror the command-line selectors of the printing helpers, so
    NewlineMode("-n") and NewlineMode("--") both work.
    """

    NO_NEWLINE = "-n"
    """Print exactly the formatted text"""

    NEWLINE = "--"
    """Append a trailing newline (default)"""


class ParamKind(StrEnum):
    """Parameter shape of a message lookup variant."""

    MSGID = "msgid"
    """Message key, escape-decoded when marked"""

    MSGCTXT = "msgctxt"
    """Disambiguating context"""

    N = "n"
    """Plural selector count"""


__all__ = [
    "ArgKind",
    "DirectiveClass",
    "NewlineMode",
    "ParamKind",
]
