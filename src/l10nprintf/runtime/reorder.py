"""Argument reordering.

Turns tokenized segments plus the call-time arguments into a stream where
every directive carries its argument explicitly.

Rules:
    %%          literal '%', consumes nothing
    %N$conv     bound to argument N (1-based) when 1 <= N <= argc,
                otherwise left as literal directive text; never moves the
                sequential cursor
    %conv       bound to the next sequential argument, or to "" once the
                arguments are exhausted; a malformed directive becomes
                literal text but still advances the cursor

Surplus arguments are dropped. Nothing here raises.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from l10nprintf.constants import DIRECTIVE_START
from l10nprintf.enums import ArgKind
from l10nprintf.syntax import Directive, LiteralText, Segment

__all__ = ["BoundDirective", "FormatPlan", "reorder"]


@dataclass(frozen=True, slots=True)
class BoundDirective:
    """Directive with its argument value resolved."""

    directive: Directive
    argument: str


@dataclass(frozen=True, slots=True)
class FormatPlan:
    """Reordered directive stream.

    Attributes:
        segments: Literal runs and bound directives in output order
        argument_count: Number of call-time arguments that were available
    """

    segments: tuple[LiteralText | BoundDirective, ...]
    argument_count: int

    @property
    def arguments(self) -> tuple[str, ...]:
        """Argument values in directive order (the projected argument list)."""
        return tuple(s.argument for s in self.segments if isinstance(s, BoundDirective))


def reorder(segments: Sequence[Segment], arguments: Sequence[str]) -> FormatPlan:
    """Bind every directive to an explicit argument.

    Args:
        segments: Output of syntax.tokenize
        arguments: Call-time arguments as text

    Returns:
        FormatPlan with literal runs and bound directives

    Example:
        >>> from l10nprintf.syntax import tokenize
        >>> plan = reorder(tokenize("%2$s has %1$d apples"), ["3", "Ken"])
        >>> plan.arguments
        ('Ken', '3')
    """
    argc = len(arguments)
    cursor = 0
    out: list[LiteralText | BoundDirective] = []

    for segment in segments:
        if isinstance(segment, LiteralText):
            out.append(segment)
            continue

        match segment.kind:
            case ArgKind.LITERAL_PERCENT:
                out.append(LiteralText(DIRECTIVE_START))
            case ArgKind.POSITIONAL:
                position = segment.position or 0
                if segment.is_well_formed and 1 <= position <= argc:
                    out.append(BoundDirective(segment, arguments[position - 1]))
                else:
                    out.append(LiteralText(segment.source))
            case ArgKind.SEQUENTIAL:
                index = cursor
                cursor += 1
                if not segment.is_well_formed:
                    out.append(LiteralText(segment.source))
                elif index < argc:
                    out.append(BoundDirective(segment, arguments[index]))
                else:
                    out.append(BoundDirective(segment, ""))

    return FormatPlan(segments=tuple(out), argument_count=argc)
