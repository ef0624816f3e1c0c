"""Diagnostic formatting service.

Renders Diagnostic objects as multi-line text or a single line.
Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style output (default)
    SIMPLE = "simple"  # Single-line format


def _escape_control(text: str) -> str:
    """Make control characters visible so log lines stay on one line."""
    if text.isprintable():
        return text
    return text.encode("unicode_escape").decode("ascii")


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple)

    Example:
        >>> diagnostic = ErrorTemplate.command_not_found("gettext")
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        COMMAND_NOT_FOUND: Command 'gettext' not found
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        lines = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{_escape_control(diagnostic.message)}"
        ]
        if diagnostic.command:
            rendered = " ".join(_escape_control(part) for part in diagnostic.command)
            lines.append(f"  = command: {rendered}")
        if diagnostic.argument is not None:
            lines.append(f"  = argument: {_escape_control(diagnostic.argument)}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {_escape_control(diagnostic.message)}"
