"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Collaborator errors (external resolver / formatter)
        2000-2999: Formatting errors (native formatter input)
        3000-3999: Configuration errors
    """

    # Collaborator errors (1000-1999)
    COMMAND_NOT_FOUND = 1001
    COMMAND_FAILED = 1002
    CATALOG_LOAD_FAILED = 1003

    # Formatting errors (2000-2999)
    INVALID_NUMERIC_ARGUMENT = 2001
    NUMERIC_OUT_OF_RANGE = 2002

    # Configuration errors (3000-3999)
    UNKNOWN_LOCALE = 3001
    INVALID_COMMAND = 3002
    INVALID_LOOKUP_VARIANT = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        command: External command line involved, when any
        argument: Argument text that caused the error, when any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    command: tuple[str, ...] | None = None
    argument: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[COMMAND_FAILED]: Command 'printf' exited with status 1
              = command: printf -- %d abc
              = help: Check the arguments passed to the external tool

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
