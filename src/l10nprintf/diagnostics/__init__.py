"""Diagnostic system for l10nprintf errors.

Provides structured error diagnostics with codes and hints, and the
exception hierarchy used for collaborator failures.

Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ConfigurationError, L10nError, NativeFormatError, ResolverError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "L10nError",
    "NativeFormatError",
    "OutputFormat",
    "ResolverError",
]
