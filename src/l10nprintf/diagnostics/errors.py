"""Exception hierarchy with structured diagnostics.

Formatting calls degrade instead of raising; these exceptions are reserved
for collaborator failures and invalid configuration.

Zero external dependencies.
"""

from .codes import Diagnostic


class L10nError(Exception):
    """Base exception for all l10nprintf errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize L10nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ResolverError(L10nError):
    """The external message resolver failed.

    Raised when the gettext tool exits with a non-zero status or a catalog
    cannot be loaded. A missing tool is not an error: resolution falls back
    to the untranslated key.
    """


class NativeFormatError(L10nError):
    """The native numeric/text formatter failed.

    Attributes:
        partial_output: Text produced before the failure (may be empty)
    """

    def __init__(self, message: str | Diagnostic, *, partial_output: str = "") -> None:
        super().__init__(message)
        self.partial_output = partial_output


class ConfigurationError(L10nError, ValueError):
    """Invalid engine configuration."""
