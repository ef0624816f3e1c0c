"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def command_not_found(command: str) -> Diagnostic:
        """External tool is not on PATH.

        Args:
            command: Command name that could not be located

        Returns:
            Diagnostic for COMMAND_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.COMMAND_NOT_FOUND,
            message=f"Command '{command}' not found",
            hint="Install the tool or point the configuration at another command",
            severity="warning",
        )

    @staticmethod
    def command_failed(argv: Sequence[str], returncode: int, stderr: str) -> Diagnostic:
        """External tool exited with a non-zero status.

        Args:
            argv: Full command line
            returncode: Exit status
            stderr: Captured standard error (may be empty)

        Returns:
            Diagnostic for COMMAND_FAILED
        """
        detail = stderr.strip()
        msg = f"Command '{argv[0]}' exited with status {returncode}"
        if detail:
            msg = f"{msg}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.COMMAND_FAILED,
            message=msg,
            hint="Check the arguments passed to the external tool",
            command=tuple(argv),
        )

    @staticmethod
    def catalog_load_failed(dirname: str, domain: str, reason: str) -> Diagnostic:
        """Compiled message catalog could not be read.

        Returns:
            Diagnostic for CATALOG_LOAD_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_LOAD_FAILED,
            message=f"Cannot load catalog '{domain}' from '{dirname}': {reason}",
            hint="Compile the catalog with 'pybabel compile' or 'msgfmt'",
        )

    @staticmethod
    def invalid_numeric_argument(value: str, conversion: str) -> Diagnostic:
        """Argument text is not a number for a numeric conversion.

        Args:
            value: Argument text as supplied
            conversion: Conversion character of the directive

        Returns:
            Diagnostic for INVALID_NUMERIC_ARGUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMERIC_ARGUMENT,
            message=f"Invalid number for '%{conversion}': '{value}'",
            hint="Pass digits with at most one decimal separator",
            argument=value,
        )

    @staticmethod
    def numeric_out_of_range(value: str, conversion: str) -> Diagnostic:
        """Numeric argument cannot be represented by the conversion.

        Returns:
            Diagnostic for NUMERIC_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.NUMERIC_OUT_OF_RANGE,
            message=f"Number out of range for '%{conversion}': '{value}'",
            argument=value,
        )

    @staticmethod
    def unknown_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier not known to Babel.

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=f"Unknown locale '{locale_code}': {reason}",
            hint="Use a CLDR locale identifier such as 'en_US' or 'de-DE'",
        )

    @staticmethod
    def invalid_command(field_name: str, value: object) -> Diagnostic:
        """Configured command name is empty or not a string.

        Returns:
            Diagnostic for INVALID_COMMAND
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_COMMAND,
            message=f"{field_name} must be a non-empty command name, got {value!r}",
        )

    @staticmethod
    def invalid_lookup_variant(name: str, expected: int, received: int) -> Diagnostic:
        """Lookup variant called with the wrong number of parameters.

        Returns:
            Diagnostic for INVALID_LOOKUP_VARIANT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOOKUP_VARIANT,
            message=f"{name}() takes {expected} parameter(s), got {received}",
        )
