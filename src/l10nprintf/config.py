"""Engine configuration.

One frozen dataclass holds every collaborator choice. Build it directly or
from the process environment:

    I18N_PRINTF       external printf command (unset: in-process BabelPrintf)
    I18N_GETTEXT      gettext command (default: gettext)
    I18N_NGETTEXT     ngettext command (default: ngettext)
    TEXTDOMAIN        message catalog domain
    TEXTDOMAINDIR     directory holding compiled catalogs
    LC_ALL, LC_NUMERIC, LANG
                      numeric locale, first non-C value wins
    LANGUAGE, LC_ALL, LC_MESSAGES, LANG
                      catalog locale, first non-C value wins
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from l10nprintf.constants import DEFAULT_GETTEXT_COMMAND, DEFAULT_NGETTEXT_COMMAND
from l10nprintf.diagnostics import ConfigurationError, ErrorTemplate
from l10nprintf.locale_utils import get_message_locale, get_system_locale, normalize_locale

__all__ = ["EngineConfig"]


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable collaborator configuration for MessageFormatter.

    Attributes:
        locale: Numeric locale for the in-process printf (default: from
            LC_ALL / LC_NUMERIC / LANG, else en_US)
        printf_command: External printf to use instead of the in-process
            one (default: None)
        gettext_command: Singular lookup tool (default: "gettext")
        ngettext_command: Plural lookup tool (default: "ngettext")
        domain: Message catalog domain (default: None)
        localedir: Catalog directory. When set, catalogs are loaded in
            process with Babel instead of running the lookup tools.
        message_locale: Locale whose catalog is loaded from localedir
            (default: from LANGUAGE / LC_ALL / LC_MESSAGES / LANG, else en_US)

    Example:
        >>> config = EngineConfig(locale="de_DE", localedir="locale", domain="app")
        >>> config.uses_catalogs
        True
    """

    locale: str = field(default_factory=get_system_locale)
    printf_command: str | None = None
    gettext_command: str = DEFAULT_GETTEXT_COMMAND
    ngettext_command: str = DEFAULT_NGETTEXT_COMMAND
    domain: str | None = None
    localedir: str | None = None
    message_locale: str = field(default_factory=get_message_locale)

    def __post_init__(self) -> None:
        """Validate command names and normalize both locales.

        Raises:
            ConfigurationError: If a command or locale is empty or not a string
        """
        for name in ("gettext_command", "ngettext_command"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(ErrorTemplate.invalid_command(name, value))
        if self.printf_command is not None and (
            not isinstance(self.printf_command, str) or not self.printf_command.strip()
        ):
            raise ConfigurationError(
                ErrorTemplate.invalid_command("printf_command", self.printf_command)
            )
        for name in ("locale", "message_locale"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                msg = f"{name} must be a non-empty string, got {value!r}"
                raise ConfigurationError(msg)
            # Frozen dataclass: bypass immutability for normalization
            object.__setattr__(self, name, normalize_locale(value))

    @property
    def uses_catalogs(self) -> bool:
        """True if messages come from compiled catalogs in localedir."""
        return self.localedir is not None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineConfig:
        """Build a configuration from environment variables.

        Empty variables count as unset.

        Args:
            environ: Variable mapping (default: os.environ)
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(name)
            return value or None

        return cls(
            locale=get_system_locale(environ=env),
            printf_command=get("I18N_PRINTF"),
            gettext_command=get("I18N_GETTEXT") or DEFAULT_GETTEXT_COMMAND,
            ngettext_command=get("I18N_NGETTEXT") or DEFAULT_NGETTEXT_COMMAND,
            domain=get("TEXTDOMAIN"),
            localedir=get("TEXTDOMAINDIR"),
            message_locale=get_message_locale(environ=env),
        )
