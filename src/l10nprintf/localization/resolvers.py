"""Message resolution collaborators.

A resolver maps (msgid, msgctxt, msgid_plural, n) to localized text. When
there is no translation, the msgid comes back unchanged (the msgid_plural
when n != 1).

Components:
    MessageResolver     - Protocol (structural typing)
    NullResolver        - No catalog; plural choice is n == 1
    TranslationsResolver - gettext.NullTranslations / babel.support.Translations
    CommandResolver     - External gettext(1) / ngettext(1) tools
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Iterable, Sequence
from functools import cached_property
from typing import TYPE_CHECKING, Protocol

from babel.support import Translations

from l10nprintf.constants import (
    DEFAULT_GETTEXT_COMMAND,
    DEFAULT_NGETTEXT_COMMAND,
    ESCAPE_CHAR,
)
from l10nprintf.diagnostics import ErrorTemplate, ResolverError

if TYPE_CHECKING:
    import gettext

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "MessageResolver",
    # Implementations
    "NullResolver",
    "TranslationsResolver",
    "CommandResolver",
    # Helpers
    "select_plural_form",
]

logger = logging.getLogger(__name__)

# Text domain used while probing tool capabilities, so that probes never
# hit a real catalog.
_PROBE_DOMAIN = "-"


class MessageResolver(Protocol):
    """Protocol for message catalogs.

    Example:
        >>> class Upper:
        ...     def resolve(self, msgid, *, msgctxt=None, msgid_plural=None, n=None):
        ...         return select_plural_form(msgid, msgid_plural, n).upper()
    """

    def resolve(
        self,
        msgid: str,
        *,
        msgctxt: str | None = None,
        msgid_plural: str | None = None,
        n: int | None = None,
    ) -> str:
        """Return localized text, or the source form when untranslated.

        Raises:
            ResolverError: If the underlying catalog or tool fails
        """
        ...


def select_plural_form(msgid: str, msgid_plural: str | None, n: int | None) -> str:
    """Choose between singular and plural source text: singular iff n == 1.

    Example:
        >>> [select_plural_form("apple", "apples", n) for n in (0, 1, 2)]
        ['apples', 'apple', 'apples']
    """
    if msgid_plural is None or n == 1:
        return msgid
    return msgid_plural


class NullResolver:
    """Resolver without a catalog. Every message is untranslated."""

    def __repr__(self) -> str:
        return "NullResolver()"

    def resolve(
        self,
        msgid: str,
        *,
        msgctxt: str | None = None,  # noqa: ARG002
        msgid_plural: str | None = None,
        n: int | None = None,
    ) -> str:
        return select_plural_form(msgid, msgid_plural, n)


class TranslationsResolver:
    """Resolver backed by an in-process gettext catalog.

    Accepts anything with the gettext.NullTranslations lookup methods:
    stdlib gettext objects as well as babel.support.Translations.

    Example:
        >>> resolver = TranslationsResolver.load("locale", ["de_DE"], "messages")
        >>> resolver.resolve("Open", msgctxt="Menu")
        'Öffnen'
    """

    def __init__(self, translations: gettext.NullTranslations) -> None:
        self.translations = translations

    def __repr__(self) -> str:
        return f"TranslationsResolver({type(self.translations).__name__})"

    @classmethod
    def load(
        cls,
        dirname: str | os.PathLike[str],
        locales: Iterable[str] | str | None = None,
        domain: str | None = None,
    ) -> TranslationsResolver:
        """Load compiled .mo catalogs with babel.support.Translations.load.

        A missing catalog is not an error: the resolver then returns every
        message untranslated.

        Raises:
            ResolverError: If a catalog exists but cannot be read
        """
        if isinstance(locales, str):
            locales = [locales]
        try:
            translations = Translations.load(dirname, locales, domain)
        except OSError as e:
            diagnostic = ErrorTemplate.catalog_load_failed(
                os.fspath(dirname), domain or Translations.DEFAULT_DOMAIN, str(e)
            )
            raise ResolverError(diagnostic) from e
        if not isinstance(translations, Translations):
            logger.debug("No catalog for %s in %s, messages stay untranslated", locales, dirname)
        return cls(translations)

    def resolve(
        self,
        msgid: str,
        *,
        msgctxt: str | None = None,
        msgid_plural: str | None = None,
        n: int | None = None,
    ) -> str:
        t = self.translations
        if msgid_plural is None:
            if msgctxt is None:
                return t.gettext(msgid)
            return t.pgettext(msgctxt, msgid)
        count = 0 if n is None else n
        if msgctxt is None:
            return t.ngettext(msgid, msgid_plural, count)
        return t.npgettext(msgctxt, msgid, msgid_plural, count)


class CommandResolver:
    """Resolver that runs the platform gettext and ngettext tools.

    Capabilities are probed once per instance:

        gettext -E ''      succeeds -> messages passed as-is with -E
                           fails    -> -e with backslashes doubled
        gettext -c '' ''   succeeds -> context lookups supported
        ngettext -c ...    succeeds -> plural context lookups supported

    Operands follow "--" so that messages and counts starting with "-" are
    not read as options.

    When a tool is not installed the resolver logs a warning once and
    answers like NullResolver. A tool that runs but exits non-zero raises
    ResolverError.

    Attributes:
        gettext_command: Singular lookup tool
        ngettext_command: Plural lookup tool
        text_domain: TEXTDOMAIN for lookups (None inherits the environment)
        text_domain_dir: TEXTDOMAINDIR for lookups (None inherits the environment)
    """

    def __init__(
        self,
        gettext_command: str = DEFAULT_GETTEXT_COMMAND,
        ngettext_command: str = DEFAULT_NGETTEXT_COMMAND,
        *,
        text_domain: str | None = None,
        text_domain_dir: str | None = None,
    ) -> None:
        self.gettext_command = gettext_command
        self.ngettext_command = ngettext_command
        self.text_domain = text_domain
        self.text_domain_dir = text_domain_dir

    def __repr__(self) -> str:
        return (
            f"CommandResolver({self.gettext_command!r}, {self.ngettext_command!r}, "
            f"text_domain={self.text_domain!r})"
        )

    # ------------------------------------------------------------------
    # Capability probes
    # ------------------------------------------------------------------

    @cached_property
    def has_gettext(self) -> bool:
        """True if the singular lookup tool is installed."""
        return self._locate(self.gettext_command)

    @cached_property
    def has_ngettext(self) -> bool:
        """True if the plural lookup tool is installed."""
        return self._locate(self.ngettext_command)

    @cached_property
    def supports_raw_option(self) -> bool:
        """True if gettext accepts -E (no escape expansion)."""
        return self.has_gettext and self._probe([self.gettext_command, "-E", ""])

    @cached_property
    def gettext_supports_context(self) -> bool:
        """True if gettext accepts -c CONTEXT."""
        return self.has_gettext and self._probe([self.gettext_command, "-c", "", ""])

    @cached_property
    def ngettext_supports_context(self) -> bool:
        """True if ngettext accepts -c CONTEXT."""
        return self.has_ngettext and self._probe(
            [self.ngettext_command, "-c", "", "", "", ""]
        )

    @staticmethod
    def _locate(command: str) -> bool:
        if shutil.which(command) is not None:
            return True
        logger.warning(
            "%s; messages will not be translated", ErrorTemplate.command_not_found(command)
        )
        return False

    def _probe(self, argv: list[str]) -> bool:
        env = self._environment(probe=True)
        try:
            completed = subprocess.run(
                argv, capture_output=True, text=True, errors="surrogateescape", env=env, check=False
            )
        except OSError:
            result = False
        else:
            result = completed.returncode == 0
        logger.debug("Probe %s: %s", argv, result)
        return result

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(
        self,
        msgid: str,
        *,
        msgctxt: str | None = None,
        msgid_plural: str | None = None,
        n: int | None = None,
    ) -> str:
        if msgid_plural is None:
            return self._gettext(msgid, msgctxt)
        return self._ngettext(msgid, msgid_plural, 0 if n is None else n, msgctxt)

    def _gettext(self, msgid: str, msgctxt: str | None) -> str:
        if not self.has_gettext:
            return msgid
        if msgctxt is not None and not self.gettext_supports_context:
            return msgid

        context = [] if msgctxt is None else ["-c", msgctxt]
        if self.supports_raw_option:
            argv = [self.gettext_command, "-E", *context, "--", msgid]
            return self._run(argv, self._environment())

        # Tools without -E expand escapes; double backslashes so they survive.
        # Some of them also fail on an empty TEXTDOMAIN.
        escaped = msgid.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2)
        argv = [self.gettext_command, "-e", *context, "--", escaped]
        env = self._environment()
        if not env.get("TEXTDOMAIN"):
            env["TEXTDOMAIN"] = _PROBE_DOMAIN
        return self._run(argv, env)

    def _ngettext(self, msgid: str, msgid_plural: str, n: int, msgctxt: str | None) -> str:
        if not self.has_ngettext:
            return select_plural_form(msgid, msgid_plural, n)
        context: list[str] = []
        if msgctxt is not None and self.ngettext_supports_context:
            context = ["-c", msgctxt]
        argv = [self.ngettext_command, "-E", *context, "--", msgid, msgid_plural, str(n)]
        return self._run(argv, self._environment())

    def _environment(self, *, probe: bool = False) -> dict[str, str]:
        env = dict(os.environ)
        if probe:
            env["TEXTDOMAIN"] = _PROBE_DOMAIN
        elif self.text_domain is not None:
            env["TEXTDOMAIN"] = self.text_domain
        if self.text_domain_dir is not None:
            env["TEXTDOMAINDIR"] = self.text_domain_dir
        return env

    @staticmethod
    def _run(argv: Sequence[str], env: dict[str, str]) -> str:
        try:
            completed = subprocess.run(
                list(argv),
                capture_output=True,
                text=True,
                errors="surrogateescape",
                env=env,
                check=False,
            )
        except OSError as e:
            raise ResolverError(ErrorTemplate.command_failed(argv, -1, str(e))) from e
        if completed.returncode != 0:
            raise ResolverError(
                ErrorTemplate.command_failed(argv, completed.returncode, completed.stderr)
            )
        return completed.stdout
