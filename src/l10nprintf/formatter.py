"""MessageFormatter - translation lookup plus printf-style formatting.

Pipeline for one call:

    template -> tokenize -> reorder -> classify -> normalize -> render

Each stage is a pure function over call-local values. The only shared state
is the numeric profile of the native formatter, detected once on first use.

Formatting never raises on bad templates or missing arguments. Only failures
of the collaborators (message resolver, native formatter) propagate.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from l10nprintf.config import EngineConfig
from l10nprintf.enums import NewlineMode
from l10nprintf.localization import (
    LOOKUP_VARIANTS,
    CommandResolver,
    MessageResolver,
    NullResolver,
    TranslationsResolver,
    lookup,
    parse_count,
)
from l10nprintf.runtime import (
    BabelPrintf,
    CommandPrintf,
    LocaleNumericProfile,
    NativeFormatter,
    NumericProfileCache,
    classify_plan,
    emit,
    normalize_arguments,
    render,
    reorder,
)
from l10nprintf.syntax import tokenize
from l10nprintf.syntax import unescape as _unescape

if TYPE_CHECKING:
    from typing import TextIO

__all__ = ["MessageFormatter"]

logger = logging.getLogger(__name__)


def _as_text(value: object) -> str:
    return value if isinstance(value, str) else str(value)


class MessageFormatter:
    """Translation-aware printf engine.

    Args:
        resolver: Message catalog (default: NullResolver)
        native: Native printf collaborator (default: BabelPrintf for locale)
        locale: Locale for the default BabelPrintf (default: en_US)

    Example:
        >>> mf = MessageFormatter(locale="de_DE")
        >>> mf.format("%2$s has %1$.1f kg", "3.5", "Ken")
        'Ken has 3,5 kg'
        >>> mf.nprint("Here is %d apple.", "Here are %d apples.", 3)
        Here are 3 apples.
    """

    __slots__ = ("_profiles", "native", "resolver")

    def __init__(
        self,
        resolver: MessageResolver | None = None,
        native: NativeFormatter | None = None,
        locale: str | None = None,
    ) -> None:
        self.resolver: MessageResolver = NullResolver() if resolver is None else resolver
        if native is None:
            native = BabelPrintf() if locale is None else BabelPrintf(locale)
        self.native: NativeFormatter = native
        self._profiles = NumericProfileCache(native)

    def __repr__(self) -> str:
        return f"MessageFormatter(resolver={self.resolver!r}, native={self.native!r})"

    @classmethod
    def from_config(cls, config: EngineConfig | None = None) -> MessageFormatter:
        """Build resolver and native formatter from a configuration.

        Args:
            config: Configuration (default: EngineConfig.from_env())

        Raises:
            ResolverError: If a catalog in config.localedir cannot be read
        """
        if config is None:
            config = EngineConfig.from_env()

        resolver: MessageResolver
        if config.uses_catalogs:
            resolver = TranslationsResolver.load(
                config.localedir or "", [config.message_locale], config.domain
            )
        else:
            resolver = CommandResolver(
                config.gettext_command,
                config.ngettext_command,
                text_domain=config.domain,
            )

        native: NativeFormatter
        if config.printf_command is None:
            native = BabelPrintf(config.locale)
        else:
            native = CommandPrintf(config.printf_command)

        logger.debug("Formatter from %s: %r, %r", config, resolver, native)
        return cls(resolver=resolver, native=native)

    # ------------------------------------------------------------------
    # Numeric profile
    # ------------------------------------------------------------------

    @property
    def numeric_profile(self) -> LocaleNumericProfile:
        """Numeric profile of the native formatter, detected on first use."""
        return self._profiles.get()

    def detect_numeric_profile(self) -> LocaleNumericProfile:
        """Probe the native formatter (if not done yet) and return its profile."""
        return self._profiles.get()

    def redetect_numeric_profile(self) -> LocaleNumericProfile:
        """Probe again and replace the cached profile."""
        return self._profiles.redetect()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, template: str, *args: object) -> str:
        """Substitute args into template and return the text.

        Arguments are converted with str(). Positional directives (%2$s)
        bind by index; sequential ones consume arguments in order.

        Raises:
            NativeFormatError: If the native formatter fails
        """
        return self._render(template, args, newline=False)

    def formatln(self, template: str, *args: object) -> str:
        """Like format() with a trailing line terminator."""
        return self._render(template, args, newline=True)

    def print(
        self,
        template: str,
        *args: object,
        mode: NewlineMode | str = NewlineMode.NEWLINE,
        file: TextIO | None = None,
    ) -> None:
        """Format and write to file (default: sys.stdout).

        Args:
            template: printf-style template
            *args: Format arguments
            mode: NewlineMode.NO_NEWLINE ("-n") or NewlineMode.NEWLINE ("--")
            file: Output stream
        """
        emit(self.format(template, *args), NewlineMode(mode), file)

    def echo(self, text: str, file: TextIO | None = None) -> None:
        """Write text unchanged plus a line terminator."""
        emit(text, NewlineMode.NEWLINE, file)

    @staticmethod
    def unescape(text: str) -> str:
        """Decode backslash escape sequences in text."""
        return _unescape(text)

    def _render(self, template: str, args: Sequence[object], *, newline: bool) -> str:
        arguments = [_as_text(a) for a in args]
        plan = reorder(tokenize(template), arguments)
        profile = self._profiles.get()
        segments = normalize_arguments(classify_plan(plan, profile), profile)
        return render(segments, self.native, newline=newline)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def lookup(self, variant: str, *params: object) -> str:
        """Resolve a message using the named lookup variant."""
        return lookup(self.resolver, LOOKUP_VARIANTS[variant], *params)

    def gettext(self, msgid: str) -> str:
        return self.lookup("gettext", msgid)

    def ngettext(self, msgid: str, msgid_plural: str, n: object) -> str:
        return self.lookup("ngettext", msgid, msgid_plural, n)

    def sgettext(self, msgid: str) -> str:
        """gettext that drops a "Context|" prefix when untranslated."""
        return self.lookup("sgettext", msgid)

    def nsgettext(self, msgid: str, msgid_plural: str, n: object) -> str:
        return self.lookup("nsgettext", msgid, msgid_plural, n)

    def pgettext(self, msgctxt: str, msgid: str) -> str:
        return self.lookup("pgettext", msgctxt, msgid)

    def npgettext(self, msgctxt: str, msgid: str, msgid_plural: str, n: object) -> str:
        return self.lookup("npgettext", msgctxt, msgid, msgid_plural, n)

    @staticmethod
    def gettext_noop(msgid: str) -> str:
        """Mark msgid for extraction without translating it."""
        return msgid

    # ------------------------------------------------------------------
    # Lookup and print
    # ------------------------------------------------------------------

    def print_variant(
        self,
        variant: str,
        params: Sequence[object],
        args: Sequence[object],
        *,
        mode: NewlineMode | str = NewlineMode.NEWLINE,
        file: TextIO | None = None,
    ) -> None:
        """Look up a message and print it formatted.

        For plural variants the count becomes the first format argument, so
        "%d apples" needs no extra argument.

        Args:
            variant: Lookup variant name
            params: Lookup parameters (see localization.lookup)
            args: Additional format arguments
            mode: Newline mode
            file: Output stream
        """
        descriptor = LOOKUP_VARIANTS[variant]
        template = lookup(self.resolver, descriptor, *params)
        if descriptor.is_plural:
            args = (parse_count(params[-1]), *args)
        self.print(template, *args, mode=mode, file=file)

    def print_message(
        self,
        msgid: str,
        *args: object,
        mode: NewlineMode | str = NewlineMode.NEWLINE,
        file: TextIO | None = None,
    ) -> None:
        """gettext, then print formatted."""
        self.print_variant("gettext", (msgid,), args, mode=mode, file=file)

    def nprint(
        self,
        msgid: str,
        msgid_plural: str,
        n: object,
        *args: object,
        mode: NewlineMode | str = NewlineMode.NEWLINE,
        file: TextIO | None = None,
    ) -> None:
        """ngettext, then print formatted with n as the first argument."""
        self.print_variant("ngettext", (msgid, msgid_plural, n), args, mode=mode, file=file)

    def sprint(
        self,
        msgid: str,
        *args: object,
        mode: NewlineMode | str = NewlineMode.NEWLINE,
        file: TextIO | None = None,
    ) -> None:
        self.print_variant("sgettext", (msgid,), args, mode=mode, file=file)

    def nsprint(
        self,
        msgid: str,
        msgid_plural: str,
        n: object,
        *args: object,
        mode: NewlineMode | str = NewlineMode.NEWLINE,
        file: TextIO | None = None,
    ) -> None:
        self.print_variant("nsgettext", (msgid, msgid_plural, n), args, mode=mode, file=file)

    def pprint(
        self,
        msgctxt: str,
        msgid: str,
        *args: object,
        mode: NewlineMode | str = NewlineMode.NEWLINE,
        file: TextIO | None = None,
    ) -> None:
        self.print_variant("pgettext", (msgctxt, msgid), args, mode=mode, file=file)

    def npprint(
        self,
        msgctxt: str,
        msgid: str,
        msgid_plural: str,
        n: object,
        *args: object,
        mode: NewlineMode | str = NewlineMode.NEWLINE,
        file: TextIO | None = None,
    ) -> None:
        self.print_variant(
            "npgettext", (msgctxt, msgid, msgid_plural, n), args, mode=mode, file=file
        )

