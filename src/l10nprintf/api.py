"""Module-level entry points backed by one shared MessageFormatter.

The shared formatter is built from the environment (EngineConfig.from_env)
on first use. Call configure() beforehand to choose other collaborators, or
later to replace it.

Shorthand aliases:
    _    print_message      n_   nprint
    s_   sprint             ns_  nsprint
    p_   pprint             np_  npprint
    N_   gettext_noop

Example:
    >>> from l10nprintf import api
    >>> api.configure(locale="fr_FR")
    >>> api.sprintf("%s: %.2f", "Total", "1234.5")
    'Total: 1234,50'
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import TYPE_CHECKING

from l10nprintf.config import EngineConfig
from l10nprintf.enums import NewlineMode
from l10nprintf.formatter import MessageFormatter
from l10nprintf.syntax import unescape

if TYPE_CHECKING:
    from typing import TextIO

    from l10nprintf.localization import MessageResolver
    from l10nprintf.runtime import LocaleNumericProfile, NativeFormatter

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Shared formatter
    "configure",
    "get_shared_formatter",
    "reset_shared_formatter",
    # Formatting
    "sprintf",
    "sprintfln",
    "print_formatted",
    "echo",
    "unescape",
    "detect_numeric_profile",
    "redetect_numeric_profile",
    # Lookups
    "gettext",
    "ngettext",
    "sgettext",
    "nsgettext",
    "pgettext",
    "npgettext",
    "gettext_noop",
    # Lookup and print
    "print_message",
    "nprint",
    "sprint",
    "nsprint",
    "pprint",
    "npprint",
    # Aliases
    "_",
    "n_",
    "s_",
    "ns_",
    "p_",
    "np_",
    "N_",
]

logger = logging.getLogger(__name__)

_shared: MessageFormatter | None = None
_shared_lock = Lock()


def get_shared_formatter() -> MessageFormatter:
    """Return the process-wide formatter, creating it on first use.

    Thread Safety:
        Creation is guarded by a lock; every caller gets the same instance.
    """
    global _shared  # noqa: PLW0603
    formatter = _shared
    if formatter is not None:
        return formatter
    with _shared_lock:
        if _shared is None:
            _shared = MessageFormatter.from_config(EngineConfig.from_env())
            logger.debug("Created shared formatter %r", _shared)
        return _shared


def configure(
    config: EngineConfig | None = None,
    *,
    resolver: MessageResolver | None = None,
    native: NativeFormatter | None = None,
    locale: str | None = None,
) -> MessageFormatter:
    """Replace the shared formatter.

    Pass either a complete EngineConfig or individual collaborators. With
    collaborators, anything left out gets the MessageFormatter default.

    Returns:
        The new shared formatter

    Raises:
        TypeError: If config is combined with resolver, native or locale
    """
    global _shared  # noqa: PLW0603
    if config is not None and any(v is not None for v in (resolver, native, locale)):
        msg = "configure() takes either config or resolver/native/locale, not both"
        raise TypeError(msg)
    if config is not None:
        formatter = MessageFormatter.from_config(config)
    else:
        formatter = MessageFormatter(resolver=resolver, native=native, locale=locale)
    with _shared_lock:
        _shared = formatter
    return formatter


def reset_shared_formatter() -> None:
    """Drop the shared formatter; the next call rebuilds it from the environment."""
    global _shared  # noqa: PLW0603
    with _shared_lock:
        _shared = None


# ============================================================================
# FORMATTING
# ============================================================================


def sprintf(template: str, *args: object) -> str:
    """Format template with args and return the text."""
    return get_shared_formatter().format(template, *args)


def sprintfln(template: str, *args: object) -> str:
    """Format template with args and return the text plus a newline."""
    return get_shared_formatter().formatln(template, *args)


def print_formatted(
    template: str,
    *args: object,
    mode: NewlineMode | str = NewlineMode.NEWLINE,
    file: TextIO | None = None,
) -> None:
    """Format and print; mode selects "-n" (no newline) or "--" (newline)."""
    get_shared_formatter().print(template, *args, mode=mode, file=file)


def echo(text: str, file: TextIO | None = None) -> None:
    """Print text unchanged plus a newline."""
    get_shared_formatter().echo(text, file=file)


def detect_numeric_profile() -> LocaleNumericProfile:
    """Numeric profile of the shared formatter (probed on first use)."""
    return get_shared_formatter().detect_numeric_profile()


def redetect_numeric_profile() -> LocaleNumericProfile:
    """Probe the shared formatter again, e.g. after changing the locale."""
    return get_shared_formatter().redetect_numeric_profile()


# ============================================================================
# LOOKUPS
# ============================================================================


def gettext(msgid: str) -> str:
    return get_shared_formatter().gettext(msgid)


def ngettext(msgid: str, msgid_plural: str, n: object) -> str:
    return get_shared_formatter().ngettext(msgid, msgid_plural, n)


def sgettext(msgid: str) -> str:
    return get_shared_formatter().sgettext(msgid)


def nsgettext(msgid: str, msgid_plural: str, n: object) -> str:
    return get_shared_formatter().nsgettext(msgid, msgid_plural, n)


def pgettext(msgctxt: str, msgid: str) -> str:
    return get_shared_formatter().pgettext(msgctxt, msgid)


def npgettext(msgctxt: str, msgid: str, msgid_plural: str, n: object) -> str:
    return get_shared_formatter().npgettext(msgctxt, msgid, msgid_plural, n)


def gettext_noop(msgid: str) -> str:
    """Return msgid unchanged; marks it for message extraction."""
    return msgid


# ============================================================================
# LOOKUP AND PRINT
# ============================================================================


def print_message(
    msgid: str,
    *args: object,
    mode: NewlineMode | str = NewlineMode.NEWLINE,
    file: TextIO | None = None,
) -> None:
    """Translate msgid and print it formatted with args."""
    get_shared_formatter().print_message(msgid, *args, mode=mode, file=file)


def nprint(
    msgid: str,
    msgid_plural: str,
    n: object,
    *args: object,
    mode: NewlineMode | str = NewlineMode.NEWLINE,
    file: TextIO | None = None,
) -> None:
    """Translate the plural form for n and print it with n as first argument."""
    get_shared_formatter().nprint(msgid, msgid_plural, n, *args, mode=mode, file=file)


def sprint(
    msgid: str,
    *args: object,
    mode: NewlineMode | str = NewlineMode.NEWLINE,
    file: TextIO | None = None,
) -> None:
    get_shared_formatter().sprint(msgid, *args, mode=mode, file=file)


def nsprint(
    msgid: str,
    msgid_plural: str,
    n: object,
    *args: object,
    mode: NewlineMode | str = NewlineMode.NEWLINE,
    file: TextIO | None = None,
) -> None:
    get_shared_formatter().nsprint(msgid, msgid_plural, n, *args, mode=mode, file=file)


def pprint(
    msgctxt: str,
    msgid: str,
    *args: object,
    mode: NewlineMode | str = NewlineMode.NEWLINE,
    file: TextIO | None = None,
) -> None:
    get_shared_formatter().pprint(msgctxt, msgid, *args, mode=mode, file=file)


def npprint(
    msgctxt: str,
    msgid: str,
    msgid_plural: str,
    n: object,
    *args: object,
    mode: NewlineMode | str = NewlineMode.NEWLINE,
    file: TextIO | None = None,
) -> None:
    get_shared_formatter().npprint(
        msgctxt, msgid, msgid_plural, n, *args, mode=mode, file=file
    )


# Shorthand aliases
_ = print_message
n_ = nprint
s_ = sprint
ns_ = nsprint
p_ = pprint
np_ = npprint
N_ = gettext_noop
