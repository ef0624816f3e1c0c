"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale code normalization and system locale detection used by
the configuration layer and the in-process printf.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from l10nprintf.constants import FALLBACK_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_message_locale",
    "get_system_locale",
    "normalize_locale",
    "strip_encoding",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Encoding and modifier suffixes (".UTF-8", "@euro") are dropped.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
    """
    return strip_encoding(locale_code).replace("-", "_")


def strip_encoding(locale_code: str) -> str:
    """Drop ".encoding" and "@modifier" suffixes from a POSIX locale name."""
    return locale_code.split(".", 1)[0].split("@", 1)[0]


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def _first_locale(candidates: Iterable[str | None]) -> str | None:
    for value in candidates:
        if value and strip_encoding(value) not in _PSEUDO_LOCALES:
            return normalize_locale(value)
    return None


def get_system_locale(*, environ: Mapping[str, str] | None = None) -> str:
    """Detect the numeric locale from environment variables.

    Detection order follows POSIX precedence for numeric formatting:
    LC_ALL, LC_NUMERIC, LANG. The "C" and "POSIX" pseudo-locales are
    skipped.

    Args:
        environ: Variable mapping to read (default: os.environ)

    Returns:
        Detected locale code in POSIX format, "en_US" when none is set.
    """
    env = os.environ if environ is None else environ
    found = _first_locale(env.get(var) for var in ("LC_ALL", "LC_NUMERIC", "LANG"))
    return found or FALLBACK_LOCALE


def get_message_locale(*, environ: Mapping[str, str] | None = None) -> str:
    """Detect the locale used to pick message catalogs.

    The first entry of the GNU LANGUAGE priority list wins, then LC_ALL,
    LC_MESSAGES and LANG. "C" and "POSIX" are skipped.

    Example:
        >>> get_message_locale(environ={"LC_NUMERIC": "de_DE", "LC_MESSAGES": "fr_FR.UTF-8"})
        'fr_FR'
    """
    env = os.environ if environ is None else environ
    language = env.get("LANGUAGE", "").split(":", 1)[0]
    found = _first_locale(
        [language, *(env.get(var) for var in ("LC_ALL", "LC_MESSAGES", "LANG"))]
    )
    return found or FALLBACK_LOCALE
