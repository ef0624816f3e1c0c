"""Locale numeric profile detection.

The profile records two facts about the active native formatter:

    decimal_point      - symbol it emits between integer and fraction digits
                         and is able to read back
    grouping_supported - whether it accepts the ' grouping flag

Both are probed through the formatter itself, once, and cached. A formatter
that prints a locale decimal symbol but cannot parse it on input (GNU
coreutils printf <= 8.30 has this defect) is pinned to '.' for the lifetime
of the detected profile.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import TYPE_CHECKING

from l10nprintf.constants import CANONICAL_DECIMAL_POINT
from l10nprintf.diagnostics import NativeFormatError

if TYPE_CHECKING:
    from .native import NativeFormatter

__all__ = [
    "LocaleNumericProfile",
    "NumericProfileCache",
    "detect_numeric_profile",
    "probe_decimal_point",
    "probe_grouping",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleNumericProfile:
    """Immutable numeric capabilities of a native formatter.

    Attributes:
        decimal_point: Decimal separator the formatter reads and writes
        grouping_supported: True if the ' flag is accepted
    """

    decimal_point: str = CANONICAL_DECIMAL_POINT
    grouping_supported: bool = False


def probe_decimal_point(formatter: NativeFormatter) -> str:
    """Detect the decimal point the formatter round-trips.

    Formats 1 with one fraction digit, strips the leading '1' and trailing
    '0', then checks that '1<symbol>2' is accepted as input.

    Returns:
        The detected symbol, or '.' when detection or the round trip fails
    """
    try:
        sample = formatter.format("%1.1f", ["1"])
    except NativeFormatError as e:
        logger.debug("Decimal point probe failed, using '.': %s", e)
        return CANONICAL_DECIMAL_POINT

    symbol = (sample or "1.0").removeprefix("1").removesuffix("0") or CANONICAL_DECIMAL_POINT
    if symbol == CANONICAL_DECIMAL_POINT:
        return symbol

    try:
        formatter.format("%f", [f"1{symbol}2"])
    except NativeFormatError:
        logger.debug(
            "Formatter %r prints %r but cannot parse it, using '.'", formatter, symbol
        )
        return CANONICAL_DECIMAL_POINT
    return symbol


def probe_grouping(formatter: NativeFormatter) -> bool:
    """True if formatting 0 with %'d yields exactly '0'."""
    try:
        return formatter.format("%'d", ["0"]) == "0"
    except NativeFormatError:
        return False


def detect_numeric_profile(formatter: NativeFormatter) -> LocaleNumericProfile:
    """Run all probes against formatter.

    Example:
        >>> from l10nprintf.runtime.native import BabelPrintf
        >>> detect_numeric_profile(BabelPrintf("de_DE"))
        LocaleNumericProfile(decimal_point=',', grouping_supported=True)
    """
    profile = LocaleNumericProfile(
        decimal_point=probe_decimal_point(formatter),
        grouping_supported=probe_grouping(formatter),
    )
    logger.debug("Detected numeric profile for %r: %s", formatter, profile)
    return profile


class NumericProfileCache:
    """Lazily detected, explicitly re-detectable profile for one formatter.

    Thread Safety:
        Detection and replacement run under an RLock. Readers get an
        immutable LocaleNumericProfile and never observe a partial update.
    """

    def __init__(self, formatter: NativeFormatter) -> None:
        self._formatter = formatter
        self._profile: LocaleNumericProfile | None = None
        self._lock = RLock()

    @property
    def is_detected(self) -> bool:
        """True once a profile has been computed."""
        return self._profile is not None

    def get(self) -> LocaleNumericProfile:
        """Return the cached profile, detecting it on first use."""
        profile = self._profile
        if profile is not None:
            return profile
        with self._lock:
            if self._profile is None:
                self._profile = detect_numeric_profile(self._formatter)
            return self._profile

    def redetect(self) -> LocaleNumericProfile:
        """Probe again (e.g. after a locale change) and replace the cache."""
        with self._lock:
            self._profile = detect_numeric_profile(self._formatter)
            return self._profile

    def clear(self) -> None:
        """Forget the cached profile; the next get() probes again."""
        with self._lock:
            self._profile = None
