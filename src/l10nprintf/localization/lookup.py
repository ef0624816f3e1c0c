"""Lookup variants as data.

Each gettext-family entry point is described by a LookupVariant (name plus
parameter shape). One dispatcher, lookup(), serves all of them:

    gettext    (msgid)
    ngettext   (msgid, msgid_plural, n)
    sgettext   (msgid)                          context prefix stripped
    nsgettext  (msgid, msgid_plural, n)         context prefix stripped
    pgettext   (msgctxt, msgid)
    npgettext  (msgctxt, msgid, msgid_plural, n)

Every msgid parameter goes through decode_message_key, so "$"-marked keys
are escape-decoded before resolution.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import TYPE_CHECKING

from l10nprintf.constants import CONTEXT_SEPARATOR
from l10nprintf.diagnostics import ErrorTemplate
from l10nprintf.enums import ParamKind
from l10nprintf.syntax import decode_message_key

if TYPE_CHECKING:
    from .resolvers import MessageResolver

__all__ = [
    "LOOKUP_VARIANTS",
    "LookupVariant",
    "lookup",
    "parse_count",
    "strip_context",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LookupVariant:
    """Descriptor of one lookup entry point.

    Attributes:
        name: Public function name
        params: Parameter kinds in call order
        strip_context: Drop a "Context|" prefix from untranslated results
    """

    name: str
    params: tuple[ParamKind, ...]
    strip_context: bool = False

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def is_plural(self) -> bool:
        return ParamKind.N in self.params

    @property
    def has_context(self) -> bool:
        return ParamKind.MSGCTXT in self.params


_ID = ParamKind.MSGID
_CTX = ParamKind.MSGCTXT
_N = ParamKind.N

LOOKUP_VARIANTS: Mapping[str, LookupVariant] = MappingProxyType(
    {
        variant.name: variant
        for variant in (
            LookupVariant("gettext", (_ID,)),
            LookupVariant("ngettext", (_ID, _ID, _N)),
            LookupVariant("sgettext", (_ID,), strip_context=True),
            LookupVariant("nsgettext", (_ID, _ID, _N), strip_context=True),
            LookupVariant("pgettext", (_CTX, _ID)),
            LookupVariant("npgettext", (_CTX, _ID, _ID, _N)),
        )
    }
)


def parse_count(value: object) -> int:
    """Convert a plural count to int.

    Integers pass through. Text is read as a decimal number and truncated;
    anything unreadable counts as 0.

    Example:
        >>> parse_count("3"), parse_count(2.7), parse_count("many")
        (3, 2, 0)
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        number = Decimal(str(value).strip())
        return int(number)
    except (InvalidOperation, ValueError, OverflowError):
        logger.debug("Plural count %r is not a number, using 0", value)
        return 0


def strip_context(text: str) -> str:
    """Drop everything up to and including the first '|'.

    Example:
        >>> strip_context("Menu|Open")
        'Open'
        >>> strip_context("Open")
        'Open'
    """
    _, found, rest = text.partition(CONTEXT_SEPARATOR)
    return rest if found else text


def lookup(resolver: MessageResolver, variant: LookupVariant | str, *params: object) -> str:
    """Resolve a message with the parameter shape of variant.

    Args:
        resolver: Message catalog
        variant: LookupVariant or its name
        *params: Positional parameters matching variant.params

    Returns:
        Localized text, or the (decoded) source text when untranslated

    Raises:
        KeyError: If variant names no known lookup
        TypeError: If the parameter count does not match
        ResolverError: If the resolver fails

    Example:
        >>> from l10nprintf.localization.resolvers import NullResolver
        >>> lookup(NullResolver(), "ngettext", "apple", "apples", 2)
        'apples'
    """
    if isinstance(variant, str):
        variant = LOOKUP_VARIANTS[variant]
    if len(params) != variant.arity:
        diagnostic = ErrorTemplate.invalid_lookup_variant(
            variant.name, variant.arity, len(params)
        )
        raise TypeError(diagnostic.message)

    msgids: list[str] = []
    msgctxt: str | None = None
    n: int | None = None
    for kind, value in zip(variant.params, params, strict=True):
        match kind:
            case ParamKind.MSGID:
                msgids.append(decode_message_key(str(value)))
            case ParamKind.MSGCTXT:
                msgctxt = str(value)
            case ParamKind.N:
                n = parse_count(value)

    msgid = msgids[0]
    msgid_plural = msgids[1] if len(msgids) > 1 else None
    result = resolver.resolve(msgid, msgctxt=msgctxt, msgid_plural=msgid_plural, n=n)

    if variant.strip_context and result in msgids:
        result = strip_context(result)
    return result
