"""Message lookup package.

Submodules:
    resolvers - MessageResolver protocol and its implementations
    lookup    - Lookup variant descriptors and the generic dispatcher
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .lookup import LOOKUP_VARIANTS, LookupVariant, lookup, parse_count, strip_context
from .resolvers import (
    CommandResolver,
    MessageResolver,
    NullResolver,
    TranslationsResolver,
    select_plural_form,
)

__all__ = [
    # Resolvers
    "MessageResolver",
    "NullResolver",
    "TranslationsResolver",
    "CommandResolver",
    "select_plural_form",
    # Lookup dispatch
    "LOOKUP_VARIANTS",
    "LookupVariant",
    "lookup",
    "parse_count",
    "strip_context",
]
