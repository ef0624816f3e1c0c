"""l10nprintf - translation-aware printf formatting.

Resolves message keys through gettext-style catalogs and substitutes
positional (%2$s) or sequential (%s) arguments with printf directives.
Numeric arguments are normalized to the decimal separator of the active
locale before formatting, whatever separator the caller used.

Public API:
    MessageFormatter - Lookup and formatting engine
    EngineConfig - Collaborator configuration (from_env for I18N_* variables)
    sprintf, sprintfln, print_formatted - Shared-formatter formatting
    gettext, ngettext, sgettext, nsgettext, pgettext, npgettext - Lookups
    unescape - Backslash escape decoding

Exceptions:
    L10nError - Base exception class
    ResolverError - Message resolver failure
    NativeFormatError - Native printf failure
    ConfigurationError - Invalid configuration

Submodules:
    l10nprintf.api - Module-level functions and shorthand aliases
    l10nprintf.syntax - Escape decoding and directive tokenizer
    l10nprintf.runtime - Reordering, classification, numeric profile, dispatch
    l10nprintf.localization - Message resolvers and lookup variants
    l10nprintf.diagnostics - Diagnostic codes and error types
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .api import (
    configure,
    gettext,
    ngettext,
    npgettext,
    nsgettext,
    pgettext,
    print_formatted,
    sgettext,
    sprintf,
    sprintfln,
    unescape,
)
from .config import EngineConfig
from .diagnostics import ConfigurationError, L10nError, NativeFormatError, ResolverError
from .enums import NewlineMode
from .formatter import MessageFormatter

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("l10nprintf")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "EngineConfig",
    "L10nError",
    "MessageFormatter",
    "NativeFormatError",
    "NewlineMode",
    "ResolverError",
    "__version__",
    "configure",
    "gettext",
    "ngettext",
    "npgettext",
    "nsgettext",
    "pgettext",
    "print_formatted",
    "sgettext",
    "sprintf",
    "sprintfln",
    "unescape",
]
