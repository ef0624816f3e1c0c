"""Quickstart example for l10nprintf.

This example demonstrates message lookup and printf-style formatting with
locale-aware decimal handling.

Note: Catalog examples compile a throwaway catalog into a temporary
directory. Real applications ship .mo files built with 'pybabel compile'.
"""

import tempfile
from pathlib import Path

from babel.messages.catalog import Catalog
from babel.messages.mofile import write_mo

from l10nprintf import EngineConfig, MessageFormatter, NewlineMode

# Example 1: Sequential and positional arguments
print("=" * 50)
print("Example 1: Argument Order")
print("=" * 50)

mf = MessageFormatter(locale="en_US")

print(mf.format("%s bought %d apples", "Ken", 3))
# Output: Ken bought 3 apples

print(mf.format("%2$s bought %1$d apples", 3, "Ken"))
# Output: Ken bought 3 apples

print(mf.format("%s and %s", "Ann"))
# Output: Ann and

print(mf.format("%5$s stays literal", "a", "b"))
# Output: %5$s stays literal

# Example 2: Decimal separators
print("\n" + "=" * 50)
print("Example 2: Locale Decimal Point")
print("=" * 50)

de = MessageFormatter(locale="de_DE")

for amount in ("3.14", "3,14"):
    print(de.format("Preis: %.2f EUR", amount))
# Output: Preis: 3,14 EUR (both times)

print(de.format("%'d Einwohner", 3645000))
# Output: 3.645.000 Einwohner

print(de.numeric_profile)
# Output: LocaleNumericProfile(decimal_point=',', grouping_supported=True)

# Example 3: Plural lookups from a compiled catalog
print("\n" + "=" * 50)
print("Example 3: Catalog Lookups")
print("=" * 50)

catalog = Catalog(locale="de_DE")
catalog.add(
    ("Here is %d apple.", "Here are %d apples."),
    ("Hier ist %d Apfel.", "Hier sind %d Äpfel."),
)
catalog.add("Open", "Öffnen", context="Menu")

with tempfile.TemporaryDirectory() as tmpdir:
    target = Path(tmpdir) / "de_DE" / "LC_MESSAGES"
    target.mkdir(parents=True)
    with (target / "shop.mo").open("wb") as fileobj:
        write_mo(fileobj, catalog)

    shop = MessageFormatter.from_config(
        EngineConfig(locale="de_DE", message_locale="de_DE", localedir=tmpdir, domain="shop")
    )
    for n in (1, 4):
        shop.nprint("Here is %d apple.", "Here are %d apples.", n)
    # Output: Hier ist 1 Apfel.
    #         Hier sind 4 Äpfel.

    print(shop.pgettext("Menu", "Open"))
    # Output: Öffnen

    print(shop.sgettext("Menu|Close"))
    # Output: Close

# Example 4: Escapes and newline modes
print("\n" + "=" * 50)
print("Example 4: Escapes and Print Modes")
print("=" * 50)

mf.print_message("$Name:\\t%s", "Ken")
# Output: Name:	Ken

mf.print("%d%% done", 50, mode=NewlineMode.NO_NEWLINE)
mf.echo("")
# Output: 50% done
