"""Tests for the module-level API and its shared formatter."""

import io
import threading

import pytest

import l10nprintf
from l10nprintf import EngineConfig, MessageFormatter, api
from l10nprintf.localization import CommandResolver
from tests.helpers.fakes import DictResolver


class TestSharedFormatter:
    """Lifecycle of the process-wide formatter."""

    def test_lazy_singleton(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The shared formatter is built once from the environment."""
        monkeypatch.delenv("TEXTDOMAINDIR", raising=False)
        first = api.get_shared_formatter()
        assert api.get_shared_formatter() is first
        assert isinstance(first.resolver, CommandResolver)

    def test_concurrent_creation(self) -> None:
        """Racing threads all receive the same instance."""
        seen: list[MessageFormatter] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            seen.append(api.get_shared_formatter())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len({id(f) for f in seen}) == 1

    def test_configure_collaborators(self) -> None:
        """configure() replaces the shared formatter."""
        formatter = api.configure(locale="de_DE")
        assert api.get_shared_formatter() is formatter
        assert api.sprintf("%.1f", "2.5") == "2,5"

    def test_configure_with_config(self) -> None:
        """A full EngineConfig is accepted."""
        api.configure(EngineConfig(locale="fr_FR"))
        assert api.sprintf("%.2f", "1234.5") == "1234,50"

    def test_config_with_collaborators_rejected(self) -> None:
        """Mixing a config with collaborators is an error, not a silent drop."""
        previous = api.configure(locale="en_US")
        with pytest.raises(TypeError, match="config"):
            api.configure(EngineConfig(locale="fr_FR"), resolver=DictResolver())
        with pytest.raises(TypeError):
            api.configure(EngineConfig(locale="fr_FR"), locale="de_DE")
        assert api.get_shared_formatter() is previous

    def test_reset(self) -> None:
        """reset_shared_formatter drops the configured instance."""
        formatter = api.configure(locale="de_DE")
        api.reset_shared_formatter()
        assert api.get_shared_formatter() is not formatter


class TestFormattingFunctions:
    """sprintf family."""

    @pytest.fixture(autouse=True)
    def _english(self) -> None:
        api.configure(locale="en_US")

    def test_sprintf(self) -> None:
        """Positional and sequential directives."""
        assert api.sprintf("%2$s has %1$d apples", "3", "Ken") == "Ken has 3 apples"
        assert api.sprintfln("%s", "x") == "x\n"

    def test_print_formatted(self) -> None:
        """print_formatted honors the newline mode."""
        stream = io.StringIO()
        api.print_formatted("%s", "a", mode="-n", file=stream)
        api.print_formatted("%s", "b", file=stream)
        assert stream.getvalue() == "ab\n"

    def test_print_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Output goes to stdout by default."""
        api.print_formatted("%d%%", 50)
        api.echo("done")
        assert capsys.readouterr().out == "50%\ndone\n"

    def test_unescape(self) -> None:
        """unescape is exported from the package."""
        assert l10nprintf.unescape("\\101\\102") == "AB"

    def test_profiles(self) -> None:
        """Profile helpers delegate to the shared formatter."""
        assert api.detect_numeric_profile().decimal_point == "."
        assert api.redetect_numeric_profile().grouping_supported is True


class TestLookupsAndAliases:
    """Lookup functions and shorthand aliases."""

    @pytest.fixture(autouse=True)
    def _catalog(self) -> None:
        api.configure(
            resolver=DictResolver(
                singular={(None, "Hello, %s"): "Hallo, %s"},
                plural={(None, "%d apple"): ("%d Apfel", "%d Äpfel")},
            ),
            locale="de_DE",
        )

    def test_lookups(self) -> None:
        """Lookups use the configured resolver."""
        assert l10nprintf.gettext("Hello, %s") == "Hallo, %s"
        assert l10nprintf.ngettext("%d apple", "%d apples", 2) == "%d Äpfel"
        assert l10nprintf.sgettext("Menu|Open") == "Open"
        assert l10nprintf.nsgettext("A|x", "A|xs", 1) == "x"
        assert l10nprintf.pgettext("Menu", "Open") == "Open"
        assert l10nprintf.npgettext("Menu", "x", "xs", 3) == "xs"
        assert api.gettext_noop("Hello") == "Hello"

    def test_print_aliases(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Short aliases print translated, formatted messages."""
        api._("Hello, %s", "Ken")
        api.n_("%d apple", "%d apples", 3)
        api.s_("Menu|Open")
        api.ns_("A|%d x", "A|%d xs", 1)
        api.p_("Menu", "Save %s", "all", mode="-n")
        api.np_("Disk", "%d file", "%d files", 2, mode="--")
        assert capsys.readouterr().out == (
            "Hallo, Ken\n3 Äpfel\nOpen\n1 x\nSave all2 files\n"
        )

    def test_noop_alias(self) -> None:
        """N_ returns its argument untouched."""
        assert api.N_("Later") == "Later"

    def test_alias_identity(self) -> None:
        """Aliases are the print functions themselves."""
        assert api._ is api.print_message
        assert api.n_ is api.nprint
        assert api.s_ is api.sprint
        assert api.ns_ is api.nsprint
        assert api.p_ is api.pprint
        assert api.np_ is api.npprint
        assert api.N_ is api.gettext_noop


def test_version() -> None:
    """A version string is always available."""
    assert isinstance(l10nprintf.__version__, str)
    assert l10nprintf.__version__
