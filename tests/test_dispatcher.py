"""Tests for building and issuing the native formatter call."""

import io

from l10nprintf.enums import NewlineMode
from l10nprintf.runtime import (
    LocaleNumericProfile,
    build_native_call,
    classify_plan,
    emit,
    escape_literal,
    render,
    reorder,
)
from l10nprintf.syntax import LiteralText, tokenize
from tests.helpers.fakes import ScriptedFormatter


def _segments(template: str, *args: str):  # type: ignore[no-untyped-def]
    return classify_plan(reorder(tokenize(template), list(args)), LocaleNumericProfile())


class TestBuildNativeCall:
    """Template and argument projection."""

    def test_escape_literal(self) -> None:
        """Every % in literal text is doubled."""
        assert escape_literal("50% off, 100%") == "50%% off, 100%%"

    def test_projection(self) -> None:
        """Positional directives become sequential in directive order."""
        template, args = build_native_call(_segments("%2$s has %1$d apples", "3", "Ken"))
        assert template == "%s has %d apples"
        assert args == ("Ken", "3")

    def test_literal_percent_and_out_of_range(self) -> None:
        """Inert directive text is escaped so the native formatter prints it."""
        template, args = build_native_call(_segments("100%% %5$s", "a"))
        assert template == "100%% %%5$s"
        assert args == ()

    def test_literal_only(self) -> None:
        """Plain literals need no arguments."""
        assert build_native_call([LiteralText("x")]) == ("x", ())


class TestRender:
    """Single native call per render."""

    def test_one_call(self) -> None:
        """render() calls the native formatter exactly once."""
        formatter = ScriptedFormatter(lambda t, a: "out")
        assert render(_segments("%s-%s", "a", "b"), formatter) == "out"
        assert formatter.calls == [("%s-%s", ("a", "b"))]

    def test_newline_appended_to_template(self) -> None:
        """newline=True adds the terminator to the native template."""
        formatter = ScriptedFormatter(lambda t, a: t)
        assert render(_segments("x"), formatter, newline=True) == "x\n"


class TestEmit:
    """Writing formatted text."""

    def test_default_appends_newline(self) -> None:
        """The default mode adds a newline."""
        stream = io.StringIO()
        emit("hello", file=stream)
        assert stream.getvalue() == "hello\n"

    def test_no_newline_mode(self) -> None:
        """-n writes the text exactly."""
        stream = io.StringIO()
        emit("hello", NewlineMode.NO_NEWLINE, stream)
        assert stream.getvalue() == "hello"

    def test_explicit_newline_mode(self) -> None:
        """-- adds a newline."""
        stream = io.StringIO()
        emit("hello", NewlineMode("--"), stream)
        assert stream.getvalue() == "hello\n"
