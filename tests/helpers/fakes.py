"""Test doubles for the native formatter and message resolver collaborators."""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest

from l10nprintf.diagnostics import NativeFormatError
from l10nprintf.localization import select_plural_form
from l10nprintf.runtime import BabelPrintf

requires_posix_shell = pytest.mark.skipif(
    os.name != "posix" or shutil.which("sh") is None,
    reason="needs a POSIX shell for fake command-line tools",
)


class ScriptedFormatter:
    """Native formatter answering from a callable, recording every call."""

    def __init__(self, respond: Callable[[str, Sequence[str]], str]) -> None:
        self.respond = respond
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def format(self, template: str, arguments: Sequence[str]) -> str:
        self.calls.append((template, tuple(arguments)))
        return self.respond(template, arguments)


class NoGroupingPrintf(BabelPrintf):
    """BabelPrintf that rejects the grouping flag, like printf without %'d."""

    def format(self, template: str, arguments: Sequence[str]) -> str:
        if "%'" in template:
            msg = "grouping flag not supported"
            raise NativeFormatError(msg)
        return super().format(template, arguments)


class StrictInputPrintf(BabelPrintf):
    """BabelPrintf that prints the locale symbol but only parses '.' input.

    Mimics printf implementations that format with the locale decimal point
    yet reject it when reading arguments.
    """

    def format(self, template: str, arguments: Sequence[str]) -> str:
        for argument in arguments:
            if self.decimal_symbol in argument and self.decimal_symbol != ".":
                msg = f"invalid number: {argument}"
                raise NativeFormatError(msg)
        return super().format(template, [a.replace(".", self.decimal_symbol) for a in arguments])


class DictResolver:
    """In-memory catalog keyed by (msgctxt, msgid)."""

    def __init__(
        self,
        singular: Mapping[tuple[str | None, str], str] | None = None,
        plural: Mapping[tuple[str | None, str], tuple[str, str]] | None = None,
    ) -> None:
        self.singular = dict(singular or {})
        self.plural = dict(plural or {})
        self.calls: list[tuple[str, str | None, str | None, int | None]] = []

    def resolve(
        self,
        msgid: str,
        *,
        msgctxt: str | None = None,
        msgid_plural: str | None = None,
        n: int | None = None,
    ) -> str:
        self.calls.append((msgid, msgctxt, msgid_plural, n))
        if msgid_plural is None:
            return self.singular.get((msgctxt, msgid), msgid)
        forms = self.plural.get((msgctxt, msgid))
        if forms is None:
            return select_plural_form(msgid, msgid_plural, n)
        return forms[0] if n == 1 else forms[1]


def write_tool(directory: Path, name: str, body: str) -> str:
    """Write an executable /bin/sh script and return its absolute path."""
    path = directory / name
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)
