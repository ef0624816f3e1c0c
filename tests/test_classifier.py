"""Tests for directive classification."""

import pytest

from l10nprintf.enums import DirectiveClass
from l10nprintf.runtime import (
    ClassifiedDirective,
    LocaleNumericProfile,
    classify,
    classify_conversion,
    classify_plan,
    reorder,
)
from l10nprintf.syntax import LiteralText, tokenize


def _classified(template: str, *args: str, grouping: bool = True) -> list[ClassifiedDirective]:
    profile = LocaleNumericProfile(decimal_point=".", grouping_supported=grouping)
    plan = reorder(tokenize(template), list(args))
    return [s for s in classify_plan(plan, profile) if isinstance(s, ClassifiedDirective)]


class TestClassifyConversion:
    """NUMERIC_DECIMAL versus OTHER."""

    @pytest.mark.parametrize("conversion", list("fFeEgG"))
    @pytest.mark.parametrize("length", ["", "h", "l", "L"])
    def test_decimal_conversions(self, length: str, conversion: str) -> None:
        """Floating conversions with no, h, l or L length are numeric-decimal."""
        assert classify_conversion(length, conversion) is DirectiveClass.NUMERIC_DECIMAL

    @pytest.mark.parametrize("conversion", list("diouxXcsb"))
    def test_other_conversions(self, conversion: str) -> None:
        """Integer and text conversions are OTHER."""
        assert classify_conversion("", conversion) is DirectiveClass.OTHER

    @pytest.mark.parametrize("length", ["hh", "ll", "j", "z", "t"])
    def test_other_lengths_make_floating_other(self, length: str) -> None:
        """Only h, l and L keep a floating conversion numeric-decimal."""
        assert classify_conversion(length, "f") is DirectiveClass.OTHER

    def test_unknown_conversion(self) -> None:
        """Unrecognized conversions are OTHER."""
        assert classify_conversion("", "q") is DirectiveClass.OTHER
        assert classify_conversion("", "") is DirectiveClass.OTHER


class TestGroupingFlag:
    """Handling of the ' flag."""

    def test_kept_when_supported(self) -> None:
        """' survives when the profile supports grouping."""
        (directive,) = _classified("%'d", "1000", grouping=True)
        assert directive.native_spec == "%'d"

    def test_stripped_when_unsupported(self) -> None:
        """' is removed when grouping is unsupported; everything else stays."""
        (directive,) = _classified("%'-'10.2f", "1.5", grouping=False)
        assert directive.native_spec == "%-10.2f"
        assert directive.classification is DirectiveClass.NUMERIC_DECIMAL


class TestClassify:
    """Classification of bound directives."""

    def test_positional_indicator_dropped(self) -> None:
        """Native specs never carry N$."""
        specs = [d.native_spec for d in _classified("%2$s %1$.1Lf", "1.5", "x")]
        assert specs == ["%s", "%.1Lf"]

    def test_argument_carried(self) -> None:
        """The bound argument is copied to the classified directive."""
        (directive,) = _classified("%2$s", "a", "b")
        assert directive.argument == "b"
        assert directive.bound.directive.position == 2

    def test_literals_pass_through(self) -> None:
        """Literal segments are untouched by classify_plan."""
        profile = LocaleNumericProfile()
        plan = reorder(tokenize("a%%b%5$s"), [])
        assert classify_plan(plan, profile) == plan.segments
        assert all(isinstance(s, LiteralText) for s in plan.segments)

    def test_classify_single(self) -> None:
        """classify() works on one bound directive."""
        plan = reorder(tokenize("%e"), ["1"])
        (bound,) = plan.segments
        result = classify(bound, grouping_supported=False)  # type: ignore[arg-type]
        assert result.classification is DirectiveClass.NUMERIC_DECIMAL
        assert result.native_spec == "%e"
