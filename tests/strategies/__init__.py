"""Hypothesis strategies for l10nprintf property-based testing.

Usage:
    from tests.strategies import format_templates, integer_arguments
"""

from hypothesis import strategies as st

__all__ = [
    "decimal_texts",
    "format_templates",
    "integer_arguments",
    "plain_text",
]

# Pieces that exercise every directive shape: positional in and out of
# range, sequential, malformed, unterminated, literal percent.
_TEMPLATE_PIECES = (
    "%s",
    "%d",
    "%x",
    "%c",
    "%1$s",
    "%2$d",
    "%5$s",
    "%%",
    "%",
    "%q",
    "%-4s",
    "%05d",
    "%.1f",
    "%'d",
    "%1$",
    "%'.2f",
    "abc",
    " ",
    "$",
    "\\n",
)

format_templates = st.lists(st.sampled_from(_TEMPLATE_PIECES), max_size=12).map("".join)

integer_arguments = st.lists(
    st.integers(min_value=-(10**9), max_value=10**9).map(str), max_size=6
)

plain_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\\%"),
    max_size=40,
)

decimal_texts = st.tuples(
    st.integers(min_value=0, max_value=10**6),
    st.sampled_from([".", ",", "٫"]),
    st.integers(min_value=0, max_value=999),
).map(lambda t: f"{t[0]}{t[1]}{t[2]}")
