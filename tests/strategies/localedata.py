"""Hypothesis strategies for locale data property-based testing.

Provides reusable strategies for generating locale data test inputs:
- Locale tags built from language, script, region, and variant subtags
- JSON-like locale data values for merge properties
- Global root lists

Event-Emitting Strategies (HypoFuzz-Optimized):
- locale_tags: Emits locale_shape=lang|lang_script|lang_region|...
- locale_values: Emits locale_value_kind=mapping|list|scalar

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

_LANGUAGES = ["en", "de", "fr", "it", "zh", "sr", "pt", "vi", "und"]
_SCRIPTS = ["Latn", "Cyrl", "Hans", "Hant"]
_REGIONS = ["US", "DE", "CH", "CN", "TW", "BR", "NL", "419"]
_VARIANTS = ["POSIX", "1996", "VALENCIA"]

_KEYS = st.sampled_from(["a", "b", "c", "x", "items", "name"])
_SCALARS = st.one_of(
    st.text(max_size=8),
    st.integers(min_value=-1000, max_value=1000),
    st.booleans(),
    st.none(),
)


@st.composite
def locale_tags(draw: DrawFn, separator: str = "-") -> str:
    """Generate locale tags with every combination of optional subtags.

    Events emitted:
    - locale_shape=<subtags present joined by underscore>
    """
    parts = [draw(st.sampled_from(_LANGUAGES))]
    shape = ["lang"]
    if draw(st.booleans()):
        parts.append(draw(st.sampled_from(_SCRIPTS)))
        shape.append("script")
    if draw(st.booleans()):
        parts.append(draw(st.sampled_from(_REGIONS)))
        shape.append("region")
    if draw(st.booleans()):
        parts.append(draw(st.sampled_from(_VARIANTS)))
        shape.append("variant")
    event(f"locale_shape={'_'.join(shape)}")
    return separator.join(parts)


def locale_values(max_leaves: int = 12) -> st.SearchStrategy[object]:
    """Generate JSON-like locale data (nested dicts and lists of scalars)."""
    return st.recursive(
        _SCALARS,
        lambda children: st.one_of(
            st.lists(children, max_size=3),
            st.dictionaries(_KEYS, children, max_size=4),
        ),
        max_leaves=max_leaves,
    )


@st.composite
def locale_mappings(draw: DrawFn) -> dict[str, object]:
    """Generate a top-level mapping, the usual shape of a fragment file.

    Events emitted:
    - locale_value_kind=mapping|list|scalar (of the first value)
    """
    value = draw(st.dictionaries(_KEYS, locale_values(), max_size=4))
    if value:
        first = next(iter(value.values()))
        match first:
            case dict():
                event("locale_value_kind=mapping")
            case list():
                event("locale_value_kind=list")
            case _:
                event("locale_value_kind=scalar")
    return value


root_paths = st.lists(
    st.sampled_from(["/a", "/b", "/c", "./d", "http://cdn/e"]),
    max_size=6,
)
