"""Deep merge of locale data fragments.

Fragments are merged from the most generic to the most specific, so the
second argument of merge_values() always wins:

    >>> merge_values({"a": "b", "x": {"m": "n"}}, {"a": "c", "x": {"o": "p"}})
    {'a': 'c', 'x': {'m': 'n', 'o': 'p'}}

Inputs are never mutated. Values held by the cache are passed in directly,
so the result is built from copies.

Python 3.13+.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping

from localedata.enums import ArrayMode
from localedata.types import LocaleValue

__all__ = ["merge_all", "merge_values"]


def merge_values(
    generic: LocaleValue,
    specific: LocaleValue,
    array_mode: ArrayMode = ArrayMode.CONCATENATE,
) -> LocaleValue:
    """Merge a more specific value over a more generic one.

    Rules:
        - mapping over mapping: merged key by key, recursively
        - list over list: generic ++ specific, or specific alone when
          array_mode is REPLACE
        - anything else: the specific value replaces the generic one

    Args:
        generic: Less specific value
        specific: More specific value
        array_mode: How nested lists combine

    Returns:
        New merged value sharing no mutable state with the inputs
    """
    match generic, specific:
        case Mapping(), Mapping():
            merged = {key: copy.deepcopy(value) for key, value in generic.items()}
            for key, value in specific.items():
                if key in merged:
                    merged[key] = merge_values(merged[key], value, array_mode)
                else:
                    merged[key] = copy.deepcopy(value)
            return merged
        case list(), list() if array_mode is ArrayMode.CONCATENATE:
            return copy.deepcopy(generic) + copy.deepcopy(specific)
        case _:
            return copy.deepcopy(specific)


def merge_all(
    values: Iterable[LocaleValue], array_mode: ArrayMode = ArrayMode.CONCATENATE
) -> LocaleValue:
    """Fold values, most generic first, into one result.

    Starts from an empty mapping, so no values yields {}.
    """
    merged: LocaleValue = {}
    for value in values:
        merged = merge_values(merged, value, array_mode)
    return merged
