"""Hypothesis strategies for localedata property-based testing.

Usage:
    from tests.strategies import locale_tags, locale_mappings
"""

from .localedata import locale_mappings, locale_tags, locale_values, root_paths

__all__ = [
    "locale_mappings",
    "locale_tags",
    "locale_values",
    "root_paths",
]
