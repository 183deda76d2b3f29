"""Type aliases for the locale data domain.

Provides semantic type aliases used throughout the package and by user code
when annotating LocaleData call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

__all__ = [
    "Basename",
    "ContentParser",
    "LocaleCode",
    "LocaleValue",
    "PackageName",
    "RootPath",
]

type PackageName = str
"""Unique name of the package that owns a cache (e.g., 'numfmt-lib')."""

type Basename = str
"""Category of locale data (e.g., 'numfmt', 'sysres')."""

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en', 'de-DE', 'zh-Hans-CN') or 'root'."""

type RootPath = str
"""Storage root searched for locale data (directory path or URI)."""

type LocaleValue = (
    dict[str, "LocaleValue"] | list["LocaleValue"] | str | int | float | bool | None
)
"""Parsed locale data: any JSON value."""

type ContentParser = Callable[[bytes, str], LocaleValue]
"""Turns raw file bytes (and the path they came from) into locale data."""
