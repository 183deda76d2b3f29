"""Sublocale fragments and their storage path suffixes.

A request for one basename in one locale is decomposed into fragments, one
per sublocale, ordered from the world-wide root to the full locale. Each
fragment names the file that may hold its share of the data:

    root       -> numfmt.json
    de         -> de/numfmt.json
    und-DE     -> und/DE/numfmt.json
    de-DE      -> de/DE/numfmt.json

Ordering comes from locale_utils.get_sublocales(); this module only owns the
mapping from sublocale to path.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from localedata.constants import DATA_EXTENSION, PATH_SEPARATOR, ROOT_LOCALE
from localedata.locale_utils import get_sublocales
from localedata.types import Basename, LocaleCode, RootPath

__all__ = ["Fragment", "expand_fragments", "fragment_path", "join_path"]


@dataclass(frozen=True, slots=True)
class Fragment:
    """One generic-to-specific unit of a locale request.

    Attributes:
        rank: Merge position, 0 for root up to n-1 for the full locale
        locale: Canonical sublocale tag used as the cache key
        path_suffix: File path relative to a storage root
    """

    rank: int
    locale: LocaleCode
    path_suffix: str

    @property
    def is_root(self) -> bool:
        """Check if this is the world-wide root fragment."""
        return self.locale == ROOT_LOCALE


def fragment_path(
    basename: Basename, sublocale: LocaleCode, extension: str = DATA_EXTENSION
) -> str:
    """Return the path suffix of one sublocale's data file.

    Example:
        >>> fragment_path("numfmt", "zh-Hans-CN")
        'zh/Hans/CN/numfmt.json'
    """
    file_name = f"{basename}{extension}"
    if sublocale == ROOT_LOCALE:
        return file_name
    return PATH_SEPARATOR.join([*sublocale.split("-"), file_name])


def join_path(root: RootPath, suffix: str) -> str:
    """Join a storage root and a relative suffix.

    Roots may be URIs, so no normalization is applied beyond trimming a
    trailing separator from the root.
    """
    if not root:
        return suffix
    return f"{root.rstrip(PATH_SEPARATOR)}{PATH_SEPARATOR}{suffix}"


@functools.lru_cache(maxsize=512)
def expand_fragments(
    basename: Basename, locale: LocaleCode, extension: str = DATA_EXTENSION
) -> tuple[Fragment, ...]:
    """Expand a locale into ordered fragments for one basename.

    Pure and deterministic: no I/O, memoized per arguments. The result is
    never empty and always starts with the root fragment.

    Args:
        basename: Category of locale data
        locale: Locale tag in BCP-47 or POSIX format
        extension: File extension of data files

    Returns:
        Fragments ordered by ascending rank

    Raises:
        ValueError: If the locale is not a valid locale identifier
    """
    return tuple(
        Fragment(
            rank=rank,
            locale=sublocale,
            path_suffix=fragment_path(basename, sublocale, extension),
        )
        for rank, sublocale in enumerate(get_sublocales(locale))
    )
