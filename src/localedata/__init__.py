"""localedata - Locale data resolution with root fallback and caching.

Finds locale-specific data by merging generic-to-specific fragment files
(root, language, region, script, variant) from an ordered list of storage
roots, and caches every outcome per package so repeated lookups never touch
storage again.

Public API:
    LocaleData - Per-package resolution engine (blocking and asyncio)
    get_locale_data - Shared engine per package
    LoadRequest - Explicit request object for LocaleData.load()
    LocaleDataConfig - Explicit construction options
    MergePolicy - merge-all, return-one, most-specific
    ArrayMode - concatenate or replace nested lists
    add_global_root, remove_global_root, clear_global_roots, get_global_roots
    cache_data, check_cache, clear_cache

Exceptions:
    LocaleDataError - Base exception class
    ConfigurationError - Invalid construction or request arguments
    DataParseError - Malformed data file
    LoaderError - Unreadable data file

Submodules:
    localedata.cache - DataCache and CacheRegistry
    localedata.roots - RootRegistry
    localedata.fragments - Fragment expansion and path layout
    localedata.loading - DataLoader protocol and PathDataLoader
    localedata.locale_utils - Locale normalization and sublocale expansion
    localedata.merge - Deep merge of fragment values
"""

from .config import LoadRequest, LocaleDataConfig
from .engine import (
    LocaleData,
    add_global_root,
    cache_data,
    check_cache,
    clear_cache,
    clear_global_roots,
    get_global_roots,
    get_locale_data,
    remove_global_root,
)
from .enums import ArrayMode, Marker, MergePolicy
from .errors import ConfigurationError, DataParseError, LoaderError, LocaleDataError

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localedata")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArrayMode",
    "ConfigurationError",
    "DataParseError",
    "LoadRequest",
    "LoaderError",
    "LocaleData",
    "LocaleDataConfig",
    "LocaleDataError",
    "Marker",
    "MergePolicy",
    "__version__",
    "add_global_root",
    "cache_data",
    "check_cache",
    "clear_cache",
    "clear_global_roots",
    "get_global_roots",
    "get_locale_data",
    "remove_global_root",
]
