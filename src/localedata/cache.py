"""Thread-safe per-package cache for locale data fragments.

Architecture:
    - One DataCache per package name, handed out by a CacheRegistry
    - Keys: (basename, sublocale) tuples of canonical strings
    - Values: parsed locale data, or Marker.NOT_FOUND for "checked, absent"
    - A missing key means "never checked" and reads back as Marker.UNSET
    - No eviction: entries live until an explicit clear

Thread Safety:
    All operations protected by RLock. Safe for concurrent reads and writes.
    Concurrent writers of the same key are last-writer-wins.

Python 3.13+.
"""

from __future__ import annotations

import logging
from threading import RLock

from localedata.enums import Marker
from localedata.types import Basename, LocaleCode, LocaleValue, PackageName

__all__ = ["CacheRegistry", "DataCache", "default_cache_registry"]

logger = logging.getLogger(__name__)

# Internal type alias for cache keys (prefixed with _ per naming convention)
type _CacheKey = tuple[Basename, LocaleCode]


class DataCache:
    """Locale data cache for a single package.

    Transparent to caller: get() returns Marker.UNSET on a miss, never
    raises.

    Attributes:
        package_name: Name of the package owning this cache
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_data", "_hits", "_lock", "_misses", "_package_name")

    def __init__(self, package_name: PackageName) -> None:
        """Initialize an empty cache.

        Args:
            package_name: Name of the package owning this cache
        """
        self._package_name = package_name
        self._data: dict[_CacheKey, LocaleValue | Marker] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, basename: Basename, sublocale: LocaleCode) -> LocaleValue | Marker:
        """Get the cached value for one fragment.

        Args:
            basename: Category of locale data
            sublocale: Canonical sublocale tag

        Returns:
            Cached data, Marker.NOT_FOUND if known absent, or Marker.UNSET
            if never checked
        """
        with self._lock:
            try:
                value = self._data[(basename, sublocale)]
            except KeyError:
                self._misses += 1
                return Marker.UNSET
            self._hits += 1
            return value

    def has(self, basename: Basename, sublocale: LocaleCode) -> bool:
        """Check if the fragment was ever checked. Does not touch metrics."""
        with self._lock:
            return (basename, sublocale) in self._data

    def put(
        self, basename: Basename, sublocale: LocaleCode, value: LocaleValue | Marker
    ) -> None:
        """Store a value, overwriting any prior entry.

        Args:
            basename: Category of locale data
            sublocale: Canonical sublocale tag
            value: Parsed data, or Marker.NOT_FOUND

        Raises:
            ValueError: If value is Marker.UNSET (absence is not storable)
        """
        if value is Marker.UNSET:
            msg = "Marker.UNSET cannot be stored; it means the key is absent"
            raise ValueError(msg)
        with self._lock:
            self._data[(basename, sublocale)] = value

    def clear(self) -> None:
        """Drop every entry and reset metrics."""
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - negative (int): Entries recording known-absent data
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            negative = sum(1 for v in self._data.values() if v is Marker.NOT_FOUND)
            return {
                "size": len(self._data),
                "negative": negative,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        """Get current number of entries."""
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"DataCache(package_name={self._package_name!r}, size={len(self)})"

    @property
    def package_name(self) -> PackageName:
        """Name of the package owning this cache."""
        return self._package_name

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._lock:
            return self._misses


class CacheRegistry:
    """Hands out one DataCache per package name.

    Every engine created for the same package name through the same
    registry shares a single cache instance. Production code uses
    default_cache_registry; tests construct their own registry to stay
    isolated.
    """

    __slots__ = ("_caches", "_lock")

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._caches: dict[PackageName, DataCache] = {}
        self._lock = RLock()

    def get_cache(self, package_name: PackageName) -> DataCache:
        """Return the cache for a package, creating it on first use.

        Args:
            package_name: Name of the package

        Returns:
            The same DataCache instance for every call with an equal name
        """
        with self._lock:
            cache = self._caches.get(package_name)
            if cache is None:
                cache = DataCache(package_name)
                self._caches[package_name] = cache
                logger.debug("Created data cache for package: %s", package_name)
            return cache

    def find_cache(self, package_name: PackageName) -> DataCache | None:
        """Return the cache for a package, or None if none was created."""
        with self._lock:
            return self._caches.get(package_name)

    def clear_all(self) -> None:
        """Drop every entry of every package's cache.

        Cache instances stay registered so that engines holding a reference
        observe the clear.
        """
        with self._lock:
            for cache in self._caches.values():
                cache.clear()
        logger.debug("Cleared all data caches")

    def package_names(self) -> tuple[PackageName, ...]:
        """Names of packages that have a cache, in creation order."""
        with self._lock:
            return tuple(self._caches)

    def __len__(self) -> int:
        """Number of package caches."""
        with self._lock:
            return len(self._caches)


default_cache_registry = CacheRegistry()
"""Process-wide cache registry used unless an engine is given its own."""
