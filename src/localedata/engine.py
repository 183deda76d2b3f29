"""Locale data resolution with root fallback, fragment merging and caching.

Implements LocaleData, the engine that answers "give me the <basename> data
for <locale>", plus the process-wide functions that manage the shared root
list and caches.

Resolution of one request:
    1. Expand the locale into fragments, root first (fragments.py)
    2. Probe the package cache per fragment; positive and negative entries
       both resolve the fragment
    3. Walk the effective roots (global roots, then the engine's own path).
       At each root, every still-unresolved fragment is requested in one
       batched loader call. Found files are parsed, cached, and excluded
       from later roots. Absent files leave the fragment open for the next
       root.
    4. Fragments absent from every root are cached as Marker.NOT_FOUND
    5. Merge the fragment values per MergePolicy

The blocking and asyncio paths share every step except the loader call.
In the asyncio path each root's batch is awaited before the next root is
consulted, because a fragment resolved at one root must not be requested
again from the next.

Python 3.13+.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Coroutine, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from localedata.cache import CacheRegistry, DataCache, default_cache_registry
from localedata.config import LoadRequest, LocaleDataConfig
from localedata.constants import DATA_EXTENSION
from localedata.enums import ArrayMode, Marker, MergePolicy
from localedata.errors import ConfigurationError, DataParseError, LoaderError
from localedata.fragments import Fragment, expand_fragments, join_path
from localedata.loading import DataLoader, PathDataLoader, parse_json_content
from localedata.locale_utils import get_sublocales, get_system_locale, normalize_locale
from localedata.merge import merge_all, merge_values
from localedata.roots import RootRegistry, default_root_registry
from localedata.types import (
    Basename,
    ContentParser,
    LocaleCode,
    LocaleValue,
    PackageName,
    RootPath,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Engine
    "LocaleData",
    "ResolutionSlot",
    "get_locale_data",
    # Global roots
    "add_global_root",
    "clear_global_roots",
    "get_global_roots",
    "remove_global_root",
    # Global cache
    "cache_data",
    "check_cache",
    "clear_cache",
]

logger = logging.getLogger(__name__)

# Internal type alias for a batch entry (prefixed with _ per naming convention)
type _Pending = list[tuple["ResolutionSlot", str]]


@dataclass(slots=True)
class ResolutionSlot:
    """Per-request state of one fragment.

    Owned by a single load_data call and discarded when it returns.

    Attributes:
        fragment: The fragment being resolved
        value: Data, Marker.NOT_FOUND (absent so far), or Marker.UNSET
        resolved: True once the value is final and no root is consulted
    """

    fragment: Fragment
    value: LocaleValue | Marker = Marker.UNSET
    resolved: bool = False

    @property
    def has_data(self) -> bool:
        """Check if the slot holds a positive value."""
        return not isinstance(self.value, Marker)


class LocaleData:
    """Loads and caches locale data for one package.

    Data is looked up in the process-wide global roots first, most recently
    added first, and then in the package's own ``path``. Fragment files are
    merged from the world-wide root data to the most specific locale data.

    Engines for the same package name share one cache, so data loaded by one
    engine (or injected with cache_data, or preloaded with ensure_locale) is
    visible to all of them.

    Example - Blocking:
        >>> locale_data = LocaleData("numfmt-lib", "./locale", sync=True)
        >>> locale_data.load_data("numfmt", locale="it-CH")
        {'decimal': '.', 'group': '’'}

    Example - Asyncio:
        >>> locale_data = LocaleData("numfmt-lib", "./locale")
        >>> await locale_data.load_data_async("numfmt", locale="it-CH")
        {'decimal': '.', 'group': '’'}

    Example - Isolated registries:
        >>> roots, caches = RootRegistry(), CacheRegistry()
        >>> locale_data = LocaleData("pkg", "./locale", roots=roots, caches=caches)
    """

    __slots__ = (
        "_cache",
        "_caches",
        "_config",
        "_loader",
        "_parser",
        "_roots",
        "_sync",
    )

    def __init__(
        self,
        package_name: PackageName,
        path: RootPath,
        *,
        sync: bool = False,
        use_cache: bool = True,
        loader: DataLoader | None = None,
        parser: ContentParser | None = None,
        roots: RootRegistry | None = None,
        caches: CacheRegistry | None = None,
    ) -> None:
        """Initialize a locale data engine.

        Args:
            package_name: Unique name of the calling package (e.g., "numfmt-lib")
            path: Root of the package's own locale data; searched last
            sync: Default to blocking loads. Only honored when the loader
                supports them; check is_sync() afterwards.
            use_cache: Read and write the shared package cache
            loader: Loader for data files (default: PathDataLoader())
            parser: Parser for file content (default: parse_json_content)
            roots: Global root registry (default: process-wide registry)
            caches: Cache registry (default: process-wide registry)

        Raises:
            ConfigurationError: If package_name or path is missing
        """
        self._config = LocaleDataConfig(
            package_name=package_name, path=path, sync=sync, use_cache=use_cache
        )
        self._loader: DataLoader = loader if loader is not None else PathDataLoader()
        self._parser: ContentParser = parser if parser is not None else parse_json_content
        self._roots = roots if roots is not None else default_root_registry
        self._caches = caches if caches is not None else default_cache_registry
        self._cache: DataCache = self._caches.get_cache(package_name)
        self._sync = sync is True and self._loader.supports_sync

        logger.info(
            "LocaleData created for package %s (path=%s, sync=%s, use_cache=%s)",
            package_name,
            path,
            self._sync,
            use_cache,
        )

    @classmethod
    def from_config(
        cls,
        config: LocaleDataConfig,
        *,
        loader: DataLoader | None = None,
        parser: ContentParser | None = None,
        roots: RootRegistry | None = None,
        caches: CacheRegistry | None = None,
    ) -> LocaleData:
        """Create an engine from a LocaleDataConfig."""
        return cls(
            config.package_name,
            config.path,
            sync=config.sync,
            use_cache=config.use_cache,
            loader=loader,
            parser=parser,
            roots=roots,
            caches=caches,
        )

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LocaleData(package_name={self.package_name!r}, path={self.path!r}, "
            f"sync={self._sync}, use_cache={self.use_cache})"
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def package_name(self) -> PackageName:
        """Name of the package this engine loads data for."""
        return self._config.package_name

    @property
    def path(self) -> RootPath:
        """The package's own data root."""
        return self._config.path

    @property
    def use_cache(self) -> bool:
        """Whether this engine reads and writes the package cache."""
        return self._config.use_cache

    @property
    def cache(self) -> DataCache:
        """The package cache shared with every engine of this package."""
        return self._cache

    @property
    def loader(self) -> DataLoader:
        """The loader used for data files."""
        return self._loader

    def is_sync(self) -> bool:
        """Whether load() blocks by default.

        False when sync was not requested, or was requested but the loader
        cannot load synchronously.
        """
        return self._sync

    def effective_roots(self) -> tuple[RootPath, ...]:
        """Roots searched for data, highest priority first.

        The package path is always last, whatever the global roots are.
        """
        return (*self._roots.get(), self.path)

    get_roots = effective_roots

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @staticmethod
    def _make_request(
        basename: Basename,
        locale: LocaleCode | None,
        merge_policy: MergePolicy | str,
        array_mode: ArrayMode | str,
        replace: bool | None,
        sync: bool,
    ) -> LoadRequest:
        if replace is not None:
            array_mode = ArrayMode.REPLACE if replace else ArrayMode.CONCATENATE
        return LoadRequest(
            basename=basename,
            locale=locale,
            merge_policy=merge_policy,  # type: ignore[arg-type]
            array_mode=array_mode,  # type: ignore[arg-type]
            sync=sync,
        )

    def load_data(
        self,
        basename: Basename,
        *,
        locale: LocaleCode | None = None,
        merge_policy: MergePolicy | str = MergePolicy.MERGE_ALL,
        array_mode: ArrayMode | str = ArrayMode.CONCATENATE,
        replace: bool | None = None,
    ) -> LocaleValue:
        """Load data for a basename and locale, blocking.

        Args:
            basename: Category of data to load (e.g., "numfmt")
            locale: Locale to load for (default: the system locale)
            merge_policy: How fragments combine (default: MERGE_ALL)
            array_mode: How nested lists merge (default: CONCATENATE)
            replace: Shorthand for array_mode; True means REPLACE

        Returns:
            The merged data; {} if nothing was found

        Raises:
            ConfigurationError: If basename is missing or locale is invalid
            DataParseError: If a data file is malformed
            LoaderError: If a data file cannot be read, or if
                the loader cannot block and the cache does not hold every
                fragment
        """
        request = self._make_request(basename, locale, merge_policy, array_mode, replace, True)
        return self._resolve_sync(request)

    async def load_data_async(
        self,
        basename: Basename,
        *,
        locale: LocaleCode | None = None,
        merge_policy: MergePolicy | str = MergePolicy.MERGE_ALL,
        array_mode: ArrayMode | str = ArrayMode.CONCATENATE,
        replace: bool | None = None,
    ) -> LocaleValue:
        """Load data for a basename and locale without blocking the event loop.

        Same arguments, result, and errors as load_data().
        """
        request = self._make_request(basename, locale, merge_policy, array_mode, replace, False)
        return await self._resolve_async(request)

    def load(
        self, request: LoadRequest
    ) -> LocaleValue | Coroutine[Any, Any, LocaleValue]:
        """Load data described by a LoadRequest.

        Blocks and returns the data when the request (or, if request.sync is
        None, the engine default) is synchronous. Otherwise returns a
        coroutine to be awaited.
        """
        sync = self._sync if request.sync is None else request.sync
        if sync:
            return self._resolve_sync(request)
        return self._resolve_async(request)

    def _begin(self, request: LoadRequest) -> list[ResolutionSlot]:
        """Expand the request into slots and resolve what the cache knows."""
        try:
            locale = normalize_locale(request.locale or get_system_locale())
        except ValueError as e:
            msg = f"Invalid locale for load_data: {request.locale!r}"
            raise ConfigurationError(msg) from e

        slots = [ResolutionSlot(fragment) for fragment in expand_fragments(request.basename, locale)]
        if not self.use_cache:
            return slots

        for slot in slots:
            value = self._cache.get(request.basename, slot.fragment.locale)
            if value is not Marker.UNSET:
                slot.value = value
                slot.resolved = True
        logger.debug(
            "Cache resolved %d/%d fragments for %s/%s",
            sum(1 for slot in slots if slot.resolved),
            len(slots),
            request.basename,
            locale,
        )
        return slots

    @staticmethod
    def _pending(root: RootPath, slots: Sequence[ResolutionSlot]) -> _Pending:
        """Candidate paths at one root for every still-unresolved slot."""
        return [
            (slot, join_path(root, slot.fragment.path_suffix))
            for slot in slots
            if not slot.resolved
        ]

    def _store(self, basename: Basename, sublocale: LocaleCode, value: LocaleValue | Marker) -> None:
        if self.use_cache:
            self._cache.put(basename, sublocale, value)

    def _absorb(
        self,
        basename: Basename,
        pending: _Pending,
        contents: Sequence[bytes | None],
    ) -> None:
        """Apply one root's batch results to the slots that requested them."""
        if len(contents) != len(pending):
            msg = f"Loader returned {len(contents)} results for {len(pending)} paths"
            raise LoaderError(msg)

        for (slot, path), content in zip(pending, contents, strict=True):
            if not content:
                # Absent here; the next root may still supply it
                slot.value = Marker.NOT_FOUND
                continue
            value = self._parser(content, path)
            if value is None:
                # A null document holds no data; the next root may still supply it
                slot.value = Marker.NOT_FOUND
                continue
            slot.value = value
            slot.resolved = True
            self._store(basename, slot.fragment.locale, value)
            logger.debug("Loaded %s", path)

    def _finish(self, request: LoadRequest, slots: Sequence[ResolutionSlot]) -> LocaleValue:
        """Record fragments found nowhere as negative, then merge."""
        for slot in slots:
            if not slot.resolved:
                slot.value = Marker.NOT_FOUND
                slot.resolved = True
                self._store(request.basename, slot.fragment.locale, Marker.NOT_FOUND)
        return self._merge(request, slots)

    @staticmethod
    def _merge(request: LoadRequest, slots: Sequence[ResolutionSlot]) -> LocaleValue:
        """Combine slot values in ascending rank per the merge policy."""
        values = [slot.value for slot in slots if slot.has_data]
        match request.merge_policy:
            case MergePolicy.RETURN_ONE:
                return copy.deepcopy(values[0]) if values else {}
            case MergePolicy.MOST_SPECIFIC:
                return copy.deepcopy(values[-1]) if values else {}
            case _:
                return merge_all(values, request.array_mode)  # type: ignore[arg-type]

    def _resolve_sync(self, request: LoadRequest) -> LocaleValue:
        slots = self._begin(request)

        if not self._loader.supports_sync:
            # Without blocking I/O only a request the cache fully answers
            # can be served; anything else would differ from the asyncio result.
            if all(slot.resolved for slot in slots):
                return self._merge(request, slots)
            logger.warning(
                "Loader cannot load synchronously; %s for package %s is not fully cached",
                request.basename,
                self.package_name,
            )
            msg = (
                f"Blocking load of '{request.basename}' needs I/O but the loader only "
                "supports asynchronous loading; use load_data_async or ensure_locale first"
            )
            raise LoaderError(msg)

        for root in self.effective_roots():
            pending = self._pending(root, slots)
            if not pending:
                break
            logger.debug("Requesting %d file(s) from root %s", len(pending), root)
            contents = self._loader.load_many([path for _, path in pending])
            self._absorb(request.basename, pending, contents)

        return self._finish(request, slots)

    async def _resolve_async(self, request: LoadRequest) -> LocaleValue:
        slots = self._begin(request)

        for root in self.effective_roots():
            pending = self._pending(root, slots)
            if not pending:
                break
            logger.debug("Requesting %d file(s) from root %s", len(pending), root)
            contents = await self._loader.load_many_async([path for _, path in pending])
            self._absorb(request.basename, pending, contents)

        return self._finish(request, slots)

    async def ensure_locale(self, locale: LocaleCode) -> bool:
        """Preload whole-locale data files into the cache.

        Looks for ``<root>/<locale>.json`` in every effective root. Each file
        maps basenames to that basename's data for the full locale. Values
        from earlier roots replace those of later ones, lists included. Each
        basename is cached under the full locale, so later loads for it do not
        need the loader for that fragment.

        Args:
            locale: Full locale tag

        Returns:
            True if the loader can block (preloading is unnecessary) or at
            least one file was found and cached; False otherwise

        Raises:
            ConfigurationError: If locale is invalid
            DataParseError: If a file is malformed or not a mapping
            LoaderError: If a file exists but cannot be read
        """
        if self._loader.supports_sync:
            return True

        try:
            code = normalize_locale(locale)
        except (TypeError, ValueError) as e:
            msg = f"Invalid locale for ensure_locale: {locale!r}"
            raise ConfigurationError(msg) from e

        paths = [join_path(root, f"{code}{DATA_EXTENSION}") for root in self.effective_roots()]
        contents = await self._loader.load_many_async(paths)

        found = [(path, content) for path, content in zip(paths, contents, strict=True) if content]
        if not found:
            logger.info("No whole-locale data found for %s", code)
            return False

        merged: LocaleValue = {}
        # Lowest priority first so earlier roots override
        for path, content in reversed(found):
            value = self._parser(content, path)
            if not isinstance(value, Mapping):
                msg = f"Whole-locale data in '{path}' must be a mapping of basenames"
                raise DataParseError(msg, path=path)
            merged = merge_values(merged, value, ArrayMode.REPLACE)

        for basename, value in merged.items():  # type: ignore[union-attr]
            self._cache.put(basename, code, value)
        logger.info("Preloaded %d basename(s) for locale %s", len(merged), code)  # type: ignore[arg-type]
        return True


# ----------------------------------------------------------------------
# Shared instances
# ----------------------------------------------------------------------

_instances: dict[tuple[PackageName, RootPath, bool], LocaleData] = {}
_instances_lock = threading.Lock()


def get_locale_data(package_name: PackageName, path: RootPath, *, sync: bool = False) -> LocaleData:
    """Return the shared LocaleData for a package, creating it on first use.

    Classes within one package should share an engine; this factory returns
    the same instance for the same (package_name, path, sync) arguments.
    Uses the process-wide registries.

    Raises:
        ConfigurationError: If package_name or path is missing
    """
    key = (package_name, path, sync)
    with _instances_lock:
        instance = _instances.get(key)
        if instance is None:
            instance = LocaleData(package_name, path, sync=sync)
            _instances[key] = instance
        return instance


# ----------------------------------------------------------------------
# Process-wide roots
# ----------------------------------------------------------------------


def _roots(registry: RootRegistry | None) -> RootRegistry:
    return registry if registry is not None else default_root_registry


def _caches(registry: CacheRegistry | None) -> CacheRegistry:
    return registry if registry is not None else default_cache_registry


def add_global_root(root: RootPath, *, registry: RootRegistry | None = None) -> None:
    """Add a root searched before all existing roots by every engine.

    Non-string input is ignored.
    """
    _roots(registry).add(root)


def remove_global_root(root: RootPath, *, registry: RootRegistry | None = None) -> None:
    """Remove a global root. Engines' own paths cannot be removed."""
    _roots(registry).remove(root)


def clear_global_roots(*, registry: RootRegistry | None = None) -> None:
    """Remove every global root."""
    _roots(registry).clear()


def get_global_roots(*, registry: RootRegistry | None = None) -> tuple[RootPath, ...]:
    """Global roots, most recently added first."""
    return _roots(registry).get()


# ----------------------------------------------------------------------
# Process-wide cache
# ----------------------------------------------------------------------


def cache_data(
    package_name: PackageName,
    data: Mapping[LocaleCode, Mapping[Basename, LocaleValue]],
    *,
    registry: CacheRegistry | None = None,
) -> None:
    """Inject data into a package's cache, bypassing every loader.

    The data has the shape::

        {
            "de-DE": {"numfmt": {...}, "sysres": {...}},
            "und-NL": {"timezone": {...}},
        }

    Each value is cached under (basename, locale), where locale is the full
    locale key. Region-only data uses the "und" language. Invalid shapes
    and invalid locale keys are ignored.
    """
    if not isinstance(package_name, str) or not isinstance(data, Mapping):
        logger.debug("Ignoring invalid cache_data call for package %r", package_name)
        return

    cache = _caches(registry).get_cache(package_name)
    for locale, locale_data in data.items():
        if not isinstance(locale_data, Mapping):
            continue
        try:
            code = normalize_locale(locale)
        except (TypeError, ValueError):
            logger.debug("Ignoring cache_data for invalid locale %r", locale)
            continue
        for basename, value in locale_data.items():
            cache.put(basename, code, copy.deepcopy(value))


def check_cache(
    package_name: PackageName,
    locale: LocaleCode,
    basename: Basename,
    *,
    registry: CacheRegistry | None = None,
) -> bool:
    """Check if a load for this data was already attempted or made unnecessary.

    True if any fragment more specific than root has a cache entry, whether
    data or a known absence. The root fragment is skipped: root data is
    shared by every locale and says nothing about this one.

    Returns False for non-string arguments or an invalid locale.
    """
    if not all(isinstance(arg, str) for arg in (package_name, locale, basename)):
        return False
    try:
        sublocales = get_sublocales(locale)
    except ValueError:
        return False

    cache = _caches(registry).find_cache(package_name)
    if cache is None:
        return False
    return any(cache.has(basename, sublocale) for sublocale in sublocales[1:])


def clear_cache(*, registry: CacheRegistry | None = None) -> None:
    """Clear every package's cache. Intended for test isolation."""
    _caches(registry).clear_all()
