"""Configuration objects for LocaleData engines and requests.

Both are frozen dataclasses that validate at construction, so the
resolution algorithm never sees missing identifiers or unknown selectors.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from localedata.enums import ArrayMode, MergePolicy
from localedata.errors import ConfigurationError
from localedata.types import Basename, LocaleCode, PackageName, RootPath

__all__ = ["LoadRequest", "LocaleDataConfig"]


@dataclass(frozen=True, slots=True)
class LocaleDataConfig:
    """Immutable construction options for a LocaleData engine.

    Example:
        >>> config = LocaleDataConfig("numfmt-lib", "./locale", sync=True)
        >>> engine = LocaleData.from_config(config)

    Attributes:
        package_name: Unique name of the calling package; selects the cache
        path: The package's own locale data root, searched last
        sync: Request blocking loads by default (default: False). Ignored
            when the loader cannot block.
        use_cache: Read and write the shared cache (default: True). False
            reloads from storage on every call, trading speed for memory.
    """

    package_name: PackageName
    path: RootPath
    sync: bool = False
    use_cache: bool = True

    def __post_init__(self) -> None:
        """Validate identifiers at construction time.

        Raises:
            ConfigurationError: If package_name or path is missing or not a string
        """
        if not isinstance(self.package_name, str) or not self.package_name:
            msg = f"LocaleData requires a non-empty package name, got {self.package_name!r}"
            raise ConfigurationError(msg)
        if not isinstance(self.path, str) or not self.path:
            msg = f"LocaleData requires a non-empty data path, got {self.path!r}"
            raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class LoadRequest:
    """One load_data request with defaults applied.

    Selectors given as strings are converted to their enums, so
    ``LoadRequest("numfmt", merge_policy="most-specific")`` is valid.

    Attributes:
        basename: Category of locale data to load (required)
        locale: Locale to load; None means the ambient locale
        merge_policy: How fragments combine (default: MERGE_ALL)
        array_mode: How nested lists merge (default: CONCATENATE)
        sync: Blocking (True) or asyncio (False) load; None means the
            engine default
    """

    basename: Basename
    locale: LocaleCode | None = None
    merge_policy: MergePolicy = MergePolicy.MERGE_ALL
    array_mode: ArrayMode = ArrayMode.CONCATENATE
    sync: bool | None = None

    def __post_init__(self) -> None:
        """Validate and coerce fields at construction time.

        Raises:
            ConfigurationError: If basename is missing or a selector is unknown
        """
        if not isinstance(self.basename, str) or not self.basename:
            msg = f"load_data requires a non-empty basename, got {self.basename!r}"
            raise ConfigurationError(msg)
        if self.locale is not None and (not isinstance(self.locale, str) or not self.locale):
            msg = f"locale must be a non-empty string or None, got {self.locale!r}"
            raise ConfigurationError(msg)
        try:
            object.__setattr__(self, "merge_policy", MergePolicy(self.merge_policy))
            object.__setattr__(self, "array_mode", ArrayMode(self.array_mode))
        except ValueError as e:
            msg = f"Invalid load_data selector: {e}"
            raise ConfigurationError(msg) from e
