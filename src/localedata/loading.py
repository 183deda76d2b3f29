"""Loading infrastructure for locale data files.

Provides the protocol the resolution engine uses to fetch raw bytes, a
filesystem implementation, and the default content parser.

Components:
    DataLoader - Protocol for batched blocking and asyncio loads (structural typing)
    PathDataLoader - Disk-based loader built on pathlib
    parse_json_content - Default ContentParser for UTF-8 JSON5 files

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import json5

from localedata.constants import DATA_ENCODING
from localedata.errors import DataParseError, LoaderError
from localedata.types import LocaleValue

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DataLoader",
    # Concrete loader
    "PathDataLoader",
    # Parser
    "parse_json_content",
]

logger = logging.getLogger(__name__)


class DataLoader(Protocol):
    """Protocol for loading raw locale data files in batches.

    Every loader must support asyncio loads. Loaders that can also block
    report it through supports_sync; the engine never calls load_many on a
    loader that reports False.

    Both load methods return one entry per requested path, in order. None
    means the file does not exist. Any other failure raises LoaderError for
    the whole batch.

    Example:
        >>> class MemoryLoader:
        ...     supports_sync = True
        ...     def __init__(self, files: dict[str, bytes]) -> None:
        ...         self.files = files
        ...     def load_many(self, paths):
        ...         return [self.files.get(p) for p in paths]
        ...     async def load_many_async(self, paths):
        ...         return self.load_many(paths)
    """

    @property
    def supports_sync(self) -> bool:
        """Whether load_many may be called."""

    def load_many(self, paths: Sequence[str]) -> list[bytes | None]:
        """Load files, blocking until all are read.

        Raises:
            LoaderError: If any file exists but cannot be read
        """

    async def load_many_async(self, paths: Sequence[str]) -> list[bytes | None]:
        """Load files without blocking the event loop.

        Raises:
            LoaderError: If any file exists but cannot be read
        """


@dataclass(frozen=True, slots=True)
class PathDataLoader:
    """File system loader for locale data.

    Implements DataLoader over pathlib. Asyncio loads run the blocking reads
    in a worker thread, one thread hop per batch.

    Example:
        >>> loader = PathDataLoader()
        >>> loader.load_many(["locale/numfmt.json", "locale/de/numfmt.json"])
        [b'{"decimal": "."}', None]

    Attributes:
        sync: Whether blocking loads are offered. False models a platform
              where only asynchronous I/O is available.
    """

    sync: bool = True

    @property
    def supports_sync(self) -> bool:
        """Whether load_many may be called."""
        return self.sync

    @staticmethod
    def _read(path: str) -> bytes | None:
        """Read one file, mapping absence to None.

        Raises:
            LoaderError: If the file exists but cannot be read
        """
        try:
            return Path(path).read_bytes()
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
            return None
        except OSError as e:
            msg = f"Failed to read locale data file '{path}': {e}"
            raise LoaderError(msg, path=path) from e

    def _read_all(self, paths: Sequence[str]) -> list[bytes | None]:
        return [self._read(path) for path in paths]

    def load_many(self, paths: Sequence[str]) -> list[bytes | None]:
        """Load files from disk, blocking.

        Args:
            paths: Candidate file paths

        Returns:
            File contents in request order, None for absent files

        Raises:
            LoaderError: If blocking loads are disabled or a file cannot be read
        """
        if not self.sync:
            msg = "This loader only supports asynchronous loading"
            raise LoaderError(msg)
        return self._read_all(paths)

    async def load_many_async(self, paths: Sequence[str]) -> list[bytes | None]:
        """Load files from disk in a worker thread.

        Args:
            paths: Candidate file paths

        Returns:
            File contents in request order, None for absent files

        Raises:
            LoaderError: If a file cannot be read
        """
        return await asyncio.to_thread(self._read_all, list(paths))


def parse_json_content(content: bytes, path: str) -> LocaleValue:
    """Parse a UTF-8 JSON5 locale data file.

    JSON5 is a superset of JSON, so plain JSON files parse unchanged. Data
    files may also carry comments and trailing commas.

    Args:
        content: Raw file bytes
        path: Path the bytes came from (for error messages)

    Returns:
        Parsed value

    Raises:
        DataParseError: If the content is not valid UTF-8 JSON5
    """
    try:
        return json5.loads(content.decode(DATA_ENCODING))  # type: ignore[no-any-return]
    except ValueError as e:
        # UnicodeDecodeError and json5 syntax errors are both ValueErrors
        logger.error("Failed to parse locale data %s: %s", path, e)
        msg = f"Malformed locale data in '{path}': {e}"
        raise DataParseError(msg, path=path) from e
