"""Exception hierarchy for locale data resolution.

A missing file is not an error: it folds into negative-cache semantics.
Only configuration mistakes, unreadable storage, and malformed content
raise.

Hierarchy:
    LocaleDataError (base)
    ├─ ConfigurationError (missing or invalid construction arguments)
    ├─ DataParseError (content fetched but malformed)
    └─ LoaderError (I/O failure other than not-found)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "DataParseError",
    "LoaderError",
    "LocaleDataError",
]


class LocaleDataError(Exception):
    """Base exception for all locale data errors."""


class ConfigurationError(LocaleDataError, ValueError):
    """Raised when an engine or request is built from invalid arguments.

    Fatal and never retried. Subclasses ValueError so that callers treating
    bad arguments generically still catch it.
    """


class DataParseError(LocaleDataError):
    """Content was read successfully but could not be parsed.

    Propagates out of load_data and is never cached, so a later call can
    succeed once the file is fixed.

    Attributes:
        path: Candidate path whose content failed to parse
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        """Initialize DataParseError.

        Args:
            message: Error message
            path: Candidate path whose content failed to parse
        """
        super().__init__(message)
        self.path = path


class LoaderError(LocaleDataError):
    """Storage could not be read for a reason other than absence.

    Aborts the whole batch it occurred in.

    Attributes:
        path: Candidate path that failed, if known
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        """Initialize LoaderError.

        Args:
            message: Error message
            path: Candidate path that failed, if known
        """
        super().__init__(message)
        self.path = path
