"""Shared constants for localedata.

Centralizes the fixed names and file conventions used by the fragment
builder, the loader, and the resolution engine so that every module agrees
on how locale data is laid out on disk.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale names
    "ROOT_LOCALE",
    "UNDEFINED_LANGUAGE",
    "DEFAULT_LOCALE",
    # File layout
    "DATA_EXTENSION",
    "DATA_ENCODING",
    "PATH_SEPARATOR",
]

# ============================================================================
# LOCALE NAMES
# ============================================================================

# Name of the world-wide fragment. Its data lives at the top of each root.
ROOT_LOCALE = "root"

# Language subtag meaning "all languages". Region-only data is stored under
# und/<region> because the language is the minimum locale part.
UNDEFINED_LANGUAGE = "und"

# Used when neither the caller nor the environment names a locale.
DEFAULT_LOCALE = "en-US"

# ============================================================================
# FILE LAYOUT
# ============================================================================

DATA_EXTENSION = ".json"

DATA_ENCODING = "utf-8"

# Roots may be URIs as well as filesystem paths, so candidate paths are
# always joined with a forward slash.
PATH_SEPARATOR = "/"
