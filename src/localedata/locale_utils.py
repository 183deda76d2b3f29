"""Locale utilities for tag normalization and sublocale expansion.

Centralizes locale format handling used throughout the package. Every
locale that reaches the cache or the fragment builder passes through
normalize_locale() first, so "de_DE", "de-de" and "de-DE" share cache keys.

Subtag grammar is delegated to Babel (babel.core.parse_locale); this module
only decides how the parsed subtags decompose into sublocales.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import NamedTuple

from babel.core import parse_locale

from localedata.constants import DEFAULT_LOCALE, ROOT_LOCALE, UNDEFINED_LANGUAGE
from localedata.types import LocaleCode

__all__ = [
    "LocaleParts",
    "clear_locale_cache",
    "get_sublocales",
    "get_system_locale",
    "normalize_locale",
    "parse_locale_parts",
]


class LocaleParts(NamedTuple):
    """Subtags of a locale tag. Absent subtags are None."""

    language: str | None
    script: str | None
    region: str | None
    variant: str | None


@functools.lru_cache(maxsize=256)
def parse_locale_parts(locale_code: LocaleCode) -> LocaleParts:
    """Split a locale tag into language, script, region and variant.

    Accepts BCP-47 ("zh-Hans-CN") and POSIX ("zh_Hans_CN") separators.
    Encoding and modifier suffixes ("de_DE.UTF-8@euro") are dropped.

    Args:
        locale_code: Locale tag, or "root"

    Returns:
        LocaleParts with canonical casing

    Raises:
        ValueError: If the tag is not a valid locale identifier

    Example:
        >>> parse_locale_parts("zh_hans_cn")
        LocaleParts(language='zh', script='Hans', region='CN', variant=None)
    """
    if locale_code == ROOT_LOCALE:
        return LocaleParts(None, None, None, None)
    if not isinstance(locale_code, str) or not locale_code:
        msg = f"Locale code must be a non-empty string, got {locale_code!r}"
        raise ValueError(msg)

    parsed = parse_locale(locale_code.replace("_", "-"), sep="-")
    language, region, script, variant = parsed[:4]
    return LocaleParts(language, script, region, variant)


def normalize_locale(locale_code: LocaleCode) -> LocaleCode:
    """Convert a locale tag to the canonical hyphenated form.

    This is the canonical normalization function. All locale handling
    normalizes at the system boundary with it, then uses the normalized
    form for cache keys and lookups.

    Args:
        locale_code: Locale tag in BCP-47 or POSIX format

    Returns:
        Canonical BCP-47 form, or "root" for the root locale

    Raises:
        ValueError: If the tag is not a valid locale identifier

    Example:
        >>> normalize_locale("en_us")
        'en-US'
        >>> normalize_locale("root")
        'root'
    """
    parts = parse_locale_parts(locale_code)
    if parts.language is None:
        return ROOT_LOCALE
    return "-".join(part for part in parts if part)


def _join(*parts: str | None) -> LocaleCode | None:
    """Join subtags with hyphens, or None if any subtag is missing."""
    if any(part is None for part in parts):
        return None
    return "-".join(parts)  # type: ignore[arg-type]


@functools.lru_cache(maxsize=256)
def get_sublocales(locale_code: LocaleCode) -> tuple[LocaleCode, ...]:
    """Expand a locale into its sublocales, most generic first.

    Order:
        root, language, und-region, language-script, language-region,
        language-variant, und-region-variant, language-script-region,
        language-script-variant, language-region-variant,
        language-script-region-variant

    Entries that need a subtag the locale does not have are skipped, so the
    result always starts with "root" and contains no duplicates.

    Args:
        locale_code: Locale tag in BCP-47 or POSIX format

    Returns:
        Tuple of canonical sublocale tags

    Raises:
        ValueError: If the tag is not a valid locale identifier

    Example:
        >>> get_sublocales("de-DE")
        ('root', 'de', 'und-DE', 'de-DE')
    """
    lang, script, region, variant = parse_locale_parts(locale_code)
    und = UNDEFINED_LANGUAGE

    candidates = (
        ROOT_LOCALE,
        lang,
        _join(und, region) if lang != und else None,
        _join(lang, script),
        _join(lang, region),
        _join(lang, variant),
        _join(und, region, variant) if lang != und else None,
        _join(lang, script, region),
        _join(lang, script, variant),
        _join(lang, region, variant),
        _join(lang, script, region, variant),
    )
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys(c for c in candidates if c is not None))


def clear_locale_cache() -> None:
    """Clear the memoized parse and expansion results."""
    parse_locale_parts.cache_clear()
    get_sublocales.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> LocaleCode:
    """Detect the ambient locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and values that do not parse
    as locale identifiers.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return DEFAULT_LOCALE.

    Returns:
        Detected locale in canonical BCP-47 form

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str] = []
    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            candidates.append(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            candidates.append(value)

    for candidate in candidates:
        # Strip encoding suffix (e.g., ".UTF-8")
        code = candidate.split(".")[0]
        if code in ("C", "POSIX", ""):
            continue
        try:
            return normalize_locale(code)
        except ValueError:
            continue

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
