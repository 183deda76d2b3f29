"""LocaleData Example - Fragment Fallback and Override Roots.

Demonstrates how locale data is merged from generic to specific fragments,
how application roots override what a package ships, and how the cache
makes repeated lookups free.

Scenarios covered:
1. Merging root, language, region, and full-locale data
2. Overriding package data from a global root
3. Merge policies and array modes
4. Injecting data and asyncio loading

Data layout (one JSON file per fragment):

    locale/numfmt.json            root data, every locale inherits it
    locale/de/numfmt.json         German
    locale/und/CH/numfmt.json     any language in Switzerland
    locale/de/CH/numfmt.json      German in Switzerland

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import logging
import tempfile
from pathlib import Path

from localedata import (
    LocaleData,
    add_global_root,
    cache_data,
    check_cache,
    clear_cache,
    clear_global_roots,
)

PACKAGE_DATA = {
    "numfmt.json": {"decimal": ".", "group": ",", "patterns": ["#,##0.###"]},
    "de/numfmt.json": {"decimal": ",", "group": "."},
    "und/CH/numfmt.json": {"currency": "CHF"},
    "de/CH/numfmt.json": {"group": "’", "patterns": ["#,##0.00"]},
    "it/numfmt.json": {"decimal": ","},
}

OVERRIDE_DATA = {
    "de/numfmt.json": {"group": " "},
}


def _write(base: Path, files: dict[str, object]) -> str:
    for relative, content in files.items():
        target = base / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
    return str(base)


def example_1_fragment_merging(package_root: str) -> None:
    """Example 1: Generic-to-specific merging."""
    print("=" * 60)
    print("Example 1: Fragment Merging")
    print("=" * 60)

    locale_data = LocaleData("numfmt-lib", package_root, sync=True)

    for locale in ("root", "de", "de-CH", "it-CH", "fr-FR"):
        print(f"  {locale:6} -> {locale_data.load_data('numfmt', locale=locale)}")


def example_2_override_root(package_root: str, override_root: str) -> None:
    """Example 2: An application root overrides package data."""
    print("\n" + "=" * 60)
    print("Example 2: Override Roots")
    print("=" * 60)

    locale_data = LocaleData("numfmt-lib", package_root, sync=True)
    add_global_root(override_root)
    clear_cache()

    print(f"  roots: {locale_data.effective_roots()}")
    print(f"  de -> {locale_data.load_data('numfmt', locale='de')}")

    clear_global_roots()
    clear_cache()


def example_3_policies(package_root: str) -> None:
    """Example 3: Merge policies and array modes."""
    print("\n" + "=" * 60)
    print("Example 3: Merge Policies")
    print("=" * 60)

    locale_data = LocaleData("numfmt-lib", package_root, sync=True)

    print(f"  merge-all     -> {locale_data.load_data('numfmt', locale='de-CH')}")
    print(
        "  replace       -> "
        f"{locale_data.load_data('numfmt', locale='de-CH', replace=True)}"
    )
    print(
        "  return-one    -> "
        f"{locale_data.load_data('numfmt', locale='de-CH', merge_policy='return-one')}"
    )
    print(
        "  most-specific -> "
        f"{locale_data.load_data('numfmt', locale='de-CH', merge_policy='most-specific')}"
    )


def example_4_injection_and_asyncio(package_root: str) -> None:
    """Example 4: Injected data and asyncio loads."""
    print("\n" + "=" * 60)
    print("Example 4: Injection and Asyncio")
    print("=" * 60)

    cache_data("numfmt-lib", {"nl-NL": {"numfmt": {"decimal": ",", "group": "."}}})
    print(f"  cached nl-NL: {check_cache('numfmt-lib', 'nl-NL', 'numfmt')}")

    locale_data = LocaleData("numfmt-lib", package_root)
    result = asyncio.run(locale_data.load_data_async("numfmt", locale="nl-NL"))
    print(f"  nl-NL -> {result}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)

    with tempfile.TemporaryDirectory() as tmp:
        package = _write(Path(tmp) / "locale", PACKAGE_DATA)
        override = _write(Path(tmp) / "override", OVERRIDE_DATA)

        example_1_fragment_merging(package)
        example_2_override_root(package, override)
        example_3_policies(package)
        example_4_injection_and_asyncio(package)

    print("\n" + "=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
