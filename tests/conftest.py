"""Pytest configuration for the localedata test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Isolation:
Tests build their own RootRegistry and CacheRegistry through the
``roots`` and ``caches`` fixtures. The autouse fixture below also resets the
process-wide registries, for tests that exercise the default wiring.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from localedata.cache import CacheRegistry, default_cache_registry
from localedata.roots import RootRegistry, default_root_registry
from tests.helpers.loaders import RecordingLoader
from tests.helpers.trees import OVERRIDE_FILES, PACKAGE_FILES, write_tree

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# REGISTRY ISOLATION
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_default_registries() -> Iterator[None]:
    """Leave the process-wide registries empty before and after each test."""
    default_root_registry.clear()
    default_cache_registry.clear_all()
    yield
    default_root_registry.clear()
    default_cache_registry.clear_all()


@pytest.fixture
def roots() -> RootRegistry:
    """Isolated global root registry."""
    return RootRegistry()


@pytest.fixture
def caches() -> CacheRegistry:
    """Isolated cache registry."""
    return CacheRegistry()


@pytest.fixture
def recording_loader() -> RecordingLoader:
    """Filesystem loader that records every batch."""
    return RecordingLoader()


# =============================================================================
# DATA TREES
# =============================================================================


@pytest.fixture
def package_root(tmp_path: Path) -> str:
    """Private data root shipped with the package under test."""
    return write_tree(tmp_path / "package", PACKAGE_FILES)


@pytest.fixture
def override_root(tmp_path: Path) -> str:
    """Application override root, meant to be added as a global root."""
    return write_tree(tmp_path / "override", OVERRIDE_FILES)
