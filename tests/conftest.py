"""Pytest configuration for the localehelper test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from localehelper.helper import reset_default_helper
from localehelper.host import HostEnvironment, HostPlatform, Resources
from localehelper.locale_utils import clear_locale_cache
from localehelper.preferences import InMemoryPreferenceStore
from localehelper.process import reset_default_locale
from tests.helpers.catalogs import CATALOG

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


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
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# GLOBAL STATE ISOLATION
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset process default locale, shared helper and Babel cache per test."""
    monkeypatch.delenv("LOCALEHELPER_API_LEVEL", raising=False)
    monkeypatch.delenv("LOCALEHELPER_PREFERENCES_PATH", raising=False)
    reset_default_locale()
    reset_default_helper()
    yield
    reset_default_locale()
    reset_default_helper()
    clear_locale_cache()


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture
def scoped_env(store: InMemoryPreferenceStore) -> HostEnvironment:
    """Environment on a host that can derive scoped configurations."""
    return HostEnvironment(Resources(catalog=CATALOG), store, HostPlatform(api_level=30))


@pytest.fixture
def legacy_env(store: InMemoryPreferenceStore) -> HostEnvironment:
    """Environment on a host that only supports in-place updates."""
    return HostEnvironment(Resources(catalog=CATALOG), store, HostPlatform(api_level=21))
