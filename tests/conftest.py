# tests/conftest.py
"""Shared test fixtures and Hypothesis configuration.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/

Fixtures:
- source: deterministic EntropySource, fresh per test
- clean_env: strips PROPTREE_* variables so config defaults are predictable
- reset_logging: restores structlog and proptree logger state after a test
"""

import logging
import os
from collections.abc import Iterator

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from proptree.entropy import EntropySource
from proptree.runner.config import ENVVAR_PREFIX


@pytest.fixture
def source() -> EntropySource:
    """Deterministic entropy source."""
    return EntropySource.deterministic()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove PROPTREE_* environment variables for the duration of a test."""
    for name in list(os.environ):
        if name.startswith(f"{ENVVAR_PREFIX}_"):
            monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Undo configure_logging() side effects after the test."""
    package_logger = logging.getLogger("proptree")
    handlers, level = package_logger.handlers[:], package_logger.level
    yield
    structlog.reset_defaults()
    package_logger.handlers = handlers
    package_logger.setLevel(level)


# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
