# tests/conftest.py
"""Shared test fixtures and helpers.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/

Hypothesis drives the tests OF propkit's engine (bounds, shrink order,
determinism). The demo properties themselves are checked with propkit.
"""

import logging
import os
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from propkit.generators import Generator, array_of, boolean, integer, record_of, string

# =============================================================================
# Logging Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging calls made by a test.

    configure_logging replaces the root handlers with one bound to the
    sys.stderr of that moment. Under capsys or CliRunner that stream is
    closed after the test, so later log records would hit a dead handler.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


# =============================================================================
# Generator Fixtures
# =============================================================================


@pytest.fixture
def digits() -> Generator[int]:
    """Integers 0..9."""
    return integer(0, 9)


@pytest.fixture
def small_arrays() -> Generator[list[int]]:
    """Arrays of up to 10 integers in 0..100."""
    return array_of(integer(0, 100))


@pytest.fixture
def flag_records() -> Generator[dict[str, Any]]:
    """Records with a name, a count and a flag."""
    return record_of({"name": string(5), "count": integer(0, 5), "flag": boolean()})


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
