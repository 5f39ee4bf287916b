"""Standardized Hypothesis settings profiles for property tests.

Import these instead of using inline @settings(max_examples=...).

Usage:
    from tests.property.settings import STANDARD_SETTINGS

    @given(seed=seeds)
    @STANDARD_SETTINGS
    def test_something(seed):
        ...

Tiers:
- DETERMINISM_SETTINGS: 500 examples - seed replay guarantees
- STANDARD_SETTINGS: 100 examples - Regular property tests
- SLOW_SETTINGS: 50 examples - Tests that run a whole check() per example
- QUICK_SETTINGS: 20 examples - Fast validation tests
"""

from hypothesis import settings

# Replay of a reported seed is the guarantee counterexamples rest on
DETERMINISM_SETTINGS = settings(max_examples=500)

# Standard property tests - good balance of coverage and speed
STANDARD_SETTINGS = settings(max_examples=100)

# Each example runs a full trial loop plus shrinking
SLOW_SETTINGS = settings(max_examples=50)

# Quick validation tests - simple input rejection
QUICK_SETTINGS = settings(max_examples=20)
