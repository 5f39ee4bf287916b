# tests/property/generators/test_generator_properties.py
"""Property-based tests for generators and shrinking.

Tests invariants:
- Generated and shrunk values keep the generator's declared shape and range
- Shrink candidates are strictly smaller under each generator's order
- Sampling is deterministic for every seed
- Greedy shrinking terminates within budget on injected failures
"""

from __future__ import annotations

from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from propkit.engine.runner import check
from propkit.engine.sampler import sample
from propkit.generators import anything, array_of, boolean, integer, record_of, string
from propkit.generators.primitives import shrink_target
from tests.property.settings import DETERMINISM_SETTINGS, SLOW_SETTINGS, STANDARD_SETTINGS
from tests.property.strategies import bounds, printable_text, seeds


def _complexity(text: str) -> tuple[int, int]:
    return len(text), sum(1 for ch in text if ch != "a")


def _depth(value: Any) -> int:
    if isinstance(value, list):
        return 1 + max((_depth(item) for item in value), default=0)
    if isinstance(value, dict):
        return 1 + max((_depth(item) for item in value.values()), default=0)
    return 0


# =============================================================================
# integer
# =============================================================================


class TestIntegerProperties:
    """Property: integers stay in range and shrink strictly toward the target."""

    @given(seed=seeds, range_=bounds)
    @STANDARD_SETTINGS
    def test_draw_and_shrink_in_range(self, seed: int, range_: tuple[int, int]) -> None:
        lo, hi = range_
        gen = integer(lo, hi)
        value, _ = gen.draw(seed)
        assert lo <= value <= hi
        target = shrink_target(lo, hi)
        for candidate in gen.shrink(value):
            assert lo <= candidate <= hi
            assert abs(candidate - target) < abs(value - target)


# =============================================================================
# string
# =============================================================================


class TestStringProperties:
    """Property: string shrinks reduce (length, non-simple chars)."""

    @given(text=printable_text)
    @STANDARD_SETTINGS
    def test_shrink_strictly_simpler(self, text: str) -> None:
        for candidate in string().shrink(text):
            assert _complexity(candidate) < _complexity(text)

    @given(seed=seeds, max_length=st.integers(min_value=0, max_value=30))
    @STANDARD_SETTINGS
    def test_length_bounded(self, seed: int, max_length: int) -> None:
        value, _ = string(max_length).draw(seed)
        assert len(value) <= max_length


# =============================================================================
# array_of / record_of
# =============================================================================


class TestArrayProperties:
    """Property: arrays keep element range and change length by at most one per shrink."""

    @given(seed=seeds, min_length=st.integers(min_value=0, max_value=3))
    @STANDARD_SETTINGS
    def test_shape_preserved_through_shrinking(self, seed: int, min_length: int) -> None:
        gen = array_of(integer(-5, 5), max_length=6, min_length=min_length)
        value, _ = gen.draw(seed)
        assert min_length <= len(value) <= 6
        for candidate in gen.shrink(value):
            assert len(value) - len(candidate) in (0, 1)
            assert len(candidate) >= min_length
            assert all(-5 <= item <= 5 for item in candidate)


class TestRecordProperties:
    """Property: records never gain or lose keys."""

    @given(seed=seeds)
    @STANDARD_SETTINGS
    def test_keys_exact_through_shrinking(self, seed: int) -> None:
        gen = record_of({"name": string(4), "age": integer(0, 120), "admin": boolean()})
        value, _ = gen.draw(seed)
        assert list(value) == ["name", "age", "admin"]
        for candidate in gen.shrink(value):
            assert list(candidate) == ["name", "age", "admin"]
            assert sum(candidate[key] != value[key] for key in value) == 1


# =============================================================================
# anything
# =============================================================================


class TestAnythingProperties:
    """Property: anything() respects its depth bound."""

    @given(seed=seeds, max_depth=st.integers(min_value=0, max_value=3))
    @STANDARD_SETTINGS
    def test_depth_bounded(self, seed: int, max_depth: int) -> None:
        value, _ = anything(max_depth).draw(seed)
        assert _depth(value) <= max_depth


# =============================================================================
# Determinism and termination
# =============================================================================


class TestDeterminism:
    """Property: the same seed always samples the same values."""

    @given(seed=seeds)
    @DETERMINISM_SETTINGS
    def test_sample_replays(self, seed: int) -> None:
        gen = record_of({"xs": array_of(anything(1), max_length=4), "s": string()})
        assert sample(gen, 5, seed) == sample(gen, 5, seed)


class TestShrinkTermination:
    """Property: injected failures shrink to the minimal case within budget."""

    @given(seed=seeds)
    @SLOW_SETTINGS
    def test_nonempty_arrays_shrink_to_single_zero(self, seed: int) -> None:
        result = check(array_of(integer(0, 1000)), lambda xs: len(xs) == 0, seed=seed, max_shrink_steps=1000)
        assert result.counterexample is not None
        assert result.counterexample.minimal == [0]
        assert result.counterexample.shrink_attempts < 1000
