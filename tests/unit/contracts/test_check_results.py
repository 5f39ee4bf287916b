# tests/unit/contracts/test_check_results.py
"""Unit tests for CheckResult invariants and PropertyFailedError."""

from __future__ import annotations

import pytest

from propkit.contracts.errors import PropertyFailedError, PropkitError, UnsatisfiableFilterError
from propkit.contracts.results import CheckResult, Counterexample
from propkit.core.random_source import Seed


def _counterexample() -> Counterexample[int]:
    return Counterexample(
        original=42,
        minimal=7,
        seed=Seed(5),
        trial=2,
        shrink_steps=3,
        shrink_attempts=9,
        reason="predicate returned False",
    )


class TestCheckResultFactories:
    """Tests for the factory methods."""

    def test_passed(self) -> None:
        result: CheckResult[int] = CheckResult.passed(seed=Seed(1), trials_run=100)
        assert result.ok
        assert result.shrink_steps == 0

    def test_failed_takes_seed_and_trials_from_counterexample(self) -> None:
        result = CheckResult.failed(_counterexample())
        assert not result.ok
        assert result.seed == Seed(5)
        assert result.trials_run == 3
        assert result.shrink_steps == 3

    def test_unsatisfiable(self) -> None:
        error = UnsatisfiableFilterError("integer(0, 1).filter", 10)
        result: CheckResult[int] = CheckResult.unsatisfiable(error, seed=Seed(4), trial=6)
        assert not result.ok
        assert result.error is error
        assert result.trials_run == 6


class TestCheckResultInvariants:
    """Direct construction must respect status invariants."""

    def test_failed_requires_counterexample(self) -> None:
        with pytest.raises(ValueError, match="counterexample"):
            CheckResult(status="failed", seed=Seed(1), trials_run=1)

    def test_unsatisfiable_requires_error(self) -> None:
        with pytest.raises(ValueError, match="filter error"):
            CheckResult(status="unsatisfiable", seed=Seed(1), trials_run=0)

    def test_passed_rejects_counterexample(self) -> None:
        with pytest.raises(ValueError, match="passed"):
            CheckResult(status="passed", seed=Seed(1), trials_run=1, counterexample=_counterexample())


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self) -> None:
        assert issubclass(UnsatisfiableFilterError, PropkitError)
        assert issubclass(PropertyFailedError, PropkitError)
        assert issubclass(PropertyFailedError, AssertionError)

    def test_property_failed_message(self) -> None:
        error = PropertyFailedError(CheckResult.failed(_counterexample()))
        message = str(error)
        assert "after 3 trial(s)" in message
        assert "seed=5" in message
        assert "shrink_steps=3" in message
        assert "counterexample: 7" in message
        assert "original:       42" in message

    def test_property_failed_requires_counterexample(self) -> None:
        with pytest.raises(ValueError):
            PropertyFailedError(CheckResult.passed(seed=Seed(1), trials_run=1))

    def test_unsatisfiable_message(self) -> None:
        error = UnsatisfiableFilterError("gen", 3)
        assert str(error) == "Filter on gen rejected 3 consecutive draws"
