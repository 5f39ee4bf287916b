# src/propkit/contracts/results.py
"""Property outcomes and check results.

These types answer: "What happened when a property was checked?"

- Passed / Failed: outcome of evaluating a predicate against ONE value.
  A predicate that raises is a Failed outcome, not an exception.
- Counterexample: the minimised failing value plus everything needed to
  reproduce it (original value, seed, trial index, shrink counts).
- CheckResult: outcome of a whole ``check`` run. Use the factory methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from propkit.contracts.errors import UnsatisfiableFilterError
    from propkit.core.random_source import Seed


@dataclass(frozen=True, slots=True)
class Passed:
    """The predicate held for the value."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failed:
    """The predicate returned a falsy value other than None, or raised.

    Attributes:
        reason: Human-readable description (the returned value or the exception).
        error: The exception raised by the predicate, if any.
    """

    reason: str
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return False


type PropertyOutcome = Passed | Failed


@dataclass(frozen=True, slots=True)
class Counterexample[T]:
    """A failing input, before and after shrinking.

    Attributes:
        original: The first failing value drawn.
        minimal: The smallest failing value shrinking reached.
        seed: Seed the failing trial drew ``original`` from. Drawing from the
              same generator with this seed reproduces ``original``.
        trial: Zero-based index of the failing trial.
        shrink_steps: Number of accepted (still failing) shrink candidates.
        shrink_attempts: Number of shrink candidates evaluated.
        reason: Failure reason for ``minimal``.
        error: Exception raised by the predicate for ``minimal``, if any.
    """

    original: T
    minimal: T
    seed: Seed
    trial: int
    shrink_steps: int
    shrink_attempts: int
    reason: str
    error: BaseException | None = None


@dataclass(frozen=True)
class CheckResult[T]:
    """Result of checking a property.

    status is one of:
    - "passed": every trial held
    - "failed": a counterexample was found (see ``counterexample``)
    - "unsatisfiable": a filtered generator gave up (see ``error``)

    seed is the starting seed for passed runs and the seed of the failing or
    aborted trial otherwise.
    """

    status: Literal["passed", "failed", "unsatisfiable"]
    seed: Seed
    trials_run: int
    counterexample: Counterexample[T] | None = None
    error: UnsatisfiableFilterError | None = None

    def __post_init__(self) -> None:
        if self.status == "failed" and self.counterexample is None:
            raise ValueError("CheckResult with status='failed' MUST carry a counterexample")
        if self.status == "unsatisfiable" and self.error is None:
            raise ValueError("CheckResult with status='unsatisfiable' MUST carry the filter error")
        if self.status == "passed" and (self.counterexample is not None or self.error is not None):
            raise ValueError("CheckResult with status='passed' cannot carry a counterexample or error")

    @property
    def ok(self) -> bool:
        """True only when every trial passed."""
        return self.status == "passed"

    @property
    def shrink_steps(self) -> int:
        """Accepted shrink steps (0 unless the property failed)."""
        if self.counterexample is None:
            return 0
        return self.counterexample.shrink_steps

    @classmethod
    def passed(cls, *, seed: Seed, trials_run: int) -> CheckResult[T]:
        """Create a result for a property that held on every trial."""
        return cls(status="passed", seed=seed, trials_run=trials_run)

    @classmethod
    def failed(cls, counterexample: Counterexample[T]) -> CheckResult[T]:
        """Create a result for a falsified property."""
        return cls(
            status="failed",
            seed=counterexample.seed,
            trials_run=counterexample.trial + 1,
            counterexample=counterexample,
        )

    @classmethod
    def unsatisfiable(cls, error: UnsatisfiableFilterError, *, seed: Seed, trial: int) -> CheckResult[T]:
        """Create a result for a run aborted by a filter that could not be satisfied."""
        return cls(status="unsatisfiable", seed=seed, trials_run=trial, error=error)
