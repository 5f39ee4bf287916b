# src/propkit/contracts/errors.py
"""Exception types raised by propkit.

Only two conditions ever leave the engine as exceptions:

- UnsatisfiableFilterError: a filtered generator gave up. ``check`` turns this
  into an "unsatisfiable" result; direct ``draw``/``sample`` callers see it raised.
- PropertyFailedError: raised by ``assert_property`` for test suites that want
  a failing property to fail the test.

Predicate failures inside ``check`` are NOT exceptions - they are reported
through CheckResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from propkit.contracts.results import CheckResult


class PropkitError(Exception):
    """Base class for all propkit errors."""


class UnsatisfiableFilterError(PropkitError):
    """A filtered generator found no passing value within its retry bound.

    Attributes:
        generator_name: Name of the filtered generator.
        max_retries: Number of draws attempted before giving up.
    """

    def __init__(self, generator_name: str, max_retries: int) -> None:
        self.generator_name = generator_name
        self.max_retries = max_retries
        super().__init__(f"Filter on {generator_name} rejected {max_retries} consecutive draws")


class PropertyFailedError(PropkitError, AssertionError):
    """A property did not hold.

    Subclasses AssertionError so pytest reports it as a test failure rather
    than an error.

    Attributes:
        result: The failed CheckResult (counterexample, seed, shrink counts).
    """

    def __init__(self, result: CheckResult) -> None:
        self.result = result
        counterexample = result.counterexample
        if counterexample is None:
            raise ValueError("PropertyFailedError requires a failed CheckResult with a counterexample")
        super().__init__(
            f"Property failed after {counterexample.trial + 1} trial(s) "
            f"(seed={counterexample.seed.state}, shrink_steps={counterexample.shrink_steps})\n"
            f"  counterexample: {counterexample.minimal!r}\n"
            f"  original:       {counterexample.original!r}\n"
            f"  reason:         {counterexample.reason}"
        )
