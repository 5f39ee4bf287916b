# src/propkit/engine/runner.py
"""Property runner: random trials, then greedy shrinking of the first failure.

Flow of ``check``:

1. Draw ``trials`` values, threading the seed from one trial to the next.
2. Evaluate the predicate on each value. A falsy return value (False, 0,
   ``numpy.False_``) or an exception is a failure. None is a pass, so plain
   ``assert`` statements work, and so is any truthy value.
3. On the first failure, shrink: walk the generator's shrink candidates for
   the current best value and adopt the first one that still fails, then
   start again from it. Stop when no candidate fails or when
   ``max_shrink_steps`` candidates have been evaluated. An error raised
   while producing candidates (a user ``map``/``unmap``, say) ends shrinking
   with the current best value.
4. Report a CheckResult. Predicate errors never escape; only a filter that
   cannot be satisfied is reported as a distinct "unsatisfiable" status.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from propkit.contracts.errors import PropertyFailedError, UnsatisfiableFilterError
from propkit.contracts.results import CheckResult, Counterexample, Failed, Passed, PropertyOutcome
from propkit.core.config import RunnerSettings
from propkit.core.logging import get_logger
from propkit.core.random_source import Seed, as_seed, seed_from_time
from propkit.generators.base import Generator

logger = get_logger(__name__)

type Predicate[T] = Callable[[T], Any]


def evaluate[T](predicate: Predicate[T], value: T) -> PropertyOutcome:
    """Evaluate a predicate against one value without letting it raise.

    Returns:
        Failed if the predicate returned a falsy value other than None, or
        raised. Passed otherwise.
    """
    try:
        outcome = predicate(value)
        held = outcome is None or bool(outcome)
    except Exception as exc:
        # Predicate errors are part of the property's verdict, not engine errors
        return Failed(reason=f"{type(exc).__name__}: {exc}", error=exc)
    if not held:
        return Failed(reason=f"predicate returned {outcome!r}")
    return Passed()


def _shrink_candidates[T](generator: Generator[T], value: T) -> Iterator[T]:
    try:
        yield from generator.shrink(value)
    except Exception as exc:
        logger.debug(
            "shrink_candidates_failed",
            generator=generator.name,
            error=f"{type(exc).__name__}: {exc}",
        )


def shrink_failure[T](
    generator: Generator[T],
    predicate: Predicate[T],
    value: T,
    failure: Failed,
    *,
    seed: Seed,
    trial: int,
    max_shrink_steps: int,
) -> Counterexample[T]:
    """Greedily shrink a failing value.

    Args:
        generator: Generator that produced ``value`` (supplies candidates).
        predicate: The property being checked.
        value: The original failing value.
        failure: The outcome of evaluating ``value``.
        seed: Seed the failing trial drew from.
        trial: Index of the failing trial.
        max_shrink_steps: Budget of candidate evaluations.

    Returns:
        Counterexample holding the smallest failing value found.
    """
    best, best_failure = value, failure
    steps = 0
    attempts = 0
    improved = True

    while improved and attempts < max_shrink_steps:
        improved = False
        for candidate in _shrink_candidates(generator, best):
            if attempts >= max_shrink_steps:
                break
            attempts += 1
            outcome = evaluate(predicate, candidate)
            if isinstance(outcome, Failed):
                best, best_failure = candidate, outcome
                steps += 1
                improved = True
                break

    return Counterexample(
        original=value,
        minimal=best,
        seed=seed,
        trial=trial,
        shrink_steps=steps,
        shrink_attempts=attempts,
        reason=best_failure.reason,
        error=best_failure.error,
    )


def _resolve_settings(settings: RunnerSettings | None, overrides: dict[str, Any]) -> RunnerSettings:
    if settings is None:
        return RunnerSettings(**overrides)
    if not overrides:
        return settings
    return RunnerSettings(**{**settings.model_dump(), **overrides})


def check[T](
    generator: Generator[T],
    predicate: Predicate[T],
    settings: RunnerSettings | None = None,
    **overrides: Any,
) -> CheckResult[T]:
    """Check that ``predicate`` holds for values drawn from ``generator``.

    Args:
        generator: Source of trial values.
        predicate: Property to check. Fails by returning a falsy value
                   other than None (False, 0, ``numpy.False_``) or raising.
        settings: Runner settings (defaults: 100 trials, 1000 shrink steps,
                  time-derived seed).
        **overrides: Individual settings fields (trials, max_shrink_steps,
                     seed) taking precedence over ``settings``.

    Returns:
        CheckResult with status "passed", "failed" or "unsatisfiable".

    Raises:
        pydantic.ValidationError: If the settings or overrides are invalid.
    """
    resolved = _resolve_settings(settings, overrides)
    start = seed_from_time() if resolved.seed is None else as_seed(resolved.seed)
    log = logger.bind(generator=generator.name, seed=start.state)
    log.debug("property_check_started", trials=resolved.trials, max_shrink_steps=resolved.max_shrink_steps)

    current = start
    for trial in range(resolved.trials):
        trial_seed = current
        try:
            value, current = generator.draw_fn(current)
        except UnsatisfiableFilterError as exc:
            log.warning("filter_unsatisfiable", trial=trial, trial_seed=trial_seed.state, error=str(exc))
            return CheckResult.unsatisfiable(exc, seed=trial_seed, trial=trial)

        outcome = evaluate(predicate, value)
        if isinstance(outcome, Failed):
            log.info("property_failed", trial=trial, trial_seed=trial_seed.state, reason=outcome.reason)
            counterexample = shrink_failure(
                generator,
                predicate,
                value,
                outcome,
                seed=trial_seed,
                trial=trial,
                max_shrink_steps=resolved.max_shrink_steps,
            )
            log.info(
                "property_shrunk",
                shrink_steps=counterexample.shrink_steps,
                shrink_attempts=counterexample.shrink_attempts,
                budget_exhausted=counterexample.shrink_attempts >= resolved.max_shrink_steps,
            )
            return CheckResult.failed(counterexample)

    log.debug("property_passed", trials=resolved.trials)
    return CheckResult.passed(seed=start, trials_run=resolved.trials)


def assert_property[T](
    generator: Generator[T],
    predicate: Predicate[T],
    settings: RunnerSettings | None = None,
    **overrides: Any,
) -> CheckResult[T]:
    """Check a property and raise if it does not hold.

    Intended for test suites: a failing property fails the test with the
    minimal counterexample and the seed needed to replay it.

    Returns:
        The passing CheckResult.

    Raises:
        PropertyFailedError: If a counterexample was found.
        UnsatisfiableFilterError: If a filter in the generator gave up.
    """
    result = check(generator, predicate, settings, **overrides)
    if result.status == "unsatisfiable" and result.error is not None:
        raise result.error
    if result.status == "failed":
        raise PropertyFailedError(result)
    return result
