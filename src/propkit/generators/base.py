# src/propkit/generators/base.py
"""Generator: a declarative recipe for random values plus a shrink strategy.

A Generator is NOT a container. It pairs two pure functions:

- draw:   Seed -> (value, next Seed)
- shrink: value -> iterable of strictly "smaller" candidate values

Generators hold no state, so one instance can be shared across any number of
draws, samples and property checks. All randomness is threaded explicitly
through the seed.

Shrink functions must be finite and restartable: calling ``shrink(v)`` twice
yields the same candidates, and following candidates repeatedly must always
terminate (each generator defines its own well-founded "smaller" order).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from propkit.contracts.errors import UnsatisfiableFilterError
from propkit.core.logging import get_logger
from propkit.core.random_source import Seed, as_seed

logger = get_logger(__name__)

DEFAULT_FILTER_RETRIES = 100


def no_shrink(value: object) -> Iterable[object]:
    """Shrink function for values with no smaller candidates."""
    return ()


@dataclass(frozen=True, slots=True)
class Generator[T]:
    """Composable value recipe.

    Attributes:
        draw_fn: Pure draw function, Seed -> (value, next Seed).
        shrink_fn: Candidate function, value -> smaller values.
        name: Label used in logs and error messages.
    """

    draw_fn: Callable[[Seed], tuple[T, Seed]]
    shrink_fn: Callable[[T], Iterable[T]] = field(default=no_shrink)
    name: str = "generator"

    def draw(self, seed: int | Seed) -> tuple[T, Seed]:
        """Draw one value.

        Args:
            seed: Random source state (ints are normalised to a Seed).

        Returns:
            Tuple of (value, next seed).

        Raises:
            UnsatisfiableFilterError: If a filter in this recipe gave up.
        """
        return self.draw_fn(as_seed(seed))

    def shrink(self, value: T) -> Iterator[T]:
        """Iterate the shrink candidates for a value, most aggressive first."""
        return iter(self.shrink_fn(value))

    def map[U](self, func: Callable[[T], U], unmap: Callable[[U], T] | None = None) -> Generator[U]:
        """Transform drawn values.

        Args:
            func: Applied to every drawn value.
            unmap: Optional inverse of ``func``. When given, mapped values
                   shrink by shrinking the source value; without it mapped
                   values do not shrink.

        Returns:
            New generator producing ``func(value)``.
        """
        source = self

        def draw_mapped(seed: Seed) -> tuple[U, Seed]:
            value, seed = source.draw_fn(seed)
            return func(value), seed

        def shrink_mapped(value: U) -> Iterator[U]:
            if unmap is None:
                return
            for candidate in source.shrink(unmap(value)):
                yield func(candidate)

        return Generator(draw_mapped, shrink_mapped, name=f"{self.name}.map")

    def filter(self, predicate: Callable[[T], bool], max_retries: int = DEFAULT_FILTER_RETRIES) -> Generator[T]:
        """Constrain drawn values to those satisfying ``predicate``.

        Each rejected draw is retried with the advanced seed. After
        ``max_retries`` consecutive rejections the draw raises
        UnsatisfiableFilterError instead of looping forever. A predicate
        that raises rejects the value, both when drawing and when
        shrinking.

        Args:
            predicate: Values for which this returns falsy (or raises) are
                       rejected.
            max_retries: Maximum number of draws per generated value.

        Returns:
            New generator whose values (and shrink candidates) all satisfy
            ``predicate``.

        Raises:
            ValueError: If max_retries < 1.
        """
        if max_retries < 1:
            raise ValueError(f"max_retries must be >= 1, got {max_retries}")
        source = self
        name = f"{self.name}.filter"

        def accepts(value: T) -> bool:
            try:
                return bool(predicate(value))
            except Exception as exc:
                logger.debug("filter_predicate_raised", generator=name, error=f"{type(exc).__name__}: {exc}")
                return False

        def draw_filtered(seed: Seed) -> tuple[T, Seed]:
            for _ in range(max_retries):
                value, seed = source.draw_fn(seed)
                if accepts(value):
                    return value, seed
            logger.debug("filter_unsatisfiable", generator=name, max_retries=max_retries)
            raise UnsatisfiableFilterError(name, max_retries)

        def shrink_filtered(value: T) -> Iterator[T]:
            return (candidate for candidate in source.shrink(value) if accepts(candidate))

        return Generator(draw_filtered, shrink_filtered, name=name)

    def named(self, name: str) -> Generator[T]:
        """Return the same recipe under a different name."""
        return Generator(self.draw_fn, self.shrink_fn, name=name)
