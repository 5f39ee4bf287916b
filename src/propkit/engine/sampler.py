# src/propkit/engine/sampler.py
"""Draw values from a generator for inspection.

Purely observational: no predicate, no shrinking. Useful for eyeballing what
a generator produces before writing properties against it.
"""

from __future__ import annotations

from propkit.core.logging import get_logger
from propkit.core.random_source import Seed, as_seed, seed_from_time
from propkit.generators.base import Generator

logger = get_logger(__name__)

DEFAULT_SAMPLE_COUNT = 10


def sample[T](generator: Generator[T], count: int = DEFAULT_SAMPLE_COUNT, seed: int | Seed | None = None) -> list[T]:
    """Draw ``count`` values, advancing the seed after each draw.

    Args:
        generator: Generator to draw from.
        count: Number of values to draw.
        seed: Starting seed (time-derived when omitted). The same seed always
              yields the same list.

    Returns:
        List of drawn values in draw order.

    Raises:
        ValueError: If count < 0.
        UnsatisfiableFilterError: If a filter in the generator gave up.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    current = seed_from_time() if seed is None else as_seed(seed)
    logger.debug("sample_started", generator=generator.name, count=count, seed=current.state)

    values: list[T] = []
    for _ in range(count):
        value, current = generator.draw_fn(current)
        values.append(value)
    return values
