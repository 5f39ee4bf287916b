# src/propkit/generators/combinators.py
"""Structural combinators: array_of and record_of.

Both preserve shape through shrinking:
- array_of never shrinks below ``min_length`` and never changes the length by
  more than one element per candidate; shrunk elements come from the element
  generator's own shrink, so they stay in its range.
- record_of always produces exactly the declared keys and shrinks one field
  per candidate while holding the others fixed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from propkit.core.random_source import Seed, next_int
from propkit.generators.base import Generator

DEFAULT_MAX_ARRAY_LENGTH = 10


def shrink_list[T](
    value: list[T],
    shrink_element: Callable[[T], Iterable[T]],
    min_length: int = 0,
) -> Iterator[list[T]]:
    """Shrink candidates for a list whose elements shrink via ``shrink_element``.

    Single-element removals come first (shorter lists are preferred), then
    single-element shrinks in position order.
    """
    if len(value) > min_length:
        for index in range(len(value)):
            yield value[:index] + value[index + 1 :]
    for index, item in enumerate(value):
        for candidate in shrink_element(item):
            yield [*value[:index], candidate, *value[index + 1 :]]


def array_of[T](
    element: Generator[T],
    max_length: int = DEFAULT_MAX_ARRAY_LENGTH,
    min_length: int = 0,
) -> Generator[list[T]]:
    """Lists of ``element`` values with length uniform in [min_length, max_length].

    Raises:
        ValueError: If the length bounds are negative or inverted.
    """
    if min_length < 0:
        raise ValueError(f"min_length must be >= 0, got {min_length}")
    if min_length > max_length:
        raise ValueError(f"min_length ({min_length}) must be <= max_length ({max_length})")

    def draw(seed: Seed) -> tuple[list[T], Seed]:
        length, seed = next_int(seed, min_length, max_length)
        items: list[T] = []
        for _ in range(length):
            item, seed = element.draw_fn(seed)
            items.append(item)
        return items, seed

    def shrink(value: list[T]) -> Iterator[list[T]]:
        return shrink_list(value, element.shrink, min_length)

    return Generator(draw, shrink, name=f"array_of({element.name})")


def record_of(fields: Mapping[str, Generator[Any]]) -> Generator[dict[str, Any]]:
    """Dicts with one key per field, each drawn from its own generator.

    Fields are drawn in declaration order. The order only fixes how the seed
    is consumed; it does not change which values are possible.
    """
    declared = tuple(fields.items())
    label = ", ".join(f"{key}={gen.name}" for key, gen in declared)

    def draw(seed: Seed) -> tuple[dict[str, Any], Seed]:
        record: dict[str, Any] = {}
        for key, gen in declared:
            record[key], seed = gen.draw_fn(seed)
        return record, seed

    def shrink(value: dict[str, Any]) -> Iterator[dict[str, Any]]:
        for key, gen in declared:
            for candidate in gen.shrink(value[key]):
                yield {**value, key: candidate}

    return Generator(draw, shrink, name=f"record_of({label})")
