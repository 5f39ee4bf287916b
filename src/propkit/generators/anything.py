# src/propkit/generators/anything.py
"""Bounded "any value" generator.

Values are drawn from a closed set of shapes:

    None | bool | int | str | list[Any] | dict[str, Any]

Containers recurse into the same set, one level shallower each time. At
depth 0 only scalars are drawn, so every value is finite and the nesting
never exceeds ``max_depth``.

Shrinking first proposes None (the simplest value of any shape), then the
shape's own candidates: False for True, integers toward 0, shorter/simpler
strings, list element removal/shrinks, dict key removal/value shrinks.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from propkit.core.random_source import Seed, next_int
from propkit.generators.base import Generator
from propkit.generators.combinators import shrink_list
from propkit.generators.primitives import boolean, integer, shrink_string, shrink_toward, string

DEFAULT_MAX_DEPTH = 2
MAX_CONTAINER_LENGTH = 5
MAX_KEY_LENGTH = 6

_SCALAR_TAGS = ("none", "boolean", "integer", "string")
_CONTAINER_TAGS = ("array", "record")

_booleans = boolean()
_integers = integer()
_strings = string()
_keys = string(MAX_KEY_LENGTH)


def _draw_any(seed: Seed, depth: int) -> tuple[Any, Seed]:
    tags = _SCALAR_TAGS + _CONTAINER_TAGS if depth > 0 else _SCALAR_TAGS
    index, seed = next_int(seed, 0, len(tags) - 1)
    match tags[index]:
        case "none":
            return None, seed
        case "boolean":
            return _booleans.draw_fn(seed)
        case "integer":
            return _integers.draw_fn(seed)
        case "string":
            return _strings.draw_fn(seed)
        case "array":
            length, seed = next_int(seed, 0, MAX_CONTAINER_LENGTH)
            items: list[Any] = []
            for _ in range(length):
                item, seed = _draw_any(seed, depth - 1)
                items.append(item)
            return items, seed
        case _:
            size, seed = next_int(seed, 0, MAX_CONTAINER_LENGTH)
            record: dict[str, Any] = {}
            for _ in range(size):
                key, seed = _keys.draw_fn(seed)
                record[key], seed = _draw_any(seed, depth - 1)
            return record, seed


def shrink_any(value: Any) -> Iterator[Any]:
    """Shrink candidates for a value produced by ``anything``."""
    if value is None:
        return
    yield None
    if isinstance(value, bool):
        if value:
            yield False
    elif isinstance(value, int):
        yield from shrink_toward(value, 0)
    elif isinstance(value, str):
        yield from shrink_string(value)
    elif isinstance(value, list):
        yield from shrink_list(value, shrink_any)
    elif isinstance(value, dict):
        for key in value:
            yield {k: v for k, v in value.items() if k != key}
        for key, item in value.items():
            for candidate in shrink_any(item):
                yield {**value, key: candidate}


def anything(max_depth: int = DEFAULT_MAX_DEPTH) -> Generator[Any]:
    """Values of any supported shape, nested at most ``max_depth`` levels.

    Raises:
        ValueError: If max_depth < 0.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    def draw(seed: Seed) -> tuple[Any, Seed]:
        return _draw_any(seed, max_depth)

    return Generator(draw, shrink_any, name=f"anything({max_depth})")
