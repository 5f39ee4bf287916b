# src/propkit/generators/primitives.py
"""Primitive generators: integer, string, boolean.

Shrink orders (each is well-founded, so shrinking always terminates):
- integer: distance to the shrink target strictly decreases
- string:  (length, number of characters that are not "a") strictly decreases
- boolean: True -> False
"""

from __future__ import annotations

from collections.abc import Iterator

from propkit.core.random_source import Seed, next_int
from propkit.generators.base import Generator

MIN_INT32 = -(2**31)
MAX_INT32 = 2**31 - 1

DEFAULT_MAX_STRING_LENGTH = 10

# Printable ASCII, space through tilde
PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E
SIMPLEST_CHAR = "a"


def shrink_target(min_value: int, max_value: int) -> int:
    """Value integers shrink toward: 0 if in range, else the bound nearest 0."""
    if min_value <= 0 <= max_value:
        return 0
    return min_value if min_value > 0 else max_value


def shrink_toward(value: int, target: int) -> Iterator[int]:
    """Yield integers strictly closer to ``target`` than ``value``.

    The target itself comes first, then values that halve the remaining
    distance: value - d/2, value - d/4, ..., value - 1 (toward target).
    """
    if value == target:
        return
    yield target
    sign = 1 if value > target else -1
    half = abs(value - target) // 2
    while half > 0:
        yield value - sign * half
        half //= 2


def integer(min_value: int = MIN_INT32, max_value: int = MAX_INT32) -> Generator[int]:
    """Integers drawn uniformly from [min_value, max_value].

    Raises:
        ValueError: If min_value > max_value.
    """
    if min_value > max_value:
        raise ValueError(f"min_value ({min_value}) must be <= max_value ({max_value})")
    target = shrink_target(min_value, max_value)

    def draw(seed: Seed) -> tuple[int, Seed]:
        return next_int(seed, min_value, max_value)

    def shrink(value: int) -> Iterator[int]:
        return shrink_toward(value, target)

    return Generator(draw, shrink, name=f"integer({min_value}, {max_value})")


def shrink_string(value: str) -> Iterator[str]:
    # Shorter prefixes first: "", then half, three quarters, ..., all but one
    length = len(value)
    for prefix_length in shrink_toward(length, 0):
        yield value[:prefix_length]
    for index, char in enumerate(value):
        if char != SIMPLEST_CHAR:
            yield value[:index] + SIMPLEST_CHAR + value[index + 1 :]


def string(max_length: int = DEFAULT_MAX_STRING_LENGTH) -> Generator[str]:
    """Printable ASCII strings with length drawn uniformly from [0, max_length].

    Raises:
        ValueError: If max_length < 0.
    """
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")

    def draw(seed: Seed) -> tuple[str, Seed]:
        length, seed = next_int(seed, 0, max_length)
        chars: list[str] = []
        for _ in range(length):
            code, seed = next_int(seed, PRINTABLE_MIN, PRINTABLE_MAX)
            chars.append(chr(code))
        return "".join(chars), seed

    return Generator(draw, shrink_string, name=f"string({max_length})")


def _draw_boolean(seed: Seed) -> tuple[bool, Seed]:
    bit, seed = next_int(seed, 0, 1)
    return bit == 1, seed


def _shrink_boolean(value: bool) -> Iterator[bool]:
    if value:
        yield False


def boolean() -> Generator[bool]:
    """True or False with equal probability."""
    return Generator(_draw_boolean, _shrink_boolean, name="boolean()")
