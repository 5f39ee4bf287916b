# src/propkit/examples/lists.py
"""List helpers used by the demo properties."""

from __future__ import annotations

from typing import Any

from propkit.generators import Generator, anything, array_of


def reverse_list[T](items: list[T]) -> list[T]:
    """Return a reversed copy; the input is left untouched."""
    return items[::-1]


def any_arrays() -> Generator[list[Any]]:
    """Arrays of arbitrary values."""
    return array_of(anything()).named("any_arrays")
