# src/propkit/core/random_source.py
"""Seed-threaded random source.

Every draw takes a Seed and returns the value together with the NEXT Seed.
Nothing is mutated in place and there is no module-level random state, so any
reported seed can be fed straight back into a generator to replay a run.

The bit generator is SplitMix64: the state advances by a fixed odd gamma and
each output is a mixed copy of the new state. Uniform integers over arbitrary
ranges are produced by rejection sampling over as many 64-bit words as the
range needs.

Usage:
    seed = as_seed(42)
    value, seed = next_int(seed, 1, 6)
    other, seed = next_int(seed, 1, 6)
"""

from __future__ import annotations

import time
from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_WORD_BITS = 64


@dataclass(frozen=True, slots=True)
class Seed:
    """Immutable random source state.

    Attributes:
        state: 64-bit SplitMix64 state. Values outside [0, 2**64) are
               reduced modulo 2**64 by ``as_seed``.
    """

    state: int

    def __post_init__(self) -> None:
        if not 0 <= self.state <= _MASK64:
            raise ValueError(f"Seed state must be in [0, 2**64), got {self.state}")

    def __int__(self) -> int:
        return self.state


def as_seed(seed: int | Seed) -> Seed:
    """Normalise an int (or an existing Seed) to a Seed."""
    if isinstance(seed, Seed):
        return seed
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"seed must be an int or Seed, got {type(seed).__name__}")
    return Seed(seed & _MASK64)


def seed_from_time() -> Seed:
    """Derive a seed from the wall clock (used when the caller gives none)."""
    return Seed(time.time_ns() & _MASK64)


def _mix(z: int) -> int:
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    return z ^ (z >> 31)


def next_word(seed: Seed) -> tuple[int, Seed]:
    """Draw a raw 64-bit word.

    Returns:
        Tuple of (word in [0, 2**64), next seed).
    """
    state = (seed.state + _GOLDEN_GAMMA) & _MASK64
    return _mix(state), Seed(state)


def next_int(seed: Seed, lo: int, hi: int) -> tuple[int, Seed]:
    """Draw an integer uniformly from the inclusive range [lo, hi].

    Args:
        seed: Current random source state.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        Tuple of (value, next seed). ``next_int(s, lo, hi)`` always returns
        the same pair for the same arguments.

    Raises:
        ValueError: If lo > hi.
    """
    if lo > hi:
        raise ValueError(f"Empty range: lo ({lo}) > hi ({hi})")
    span = hi - lo + 1
    if span == 1:
        return lo, seed

    words = -(-span.bit_length() // _WORD_BITS)
    space = 1 << (words * _WORD_BITS)
    # Largest multiple of span that fits in the drawn space; anything above
    # it would bias the low residues.
    limit = space - (space % span)

    while True:
        raw = 0
        for _ in range(words):
            word, seed = next_word(seed)
            raw = (raw << _WORD_BITS) | word
        if raw < limit:
            return lo + raw % span, seed
