# src/propkit/core/__init__.py
"""Core infrastructure: random source, settings, logging."""

from propkit.core.config import (
    RunnerSettings,
    list_presets,
    load_preset,
    load_settings,
)
from propkit.core.logging import configure_logging, get_logger
from propkit.core.random_source import (
    Seed,
    as_seed,
    next_int,
    next_word,
    seed_from_time,
)

__all__ = [
    "RunnerSettings",
    "Seed",
    "as_seed",
    "configure_logging",
    "get_logger",
    "list_presets",
    "load_preset",
    "load_settings",
    "next_int",
    "next_word",
    "seed_from_time",
]
