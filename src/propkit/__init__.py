"""
propkit: a small property-based testing engine.

Seeded generators with shrinking, a sampler, and a property runner that
reports minimal, replayable counterexamples.
"""

__version__ = "0.1.0"

from propkit.contracts import (
    CheckResult,
    Counterexample,
    Failed,
    Passed,
    PropertyFailedError,
    PropkitError,
    UnsatisfiableFilterError,
)
from propkit.core.config import RunnerSettings, load_settings
from propkit.core.random_source import Seed, next_int
from propkit.engine import assert_property, check, evaluate, sample
from propkit.generators import (
    Generator,
    anything,
    array_of,
    boolean,
    integer,
    record_of,
    string,
)

__all__ = [
    "CheckResult",
    "Counterexample",
    "Failed",
    "Generator",
    "Passed",
    "PropertyFailedError",
    "PropkitError",
    "RunnerSettings",
    "Seed",
    "UnsatisfiableFilterError",
    "__version__",
    "anything",
    "array_of",
    "assert_property",
    "boolean",
    "check",
    "evaluate",
    "integer",
    "load_settings",
    "next_int",
    "record_of",
    "sample",
    "string",
]
