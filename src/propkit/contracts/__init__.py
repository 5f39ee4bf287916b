"""Shared contracts: outcome/result types and exceptions.

This package is a LEAF MODULE: it only refers to core types under
TYPE_CHECKING, so importing it never pulls in the engine.
"""

from propkit.contracts.errors import (
    PropertyFailedError,
    PropkitError,
    UnsatisfiableFilterError,
)
from propkit.contracts.results import (
    CheckResult,
    Counterexample,
    Failed,
    Passed,
    PropertyOutcome,
)

__all__ = [
    "CheckResult",
    "Counterexample",
    "Failed",
    "Passed",
    "PropertyFailedError",
    "PropertyOutcome",
    "PropkitError",
    "UnsatisfiableFilterError",
]
