"""Engine: sampling and property checking."""

from propkit.engine.runner import assert_property, check, evaluate, shrink_failure
from propkit.engine.sampler import sample

__all__ = [
    "assert_property",
    "check",
    "evaluate",
    "sample",
    "shrink_failure",
]
