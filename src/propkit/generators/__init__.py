"""Generators: seed-threaded value recipes with shrinking.

- Primitives: integer, string, boolean
- Combinators: array_of, record_of, Generator.map, Generator.filter
- anything: bounded tagged union over None/bool/int/str/list/dict
"""

from propkit.generators.anything import anything
from propkit.generators.base import DEFAULT_FILTER_RETRIES, Generator
from propkit.generators.combinators import array_of, record_of
from propkit.generators.primitives import boolean, integer, string

__all__ = [
    "DEFAULT_FILTER_RETRIES",
    "Generator",
    "anything",
    "array_of",
    "boolean",
    "integer",
    "record_of",
    "string",
]
