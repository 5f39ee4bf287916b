"""Demo properties: list reversal and username construction.

DEMO_PROPERTIES maps a name to a generator and the property checked against
it; DEMO_GENERATORS maps a name to a generator for ``propkit sample``.
Properties marked ``expected_to_fail`` are known-broken on purpose and stay
that way.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from propkit.examples.lists import any_arrays, reverse_list
from propkit.examples.usernames import (
    USERNAME_LENGTH,
    User,
    create_username,
    create_username_bad,
    decode_uri,
    encode_uri,
    users,
)
from propkit.generators import Generator, anything, boolean, integer, string


@dataclass(frozen=True, slots=True)
class DemoProperty:
    """A named property over a generator.

    Attributes:
        name: CLI-facing identifier.
        description: One-line summary.
        generator: Source of trial values.
        predicate: Property to check.
        expected_to_fail: True for properties that are known not to hold.
    """

    name: str
    description: str
    generator: Generator[Any]
    predicate: Callable[[Any], Any]
    expected_to_fail: bool = False


def _is_list(items: list[Any]) -> bool:
    return isinstance(items, list)


def _reverse_preserves_length(items: list[Any]) -> bool:
    return len(reverse_list(items)) == len(items)


def _reverse_is_involution(items: list[Any]) -> bool:
    return reverse_list(reverse_list(items)) == items


def _username_uri_roundtrip(user: User) -> bool:
    username = create_username(user)
    return decode_uri(encode_uri(username)) == username


def _username_length(user: User) -> bool:
    return len(create_username(user)) == USERNAME_LENGTH


def _username_length_bad(user: User) -> bool:
    return len(create_username_bad(user)) == USERNAME_LENGTH


_PROPERTIES = (
    DemoProperty("array-is-list", "Generated arrays are lists", any_arrays(), _is_list),
    DemoProperty(
        "reverse-preserves-length",
        "Reversing a list keeps its length",
        any_arrays(),
        _reverse_preserves_length,
    ),
    DemoProperty(
        "reverse-involution",
        "Reversing a list twice gives the original list",
        any_arrays(),
        _reverse_is_involution,
    ),
    DemoProperty(
        "username-uri-roundtrip",
        "decode_uri(encode_uri(username)) == username",
        users(),
        _username_uri_roundtrip,
    ),
    DemoProperty(
        "username-length",
        "Padded usernames are always 8 characters",
        users(),
        _username_length,
    ),
    DemoProperty(
        "username-length-bad",
        "Unpadded usernames are always 8 characters (known broken)",
        users(),
        _username_length_bad,
        expected_to_fail=True,
    ),
)

DEMO_PROPERTIES: Mapping[str, DemoProperty] = MappingProxyType({p.name: p for p in _PROPERTIES})

DEMO_GENERATORS: Mapping[str, Generator[Any]] = MappingProxyType(
    {
        "integers": integer(),
        "strings": string(),
        "booleans": boolean(),
        "anything": anything(),
        "any-arrays": any_arrays(),
        "users": users(),
    }
)

__all__ = [
    "DEMO_GENERATORS",
    "DEMO_PROPERTIES",
    "USERNAME_LENGTH",
    "DemoProperty",
    "User",
    "any_arrays",
    "create_username",
    "create_username_bad",
    "decode_uri",
    "encode_uri",
    "reverse_list",
    "users",
]
