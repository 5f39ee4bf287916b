# src/propkit/examples/usernames.py
"""Username construction from user records.

A username is always 8 characters:

    firstname[:1] padded right with "-" to 1
    surname[:5]   padded right with "-" to 5
    str(age)[:2]  padded left  with "0" to 2

``create_username_bad`` skips the padding. It is kept on purpose as the
known-broken counterpart: {"firstname": "", "surname": "", "age": 0} gives
"0", which is 1 character long, not 8.
"""

from __future__ import annotations

from typing import Any, TypedDict
from urllib.parse import quote, unquote

from propkit.generators import Generator, integer, record_of, string

USERNAME_LENGTH = 8

# Characters encodeURI leaves untouched besides ASCII letters and digits
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


class User(TypedDict):
    """User record the username is built from."""

    firstname: str
    surname: str
    age: int


def create_username_bad(user: User) -> str:
    """Unpadded username. NOT always 8 characters."""
    return user["firstname"][:1] + user["surname"][:5] + str(user["age"])[:2]


def create_username(user: User) -> str:
    """Padded username, always exactly 8 characters."""
    return (
        user["firstname"][:1].ljust(1, "-")
        + user["surname"][:5].ljust(5, "-")
        + str(user["age"])[:2].rjust(2, "0")
    )


def encode_uri(text: str) -> str:
    """Percent-encode like ``encodeURI``: reserved URI characters are kept."""
    return quote(text, safe=_URI_SAFE)


def decode_uri(text: str) -> str:
    """Inverse of ``encode_uri``."""
    return unquote(text)


def users() -> Generator[dict[str, Any]]:
    """User records with printable names and 32-bit ages."""
    return record_of(
        {
            "firstname": string(),
            "surname": string(),
            "age": integer(),
        }
    ).named("users")
