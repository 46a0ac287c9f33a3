"""Path token grammar: key tokens, index tokens and the append token.

- Index token:  ``[<integer>]`` with a base-10 signed integer body, e.g. ``[0]``.
- Append token: ``[]``, only meaningful for writes.
- Key token:    anything else.

A mapping key that literally looks like an index token cannot be escaped;
against a sequence it is always read as an index.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from yaml_node_path.errors import IndexOutOfBoundError, InvalidIndexFormatError

__all__ = [
    "APPEND_TOKEN",
    "format_path",
    "is_append",
    "is_index",
    "parse_index",
    "validate_index",
]

APPEND_TOKEN = "[]"

# ASCII digits only; int() alone would also accept whitespace and underscores.
_INDEX = re.compile(r"\[([+-]?[0-9]+)\]")


def is_append(token: str) -> bool:
    return token == APPEND_TOKEN


def is_index(token: str) -> bool:
    """True when ``token`` is a well-formed index token."""
    return _INDEX.fullmatch(token) is not None


def parse_index(token: str, path: Sequence[str] = ()) -> int:
    """Parse an index token into an integer without any range check.

    Raises:
        InvalidIndexFormatError: If the token is shorter than 3 characters,
            lacks the enclosing brackets, or has a non-integer body.
    """
    match = _INDEX.fullmatch(token)
    if match is None:
        raise InvalidIndexFormatError(token, path)
    return int(match.group(1))


def validate_index(token: str, length: int, path: Sequence[str] = ()) -> int:
    """Parse an index token and check it addresses one of ``length`` elements.

    Raises:
        InvalidIndexFormatError: If the token is malformed.
        IndexOutOfBoundError: If the index is outside ``[0, length)``.
    """
    index = parse_index(token, path)
    if index < 0 or index >= length:
        raise IndexOutOfBoundError(token, path)
    return index


def format_path(keys: Sequence[str]) -> str:
    """Render a path for diagnostics, e.g. ``clients.[1].name``."""
    return ".".join(keys)
