"""Exception hierarchy for path resolution and mutation failures.

Every failure mode of the engine has its own subclass of ``YamlPathError`` so
callers can catch the exact kind they care about, or the base class to catch
them all. Each error remembers the token that triggered it and the full path
being processed.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "DecodeError",
    "EmptyDocumentError",
    "EncodeError",
    "IndexOutOfBoundError",
    "InvalidIndexFormatError",
    "InvalidKeysListError",
    "KeyNotFoundError",
    "RootNotSetError",
    "ScalarSetAttemptError",
    "UnexpectedNodeKindError",
    "YamlPathError",
]


class YamlPathError(Exception):
    """Base exception for all yaml-node-path errors.

    Params:
        token: The path token being processed when the error occurred, if any.
        path: The full path of the failing operation.
    """

    default_message = "yaml path error"

    def __init__(
        self,
        token: str | None = None,
        path: Sequence[str] = (),
        message: str | None = None,
    ) -> None:
        self.token = token
        self.path = tuple(path)
        self.reason = message or self.default_message
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.reason
        if self.token is not None:
            text = f"{text}: {self.token!r}"
        if self.path:
            text = f"{text} (path: {'.'.join(self.path)})"
        return text


class RootNotSetError(YamlPathError):
    """Raised when no root node was given."""

    default_message = "root node not set"


class InvalidKeysListError(YamlPathError):
    """Raised for an empty path, or a path left unconsumed at a scalar on delete."""

    default_message = "invalid keys list"


class EmptyDocumentError(YamlPathError):
    """Raised when an empty document must be traversed further."""

    default_message = "empty document node provided"


class UnexpectedNodeKindError(YamlPathError):
    """Raised when the current node kind cannot be traversed by the token."""

    default_message = "unexpected node kind provided"


class InvalidIndexFormatError(YamlPathError):
    """Raised when an index token is not ``[<integer>]``."""

    default_message = "invalid index format"


class IndexOutOfBoundError(YamlPathError):
    """Raised when a well-formed index is outside the target sequence."""

    default_message = "provided index out of bound"


class KeyNotFoundError(YamlPathError):
    """Raised when no mapping entry matches the key token."""

    default_message = "key not found"


class ScalarSetAttemptError(YamlPathError):
    """Raised when a write tries to descend through a scalar."""

    default_message = "cannot iterate over scalar node"


class DecodeError(YamlPathError):
    """Raised when a node cannot be decoded into the requested type."""

    default_message = "cannot decode yaml node value"


class EncodeError(YamlPathError):
    """Raised when a value cannot be encoded into a node."""

    default_message = "cannot encode value to yaml node"
