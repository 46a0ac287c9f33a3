"""Read-only lookup of a node by path.

The walk matches the kind of the current node against the next unconsumed
token: a DOCUMENT is stepped through without consuming a token, a SEQUENCE
consumes an index token, a MAPPING consumes a key token, and a SCALAR cannot
be descended into.
"""

from __future__ import annotations

from collections.abc import Sequence

from yaml_node_path.errors import (
    EmptyDocumentError,
    KeyNotFoundError,
    UnexpectedNodeKindError,
)
from yaml_node_path.tree.nodes import Node, NodeKind
from yaml_node_path.tree.tokens import validate_index

__all__ = ["resolve"]


def resolve(node: Node, keys: Sequence[str]) -> Node:
    """Return the node found at ``keys`` below ``node``.

    An empty path returns ``node`` itself, including an empty DOCUMENT.

    Args:
        node: Root of the lookup. Any node kind is accepted.
        keys: Path tokens, outermost first.

    Returns:
        The node at the end of the path. It is the live node inside the tree,
        not a copy.

    Raises:
        EmptyDocumentError: An empty DOCUMENT was reached with tokens left.
        InvalidIndexFormatError: A SEQUENCE was reached with a malformed index.
        IndexOutOfBoundError: A SEQUENCE index is outside the sequence.
        KeyNotFoundError: No MAPPING entry matches the key token.
        UnexpectedNodeKindError: A SCALAR was reached with tokens left.
    """
    current = node
    pos = 0
    while pos < len(keys):
        token = keys[pos]
        match current.kind:
            case NodeKind.DOCUMENT:
                if not current.children:
                    raise EmptyDocumentError(None, keys)
                current = current.children[0]
                continue
            case NodeKind.SEQUENCE:
                index = validate_index(token, len(current.children), keys)
                current = current.children[index]
            case NodeKind.MAPPING:
                key_pos = current.find_key(token)
                if key_pos is None:
                    raise KeyNotFoundError(token, keys)
                current = current.children[key_pos + 1]
            case NodeKind.SCALAR:
                raise UnexpectedNodeKindError(token, keys)
        pos += 1
    return current
