"""In-place writes and deletes on a Node tree.

``set_node`` walks down the tree and either replaces an existing node,
appends a new mapping entry or sequence element, or attaches a synthesized
envelope to an empty document. ``delete_node`` removes a mapping entry or
sequence element and then prunes every ancestor container the removal left
empty.

Both walks are loops over the token list. All validation at a level happens
before anything at that level is changed, so a failing call leaves the tree
as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from yaml_node_path.engine.config import SetMode
from yaml_node_path.errors import (
    EmptyDocumentError,
    IndexOutOfBoundError,
    InvalidKeysListError,
    KeyNotFoundError,
    ScalarSetAttemptError,
    UnexpectedNodeKindError,
)
from yaml_node_path.tree.nodes import Node, NodeKind
from yaml_node_path.tree.tokens import format_path, is_append, is_index, validate_index

__all__ = ["build_envelope", "delete_node", "set_node"]

logger = logging.getLogger(__name__)


def build_envelope(value: Node, keys: Sequence[str], path: Sequence[str] = ()) -> Node:
    """Wrap ``value`` in the structure described by ``keys``.

    Each key token adds a single-entry MAPPING and each ``[]`` adds a
    one-element SEQUENCE. The first token becomes the outermost wrapper and
    the last token the innermost one. An empty ``keys`` returns ``value``.

    Raises:
        IndexOutOfBoundError: For an index token such as ``[0]``; a
            synthesized sequence has no element for it to address.
    """
    node = value
    for token in reversed(keys):
        if is_append(token):
            node = Node.sequence([node])
        elif is_index(token):
            raise IndexOutOfBoundError(token, path)
        else:
            node = Node.mapping({token: node})
    return node


def set_node(
    root: Node,
    value: Node,
    keys: Sequence[str],
    mode: SetMode = SetMode.CREATE_MISSING,
) -> None:
    """Write ``value`` at ``keys`` below ``root``, creating missing structure.

    Args:
        root: Root of the write. Modified in place.
        value: Already-encoded node to store. It is attached, not copied.
        keys: Non-empty path, outermost first.
        mode: Whether populated mappings and sequences may be descended into.

    Raises:
        InvalidKeysListError: ``keys`` is empty.
        ScalarSetAttemptError: A SCALAR was reached with tokens left.
        UnexpectedNodeKindError: A populated MAPPING or SEQUENCE was reached
            in BOOTSTRAP_ONLY mode, or an append token met a MAPPING.
        InvalidIndexFormatError: A malformed index token met a SEQUENCE.
        IndexOutOfBoundError: An index token is out of range, or an index
            token would have to address a synthesized sequence.
    """
    if not keys:
        raise InvalidKeysListError(None, keys)

    current = root
    pos = 0
    while True:
        token = keys[pos]
        rest = keys[pos + 1 :]
        match current.kind:
            case NodeKind.SCALAR:
                raise ScalarSetAttemptError(token, keys)
            case NodeKind.DOCUMENT:
                if current.children:
                    current = current.children[0]
                    continue
                current.children.append(build_envelope(value, keys[pos:], keys))
                logger.debug("Attached new document content for %s", format_path(keys))
                return
            case NodeKind.MAPPING | NodeKind.SEQUENCE if mode is SetMode.BOOTSTRAP_ONLY:
                raise UnexpectedNodeKindError(token, keys)
            case NodeKind.MAPPING:
                if is_append(token):
                    raise UnexpectedNodeKindError(token, keys)
                key_pos = current.find_key(token)
                if key_pos is None:
                    envelope = build_envelope(value, rest, keys)
                    current.children.extend((Node.key(token), envelope))
                    logger.debug("Added key %r at %s", token, format_path(keys))
                    return
                if not rest:
                    current.children[key_pos + 1] = value
                    logger.debug("Replaced value at %s", format_path(keys))
                    return
                current = current.children[key_pos + 1]
            case NodeKind.SEQUENCE:
                if is_append(token):
                    current.children.append(build_envelope(value, rest, keys))
                    logger.debug("Appended element at %s", format_path(keys))
                    return
                index = validate_index(token, len(current.children), keys)
                if not rest:
                    current.children[index] = value
                    logger.debug("Replaced element at %s", format_path(keys))
                    return
                current = current.children[index]
        pos += 1


def delete_node(root: Node, keys: Sequence[str], prune_empty: bool = True) -> None:
    """Remove the mapping entry or sequence element at ``keys``.

    After the removal, every container on the way down that is now an empty
    MAPPING or SEQUENCE is removed from its own parent, innermost first. The
    DOCUMENT itself may end up holding an empty container, but never loses its
    child through pruning.

    Args:
        root: Root of the delete. Modified in place.
        keys: Non-empty path, outermost first.
        prune_empty: Whether to prune containers left empty.

    Raises:
        InvalidKeysListError: ``keys`` is empty, or a SCALAR was reached with
            tokens left.
        EmptyDocumentError: An empty DOCUMENT was reached.
        InvalidIndexFormatError: A malformed index token met a SEQUENCE.
        IndexOutOfBoundError: An index token is out of range.
        KeyNotFoundError: No MAPPING entry matches the key token.
    """
    if not keys:
        raise InvalidKeysListError(None, keys)

    # (container, position of the entry, entry width in the children list)
    trail: list[tuple[Node, int, int]] = []
    current = root
    pos = 0
    while True:
        token = keys[pos]
        last = pos == len(keys) - 1
        match current.kind:
            case NodeKind.DOCUMENT:
                if not current.children:
                    raise EmptyDocumentError(token, keys)
                current = current.children[0]
                continue
            case NodeKind.SEQUENCE:
                index = validate_index(token, len(current.children), keys)
                if last:
                    del current.children[index]
                    break
                trail.append((current, index, 1))
                current = current.children[index]
            case NodeKind.MAPPING:
                key_pos = current.find_key(token)
                if key_pos is None:
                    raise KeyNotFoundError(token, keys)
                if last:
                    del current.children[key_pos : key_pos + 2]
                    break
                trail.append((current, key_pos, 2))
                current = current.children[key_pos + 1]
            case NodeKind.SCALAR:
                raise InvalidKeysListError(
                    token,
                    keys,
                    message=f"unresolved path {format_path(keys[pos:])!r}",
                )
        pos += 1

    logger.debug("Deleted %s", format_path(keys))
    if prune_empty:
        _prune(trail)


def _prune(trail: list[tuple[Node, int, int]]) -> None:
    for parent, position, width in reversed(trail):
        child = parent.children[position + width - 1]
        if not child.is_empty_container:
            return
        del parent.children[position : position + width]
        logger.debug("Pruned empty %s", child.kind)
