"""Conversion from the Node tree back to PyYAML nodes.

The resulting PyYAML graph can be serialized with ``yaml.serialize`` or turned
into plain Python objects with a PyYAML constructor.
"""

from __future__ import annotations

import yaml
from yaml.resolver import Resolver

from yaml_node_path.tree.nodes import Node, NodeKind

__all__ = ["to_yaml_node"]

_MAP_TAG = "tag:yaml.org,2002:map"
_SEQ_TAG = "tag:yaml.org,2002:seq"

# Stateless apart from class-level resolver tables; safe to share.
_resolver = Resolver()


def to_yaml_node(node: Node) -> yaml.Node | None:
    """Convert a Node tree into a PyYAML node graph.

    A DOCUMENT unwraps to its child, or None when it is empty. Scalars without
    a tag get the tag PyYAML's implicit resolver would assign to their text.
    """
    match node.kind:
        case NodeKind.DOCUMENT:
            if not node.children:
                return None
            return to_yaml_node(node.children[0])
        case NodeKind.SCALAR:
            tag = node.tag or _resolver.resolve(
                yaml.ScalarNode, node.value, (True, False)
            )
            return yaml.ScalarNode(tag, node.value)
        case NodeKind.SEQUENCE:
            return yaml.SequenceNode(
                node.tag or _SEQ_TAG,
                [_content(child) for child in node.children],
                flow_style=False,
            )
        case NodeKind.MAPPING:
            return yaml.MappingNode(
                node.tag or _MAP_TAG,
                [(_content(key), _content(value)) for key, value in node.pairs()],
                flow_style=False,
            )
    raise TypeError(f"Unsupported node kind: {node.kind!r}")


def _content(node: Node) -> yaml.Node:
    converted = to_yaml_node(node)
    if converted is None:
        raise TypeError("A document node cannot be nested inside another node")
    return converted
