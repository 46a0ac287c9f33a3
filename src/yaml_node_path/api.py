"""Public API functions for yaml-node-path.

Provides the user-facing functions get_value, set_value, delete_value and
has_value, plus load_document and dump_document for the PyYAML text seam.
Each path call creates a fresh YamlNavigator, so no state is kept between
calls.
"""

from __future__ import annotations

from typing import Any

import yaml

from yaml_node_path.engine.config import NavigatorConfig
from yaml_node_path.navigator import YamlNavigator
from yaml_node_path.tree.builder import TreeBuilder
from yaml_node_path.tree.emitter import to_yaml_node
from yaml_node_path.tree.nodes import Node

__all__ = [
    "delete_value",
    "dump_document",
    "get_value",
    "has_value",
    "load_document",
    "set_value",
]


def load_document(text: str) -> Node:
    """Parse YAML text into a DOCUMENT-rooted Node tree.

    Empty text (or text holding only comments) yields an empty DOCUMENT.

    Raises:
        yaml.YAMLError: If the text is not valid YAML or holds more than one
            document.
    """
    return TreeBuilder().build(yaml.compose(text, Loader=yaml.SafeLoader))


def dump_document(node: Node) -> str:
    """Serialize a Node tree to YAML text, preserving key order.

    An empty DOCUMENT serializes to an empty string.
    """
    yaml_node = to_yaml_node(node)
    if yaml_node is None:
        return ""
    return yaml.serialize(yaml_node, Dumper=yaml.SafeDumper, allow_unicode=True)


def get_value(
    root: Node | None,
    *keys: str,
    as_type: Any = Any,
    config: NavigatorConfig | None = None,
) -> Any:
    """Return the value at ``keys`` decoded into ``as_type``.

    Args:
        root:    Root node of the lookup, usually a DOCUMENT.
        keys:    Path tokens: mapping keys, ``[i]`` sequence indices.
        as_type: Requested type (``int``, ``list[str]``, a dataclass, a
                 pydantic model, ...). Defaults to ``Any``: plain Python value.
        config:  Engine parameters. Defaults to ``NavigatorConfig()`` when None.

    Examples:
        get_value(root, "persons", "[10]", "age", as_type=int)
    """
    return YamlNavigator(config=config).get(root, *keys, as_type=as_type)


def set_value(
    root: Node | None,
    value: Any,
    *keys: str,
    config: NavigatorConfig | None = None,
) -> None:
    """Write ``value`` at ``keys``; missing parts of the path are created.

    ``[]`` creates a sequence (or appends to an existing one), any other key
    creates a mapping entry.

    Examples:
        set_value(root, Person(name="Adam", age=30), "company", "ceo")
        set_value(root, 35, "some_list", "[]")   # append 35 to some_list
        set_value(root, 12, "some_list", "[8]")  # replace element 8
    """
    YamlNavigator(config=config).set(root, value, *keys)


def delete_value(
    root: Node | None,
    *keys: str,
    config: NavigatorConfig | None = None,
) -> None:
    """Remove the entry at ``keys`` and prune containers it leaves empty."""
    YamlNavigator(config=config).delete(root, *keys)


def has_value(
    root: Node | None,
    *keys: str,
    config: NavigatorConfig | None = None,
) -> bool:
    """Return True if ``keys`` resolves to a node below ``root``."""
    return YamlNavigator(config=config).exists(root, *keys)
