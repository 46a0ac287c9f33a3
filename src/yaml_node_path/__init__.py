"""yaml-node-path - read, write and delete values at token paths in YAML trees."""

from __future__ import annotations

from yaml_node_path.api import (
    delete_value,
    dump_document,
    get_value,
    has_value,
    load_document,
    set_value,
)
from yaml_node_path.codec import TypedCodec
from yaml_node_path.engine.config import NavigatorConfig, SetMode
from yaml_node_path.errors import (
    DecodeError,
    EmptyDocumentError,
    EncodeError,
    IndexOutOfBoundError,
    InvalidIndexFormatError,
    InvalidKeysListError,
    KeyNotFoundError,
    RootNotSetError,
    ScalarSetAttemptError,
    UnexpectedNodeKindError,
    YamlPathError,
)
from yaml_node_path.navigator import YamlNavigator
from yaml_node_path.tree.nodes import Node, NodeKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "DecodeError",
    "EmptyDocumentError",
    "EncodeError",
    "IndexOutOfBoundError",
    "InvalidIndexFormatError",
    "InvalidKeysListError",
    "KeyNotFoundError",
    "NavigatorConfig",
    "Node",
    "NodeKind",
    "RootNotSetError",
    "ScalarSetAttemptError",
    "SetMode",
    "TypedCodec",
    "UnexpectedNodeKindError",
    "YamlNavigator",
    "YamlPathError",
    "delete_value",
    "dump_document",
    "get_value",
    "has_value",
    "load_document",
    "set_value",
]
