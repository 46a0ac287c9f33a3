"""Engine subpackage: path resolution and in-place mutation.

Re-exports:
- resolve: read-only lookup of a node by path
- set_node / delete_node / build_envelope: in-place writes and deletes
- NavigatorConfig / SetMode: engine configuration
"""

from yaml_node_path.engine.config import NavigatorConfig, SetMode
from yaml_node_path.engine.mutator import build_envelope, delete_node, set_node
from yaml_node_path.engine.resolver import resolve

__all__ = [
    "NavigatorConfig",
    "SetMode",
    "build_envelope",
    "delete_node",
    "resolve",
    "set_node",
]
