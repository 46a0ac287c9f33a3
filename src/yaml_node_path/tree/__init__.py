"""Tree subpackage: the node model, token grammar and PyYAML conversion.

Re-exports the public API for the tree module:
- Node: dataclass representing a node in the YAML tree
- NodeKind: StrEnum of the four node kinds (DOCUMENT, MAPPING, SEQUENCE, SCALAR)
- TreeBuilder: converts a composed PyYAML node graph into a Node tree
- to_yaml_node: converts a Node tree back into PyYAML nodes
"""

from yaml_node_path.tree.builder import TreeBuilder
from yaml_node_path.tree.emitter import to_yaml_node
from yaml_node_path.tree.nodes import Node, NodeKind

__all__ = ["Node", "NodeKind", "TreeBuilder", "to_yaml_node"]
