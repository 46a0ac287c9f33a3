"""TreeBuilder: converts a composed PyYAML node graph into a Node tree.

PyYAML's ``yaml.compose`` parses document text into ``yaml.ScalarNode``,
``yaml.SequenceNode`` and ``yaml.MappingNode`` objects. TreeBuilder walks that
graph with recursive dispatch and produces the engine's own ``Node`` tree,
rooted at a DOCUMENT node.

Aliases in the source graph point at the same PyYAML node object more than
once. Every visit produces a fresh ``Node``, so each container in the result
exclusively owns its children and a mutation through one alias never shows up
through another.
"""

from __future__ import annotations

from dataclasses import dataclass

import yaml

from yaml_node_path.tree.nodes import Node, NodeKind


@dataclass
class TreeBuilder:
    """Converts PyYAML composed nodes into a typed Node tree.

    Example::
        builder = TreeBuilder()
        tree = builder.build(yaml.compose("servers: {port: 9001}"))
        # tree: DOCUMENT -> MAPPING("servers" -> MAPPING("port" -> SCALAR("9001")))
    """

    def build(self, yaml_node: yaml.Node | None) -> Node:
        """Convert a composed document root into a DOCUMENT node.

        Args:
            yaml_node: The result of ``yaml.compose``; None for empty text.

        Returns:
            A DOCUMENT node wrapping zero or one child.
        """
        if yaml_node is None:
            return Node.document()
        return Node.document(self.build_value(yaml_node))

    def build_value(self, yaml_node: yaml.Node) -> Node:
        """Convert a composed sub-tree into a Node without a DOCUMENT wrapper.

        Raises:
            TypeError: If the graph holds a non-scalar mapping key or an
                unknown node type.
            ValueError: If the graph contains a recursive alias.
        """
        return self._build(yaml_node, frozenset())

    def _build(self, yaml_node: yaml.Node, ancestors: frozenset[int]) -> Node:
        if id(yaml_node) in ancestors:
            raise ValueError("Recursive YAML alias cannot be expanded into a tree")

        if isinstance(yaml_node, yaml.ScalarNode):
            return Node.scalar(yaml_node.value, tag=yaml_node.tag)

        ancestors = ancestors | {id(yaml_node)}

        if isinstance(yaml_node, yaml.SequenceNode):
            return Node(
                NodeKind.SEQUENCE,
                tag=yaml_node.tag,
                children=[self._build(item, ancestors) for item in yaml_node.value],
            )

        if isinstance(yaml_node, yaml.MappingNode):
            return self._build_mapping(yaml_node, ancestors)

        raise TypeError(f"Unsupported YAML node type: {type(yaml_node)!r}")

    def _build_mapping(
        self, yaml_node: yaml.MappingNode, ancestors: frozenset[int]
    ) -> Node:
        mapping = Node(NodeKind.MAPPING, tag=yaml_node.tag)
        for key_node, value_node in yaml_node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise TypeError(
                    f"Mapping keys must be scalars, got {type(key_node).__name__}"
                )
            mapping.children.append(Node.scalar(key_node.value, tag=key_node.tag))
            mapping.children.append(self._build(value_node, ancestors))
        return mapping
