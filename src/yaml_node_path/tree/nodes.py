"""Node dataclass and NodeKind StrEnum for the YAML document tree.

Provides the tagged tree that the resolver and mutator walk. A tree is built
from PyYAML's composed node graph by ``TreeBuilder`` and converted back by
``to_yaml_node`` for serialization.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto

STR_TAG = "tag:yaml.org,2002:str"


class NodeKind(StrEnum):
    """Enumeration of the four node kinds in a YAML tree.

    StrEnum values are the lowercased member names:
    - DOCUMENT -> "document" : wraps zero or one root content node
    - MAPPING  -> "mapping"  : ordered key/value entries
    - SEQUENCE -> "sequence" : ordered list of nodes
    - SCALAR   -> "scalar"   : a terminal leaf value
    """

    DOCUMENT = auto()
    MAPPING = auto()
    SEQUENCE = auto()
    SCALAR = auto()


@dataclass(slots=True)
class Node:
    """A node in the YAML tree representation.

    Attributes:
        kind:     Which kind of node this is (see NodeKind).
        value:    Raw scalar text for SCALAR nodes; empty for containers.
        tag:      YAML tag (e.g. "tag:yaml.org,2002:int"). Empty means the tag
                  is resolved implicitly from ``value`` when emitted.
        children: DOCUMENT holds zero or one child. SEQUENCE holds its
                  elements. MAPPING holds a flat key/value run
                  ``[k0, v0, k1, v1, ...]`` where every key is a SCALAR.
    """

    kind: NodeKind
    value: str = ""
    tag: str = ""
    children: list[Node] = field(default_factory=list)

    @classmethod
    def document(cls, child: Node | None = None) -> Node:
        return cls(NodeKind.DOCUMENT, children=[] if child is None else [child])

    @classmethod
    def mapping(
        cls, entries: Mapping[str, Node] | Iterable[tuple[str, Node]] | None = None
    ) -> Node:
        """A MAPPING from a dict or from (key, value) pairs.

        Pairs are kept in order and may repeat a key.
        """
        node = cls(NodeKind.MAPPING)
        if isinstance(entries, Mapping):
            entries = entries.items()
        for key, value in entries or ():
            node.children.extend((cls.key(key), value))
        return node

    @classmethod
    def sequence(cls, items: list[Node] | None = None) -> Node:
        return cls(NodeKind.SEQUENCE, children=list(items or []))

    @classmethod
    def scalar(cls, value: str, tag: str = "") -> Node:
        return cls(NodeKind.SCALAR, value=value, tag=tag)

    @classmethod
    def key(cls, name: str) -> Node:
        """A mapping key scalar, explicitly tagged as a string.

        The tag keeps keys such as "8080" or "true" from turning into numbers
        or booleans when the tree is emitted and decoded.
        """
        return cls(NodeKind.SCALAR, value=name, tag=STR_TAG)

    @property
    def is_container(self) -> bool:
        """True for MAPPING and SEQUENCE nodes."""
        return self.kind in (NodeKind.MAPPING, NodeKind.SEQUENCE)

    @property
    def is_empty_container(self) -> bool:
        """True for a MAPPING or SEQUENCE without any children."""
        return self.is_container and not self.children

    def pairs(self) -> Iterator[tuple[Node, Node]]:
        """Yield (key, value) node pairs of a MAPPING in order."""
        if self.kind is not NodeKind.MAPPING:
            raise TypeError(f"pairs() requires a mapping node, got {self.kind}")
        for i in range(0, len(self.children), 2):
            yield self.children[i], self.children[i + 1]

    def find_key(self, key: str) -> int | None:
        """Return the flat-run position of the first key equal to ``key``.

        Duplicate keys are not deduplicated; the first match wins.
        """
        if self.kind is not NodeKind.MAPPING:
            raise TypeError(f"find_key() requires a mapping node, got {self.kind}")
        for i in range(0, len(self.children), 2):
            if self.children[i].value == key:
                return i
        return None
