"""YamlNavigator: orchestrator wiring the resolver, mutator and TypedCodec.

This is the layer between the raw engine functions and the public API. It
checks the arguments every operation shares (root present, path length),
converts values at the typed boundary, and applies the NavigatorConfig.

Architecture:
- get() resolves the node, then decodes it into the requested type.
- set() encodes the value first, so an unencodable value leaves the tree
  untouched, then hands the encoded node to the mutator.
- delete() goes straight to the mutator.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from yaml_node_path.codec import TypedCodec
from yaml_node_path.engine.config import NavigatorConfig
from yaml_node_path.engine.mutator import delete_node, set_node
from yaml_node_path.engine.resolver import resolve
from yaml_node_path.errors import InvalidKeysListError, RootNotSetError, YamlPathError
from yaml_node_path.tree.nodes import Node

__all__ = ["YamlNavigator"]


class YamlNavigator:
    """Reads, writes and deletes values at token paths inside a Node tree.

    The navigator holds no document state; every call receives the root it
    works on. It does no locking: callers must serialize mutating calls on
    the same tree.

    Example::

        from yaml_node_path import YamlNavigator, load_document

        nav = YamlNavigator()
        root = load_document("clients: [{name: first}, {name: second}]")
        nav.get(root, "clients", "[1]", "name", as_type=str)   # "second"
        nav.set(root, "third", "clients", "[]", "name")
        nav.delete(root, "clients", "[0]")
    """

    def __init__(
        self,
        config: NavigatorConfig | None = None,
        max_cache_size: int = 128,
    ) -> None:
        """Initialise the navigator.

        Args:
            config: Engine parameters. Defaults to ``NavigatorConfig()``.
            max_cache_size: Maximum number of TypeAdapters held by the
                per-instance codec cache. Defaults to 128.
        """
        self._config: NavigatorConfig = (
            config if config is not None else NavigatorConfig()
        )
        self._codec = TypedCodec(max_cache_size=max_cache_size)

    @property
    def config(self) -> NavigatorConfig:
        return self._config

    @property
    def codec(self) -> TypedCodec:
        return self._codec

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_node(self, root: Node | None, *keys: str) -> Node:
        """Return the live node at ``keys``; an empty path returns ``root``."""
        if root is None:
            raise RootNotSetError(None, keys)
        self._check_depth(keys)
        return resolve(root, keys)

    def get(self, root: Node | None, *keys: str, as_type: Any = Any) -> Any:
        """Return the value at ``keys`` decoded into ``as_type``.

        With the default ``as_type=Any`` the plain Python value is returned.
        A collection ``as_type`` never yields None: a node without a value
        decodes to an empty collection.

        Raises:
            RootNotSetError: ``root`` is None.
            DecodeError: The node cannot represent ``as_type``.
            YamlPathError: Any lookup failure raised by the resolver.
        """
        node = self.get_node(root, *keys)
        return self._codec.decode(node, as_type, keys)

    def exists(self, root: Node | None, *keys: str) -> bool:
        """True when ``keys`` resolves to a node below ``root``."""
        try:
            self.get_node(root, *keys)
        except RootNotSetError:
            raise
        except YamlPathError:
            return False
        return True

    def set(self, root: Node | None, value: Any, *keys: str) -> None:
        """Write ``value`` at ``keys``, creating missing structure.

        ``[]`` appends to a sequence and ``[i]`` replaces an existing element.
        Whether populated structure may be descended into depends on
        ``config.set_mode``.

        Raises:
            InvalidKeysListError: ``keys`` is empty.
            RootNotSetError: ``root`` is None.
            EncodeError: ``value`` cannot be encoded.
            YamlPathError: Any traversal failure raised by the mutator.
        """
        if not keys:
            raise InvalidKeysListError(None, keys)
        if root is None:
            raise RootNotSetError(None, keys)
        self._check_depth(keys)
        value_node = self._codec.encode(value, keys)
        set_node(root, value_node, keys, self._config.set_mode)

    def delete(self, root: Node | None, *keys: str) -> None:
        """Remove the entry at ``keys`` and prune containers left empty.

        Raises:
            InvalidKeysListError: ``keys`` is empty or cannot be consumed.
            RootNotSetError: ``root`` is None.
            YamlPathError: Any traversal failure raised by the mutator.
        """
        if not keys:
            raise InvalidKeysListError(None, keys)
        if root is None:
            raise RootNotSetError(None, keys)
        self._check_depth(keys)
        delete_node(root, keys, prune_empty=self._config.prune_empty)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_depth(self, keys: Sequence[str]) -> None:
        max_depth = self._config.max_depth
        if max_depth is not None and len(keys) > max_depth:
            raise InvalidKeysListError(
                None, keys, message=f"path longer than max_depth={max_depth}"
            )
