"""TypedCodec: conversion between Node trees and typed Python values.

Decoding turns a node into plain Python objects with PyYAML's
``SafeConstructor`` (YAML 1.1 scalar rules, merge keys, timestamps) and then
validates them into the caller's requested type with a pydantic
``TypeAdapter``. Encoding goes the other way: pydantic dumps the value to
JSON-compatible Python objects (dataclasses, models and TypedDicts included,
recursively), PyYAML's ``SafeRepresenter`` turns those into a node graph, and
``TreeBuilder`` converts that graph into a Node tree.

Building a ``TypeAdapter`` is relatively expensive, so each codec keeps its
adapters in its own ``LRUCache`` keyed by the requested type. Two codecs
never share adapters.

Example::

    codec = TypedCodec()
    node = codec.encode({"ports": [80, 443]})
    codec.decode(node, as_type=dict[str, list[int]])  # {"ports": [80, 443]}
"""

from __future__ import annotations

import io
from collections.abc import Collection, Mapping, Sequence
from typing import Any, get_origin

import yaml
from cachetools import LRUCache
from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from yaml_node_path.errors import DecodeError, EncodeError
from yaml_node_path.tree.builder import TreeBuilder
from yaml_node_path.tree.emitter import to_yaml_node
from yaml_node_path.tree.nodes import Node

__all__ = ["TypedCodec", "is_collection_type"]

_NULL_TAG = "tag:yaml.org,2002:null"


def is_collection_type(as_type: Any) -> bool:
    """True when ``as_type`` is a list-like collection type.

    Strings, bytes and mappings are collections in the ``collections.abc``
    sense but are not treated as one here.
    """
    origin = get_origin(as_type) or as_type
    if not isinstance(origin, type):
        return False
    if issubclass(origin, (str, bytes, bytearray, Mapping)):
        return False
    return issubclass(origin, Collection)


class TypedCodec:
    """Decodes nodes into requested types and encodes values into nodes.

    Args:
        max_cache_size: Maximum number of TypeAdapters held in the
            per-instance LRU cache. Defaults to 128.
    """

    def __init__(self, max_cache_size: int = 128) -> None:
        self._adapters: LRUCache[Any, TypeAdapter[Any]] = LRUCache(
            maxsize=max_cache_size
        )
        self._builder = TreeBuilder()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of adapters this codec caches."""
        return int(self._adapters.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of cached adapters."""
        return int(self._adapters.currsize)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def adapter(self, as_type: Any) -> TypeAdapter[Any]:
        """Return a (possibly cached) TypeAdapter for ``as_type``.

        Raises:
            PydanticUserError: If pydantic cannot build a schema for the type.
        """
        try:
            return self._adapters[as_type]
        except KeyError:
            pass
        except TypeError:
            # Unhashable type expressions cannot be cache keys.
            return TypeAdapter(as_type)
        adapter: TypeAdapter[Any] = TypeAdapter(as_type)
        self._adapters[as_type] = adapter
        return adapter

    def to_python(self, node: Node, path: Sequence[str] = ()) -> Any:
        """Convert a node into plain Python objects; None for an empty document.

        Raises:
            DecodeError: If PyYAML cannot construct the node (e.g. an unknown
                tag, or ``!!int`` on text that is not a number).
        """
        yaml_node = to_yaml_node(node)
        if yaml_node is None:
            return None
        loader = yaml.SafeLoader("")
        try:
            return loader.construct_document(yaml_node)
        except (yaml.YAMLError, ValueError) as exc:
            raise DecodeError(None, path, f"cannot construct yaml node: {exc}") from exc
        finally:
            loader.dispose()

    def decode(self, node: Node, as_type: Any = Any, path: Sequence[str] = ()) -> Any:
        """Decode ``node`` into a value of ``as_type``.

        When ``as_type`` is a collection type and the node holds no value (an
        empty document or a null scalar), the result is an empty collection
        rather than None. A non-null scalar requested as ``str`` decodes to its
        source text whatever its tag, so ``9001`` and ``true`` read as
        ``"9001"`` and ``"true"``.

        Raises:
            DecodeError: If the node cannot represent ``as_type``.
        """
        if as_type is str:
            yaml_node = to_yaml_node(node)
            if isinstance(yaml_node, yaml.ScalarNode) and yaml_node.tag != _NULL_TAG:
                return yaml_node.value
        data = self.to_python(node, path)
        if data is None and is_collection_type(as_type):
            data = []
        if as_type is Any:
            return data
        try:
            return self.adapter(as_type).validate_python(data)
        except (ValidationError, PydanticUserError) as exc:
            raise DecodeError(
                None, path, f"cannot decode yaml node value as {as_type!r}: {exc}"
            ) from exc

    def encode(self, value: Any, path: Sequence[str] = ()) -> Node:
        """Encode ``value`` into a fresh Node tree (no DOCUMENT wrapper).

        Raises:
            EncodeError: If pydantic cannot serialize the value or PyYAML
                cannot represent the result.
        """
        try:
            data = self.adapter(type(value)).dump_python(value, mode="json")
        except (PydanticSerializationError, PydanticUserError) as exc:
            raise EncodeError(
                None, path, f"cannot encode {type(value).__name__} value: {exc}"
            ) from exc

        dumper = yaml.SafeDumper(io.StringIO(), sort_keys=False)
        try:
            yaml_node = dumper.represent_data(data)
        except yaml.YAMLError as exc:
            raise EncodeError(None, path, f"cannot represent value: {exc}") from exc
        return self._builder.build_value(yaml_node)
