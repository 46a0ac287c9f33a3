"""Unit tests for TypedCodec.

Tests cover:
- Decoding scalars, sequences, mappings, dataclasses and pydantic models
- Empty-vs-absent normalization for collection types
- DecodeError / EncodeError with chained causes
- Encoding primitives, dicts (order preserved) and aggregate types
- Per-instance LRU caching of TypeAdapters
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel, ValidationError

from yaml_node_path import DecodeError, EncodeError, Node, NodeKind, load_document
from yaml_node_path.codec import TypedCodec, is_collection_type
from yaml_node_path.engine.resolver import resolve


@dataclass
class Server:
    host: str
    port: int


class Client(BaseModel):
    name: str
    surname: str


class Opaque:
    """A class pydantic has no schema for."""


@pytest.fixture
def codec() -> TypedCodec:
    return TypedCodec()


# ---------------------------------------------------------------------------
# is_collection_type
# ---------------------------------------------------------------------------


class TestIsCollectionType:
    @pytest.mark.parametrize(
        "tp", [list, list[int], tuple[int, ...], set[str], frozenset]
    )
    def test_collections(self, tp: Any) -> None:
        assert is_collection_type(tp)

    @pytest.mark.parametrize(
        "tp", [int, str, bytes, dict, dict[str, int], Any, list[int] | None, Server]
    )
    def test_non_collections(self, tp: Any) -> None:
        assert not is_collection_type(tp)


# ---------------------------------------------------------------------------
# decode
# ---------------------------------------------------------------------------


class TestDecode:
    def test_scalar_types(self, codec: TypedCodec, root: Node) -> None:
        port = resolve(root, ["servers", "server1", "port"])
        assert codec.decode(port, int) == 9001
        host = resolve(root, ["servers", "server1", "host"])
        assert codec.decode(host, str) == "server1.local"

    def test_any_returns_plain_python(self, codec: TypedCodec, root: Node) -> None:
        assert codec.decode(resolve(root, ["ints"])) == [10, 20, 30]

    def test_sequence_into_list(self, codec: TypedCodec, root: Node) -> None:
        assert codec.decode(resolve(root, ["ints"]), list[int]) == [10, 20, 30]

    def test_mapping_into_dataclass(self, codec: TypedCodec, root: Node) -> None:
        server = codec.decode(resolve(root, ["servers", "server2"]), Server)
        assert server == Server(host="server2.local", port=9002)

    def test_sequence_into_models(self, codec: TypedCodec, root: Node) -> None:
        clients = codec.decode(resolve(root, ["clients"]), list[Client])
        assert [c.name for c in clients] == ["first_client", "second_client"]

    def test_whole_document(self, codec: TypedCodec, root: Node) -> None:
        data = codec.decode(root, dict[str, Any])
        assert list(data) == ["clients", "servers", "ints"]

    def test_merge_keys_are_applied(self, codec: TypedCodec) -> None:
        doc = load_document("base: &b {x: 1}\nchild:\n  <<: *b\n  y: 2\n")
        assert codec.decode(resolve(doc, ["child"])) == {"x": 1, "y": 2}

    def test_shape_mismatch(self, codec: TypedCodec, root: Node) -> None:
        with pytest.raises(DecodeError) as exc_info:
            codec.decode(resolve(root, ["servers"]), list[int], ("servers",))
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.path == ("servers",)

    def test_unknown_tag(self, codec: TypedCodec) -> None:
        doc = load_document("v: !custom x")
        with pytest.raises(DecodeError):
            codec.decode(resolve(doc, ["v"]))

    def test_bad_explicit_int(self, codec: TypedCodec) -> None:
        doc = load_document("v: !!int abc")
        with pytest.raises(DecodeError):
            codec.decode(resolve(doc, ["v"]), int)

    def test_any_scalar_reads_as_its_text(self, codec: TypedCodec) -> None:
        doc = load_document("port: 9001\nflag: true\nratio: 0.5")
        assert codec.decode(resolve(doc, ["port"]), str) == "9001"
        assert codec.decode(resolve(doc, ["flag"]), str) == "true"
        assert codec.decode(resolve(doc, ["ratio"]), str) == "0.5"

    def test_null_scalar_as_str_rejected(self, codec: TypedCodec) -> None:
        doc = load_document("v: ~")
        with pytest.raises(DecodeError):
            codec.decode(resolve(doc, ["v"]), str)

    def test_mapping_as_str_rejected(self, codec: TypedCodec, root: Node) -> None:
        with pytest.raises(DecodeError):
            codec.decode(resolve(root, ["servers"]), str)


class TestEmptyVersusAbsent:
    def test_empty_document_into_list(self, codec: TypedCodec) -> None:
        assert codec.decode(Node.document(), list[int]) == []

    def test_empty_sequence_into_list(self, codec: TypedCodec) -> None:
        assert codec.decode(Node.sequence(), list[int]) == []

    def test_null_scalar_into_list(self, codec: TypedCodec) -> None:
        doc = load_document("ints: ~")
        assert codec.decode(resolve(doc, ["ints"]), list[int]) == []

    def test_null_scalar_into_tuple(self, codec: TypedCodec) -> None:
        assert codec.decode(Node.document(), tuple[int, ...]) == ()

    def test_optional_collection_keeps_none(self, codec: TypedCodec) -> None:
        assert codec.decode(Node.document(), list[int] | None) is None

    def test_empty_document_as_any(self, codec: TypedCodec) -> None:
        assert codec.decode(Node.document()) is None


# ---------------------------------------------------------------------------
# encode
# ---------------------------------------------------------------------------


class TestEncode:
    def test_int(self, codec: TypedCodec) -> None:
        node = codec.encode(35)
        assert node.kind == NodeKind.SCALAR
        assert node.value == "35"
        assert node.tag == "tag:yaml.org,2002:int"

    def test_string(self, codec: TypedCodec) -> None:
        node = codec.encode("9001")
        assert node.value == "9001"
        assert node.tag == "tag:yaml.org,2002:str"

    def test_none(self, codec: TypedCodec) -> None:
        node = codec.encode(None)
        assert node.tag == "tag:yaml.org,2002:null"

    def test_dict_keeps_insertion_order(self, codec: TypedCodec) -> None:
        node = codec.encode({"b": 1, "a": 2})
        assert node.kind == NodeKind.MAPPING
        assert [k.value for k, _ in node.pairs()] == ["b", "a"]

    def test_dataclass(self, codec: TypedCodec) -> None:
        node = codec.encode(Server(host="h", port=1))
        assert node.kind == NodeKind.MAPPING
        assert codec.decode(node, Server) == Server(host="h", port=1)

    def test_nested_aggregates(self, codec: TypedCodec) -> None:
        value = {"servers": [Server("a", 1), Server("b", 2)]}
        node = codec.encode(value)
        assert codec.decode(node, dict[str, list[Server]]) == value

    def test_model(self, codec: TypedCodec) -> None:
        node = codec.encode(Client(name="n", surname="s"))
        assert codec.decode(node) == {"name": "n", "surname": "s"}

    def test_tuple_becomes_sequence(self, codec: TypedCodec) -> None:
        node = codec.encode((1, 2))
        assert node.kind == NodeKind.SEQUENCE

    def test_shared_sub_value_is_copied(self, codec: TypedCodec) -> None:
        shared = [1]
        node = codec.encode({"a": shared, "b": shared})
        first, second = (v for _, v in node.pairs())
        assert first is not second

    def test_unsupported_type(self, codec: TypedCodec) -> None:
        with pytest.raises(EncodeError) as exc_info:
            codec.encode(Opaque(), ("x",))
        assert exc_info.value.__cause__ is not None
        assert exc_info.value.path == ("x",)


# ---------------------------------------------------------------------------
# adapter cache
# ---------------------------------------------------------------------------


class TestAdapterCache:
    def test_adapter_reused(self, codec: TypedCodec) -> None:
        assert codec.adapter(list[int]) is codec.adapter(list[int])
        assert codec.curr_size == 1

    def test_default_max_size(self, codec: TypedCodec) -> None:
        assert codec.max_size == 128

    def test_lru_eviction(self) -> None:
        codec = TypedCodec(max_cache_size=1)
        first = codec.adapter(int)
        codec.adapter(str)
        assert codec.curr_size == 1
        assert codec.adapter(int) is not first

    def test_instances_do_not_share(self) -> None:
        a = TypedCodec()
        b = TypedCodec()
        a.adapter(int)
        assert b.curr_size == 0
