# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for the canonical JSON projection."""

import threading
from types import SimpleNamespace

import orjson
import pytest

from propertree._errors import SerializationError
from propertree.base import PropertyBase, SerialKind, dumps, kind_of, to_json
from propertree.base.serialize import clone_element
from propertree.collection import PropertyList
from propertree.sentinel import Undefined


def test_kind_of():
    assert kind_of(PropertyBase()) is SerialKind.NODE
    assert kind_of(PropertyList()) is SerialKind.LIST
    assert kind_of({"a": 1}) is SerialKind.PLAIN
    assert kind_of("items") is SerialKind.PLAIN


class TestSerializeFields:
    def test_undefined_is_dropped_falsy_kept(self):
        out = to_json(
            {"a": Undefined, "b": None, "c": False, "d": 0, "e": ""}
        )
        assert out == {"b": None, "c": False, "d": 0, "e": ""}

    def test_list_key_is_singularized(self):
        a, b = PropertyBase({"name": "A"}), PropertyBase({"name": "B"})
        out = to_json({"items": PropertyList(None, [a, b])})
        assert out == {"item": [a.to_json(), b.to_json()]}

    def test_plural_list_keeps_its_key(self):
        members = PropertyList(None, [PropertyBase({"k": 1})], serialize_as_plural=True)
        assert to_json({"items": members}) == {"items": [{"k": 1}]}

    def test_list_key_without_trailing_s(self):
        assert to_json({"data": PropertyList()}) == {"data": []}

    def test_plain_list_is_not_renamed(self):
        assert to_json({"values": [1, 2]}) == {"values": [1, 2]}

    def test_nested_node_delegates(self):
        inner = PropertyBase({"x": 1, "_hidden": "meta"})
        assert to_json({"inner": inner}) == {"inner": {"x": 1}}

    def test_strings_copied_verbatim(self):
        assert to_json({"s": "abc"}) == {"s": "abc"}

    def test_deep_copy_of_plain_values(self):
        source = {"nested": {"list": [1, {"a": 2}]}}
        out = to_json(source)
        out["nested"]["list"][1]["a"] = 99
        assert source["nested"]["list"][1]["a"] == 2

    def test_nodes_inside_plain_containers_are_projected(self):
        node = PropertyBase({"x": 1})
        out = to_json({"things": [node, {"inner": node}]})
        assert out == {"things": [{"x": 1}, {"inner": {"x": 1}}]}

    def test_plain_object(self):
        obj = SimpleNamespace(name="n", _private="p", items=PropertyList())
        assert to_json(obj) == {"name": "n", "item": []}

    def test_uncopyable_value_names_the_key(self):
        with pytest.raises(SerializationError) as exc_info:
            to_json({"ok": 1, "handle": threading.Lock()})
        assert exc_info.value.details["key"] == "handle"
        assert "handle" in str(exc_info.value)

    def test_uncopyable_value_inside_node(self):
        node = PropertyBase({"name": "n"})
        node.lock = threading.Lock()
        with pytest.raises(SerializationError) as exc_info:
            node.to_json()
        assert exc_info.value.details["key"] == "lock"

    def test_scalars_have_no_fields(self):
        assert to_json(None) == {}
        assert to_json(5) == {}


class TestNodeToJson:
    def test_meta_and_link_are_left_out(self):
        node = PropertyBase({"name": "n", "_id": "1"})
        node.set_parent(PropertyList())
        assert node.to_json() == {"name": "n"}

    def test_round_trip(self):
        document = {
            "name": "n",
            "count": 0,
            "flag": False,
            "nothing": None,
            "tags": ["a", "b"],
            "nested": {"k": [1, 2, {"deep": True}]},
        }
        assert PropertyBase(document).to_json() == document

    def test_idempotent_and_non_mutating(self):
        node = PropertyBase({"name": "n", "nested": {"k": [1]}})
        first = node.to_json()
        first["nested"]["k"].append(2)
        second = node.to_json()
        assert second == {"name": "n", "nested": {"k": [1]}}
        assert node.nested == {"k": [1]}

    def test_free_function_matches_method(self):
        node = PropertyBase({"name": "n", "items": PropertyList()})
        assert to_json(node) == node.to_json() == {"name": "n", "item": []}


class TestCloneElement:
    def test_tuple_kept(self):
        assert clone_element((1, [2])) == (1, [2])

    def test_node_projected(self):
        assert clone_element(PropertyBase({"a": 1})) == {"a": 1}


class TestDumps:
    def test_dumps_node(self):
        node = PropertyBase({"name": "n", "values": [1, 2]})
        assert orjson.loads(dumps(node)) == {"name": "n", "values": [1, 2]}

    def test_dumps_indent(self):
        text = dumps({"a": 1}, indent=True)
        assert text == '{\n  "a": 1\n}'

    def test_dumps_unencodable(self):
        with pytest.raises(SerializationError):
            dumps({"obj": object()})
