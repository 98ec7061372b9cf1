"""Tests for FlatNode dataclass, NodeType StrEnum and node_type_of.

Verifies:
- NodeType has exactly 6 members with lowercase string values (StrEnum property)
- node_type_of dispatches bool before int
- FlatNode constructs correctly, is frozen and slotted
- result_key falls back to the array position for array elements
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from jsontext.tree.nodes import FlatNode, NodeType, node_type_of


class TestNodeType:
    """Tests for the NodeType StrEnum."""

    def test_has_exactly_six_members(self) -> None:
        assert len(NodeType) == 6

    def test_members_are_str_instances(self) -> None:
        for member in NodeType:
            assert isinstance(member, str), f"{member!r} is not a str instance"

    def test_values_are_lowercased(self) -> None:
        assert NodeType.OBJECT == "object"
        assert NodeType.ARRAY == "array"
        assert NodeType.STRING == "string"
        assert NodeType.NUMBER == "number"
        assert NodeType.BOOLEAN == "boolean"
        assert NodeType.NULL == "null"


class TestNodeTypeOf:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ({}, NodeType.OBJECT),
            ([], NodeType.ARRAY),
            ("x", NodeType.STRING),
            (1, NodeType.NUMBER),
            (1.5, NodeType.NUMBER),
            (True, NodeType.BOOLEAN),
            (False, NodeType.BOOLEAN),
            (None, NodeType.NULL),
        ],
    )
    def test_classifies_json_values(self, value: object, expected: NodeType) -> None:
        assert node_type_of(value) is expected  # type: ignore[arg-type]

    def test_bool_is_not_a_number(self) -> None:
        """bool subclasses int; it must still classify as BOOLEAN."""
        assert node_type_of(True) is NodeType.BOOLEAN

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            node_type_of(object())  # type: ignore[arg-type]


class TestFlatNode:
    """Tests for the FlatNode dataclass."""

    def test_construction_with_required_fields(self) -> None:
        node = FlatNode(key="a", value=1, index=0)
        assert node.key == "a"
        assert node.value == 1
        assert node.index == 0
        assert node.position is None
        assert node.depth == 1
        assert node.path == ""

    def test_node_type_property(self) -> None:
        assert FlatNode(key="a", value={"b": 1}, index=0).node_type is NodeType.OBJECT
        assert FlatNode(key="a", value="s", index=0).node_type is NodeType.STRING

    def test_is_container(self) -> None:
        assert FlatNode(key="a", value=[1], index=0).is_container
        assert FlatNode(key="a", value={}, index=0).is_container
        assert not FlatNode(key="a", value="[]", index=0).is_container

    def test_result_key_for_object_member(self) -> None:
        node = FlatNode(key="name", value="Ann", index=3, depth=2, path="/user/name")
        assert node.result_key == "name"

    def test_result_key_for_array_element(self) -> None:
        node = FlatNode(key=None, value="b", index=2, position=1, path="/tags/1")
        assert node.result_key == 1

    def test_is_frozen(self) -> None:
        node = FlatNode(key="a", value=1, index=0)
        with pytest.raises(FrozenInstanceError):
            node.key = "b"  # type: ignore[misc]

    def test_uses_slots(self) -> None:
        assert hasattr(FlatNode, "__slots__")

    def test_equality_by_value(self) -> None:
        assert FlatNode(key="a", value=1, index=0) == FlatNode(key="a", value=1, index=0)
        assert FlatNode(key="a", value=1, index=0) != FlatNode(key="a", value=1, index=1)
