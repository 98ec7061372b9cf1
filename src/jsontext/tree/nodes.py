"""FlatNode dataclass and NodeType StrEnum for the flattened JSON representation.

Decoded JSON is held as plain Python values (``JsonValue``); the walker turns
that tree into a flat sequence of ``FlatNode`` records which query operations
search by position, key or value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["FlatNode", "JsonValue", "NodeType", "node_type_of"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class NodeType(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - STRING  -> "string"  : JSON string
    - NUMBER  -> "number"  : JSON number (int or float)
    - BOOLEAN -> "boolean" : true / false
    - NULL    -> "null"    : null
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


def node_type_of(value: JsonValue) -> NodeType:
    """Classify a decoded JSON value.

    bool MUST be checked before int because bool is a subclass of int.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if isinstance(value, dict):
        return NodeType.OBJECT
    if isinstance(value, list):
        return NodeType.ARRAY
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, (int, float)):
        return NodeType.NUMBER
    if value is None:
        return NodeType.NULL

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass(frozen=True, slots=True)
class FlatNode:
    """A single entry in the flattened, pre-order listing of a JSON document.

    Attributes:
        key:       Object member name; None for array elements.
        value:     The member's decoded value (containers are kept whole).
        index:     0-based position of this node in the flattened sequence.
        position:  Element index for array elements; None for object members.
        depth:     Nesting depth, 1 for members of the root container.
        path:      JSON Pointer path (RFC 6901), e.g. "/user/name".
    """

    key: str | None
    value: Any
    index: int
    position: int | None = None
    depth: int = 1
    path: str = ""

    @property
    def node_type(self) -> NodeType:
        return node_type_of(self.value)

    @property
    def is_container(self) -> bool:
        return isinstance(self.value, (dict, list))

    @property
    def result_key(self) -> str | int | None:
        """Key used when this node is rendered as a single-entry result."""
        return self.key if self.key is not None else self.position
