"""Tree subpackage for the flattened JSON representation.

Re-exports the public API for the tree module:
- FlatNode: frozen dataclass for one entry of the flattened sequence
- NodeType: StrEnum of the six JSON value kinds
- JsonValue: type alias for decoded JSON values
- flatten: pre-order, self-first walker over a decoded document
- reassemble: collapses a flattened sequence back into a mapping
"""

from jsontext.tree.nodes import FlatNode, JsonValue, NodeType, node_type_of
from jsontext.tree.walker import flatten, reassemble

__all__ = [
    "FlatNode",
    "JsonValue",
    "NodeType",
    "flatten",
    "node_type_of",
    "reassemble",
]
