"""Flattened walker: turns a decoded JSON value into a pre-order node sequence.

The walk is depth-first and self-first: a container member is emitted before
its own children.  Object members are visited in insertion order and array
elements in index order.  The root container itself is not emitted, only its
members (and their descendants), so ``{"a": 1, "b": 2}`` flattens to exactly
two nodes.

JSON Pointer paths (RFC 6901) are built during traversal:
- Root is "" (empty string)
- Each level appends "/{key_or_index}" with "~" and "/" escaped
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from jsontext.tree.nodes import FlatNode, JsonValue

__all__ = ["flatten", "reassemble"]

# (key, position, value, depth, path)
_Pending = tuple[str | None, int | None, Any, int, str]


def _escape_pointer(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _members(value: JsonValue, path: str, depth: int) -> list[_Pending]:
    """List the direct members of a container in visiting order."""
    if isinstance(value, dict):
        return [
            (key, None, child, depth, f"{path}/{_escape_pointer(key)}")
            for key, child in value.items()
        ]
    if isinstance(value, list):
        return [
            (None, idx, child, depth, f"{path}/{idx}")
            for idx, child in enumerate(value)
        ]
    return []


def flatten(value: JsonValue) -> Iterator[FlatNode]:
    """Yield every member of ``value`` in pre-order, self-first order.

    Uses an explicit stack rather than recursion so deeply nested documents
    cannot hit the interpreter recursion limit.  Each call returns a fresh
    generator; nothing is cached between calls.

    Args:
        value: Any decoded JSON value.  Scalars and empty containers have no
            members and yield nothing.

    Yields:
        ``FlatNode`` records with consecutive ``index`` values starting at 0.
    """
    stack = _members(value, "", 1)
    stack.reverse()
    index = 0

    while stack:
        key, position, child, depth, path = stack.pop()
        yield FlatNode(
            key=key,
            value=child,
            index=index,
            position=position,
            depth=depth,
            path=path,
        )
        index += 1

        children = _members(child, path, depth + 1)
        children.reverse()
        stack.extend(children)


def reassemble(nodes: Iterable[FlatNode]) -> dict[str, Any]:
    """Collapse a flattened sequence back into a single mapping.

    Every node contributes ``result_key -> value``.  Array positions are keyed
    by their decimal text, so element ``0`` and member ``"0"`` share one key.
    When a key repeats (the same member name at several depths) the later
    value wins but the key keeps the position of its first occurrence.
    """
    assembled: dict[str, Any] = {}
    for node in nodes:
        assembled[str(node.result_key)] = node.value
    return assembled
