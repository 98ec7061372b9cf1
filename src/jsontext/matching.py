"""Match engine: per-node predicates and first-match search over a flattened document.

Each ``Routine`` is bound to one predicate in the ``ROUTINES`` function table.
The search walks the flattened sequence in order and stops at the first node
the predicate accepts; there is no ranking and no backtracking, so the same
document and operand always select the same node.

Comparison rules:

- ``BY_KEY``: object members whose key equals the operand's text.  Integer
  operands are compared as their decimal text.  Array elements have no key
  and never match.
- ``BY_VAL``: scalar nodes only.  When both operand and value are numbers
  (bool excluded) they are compared numerically; otherwise the value's text
  form (strings as-is, numbers via ``str``, ``true``/``false``/``null``) is
  compared with the operand's text.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from jsontext.errors import InvalidArgumentError
from jsontext.operators import Routine
from jsontext.tree.nodes import FlatNode

__all__ = [
    "ROUTINES",
    "Operand",
    "find_all_matches",
    "find_first_match",
    "match_by_key",
    "match_by_val",
    "validate_operand",
]

logger = logging.getLogger(__name__)

Operand = str | int | float

Predicate = Callable[[FlatNode, Operand], bool]


def _is_number(value: Any) -> bool:
    # bool subclasses int
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _scalar_text(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def validate_operand(operand: Any) -> Operand:
    """Check that ``operand`` is a text or number.

    Raises:
        InvalidArgumentError: For bools, None, containers and other types.
    """
    if isinstance(operand, str) or _is_number(operand):
        return operand
    msg = f"JSON operand must be str, int or float, got {type(operand).__name__}"
    raise InvalidArgumentError(msg, details={"operand": operand})


def match_by_key(node: FlatNode, operand: Operand) -> bool:
    if node.key is None:
        return False
    return node.key == _scalar_text(operand)


def match_by_val(node: FlatNode, operand: Operand) -> bool:
    if node.is_container:
        return False
    if _is_number(operand) and _is_number(node.value):
        return node.value == operand
    return _scalar_text(node.value) == _scalar_text(operand)


ROUTINES: dict[Routine, Predicate] = {
    Routine.BY_KEY: match_by_key,
    Routine.BY_VAL: match_by_val,
}


def find_first_match(
    nodes: Iterable[FlatNode],
    routine: Routine,
    operand: Operand,
) -> tuple[str | int | None, Any] | None:
    """Return ``(key, value)`` of the first node accepted by ``routine``.

    Args:
        nodes:   Flattened document, in traversal order.
        routine: Which predicate to apply.
        operand: Text or number to compare against.

    Returns:
        The matched node's result key and value, or None when nothing matches.
    """
    predicate = ROUTINES[routine]
    for node in nodes:
        if predicate(node, operand):
            logger.debug(
                "%s %r matched node %d at %r", routine, operand, node.index, node.path
            )
            return node.result_key, node.value
    logger.debug("%s %r matched nothing", routine, operand)
    return None


def find_all_matches(
    nodes: Iterable[FlatNode],
    routine: Routine,
    operand: Operand,
) -> list[tuple[str | int | None, Any]]:
    """Return ``(key, value)`` for every node accepted by ``routine``, in order."""
    predicate = ROUTINES[routine]
    return [
        (node.result_key, node.value) for node in nodes if predicate(node, operand)
    ]
