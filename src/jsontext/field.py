"""JSONTextField: text-backed JSON value queried by position, key or value.

The field stores JSON as text.  Every query decodes the current text, flattens
it (see ``jsontext.tree.walker``) and selects node(s) by position or through
an operator routine, then renders the result in the field's return mode.
Nothing is cached between calls.

Example::

    from jsontext import JSONTextField, ReturnMode

    field = JSONTextField('{"foo": "bar", "baz": 1}')
    field.extract("->", "foo")          # '{"foo":"bar"}'
    field.set_return_mode(ReturnMode.STRUCTURED)
    field.extract("<-", 1)              # {"baz": 1}
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from jsontext import codec
from jsontext.config import FieldConfig, NthFallback, ReturnMode
from jsontext.errors import DecodeError, InvalidArgumentError, InvalidReturnModeError
from jsontext.matching import find_all_matches, find_first_match, validate_operand
from jsontext.tree.nodes import FlatNode
from jsontext.tree.walker import flatten, reassemble

__all__ = ["JSONTextField"]

logger = logging.getLogger(__name__)


class JSONTextField:
    """A JSON document held as text with simple query operations.

    Each instance owns its text value and return mode.  Query calls only read
    them, so concurrent queries against an unchanging field are safe; changing
    the return mode while other threads query is not.

    Args:
        value:  JSON text.  Empty string means "no document".
        config: Query settings.  Defaults to ``FieldConfig()``.
    """

    def __init__(self, value: str = "", config: FieldConfig | None = None) -> None:
        self._config: FieldConfig = config if config is not None else FieldConfig()
        self._return_mode: ReturnMode = self._config.return_mode
        self._value: str = ""
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._value!r}, "
            f"return_mode={self._return_mode.value!r})"
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def value(self) -> str:
        """The stored JSON text."""
        return self._value

    @value.setter
    def value(self, text: str | None) -> None:
        if text is None:
            text = ""
        if not isinstance(text, str):
            msg = f"JSONTextField value must be str, got {type(text).__name__}"
            raise InvalidArgumentError(msg, details={"type": type(text).__name__})
        self._value = text

    @property
    def config(self) -> FieldConfig:
        return self._config

    @property
    def backend(self) -> str:
        return self._config.backend

    @property
    def return_mode(self) -> ReturnMode:
        return self._return_mode

    @return_mode.setter
    def return_mode(self, mode: ReturnMode | str) -> None:
        self.set_return_mode(mode)

    def set_return_mode(self, mode: ReturnMode | str) -> JSONTextField:
        """Tell all query methods to return structured data or JSON text.

        Args:
            mode: A ``ReturnMode`` member or its value, "array" or "json".

        Returns:
            This field, for chaining.

        Raises:
            InvalidReturnModeError: For any other value.
        """
        try:
            self._return_mode = ReturnMode(mode)
        except ValueError:
            msg = f"Bad return mode: {mode!r}, expected one of {[m.value for m in ReturnMode]}"
            raise InvalidReturnModeError(msg, details={"mode": mode}) from None
        return self

    def get_return_mode(self) -> ReturnMode:
        return self._return_mode

    # ------------------------------------------------------------------
    # Codec helpers
    # ------------------------------------------------------------------

    @staticmethod
    def is_json(text: Any) -> bool:
        return codec.is_json(text)

    @staticmethod
    def to_json(value: Any) -> str:
        return codec.to_json(value)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def iter_nodes(self) -> Iterator[FlatNode]:
        """Flatten the stored document.

        An empty value yields nothing.

        Raises:
            DecodeError: If the stored text is not JSON, or is ``null``.
        """
        if not self._value:
            return iter(())
        document = codec.decode(self._value)
        if document is None:
            msg = "Stored JSON text is null"
            raise DecodeError(msg, details={"value": self._value})
        return flatten(document)

    def _nodes_or_empty(self) -> list[FlatNode]:
        try:
            return list(self.iter_nodes())
        except DecodeError as exc:
            logger.debug("Treating undecodable document as empty: %s", exc)
            return []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def first(self) -> dict[Any, Any] | str:
        """Return the first node of the flattened document as ``{key: value}``."""
        nodes = self._nodes_or_empty()
        if not nodes:
            return self._render({})
        return self._render_node(nodes[0])

    def last(self) -> dict[Any, Any] | str:
        """Return the last node of the flattened document as ``{key: value}``."""
        nodes = self._nodes_or_empty()
        if not nodes:
            return self._render({})
        return self._render_node(nodes[-1])

    def nth(self, n: int) -> dict[Any, Any] | str:
        """Return the ``n``'th node (0-based) of the flattened document.

        When ``n`` is past the last node the result depends on
        ``FieldConfig.nth_fallback``: the whole flattened document reassembled
        into one mapping (the default), or the empty result.

        Raises:
            InvalidArgumentError: If ``n`` is not a non-negative int.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            msg = f"Argument passed to nth must be an integer, got {type(n).__name__}"
            raise InvalidArgumentError(msg, details={"n": n})
        if n < 0:
            msg = f"Argument passed to nth must be >= 0, got {n}"
            raise InvalidArgumentError(msg, details={"n": n})

        nodes = self._nodes_or_empty()
        if n < len(nodes):
            return self._render_node(nodes[n])

        logger.debug(
            "nth(%d) out of range for %d nodes, fallback=%s",
            n,
            len(nodes),
            self._config.nth_fallback,
        )
        if self._config.nth_fallback is NthFallback.EMPTY:
            return self._render({})
        return self._render(reassemble(nodes))

    def extract(self, operator: str, operand: str | int | float) -> dict[Any, Any] | str:
        """Return the first ``{key: value}`` selected by ``operator`` and ``operand``.

        Args:
            operator: A token registered for the configured backend, e.g.
                "->" (match by key) or "<-" (match by value).
            operand:  Text or number to compare against.

        Returns:
            The matched pair, or the empty result when nothing matches or the
            document is empty.

        Raises:
            InvalidOperatorError: If ``operator`` is not registered.
            InvalidArgumentError: If ``operand`` is not a str, int or float.
        """
        routine = self._config.operators.resolve(self.backend, operator)
        operand = validate_operand(operand)

        match = find_first_match(self._nodes_or_empty(), routine, operand)
        if match is None:
            return self._render({})
        key, value = match
        return self._render({key: value})

    def find(self, operator: str, operand: str | int | float) -> dict[Any, Any] | str:
        """Alias of ``extract()``."""
        return self.extract(operator, operand)

    def extract_all(
        self, operator: str, operand: str | int | float
    ) -> list[dict[Any, Any]] | str:
        """Return every ``{key: value}`` selected by ``operator``, in document order."""
        routine = self._config.operators.resolve(self.backend, operator)
        operand = validate_operand(operand)

        matches = [
            {key: value}
            for key, value in find_all_matches(self._nodes_or_empty(), routine, operand)
        ]
        if self._return_mode is ReturnMode.STRUCTURED:
            return matches
        return codec.to_json(matches)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_node(self, node: FlatNode) -> dict[Any, Any] | str:
        return self._render({node.result_key: node.value})

    def _render(self, data: dict[Any, Any]) -> dict[Any, Any] | str:
        if self._return_mode is ReturnMode.STRUCTURED:
            return data
        return codec.to_json(data)
