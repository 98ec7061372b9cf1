"""Public API functions for jsontext.

One-shot helpers over a JSON text: first, last, nth and extract.  Each call
creates a fresh JSONTextField to guarantee zero global state between calls.
"""

from __future__ import annotations

from typing import Any

from jsontext.codec import is_json, to_json
from jsontext.config import FieldConfig
from jsontext.field import JSONTextField

__all__ = ["extract", "first", "is_json", "last", "nth", "to_json"]


def first(text: str, config: FieldConfig | None = None) -> dict[Any, Any] | str:
    """Return the first node of ``text`` as ``{key: value}``.

    Args:
        text:   JSON text.
        config: Query settings.  Defaults to ``FieldConfig()`` when None.
    """
    return JSONTextField(text, config=config).first()


def last(text: str, config: FieldConfig | None = None) -> dict[Any, Any] | str:
    """Return the last node of ``text`` as ``{key: value}``."""
    return JSONTextField(text, config=config).last()


def nth(text: str, n: int, config: FieldConfig | None = None) -> dict[Any, Any] | str:
    """Return the ``n``'th node of ``text``; see ``JSONTextField.nth``."""
    return JSONTextField(text, config=config).nth(n)


def extract(
    text: str,
    operator: str,
    operand: str | int | float,
    config: FieldConfig | None = None,
) -> dict[Any, Any] | str:
    """Return the first pair of ``text`` selected by ``operator`` and ``operand``.

    Args:
        text:     JSON text.
        operator: Operator token, e.g. "->" (by key) or "<-" (by value).
        operand:  Text or number to compare against.
        config:   Query settings.  Defaults to ``FieldConfig()`` when None.

    Returns:
        The matched pair in the configured return mode, or the empty result.
    """
    return JSONTextField(text, config=config).extract(operator, operand)
