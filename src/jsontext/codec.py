"""JSON text codec: decoding, canonical encoding and the is_json/to_json helpers.

Encoding is compact (no whitespace between tokens), escapes non-ASCII and
control characters as ``\\uXXXX`` sequences and never escapes forward
slashes, so ``{"a": "b/c"}`` encodes as ``{"a":"b/c"}``.

Decoding rejects the non-standard constants ``NaN``, ``Infinity`` and
``-Infinity`` that Python's ``json`` module accepts by default, so every
decoded document can be re-encoded.
"""

from __future__ import annotations

import json
import logging
from typing import Any, NoReturn

from jsontext.errors import DecodeError, EncodeError
from jsontext.tree.nodes import JsonValue

__all__ = ["decode", "encode", "is_json", "to_json"]

logger = logging.getLogger(__name__)

_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> NoReturn:
    raise DecodeError(
        f"Non-standard JSON constant: {name}",
        details={"constant": name},
    )


def decode(text: str) -> JsonValue:
    """Decode JSON text into native Python values.

    Object member order is preserved.  Duplicate keys keep the last value.

    Args:
        text: JSON text.

    Returns:
        The decoded value (dict, list, str, int, float, bool or None).

    Raises:
        DecodeError: If ``text`` is not a string, is not valid JSON, or is
            past the interpreter's limits (nesting depth, integer digits).
    """
    if not isinstance(text, str):
        msg = f"JSON text must be str, got {type(text).__name__}"
        raise DecodeError(msg, details={"type": type(text).__name__})

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except DecodeError:
        raise
    except json.JSONDecodeError as exc:
        raise DecodeError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            details={"pos": exc.pos, "lineno": exc.lineno, "colno": exc.colno},
        ) from exc
    except RecursionError as exc:
        msg = "JSON text is nested too deeply to decode"
        raise DecodeError(msg, details={"length": len(text)}) from exc
    except ValueError as exc:
        # e.g. integer literals past sys.get_int_max_str_digits()
        raise DecodeError(f"Cannot decode JSON: {exc}") from exc


def encode(value: Any) -> str:
    """Encode a JSON value as compact text.

    Raises:
        EncodeError: If ``value`` holds something JSON cannot represent
            (arbitrary objects, NaN/Infinity floats, circular containers).
    """
    try:
        return json.dumps(
            value,
            ensure_ascii=True,
            separators=_SEPARATORS,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot encode value as JSON: {exc}") from exc
    except RecursionError as exc:
        msg = "Value is nested too deeply to encode as JSON"
        raise EncodeError(msg) from exc


def is_json(text: Any) -> bool:
    """Return True if ``text`` decodes to a non-null JSON value.

    The empty string and the literal ``null`` both count as "not JSON".
    """
    try:
        return decode(text) is not None
    except DecodeError:
        logger.debug("is_json: rejected %r", text)
        return False


def to_json(value: Any) -> str:
    """Encode ``value``, wrapping scalars in a single-element array first.

    Containers are encoded as-is, ``None`` becomes ``[]`` and any other scalar
    ``x`` becomes ``[x]``, so the output is always a JSON container.
    """
    if value is None:
        value = []
    elif not isinstance(value, (dict, list, tuple)):
        value = [value]
    return encode(value)
