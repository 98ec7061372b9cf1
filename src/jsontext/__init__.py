"""jsontext - query JSON documents stored as text by position, key or value."""

from __future__ import annotations

import logging

from jsontext.api import extract, first, is_json, last, nth, to_json
from jsontext.config import FieldConfig, NthFallback, ReturnMode
from jsontext.errors import (
    DecodeError,
    EncodeError,
    InvalidArgumentError,
    InvalidOperatorError,
    InvalidReturnModeError,
    JSONTextError,
)
from jsontext.field import JSONTextField
from jsontext.operators import (
    DEFAULT_BACKEND,
    DEFAULT_OPERATORS,
    OperatorRegistry,
    Routine,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_BACKEND",
    "DEFAULT_OPERATORS",
    "DecodeError",
    "EncodeError",
    "FieldConfig",
    "InvalidArgumentError",
    "InvalidOperatorError",
    "InvalidReturnModeError",
    "JSONTextError",
    "JSONTextField",
    "NthFallback",
    "OperatorRegistry",
    "ReturnMode",
    "Routine",
    "extract",
    "first",
    "is_json",
    "last",
    "nth",
    "to_json",
]
