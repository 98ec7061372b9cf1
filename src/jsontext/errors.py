"""Exception hierarchy for jsontext.

Every error raised by the package derives from ``JSONTextError`` so callers
can catch the whole family at once, or branch on the concrete kind:

- ``DecodeError``:            stored text is not valid JSON.
- ``EncodeError``:            a value cannot be serialized to JSON text.
- ``InvalidOperatorError``:   operator token (or backend) is not registered.
- ``InvalidReturnModeError``: return mode is not one of ``ReturnMode``.
- ``InvalidArgumentError``:   an argument has the wrong type or range.

Absence of a match and empty documents are never errors; they produce an
empty result instead.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DecodeError",
    "EncodeError",
    "InvalidArgumentError",
    "InvalidOperatorError",
    "InvalidReturnModeError",
    "JSONTextError",
]


class JSONTextError(Exception):
    """Base class for all jsontext errors.

    Attributes:
        message: Human readable description of the failure.
        details: Structured context (offending token, backend, position...).
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DecodeError(JSONTextError, ValueError):
    """Text could not be decoded as JSON."""


class EncodeError(JSONTextError, ValueError):
    """A value could not be encoded as JSON text."""


class InvalidOperatorError(JSONTextError):
    """Operator token is not recognised for the configured backend."""


class InvalidReturnModeError(JSONTextError, ValueError):
    """Return mode is outside the supported set."""


class InvalidArgumentError(JSONTextError, TypeError):
    """An argument has an unsupported type or value."""
