"""FieldConfig, ReturnMode and NthFallback for JSONTextField configuration.

FieldConfig is a frozen (immutable) dataclass holding the query settings.
ReturnMode selects how results are handed back: structured Python data or
JSON text.  NthFallback selects what ``nth()`` returns for an index past the
end of the document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto

from jsontext.errors import InvalidReturnModeError
from jsontext.operators import DEFAULT_BACKEND, OperatorRegistry

__all__ = ["FieldConfig", "NthFallback", "ReturnMode"]


class ReturnMode(StrEnum):
    """How query results are returned.

    - STRUCTURED -> "array" : a dict (or list) the caller consumes directly.
    - JSON_TEXT  -> "json"  : the same result encoded as JSON text.
    """

    STRUCTURED = "array"
    JSON_TEXT = "json"


class NthFallback(StrEnum):
    """What ``nth(n)`` returns when ``n`` is past the last node.

    - DOCUMENT: the whole flattened document reassembled into one mapping.
    - EMPTY:    the empty result.
    """

    DOCUMENT = auto()
    EMPTY = auto()


@dataclass(frozen=True, slots=True)
class FieldConfig:
    """Immutable configuration for a JSONTextField.

    Attributes:
        backend: Which operator convention to use.  Must be registered in
            ``operators``.  Default "postgres".
        operators: Registry of ``{backend: {routine: token}}``.
        return_mode: Initial return mode of fields built from this config.
            Default JSON_TEXT.
        nth_fallback: Result of ``nth()`` for an out-of-range index.
            Default DOCUMENT.
    """

    backend: str = DEFAULT_BACKEND
    operators: OperatorRegistry = field(default_factory=OperatorRegistry)
    return_mode: ReturnMode = ReturnMode.JSON_TEXT
    nth_fallback: NthFallback = NthFallback.DOCUMENT

    def __post_init__(self) -> None:
        if not isinstance(self.operators, OperatorRegistry):
            msg = f"operators must be an OperatorRegistry, got {type(self.operators).__name__}"
            raise ValueError(msg)
        if not self.operators.has_backend(self.backend):
            msg = (
                f"backend {self.backend!r} is not registered, "
                f"expected one of {list(self.operators.backends)}"
            )
            raise ValueError(msg)
        # Coerce plain strings ("json", "document") to their enum members.
        try:
            return_mode = ReturnMode(self.return_mode)
        except ValueError:
            msg = (
                f"Bad return mode: {self.return_mode!r}, "
                f"expected one of {[m.value for m in ReturnMode]}"
            )
            raise InvalidReturnModeError(
                msg, details={"mode": self.return_mode}
            ) from None
        object.__setattr__(self, "return_mode", return_mode)
        object.__setattr__(self, "nth_fallback", NthFallback(self.nth_fallback))
