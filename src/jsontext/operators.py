"""Operator registry: backend conventions mapping routines to operator tokens.

A backend is a named convention for which literal tokens select which
matching routine.  Only the PostgreSQL-flavoured convention ships by default::

    {"postgres": {"getByKey": "->", "getByVal": "<-"}}

Within a backend, routines and tokens form a bijection, so a token can be
validated and dispatched with a single lookup.  The registry is immutable;
swapping backends means passing a different registry, not subclassing.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from jsontext.errors import InvalidOperatorError

__all__ = [
    "DEFAULT_BACKEND",
    "DEFAULT_OPERATORS",
    "OperatorRegistry",
    "Routine",
]


class Routine(StrEnum):
    """The closed set of matching routines an operator can select.

    - BY_KEY -> "getByKey" : node key equals the operand
    - BY_VAL -> "getByVal" : scalar node value equals the operand
    """

    BY_KEY = "getByKey"
    BY_VAL = "getByVal"


DEFAULT_BACKEND = "postgres"

DEFAULT_OPERATORS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        DEFAULT_BACKEND: MappingProxyType(
            {
                Routine.BY_KEY: "->",
                Routine.BY_VAL: "<-",
            }
        ),
    }
)


class OperatorRegistry:
    """Immutable ``{backend: {routine: token}}`` lookup table.

    Args:
        operators: Mapping of backend id to a mapping of routine name
            (``Routine`` or its string value, e.g. ``"getByKey"``) to token.
            Defaults to ``DEFAULT_OPERATORS``.

    Raises:
        ValueError: If the mapping is empty, names an unknown routine, holds
            an empty token, or binds the same token to two routines of one
            backend.

    Example::

        registry = OperatorRegistry()
        registry.resolve("postgres", "->")     # Routine.BY_KEY
        registry.is_valid("postgres", "??")    # False
    """

    def __init__(
        self, operators: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        source = DEFAULT_OPERATORS if operators is None else operators
        if not source:
            msg = "operator registry must define at least one backend"
            raise ValueError(msg)

        self._by_routine: dict[str, dict[Routine, str]] = {}
        self._by_token: dict[str, dict[str, Routine]] = {}

        for backend, table in source.items():
            by_routine: dict[Routine, str] = {}
            by_token: dict[str, Routine] = {}
            for name, token in table.items():
                try:
                    routine = Routine(name)
                except ValueError:
                    msg = f"unknown routine {name!r} for backend {backend!r}"
                    raise ValueError(msg) from None
                if not isinstance(token, str) or not token:
                    msg = f"empty operator token for {backend!r}.{routine}"
                    raise ValueError(msg)
                if token in by_token:
                    msg = (
                        f"operator {token!r} bound twice in backend {backend!r}: "
                        f"{by_token[token]} and {routine}"
                    )
                    raise ValueError(msg)
                by_routine[routine] = token
                by_token[token] = routine
            self._by_routine[backend] = by_routine
            self._by_token[backend] = by_token

    @classmethod
    def from_mapping(cls, operators: Mapping[str, Mapping[str, str]]) -> OperatorRegistry:
        """Build a registry from plain configuration data."""
        return cls(operators)

    def __repr__(self) -> str:
        return f"OperatorRegistry({self.as_dict()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OperatorRegistry):
            return NotImplemented
        return self._by_routine == other._by_routine

    def __hash__(self) -> int:
        return hash(
            tuple(
                (backend, tuple(sorted(table.items())))
                for backend, table in sorted(self._by_routine.items())
            )
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def backends(self) -> tuple[str, ...]:
        return tuple(self._by_routine)

    def has_backend(self, backend: str) -> bool:
        return backend in self._by_routine

    def operators_for(self, backend: str) -> dict[Routine, str]:
        """Return a copy of the ``routine -> token`` table for ``backend``.

        Raises:
            InvalidOperatorError: If ``backend`` is not registered.
        """
        return dict(self._table(backend))

    def token_for(self, backend: str, routine: Routine | str) -> str:
        table = self._table(backend)
        try:
            return table[Routine(routine)]
        except (KeyError, ValueError):
            msg = f"Routine {routine!r} has no operator in backend {backend!r}"
            raise InvalidOperatorError(
                msg, details={"backend": backend, "routine": str(routine)}
            ) from None

    def is_valid(self, backend: str, token: object) -> bool:
        """Return True if ``token`` is a registered operator of ``backend``."""
        tokens = self._by_token.get(backend)
        return tokens is not None and isinstance(token, str) and token in tokens

    def resolve(self, backend: str, token: object) -> Routine:
        """Map an operator token to its matching routine.

        Raises:
            InvalidOperatorError: If ``backend`` is unknown or ``token`` is not
                one of its operators.
        """
        self._table(backend)
        if not self.is_valid(backend, token):
            msg = f"Invalid {backend} operator: {token!r}, used for JSON query."
            raise InvalidOperatorError(
                msg, details={"backend": backend, "operator": token}
            )
        return self._by_token[backend][token]  # type: ignore[index]

    def as_dict(self) -> dict[str, dict[str, str]]:
        """Plain-data copy of the registry, routine names as strings."""
        return {
            backend: {str(routine): token for routine, token in table.items()}
            for backend, table in self._by_routine.items()
        }

    def _table(self, backend: str) -> dict[Routine, str]:
        try:
            return self._by_routine[backend]
        except KeyError:
            msg = f"Unknown JSON backend: {backend!r}"
            raise InvalidOperatorError(msg, details={"backend": backend}) from None
