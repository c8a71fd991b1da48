"""Random 64-bit identifiers used as handles for assets and entities."""

from __future__ import annotations

import secrets

__all__ = ["UUID"]

_MAX = (1 << 64) - 1


class UUID:
    """An unsigned 64-bit identifier; zero means "no id"."""

    __slots__ = ("_value",)

    def __init__(self, value: int | None = None) -> None:
        if value is None:
            value = 0
            while value == 0:
                value = secrets.randbits(64)
        else:
            value = int(value)
            if not 0 <= value <= _MAX:
                raise ValueError(f"UUID value out of 64-bit unsigned range: {value}")
        self._value = value

    def is_valid(self) -> bool:
        """Return True unless this is the null id."""
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"UUID({self._value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)