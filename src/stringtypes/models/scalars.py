"""Scalar wrappers: durations, integers, floats and booleans."""

from __future__ import annotations

from datetime import timedelta

from stringtypes.models.base import StringEncoded
from stringtypes.parsing.scalars import parse_bool, parse_duration, parse_float, parse_int


class StringDuration(StringEncoded[timedelta]):
    """A ``timedelta`` encoded as ``"5m30s"``, ``"1h30m"`` or ``"250ms"``."""

    __slots__ = ()
    example = "1h30m"

    @classmethod
    def zero(cls) -> timedelta:
        return timedelta(0)

    @classmethod
    def parse(cls, token: str) -> timedelta:
        return parse_duration(token)


class StringInt(StringEncoded[int]):
    """A 64-bit integer encoded as ``"42"``."""

    __slots__ = ()
    example = "42"

    @classmethod
    def zero(cls) -> int:
        return 0

    @classmethod
    def parse(cls, token: str) -> int:
        return parse_int(token)


class StringFloat64(StringEncoded[float]):
    """A float encoded as ``"3.14159"`` or ``"1e-3"``."""

    __slots__ = ()
    example = "3.14159"

    @classmethod
    def zero(cls) -> float:
        return 0.0

    @classmethod
    def parse(cls, token: str) -> float:
        return parse_float(token)


class StringBool(StringEncoded[bool]):
    """A boolean encoded as ``"true"``/``"false"``, ``"1"``/``"0"``, ``"T"``/``"F"``."""

    __slots__ = ()
    example = "true"

    @classmethod
    def zero(cls) -> bool:
        return False

    @classmethod
    def parse(cls, token: str) -> bool:
        return parse_bool(token)
