"""Byte-size wrappers backed by the binary and decimal unit tables."""

from __future__ import annotations

from stringtypes.models.base import StringEncoded
from stringtypes.parsing.size import BINARY_BYTE_SIZES, DECIMAL_SIZES, parse_size


class StringBinaryByteSize(StringEncoded[float]):
    """Bytes from a size with 1024-based units: ``"1.5G"`` -> ``1610612736.0``.

    Units: B, K, M, G, T, P, E. An unsuffixed number is a raw byte count.
    """

    __slots__ = ()
    example = "1.5G"

    @classmethod
    def zero(cls) -> float:
        return 0.0

    @classmethod
    def parse(cls, token: str) -> float:
        return parse_size(token, BINARY_BYTE_SIZES)


class StringDecimalSize(StringEncoded[float]):
    """Units from a size with 1000-based units: ``"1.5G"`` -> ``1500000000.0``.

    Units: K, M, G, T, P, E. An unsuffixed number is a raw count.
    """

    __slots__ = ()
    example = "1.5G"

    @classmethod
    def zero(cls) -> float:
        return 0.0

    @classmethod
    def parse(cls, token: str) -> float:
        return parse_size(token, DECIMAL_SIZES)
