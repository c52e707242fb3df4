"""Human-readable size parsing (``"1.5G"``, ``"512K"``, ``"1024"``).

Two fixed multiplier tables are provided: ``BINARY_BYTE_SIZES`` (IEC, powers
of 1024) and ``DECIMAL_SIZES`` (SI, powers of 1000). The decimal table has no
``B`` entry, so ``"512B"`` is not a valid decimal size.
"""

from __future__ import annotations

from types import MappingProxyType

from stringtypes.core.types import UnitTable
from stringtypes.parsing.scalars import parse_float

BINARY_BYTE_SIZES: UnitTable = MappingProxyType({
    "B": 1.0,
    "K": float(1 << 10),  # KiB
    "M": float(1 << 20),  # MiB
    "G": float(1 << 30),  # GiB
    "T": float(1 << 40),  # TiB
    "P": float(1 << 50),  # PiB
    "E": float(1 << 60),  # EiB
})

DECIMAL_SIZES: UnitTable = MappingProxyType({
    "K": 1e3,
    "M": 1e6,
    "G": 1e9,
    "T": 1e12,
    "P": 1e15,
    "E": 1e18,
})


def check_suffix_free(table: UnitTable) -> None:
    """Raise ``ValueError`` if any unit key is a proper suffix of another key."""
    for key in table:
        for other in table:
            if key != other and other.endswith(key):
                raise ValueError(f"Unit {key!r} is a suffix of unit {other!r}")


def parse_size(token: str, table: UnitTable) -> float:
    """Parse ``<number><optional unit>`` into a count using ``table``.

    The token's tail is compared against every unit key, longest key first, so
    a table whose keys share a tail still resolves to the most specific unit.
    On a match the remaining prefix is parsed as a float and multiplied; with
    no match the whole token is parsed as a bare, unmultiplied count.

    Raises:
        ParseError: if the numeric prefix (or the bare token) is not a float.
    """
    for unit in sorted(table, key=len, reverse=True):
        if token.endswith(unit):
            return parse_float(token[: -len(unit)]) * table[unit]
    return parse_float(token)


check_suffix_free(BINARY_BYTE_SIZES)
check_suffix_free(DECIMAL_SIZES)
