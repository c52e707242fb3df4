"""Textual primitives for string-encoded scalars.

Each parser takes the raw token exactly as it appeared in the document and
either returns the native value or raises ``ParseError``. No whitespace is
stripped and no locale-specific digits are accepted.
"""

from __future__ import annotations

import math
import re
from datetime import timedelta
from fractions import Fraction

from stringtypes.core.exceptions import ParseError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

INVALID_SYNTAX = "invalid syntax"
OUT_OF_RANGE = "value out of range"


# ---------------------------------------------------------------------------
# Duration
# ---------------------------------------------------------------------------

_NANOS_PER_UNIT: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

# <digits>[.<digits>]<unit>; unit runs until the next digit or dot
_DURATION_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def parse_duration(token: str) -> timedelta:
    """Parse a compound duration such as ``"1h30m"``, ``"-1.5h"`` or ``"300ms"``.

    A duration is an optionally signed sequence of decimal numbers, each with
    an optional fraction and a required unit suffix. Valid units are ``ns``,
    ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. The bare token ``"0"``
    needs no unit.

    The total is computed in integer nanoseconds and must fit a signed 64-bit
    count; the returned ``timedelta`` is rounded half-even to microseconds.

    Raises:
        ParseError: if the token is not a valid duration or overflows.
    """
    s = token
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ParseError("parse_duration", token, "invalid duration")

    total = 0
    pos = 0
    while pos < len(s):
        match = _DURATION_COMPONENT.match(s, pos)
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise ParseError("parse_duration", token, "invalid duration")
        if not unit:
            raise ParseError("parse_duration", token, "missing unit in duration")
        if unit not in _NANOS_PER_UNIT:
            raise ParseError("parse_duration", token, f"unknown unit {unit!r} in duration")

        if len(whole.lstrip("0")) > 19:
            raise ParseError("parse_duration", token, OUT_OF_RANGE)
        magnitude = Fraction(int(whole or "0"))
        if fraction:
            # digits past nanosecond precision of the largest unit do not matter
            fraction = fraction[:19]
            magnitude += Fraction(int(fraction), 10 ** len(fraction))
        total += int(magnitude * _NANOS_PER_UNIT[unit])
        if total > -INT64_MIN:
            raise ParseError("parse_duration", token, OUT_OF_RANGE)
        pos = match.end()

    if negative:
        total = -total
    elif total > INT64_MAX:
        raise ParseError("parse_duration", token, OUT_OF_RANGE)
    return timedelta(microseconds=round(Fraction(total, 1000)))


# ---------------------------------------------------------------------------
# Integer
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r"[+-]?([0-9]+)")


def parse_int(token: str) -> int:
    """Parse a signed base-10 integer in the 64-bit range."""
    match = _INT_RE.fullmatch(token)
    if match is None:
        raise ParseError("parse_int", token, INVALID_SYNTAX)
    # int() refuses very long digit strings, so reject them by length first
    if len(match.group(1).lstrip("0")) > 19:
        raise ParseError("parse_int", token, OUT_OF_RANGE)
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParseError("parse_int", token, OUT_OF_RANGE)
    return value


# ---------------------------------------------------------------------------
# Float
# ---------------------------------------------------------------------------

_DECIMAL_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE | re.ASCII)


def parse_float(token: str) -> float:
    """Parse a 64-bit float.

    Accepts decimal and scientific notation (``"3.14"``, ``".5"``, ``"1e-3"``),
    hexadecimal mantissa with a binary exponent (``"0x1p-2"``) and the special
    values ``inf``, ``infinity`` (optionally signed) and ``nan``, ignoring case.
    Finite syntax whose value overflows a float is out of range.
    """
    if _SPECIAL_FLOAT_RE.fullmatch(token):
        return float(token)
    if _DECIMAL_FLOAT_RE.fullmatch(token):
        value = float(token)
    elif _HEX_FLOAT_RE.fullmatch(token):
        try:
            value = float.fromhex(token)
        except OverflowError as exc:
            raise ParseError("parse_float", token, OUT_OF_RANGE) from exc
    else:
        raise ParseError("parse_float", token, INVALID_SYNTAX)
    if math.isinf(value):
        raise ParseError("parse_float", token, OUT_OF_RANGE)
    return value


# ---------------------------------------------------------------------------
# Boolean
# ---------------------------------------------------------------------------

TRUE_TOKENS = frozenset({"1", "t", "T", "true", "TRUE", "True"})
FALSE_TOKENS = frozenset({"0", "f", "F", "false", "FALSE", "False"})


def parse_bool(token: str) -> bool:
    """Parse one of the canonical truthy/falsy tokens."""
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    raise ParseError("parse_bool", token, INVALID_SYNTAX)
