"""Wrapper types that decode string-encoded values in structured documents."""

from __future__ import annotations

from stringtypes.core.exceptions import DocumentDecodeError, ParseError, StringTypesError
from stringtypes.document import decode_document
from stringtypes.models.arrays import StringArray
from stringtypes.models.base import StringEncoded
from stringtypes.models.scalars import StringBool, StringDuration, StringFloat64, StringInt
from stringtypes.models.sizes import StringBinaryByteSize, StringDecimalSize
from stringtypes.parsing.size import BINARY_BYTE_SIZES, DECIMAL_SIZES, parse_size

__all__ = [
    "BINARY_BYTE_SIZES",
    "DECIMAL_SIZES",
    "DocumentDecodeError",
    "ParseError",
    "StringArray",
    "StringBinaryByteSize",
    "StringBool",
    "StringDecimalSize",
    "StringDuration",
    "StringEncoded",
    "StringFloat64",
    "StringInt",
    "StringTypesError",
    "decode_document",
    "parse_size",
]
