"""Protocol interfaces at the document-decoding boundary.

Structural typing only: the wrapper types and any pydantic model class satisfy
these without inheriting from them.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", covariant=True)
M = TypeVar("M", covariant=True)


# ---------------------------------------------------------------------------
# String-encoded wrapper
# ---------------------------------------------------------------------------

@runtime_checkable
class IStringDecoder(Protocol[T]):
    """A wrapper populated from a string token and read through ``value()``."""

    def decode(self, raw: Any) -> None: ...

    def value(self) -> T: ...


# ---------------------------------------------------------------------------
# Document decoder
# ---------------------------------------------------------------------------

@runtime_checkable
class IDocumentDecoder(Protocol[M]):
    """A document model class (pydantic ``BaseModel`` shaped)."""

    def model_validate(self, obj: Any) -> M: ...

    def model_validate_json(self, json_data: str | bytes) -> M: ...
