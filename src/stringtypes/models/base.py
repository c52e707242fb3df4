"""Generic wrapper for values that arrive quoted as strings.

A wrapper starts at its zero value, is populated by ``decode`` from the raw
string token of a document field, and is read through ``value()``. Subclasses
supply only ``zero`` and ``parse``.

The class doubles as a pydantic field type::

    class ServerConfig(BaseModel):
        timeout: StringDuration
        max_body: StringBinaryByteSize

    ServerConfig.model_validate_json('{"timeout": "1h30m", "max_body": "1.5G"}')
"""

from __future__ import annotations

import json
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from stringtypes.core.exceptions import ParseError

T = TypeVar("T")


class StringEncoded(Generic[T]):
    """A single native value decoded from a string token."""

    __slots__ = ("_value",)

    example: ClassVar[str] = ""

    def __init__(self, value: T | None = None) -> None:
        self._value: T = self.zero() if value is None else value

    @classmethod
    def zero(cls) -> T:
        raise NotImplementedError

    @classmethod
    def parse(cls, token: str) -> T:
        """Convert ``token`` into the native value or raise ``ParseError``."""
        raise NotImplementedError

    @classmethod
    def from_string(cls, raw: Any) -> Self:
        instance = cls()
        instance.decode(raw)
        return instance

    def decode(self, raw: Any) -> None:
        """Populate the wrapper from ``raw``, which must be a ``str``.

        On failure the stored value is left untouched.
        """
        if not isinstance(raw, str):
            raise ParseError(type(self).__name__, raw, f"expected a string, got {type(raw).__name__}")
        self._value = self.parse(raw)

    def unmarshal_json(self, data: str | bytes) -> None:
        """Populate the wrapper from a JSON fragment such as ``b'"1h30m"'``."""
        try:
            raw = json.loads(data)
        except ValueError as exc:
            raise ParseError(type(self).__name__, data, "malformed JSON") from exc
        self.decode(raw)

    def value(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    # -- pydantic integration ------------------------------------------------

    @classmethod
    def _validate(cls, raw: Any) -> Self:
        # each model owns its wrappers, so existing instances are copied
        if isinstance(raw, cls):
            return cls(raw.value())
        return cls.from_string(raw)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(cls._validate)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema: JsonSchemaValue = {"type": "string"}
        if cls.example:
            json_schema["examples"] = [cls.example]
        return json_schema
