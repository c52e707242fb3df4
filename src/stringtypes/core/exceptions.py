"""stringtypes exception hierarchy."""

from __future__ import annotations

from typing import Any


class StringTypesError(Exception):
    """Base exception for all stringtypes errors."""


class ParseError(StringTypesError, ValueError):
    """A string-encoded token could not be decoded into its native value."""

    def __init__(self, func: str, value: Any, reason: str) -> None:
        self.func = func
        self.value = value
        self.reason = reason
        super().__init__(f"{func}: parsing {value!r}: {reason}")


class DocumentDecodeError(StringTypesError):
    """A document failed to decode into its model."""

    def __init__(
        self,
        model_name: str,
        errors: list[dict[str, Any]],
        parse_errors: list[ParseError] | None = None,
    ) -> None:
        self.model_name = model_name
        self.errors = errors
        self.parse_errors = parse_errors or []
        super().__init__(f"Failed to decode {model_name}: {len(errors)} field error(s)")
