"""Decode whole documents into pydantic models that embed string-encoded fields."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from stringtypes.core.config import DecodeSettings
from stringtypes.core.exceptions import DocumentDecodeError, ParseError
from stringtypes.core.types import JsonPayload

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def decode_document(
    model_cls: type[M],
    payload: JsonPayload,
    settings: DecodeSettings | None = None,
) -> M:
    """Decode ``payload`` into ``model_cls``.

    Args:
        model_cls: Target pydantic model.
        payload: A mapping, or a JSON document as ``str`` or ``bytes``.
        settings: Supplies the text encoding for ``bytes`` payloads.

    Raises:
        DocumentDecodeError: if any field fails to decode. The pydantic
            ``ValidationError`` is chained as ``__cause__``.
    """
    if settings is None:
        settings = DecodeSettings()

    try:
        if isinstance(payload, bytes):
            return model_cls.model_validate_json(payload.decode(settings.document_encoding))
        if isinstance(payload, str):
            return model_cls.model_validate_json(payload)
        return model_cls.model_validate(payload)
    except LookupError as exc:
        logger.warning("Unknown document encoding %r for %s", settings.document_encoding, model_cls.__name__)
        raise DocumentDecodeError(
            model_cls.__name__,
            [{"type": "unknown_encoding", "loc": (), "msg": str(exc)}],
        ) from exc
    except UnicodeDecodeError as exc:
        logger.warning("Document for %s is not valid %s", model_cls.__name__, settings.document_encoding)
        raise DocumentDecodeError(
            model_cls.__name__,
            [{"type": "unicode_decode", "loc": (), "msg": str(exc)}],
        ) from exc
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        parse_errors = _parse_errors(errors)
        logger.warning(
            "Failed to decode %s: %d field error(s), %d parse error(s)",
            model_cls.__name__,
            len(errors),
            len(parse_errors),
        )
        raise DocumentDecodeError(model_cls.__name__, errors, parse_errors) from exc


def _parse_errors(errors: list[Any]) -> list[ParseError]:
    """Collect the ``ParseError`` behind each pydantic ``value_error``."""
    found: list[ParseError] = []
    for error in errors:
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, ParseError):
            found.append(cause)
    return found
