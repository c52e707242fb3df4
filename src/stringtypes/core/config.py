"""Library configuration using pydantic-settings."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class DecodeSettings(BaseSettings):
    """Settings for the document decoding adapter."""

    model_config = {"env_prefix": "STRINGTYPES_"}

    log_level: str = "WARNING"
    document_encoding: str = "utf-8"


def configure_logging(settings: DecodeSettings | None = None) -> logging.Logger:
    """Apply ``log_level`` to the package logger and return it."""
    if settings is None:
        settings = DecodeSettings()
    logger = logging.getLogger("stringtypes")
    logger.setLevel(settings.log_level.upper())
    return logger
