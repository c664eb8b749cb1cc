"""Circular package configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_FORMATS = frozenset({"text", "json"})


def _str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    return value if value else default


def _optional_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _format(name: str, default: str) -> str:
    value = _str(name, default).lower()
    return value if value in _LOG_FORMATS else default


@dataclass(frozen=True, slots=True)
class CircularConfig:
    """Immutable logging configuration for the circular package."""

    log_level: str = "INFO"
    log_format: str = "text"  # text|json
    log_file: str | None = None
    log_file_format: str = "json"  # text|json


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("CIRCULAR_LOG_LEVEL")
    if value is None or not value.strip():
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper() or default


def load_circular_config() -> CircularConfig:
    """Load immutable configuration from env vars."""
    return CircularConfig(
        log_level=resolve_log_level_name(default="INFO"),
        log_format=_format("CIRCULAR_LOG_FORMAT", "text"),
        log_file=_optional_str("CIRCULAR_LOG_FILE"),
        log_file_format=_format("CIRCULAR_LOG_FILE_FORMAT", "json"),
    )
