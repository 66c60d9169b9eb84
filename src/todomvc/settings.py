from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - APP_HOST: bind address used by `python -m todomvc`. Default '127.0.0.1'
    - APP_PORT: bind port. Default 8080
    - LOG_LEVEL: DEBUG, INFO (default), WARNING or ERROR
    - LOG_FILE: optional path of a rotating log file; stdout only when unset
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    """

    host: str
    port: int
    log_level: int
    log_file: Optional[str]
    cors_allow_origins: List[str]


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_int(value: str, default: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    port = _parse_int(_get_env("APP_PORT", "8080"), 8080)
    if not (0 < port < 65536):
        port = 8080

    level_name = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if level_name not in _LOG_LEVELS:
        # Fallback to INFO if unsupported
        level_name = "INFO"

    log_file = os.getenv("LOG_FILE", "").strip() or None

    return Settings(
        host=_get_env("APP_HOST", "127.0.0.1").strip(),
        port=port,
        log_level=getattr(logging, level_name),
        log_file=log_file,
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
    )
