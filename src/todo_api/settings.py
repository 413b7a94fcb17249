from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

_DEFAULT_HOST = "0.0.0.0"
_DEFAULT_PORT = 3001
_DEFAULT_CORS_ORIGIN = "http://localhost:3000"
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - HOST: bind address for the server entry point. Default '0.0.0.0'
    - PORT: bind port. Default 3001
    - APP_ENV: 'development' (default), 'production' or 'test'; NODE_ENV is read when unset
    - CORS_ORIGIN: comma-separated list of allowed origins; '*' allows any.
      Default 'http://localhost:3000'
    - LOG_LEVEL: explicit log level; derived from APP_ENV when unset
    """

    host: str
    port: int
    app_env: str
    cors_origins: List[str]
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def allow_all_origins(self) -> bool:
        return self.cors_origins == ["*"] or len(self.cors_origins) == 0


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int = _DEFAULT_PORT) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        logger.warning("Invalid PORT value '%s', using default=%s", value, default)
        return default
    if not 0 < port < 65536:
        logger.warning("PORT %s out of range, using default=%s", port, default)
        return default
    return port


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


def _resolve_log_level(raw: Optional[str], app_env: str) -> str:
    if raw:
        level = raw.strip().upper()
        if level in _LOG_LEVELS:
            return level
        logger.warning("Unknown LOG_LEVEL '%s', falling back to APP_ENV default", raw)
    return "INFO" if app_env == "production" else "DEBUG"


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    app_env = _get_env("APP_ENV", _get_env("NODE_ENV", "development")).strip().lower()
    return Settings(
        host=_get_env("HOST", _DEFAULT_HOST).strip(),
        port=_parse_port(_get_env("PORT", str(_DEFAULT_PORT))),
        app_env=app_env,
        cors_origins=_parse_origins(_get_env("CORS_ORIGIN", _DEFAULT_CORS_ORIGIN)),
        log_level=_resolve_log_level(os.getenv("LOG_LEVEL"), app_env),
    )
