"""Runtime configuration read from environment variables.

Environment variables (all optional):
- SHOPADMIN_API_URL: base URL of the catalog store (default http://localhost:3001)
- SHOPADMIN_TIMEOUT: HTTP timeout in seconds (default 10)
- SHOPADMIN_PAGE_SIZE: products per page on the product list (default 10)
- SHOPADMIN_LOG_LEVEL: logging level name (default WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from shopadmin.application.query import DEFAULT_PAGE_SIZE

DEFAULT_API_URL = "http://localhost:3001"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, val, default)
        return default


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, val, default)
        return default


@dataclass(frozen=True)
class Settings:

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            api_url=os.getenv("SHOPADMIN_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=_env_float("SHOPADMIN_TIMEOUT", DEFAULT_TIMEOUT),
            page_size=_env_int("SHOPADMIN_PAGE_SIZE", DEFAULT_PAGE_SIZE),
            log_level=os.getenv("SHOPADMIN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
