"""
Server configuration from environment variables (and an optional .env file)
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment once
load_dotenv()

DEFAULT_SERVER_NAME = "ui-museum"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SEARCH_LIMIT = 20
DEFAULT_SUGGEST_LIMIT = 10


@dataclass(frozen=True)
class ServerConfig:
    server_name: str = DEFAULT_SERVER_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    search_limit: int = DEFAULT_SEARCH_LIMIT     # tool-level default result limit
    suggest_limit: int = DEFAULT_SUGGEST_LIMIT


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default


def get_config() -> ServerConfig:
    """Read the current configuration"""
    return ServerConfig(
        server_name=os.getenv("UI_MUSEUM_SERVER_NAME", DEFAULT_SERVER_NAME),
        log_level=os.getenv("UI_MUSEUM_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        search_limit=_int_env("UI_MUSEUM_SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT),
        suggest_limit=_int_env("UI_MUSEUM_SUGGEST_LIMIT", DEFAULT_SUGGEST_LIMIT),
    )
