"""
Entry point for running as: python -m ui_museum_mcp
"""

import asyncio
import logging
import sys

from .config import get_config
from .server import main


def configure_logging(level_name: str):
    # stdout carries the MCP stdio protocol
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level > logging.DEBUG:
        logging.getLogger("mcp").setLevel(logging.WARNING)


def run():
    configure_logging(get_config().log_level)
    asyncio.run(main())


if __name__ == "__main__":
    run()
