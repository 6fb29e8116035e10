"""
Logging setup for applications embedding jresponse.

The library only creates module loggers; handlers are installed
by the embedding application through setup_logging().
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from jresponse.core.config import get_settings


def setup_logging(
    level: str | None = None,
    debug: bool | None = None,
    console: Console | None = None,
) -> None:
    """
    Configure root logging with a rich handler.

    Args:
        level: Log level name (defaults to settings.log_level)
        debug: Force DEBUG level and show source paths (defaults to settings.debug)
        console: Rich console to log to (defaults to stderr)
    """
    settings = get_settings()
    if debug is None:
        debug = settings.debug

    level_name = "DEBUG" if debug else (level or settings.log_level)
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console or Console(stderr=True),
                show_path=debug,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )
