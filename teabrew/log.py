"""Logging setup for the tea timer."""

import logging
from typing import Optional

from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Configure the root logger.

    Records go to Textual's log so they never draw over the running UI,
    and also to *log_file* when one is given.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path of a file to append records to.
    """
    handlers: list = [TextualHandler()]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        handlers=handlers,
        force=True,
    )
