"""Logging setup. Records go to the Textual dev console, never the terminal UI."""

import logging
from typing import Optional

from textual.logging import TextualHandler


_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", file: Optional[str] = None) -> logging.Logger:
    """Configure the ``eduroamlog`` logger tree.

    Safe to call more than once; handlers are replaced, not stacked.
    """
    logger = logging.getLogger("eduroamlog")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(TextualHandler())
    if file:
        file_handler = logging.FileHandler(file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(file_handler)
    logger.propagate = False
    return logger
