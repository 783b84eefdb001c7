"""Utility functions for the project."""

import logging
import os
from typing import Optional, Union


def setup_logger(
    name: str, level: Optional[Union[int, str]] = None
) -> logging.Logger:
    """Attach a stream handler to the named logger. The level defaults to the
    LOGLEVEL environment variable, or WARNING when it is unset.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = os.environ.get("LOGLEVEL", "WARNING")
    logger.setLevel(level)

    if not logger.handlers:  # Prevent duplicate handlers on reload
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
