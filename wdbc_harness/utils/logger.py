"""Logging configuration for the evaluation harness."""

import logging
import sys


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Create a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        fmt = logging.Formatter(
            "[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        # Handlers are attached per module logger, keep records off the root.
        logger.propagate = False
    return logger


def set_level(level: int) -> None:
    """Change the level of every harness logger created so far."""
    for name, logger in logging.root.manager.loggerDict.items():
        if not name.startswith("wdbc_harness") or not isinstance(logger, logging.Logger):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
