"""
Logging setup for procedural_noise.

Every module logs through `logging.getLogger(__name__)`; those loggers live
under LOGGER_NAME and propagate to it, so one call configures them all:

    from procedural_noise import setup_logger
    setup_logger(logging.DEBUG)   # shows clamp and fallback messages
"""

import logging
import sys

# Centralized logger name (package root, so module loggers propagate to it)
LOGGER_NAME = "procedural_noise"

def get_logger() -> logging.Logger:
    """Get the standard logger for procedural_noise."""
    return logging.getLogger(LOGGER_NAME)

def setup_logger(level=logging.INFO):
    """
    Configure the procedural_noise logger.

    Args:
        level: Logging level (default: INFO)
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to prevent duplicates
    if logger.handlers:
        logger.handlers.clear()

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)

    # Format: [procedural_noise] [Level] Message
    formatter = logging.Formatter(f'[{LOGGER_NAME}] [%(levelname)s] %(message)s')
    ch.setFormatter(formatter)

    logger.addHandler(ch)

    return logger
