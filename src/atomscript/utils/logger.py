"""Minimal logging utilities for AtomScript.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from atomscript.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "atomscript." prefix.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("repl").name
        'atomscript.repl'
    """
    if not (name == "atomscript" or name.startswith("atomscript.")):
        name = f"atomscript.{name}"
    return logging.getLogger(name)
