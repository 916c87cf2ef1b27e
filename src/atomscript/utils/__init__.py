"""Utility modules for AtomScript.

Provides:
- logger: get_logger for logging
"""

from atomscript.utils.logger import get_logger

__all__ = ["get_logger"]
