"""Utility modules for coolex.

Provides:
- logger: get_logger for logging
"""

from coolex.utils.logger import get_logger

__all__ = ["get_logger"]
