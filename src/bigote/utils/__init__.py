"""Utility modules for Bigote.

Provides:
- logger: get_logger for logging
"""

from bigote.utils.logger import get_logger

__all__ = ["get_logger"]
