"""Utility modules for fuzzyml.

Provides:
- logger: get_logger for logging
"""

from fuzzyml.utils.logger import get_logger

__all__ = ["get_logger"]
