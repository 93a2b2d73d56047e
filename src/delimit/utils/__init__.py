"""Utility modules for delimit.

Provides:
- logger: get_logger for namespaced logging
"""

from delimit.utils.logger import get_logger

__all__ = ["get_logger"]
