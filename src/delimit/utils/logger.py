"""Logging helper for delimit.

Every module asks for its logger through get_logger so that all records land
under the ``delimit`` namespace. The library never installs handlers.

Example:
    >>> from delimit.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("flushing %d openers", 2)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger under the ``delimit.`` prefix.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("scanner").name
        'delimit.scanner'
        >>> get_logger("delimit.parser").name
        'delimit.parser'
    """
    if not (name == "delimit" or name.startswith("delimit.")):
        name = f"delimit.{name}"
    return logging.getLogger(name)
