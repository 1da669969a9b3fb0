"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a sortable path component.

    Example:
        now()
        # "20261019_184540"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
