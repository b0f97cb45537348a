"""Core utilities for the Users API.

    from core import get_logger, set_wide_event_field
"""

from core.logger import get_logger
from core.wide_event import set_wide_event_field

__all__ = [
    "get_logger",
    "set_wide_event_field",
]
