"""
Utility helpers shared across vtag packages.
"""

from .logging import configure_logging, get_logger, time_call
from .naming import to_underscore_case

__all__ = ["configure_logging", "get_logger", "time_call", "to_underscore_case"]
