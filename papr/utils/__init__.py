"""Utility functions"""

from .line_utils import is_blank, line_at, next_line
from .logging_utils import setup_logging

__all__ = ["next_line", "line_at", "is_blank", "setup_logging"]
