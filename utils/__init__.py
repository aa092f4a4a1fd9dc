# -*- coding: utf-8 -*-
"""
Page Wizard Utility Module
"""

from .logger import get_logger, setup_logger, set_level
from .helpers import get_in, set_in, is_empty_value

__all__ = [
    "get_logger",
    "setup_logger",
    "set_level",
    "get_in",
    "set_in",
    "is_empty_value",
]
