# -*- coding: utf-8 -*-
"""
Research Project Wizard Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import to_isoformat, parse_date, add_days

__all__ = [
    "get_logger",
    "setup_logger",
    "to_isoformat",
    "parse_date",
    "add_days",
]
