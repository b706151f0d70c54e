# -*- coding: utf-8 -*-
"""
Research Project Wizard Application Core Module
"""

from .config import Config

__all__ = ["Config"]
