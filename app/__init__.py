# -*- coding: utf-8 -*-
"""
Page Wizard Application Core Module
"""

from .config import Config

__all__ = ["Config"]
