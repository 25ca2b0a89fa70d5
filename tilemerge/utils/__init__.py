# -*- coding: utf-8 -*-
"""
Display utilities for the sliding-tile game.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
