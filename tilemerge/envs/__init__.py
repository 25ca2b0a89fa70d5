# -*- coding: utf-8 -*-
"""
Python implementation of the sliding-tile merge game.

This module provides the `SlidingTileGame` class, which owns the game board and drives a game.
"""

from .game import SlidingTileGame

__all__ = ["SlidingTileGame"]
