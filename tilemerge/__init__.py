# -*- coding: utf-8 -*-
"""
Sliding-tile merge puzzle engine.

Tiles on a rectangular grid slide toward one edge and equal neighbours merge once per move. The package
provides the grid transition, board helpers, move legality and a game controller.
"""

from .config import GameConfig
from .core import Direction, TransitionResult, apply, as_board, is_done, legal_actions, new_board
from .envs import SlidingTileGame
from .errors import GameOverError, InvalidBoardError, TileMergeError

__all__ = [
    "Direction",
    "TransitionResult",
    "apply",
    "new_board",
    "as_board",
    "is_done",
    "legal_actions",
    "GameConfig",
    "SlidingTileGame",
    "TileMergeError",
    "InvalidBoardError",
    "GameOverError",
]
