# -*- coding: utf-8 -*-
"""
Core logic of the sliding-tile merge game.

It includes the grid transition that slides and merges tiles, the move directions, board construction
and validation, tile spawning, after states, move legality and game-over detection.
"""

from .direction import Direction, Traversal, traversal
from .gameboard import (
    TILE_SPAWN_PROBS,
    after_state,
    as_board,
    board_sum,
    empty_cells,
    fill_cells,
    is_done,
    latent_state,
    max_tile,
    new_board,
    next_state,
)
from .gamemove import illegal_actions, legal_actions, legal_actions_mask
from .transition import TransitionResult, apply

__all__ = [
    "Direction",
    "Traversal",
    "traversal",
    "TransitionResult",
    "apply",
    "TILE_SPAWN_PROBS",
    "new_board",
    "as_board",
    "empty_cells",
    "max_tile",
    "board_sum",
    "fill_cells",
    "latent_state",
    "after_state",
    "next_state",
    "is_done",
    "legal_actions",
    "illegal_actions",
    "legal_actions_mask",
]
