"""
Configuration of a sliding-tile game.
"""

from dataclasses import dataclass, field

from tilemerge.core.gameboard import TILE_SPAWN_PROBS, check_spawn_probs
from tilemerge.errors import InvalidBoardError


@dataclass
class GameConfig:
    """
    Parameters of a game.

    Defaults follow the reference console game: a 4x4 board that starts with a single tile.
    """

    # ##>: Board shape.
    rows: int = 4
    cols: int = 4

    # ##>: Tiles spawned by a reset.
    initial_tiles: int = 1

    # ##>: Probability of each spawned tile value.
    spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))

    # ##>: Seed of the game generator, None for a fresh one.
    seed: int | None = None

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise InvalidBoardError(f'Board dimensions must be at least 1x1, got {self.rows}x{self.cols}')
        if not 1 <= self.initial_tiles <= self.rows * self.cols:
            raise ValueError(f'initial_tiles must be between 1 and {self.rows * self.cols}, got {self.initial_tiles}')
        check_spawn_probs(self.spawn_probs)
