"""Sliding-tile game controller: owns the board, spawns tiles and keeps the score."""

import logging
from collections.abc import Sequence
from dataclasses import replace

from numpy import ndarray
from numpy.random import default_rng

from tilemerge.config import GameConfig
from tilemerge.core.direction import Direction
from tilemerge.core.gameboard import as_board, fill_cells, is_done, max_tile, new_board
from tilemerge.core.transition import apply
from tilemerge.errors import GameOverError, InvalidBoardError

_logger = logging.getLogger(__name__)


class SlidingTileGame:
    """
    Sliding-tile merge game.

    This class drives a game: it initializes the board, applies moves, spawns a new tile after every move
    that changed the board and accumulates the score.
    """

    # ##: All Actions.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(self, config: GameConfig | None = None, **overrides):
        """
        Initialize the game board.

        Parameters
        ----------
        config : GameConfig, optional
            Game parameters (default is a 4x4 board).
        **overrides
            Fields replacing those of ``config``, e.g. ``rows=3``.

        Raises
        ------
        InvalidBoardError
            If the board dimensions are invalid.
        """
        if config is None:
            config = GameConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self.config = config

        self._rng = default_rng(config.seed)
        self._board: ndarray = new_board(config.rows, config.cols)
        self._score = 0
        self._moves = 0
        self._finished = False

        self.reset()

    @property
    def board(self) -> ndarray:
        """Copy of the current board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        """Score accumulated since the last reset."""
        return self._score

    @property
    def moves(self) -> int:
        """Number of moves that changed the board since the last reset."""
        return self._moves

    @property
    def max_tile(self) -> int:
        """Highest tile on the board."""
        return max_tile(self._board)

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no direction changes the board, False otherwise.

        Notes
        -----
        The check runs when the board is replaced or moved, not on every read.
        """
        return self._finished

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with ``config.initial_tiles`` random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the game generator for a reproducible game.

        Returns
        -------
        ndarray
            Copy of the new board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._board = new_board(self.config.rows, self.config.cols)
        fill_cells(self._board, self.config.initial_tiles, spawn_probs=self.config.spawn_probs, rng=self._rng)
        self._score = 0
        self._moves = 0
        self._finished = is_done(self._board)
        return self.board

    def load(self, cells: Sequence[Sequence[int]] | ndarray) -> ndarray:
        """
        Replace the board, keeping the score.

        Parameters
        ----------
        cells : sequence of sequences or ndarray
            The new board, with the configured dimensions.

        Returns
        -------
        ndarray
            Copy of the loaded board.

        Raises
        ------
        InvalidBoardError
            If the board is malformed or its shape differs from the configuration.
        """
        board = as_board(cells)
        expected = (self.config.rows, self.config.cols)
        if board.shape != expected:
            raise InvalidBoardError(f'Expected a board of shape {expected}, got {board.shape}')
        self._board = board
        self._finished = is_done(board)
        return self.board

    def step(self, action: Direction | int | str) -> tuple[ndarray, int, bool]:
        """
        Apply a move to the board.

        Parameters
        ----------
        action : Direction, int or str
            The direction to move, as a ``Direction``, its code or its name.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - Copy of the updated board (ndarray)
            - The score gained by this move (int)
            - Whether the game has finished after this move (bool)

        Raises
        ------
        GameOverError
            If the game was already finished.

        Notes
        -----
        - A new tile is added only when the move changed the board.
        - A move that changes nothing is not counted and gains nothing.
        """
        direction = Direction.coerce(action)
        if self._finished:
            raise GameOverError(f'No move left, final score {self._score}')

        result = apply(self._board, direction)
        if result.changed:
            fill_cells(self._board, number_tile=1, spawn_probs=self.config.spawn_probs, rng=self._rng)
            self._score += result.score_gained
            self._moves += 1
            self._finished = is_done(self._board)
        _logger.debug(
            'Move %s: changed=%s, gained=%d, score=%d', direction.name, result.changed, result.score_gained, self._score
        )

        done = self._finished
        if done:
            _logger.info('Game over after %d moves: score=%d, max tile=%d', self._moves, self._score, self.max_tile)
        return self.board, result.score_gained, done

    def render(self) -> None:
        """
        Render the game board. This method prints the current board and score to the console.
        """
        width = max(len(str(self.max_tile)), 1) + 1
        for row in self._board.tolist():
            print(''.join(f'{value or ".":>{width}}' for value in row))
        print(f'Score: {self._score}')
