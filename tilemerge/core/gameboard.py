"""
Board construction and game flow helpers around the grid transition: validation, tile spawning,
after states and game-over detection.
"""

import logging
from collections.abc import Mapping, Sequence

from numpy import argwhere, asarray, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.core.direction import Direction
from tilemerge.core.transition import TransitionResult, apply
from tilemerge.errors import InvalidBoardError

_logger = logging.getLogger(__name__)

# ##>: Tile spawn probabilities of the reference game (95% for 2, 5% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.95, 4: 0.05}

# ##>: Order in which directions are probed for game over.
PROBE_ORDER = (Direction.DOWN, Direction.UP, Direction.LEFT, Direction.RIGHT)

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


def _is_tile_value(value: int) -> bool:
    """Return True for a power of two greater or equal to 2."""
    return value >= 2 and value & (value - 1) == 0


def new_board(rows: int, cols: int) -> ndarray:
    """
    Create an empty board.

    Parameters
    ----------
    rows : int
        Number of rows, at least 1.
    cols : int
        Number of columns, at least 1.

    Returns
    -------
    ndarray
        A zero-filled ``(rows, cols)`` board of int64.

    Raises
    ------
    InvalidBoardError
        If either dimension is smaller than 1.
    """
    if rows < 1 or cols < 1:
        raise InvalidBoardError(f'Board dimensions must be at least 1x1, got {rows}x{cols}')
    return zeros((rows, cols), dtype=int64)


def as_board(cells: Sequence[Sequence[int]] | ndarray) -> ndarray:
    """
    Build a validated board from nested rows or an existing array.

    Parameters
    ----------
    cells : sequence of sequences or ndarray
        Cell values row by row, 0 for empty cells.

    Returns
    -------
    ndarray
        A new int64 board; the input is never shared.

    Raises
    ------
    InvalidBoardError
        If the rows are ragged, the grid is not 2D or is empty, or a cell is neither 0 nor a power of two >= 2.
    """
    if not isinstance(cells, ndarray):
        try:
            rows = [list(row) for row in cells]
        except TypeError:
            raise InvalidBoardError('Board must be a sequence of rows') from None
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise InvalidBoardError(f'Board rows have different lengths: {sorted(widths)}')
        cells = rows

    board = asarray(cells)
    if board.ndim != 2:
        raise InvalidBoardError(f'Board must be 2D, got {board.ndim} dimension(s)')
    if board.shape[0] < 1 or board.shape[1] < 1:
        raise InvalidBoardError(f'Board dimensions must be at least 1x1, got {board.shape[0]}x{board.shape[1]}')
    if board.dtype.kind not in 'iu':
        raise InvalidBoardError(f'Board cells must be integers, got {board.dtype}')

    board = board.astype(int64)
    for value in board[board != 0].tolist():
        if not _is_tile_value(value):
            raise InvalidBoardError(f'Invalid tile value: {value}')
    return board


def empty_cells(state: ndarray) -> list[tuple[int, int]]:
    """List the ``(row, col)`` positions of empty cells."""
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(state == 0)]


def max_tile(state: ndarray) -> int:
    """Highest tile value on the board, 0 for an empty board."""
    return int(state.max())


def board_sum(state: ndarray) -> int:
    """Sum of all tile values."""
    return int(state.sum())


def check_spawn_probs(spawn_probs: Mapping[int, float]) -> None:
    """
    Validate a tile spawn distribution.

    Raises
    ------
    ValueError
        If the mapping is empty, holds a non-tile key, a negative probability, or does not sum to 1.
    """
    if not spawn_probs:
        raise ValueError('spawn_probs must not be empty')
    for value, prob in spawn_probs.items():
        if not _is_tile_value(int(value)):
            raise ValueError(f'Invalid spawn tile value: {value}')
        if prob < 0:
            raise ValueError(f'Negative spawn probability for tile {value}: {prob}')
    total = sum(spawn_probs.values())
    if abs(total - 1.0) > 1e-9:
        raise ValueError(f'spawn_probs must sum to 1, got {total}')


def fill_cells(
    state: ndarray,
    number_tile: int,
    seed: int | None = None,
    spawn_probs: Mapping[int, float] = TILE_SPAWN_PROBS,
    rng: Generator | None = None,
) -> ndarray:
    """
    Fill empty cells with new tiles.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    seed : int, optional
        Random number generator seed for reproducibility.
    spawn_probs : Mapping[int, float], optional
        Probability of each new tile value.
    rng : Generator, optional
        Generator to draw from; takes precedence over ``seed``.

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    - If there are fewer empty cells than requested, it fills all available cells.
    - **This function mutates the input array.** Pass ``state.copy()`` if the original must be preserved.
    """
    if rng is None:
        rng = default_rng(seed) if seed is not None else _GENERATOR

    available_cells = argwhere(state == 0)
    number_tile = min(number_tile, len(available_cells))

    # ##: Only if there are still available places.
    if number_tile > 0:
        values = rng.choice(list(spawn_probs.keys()), size=number_tile, p=list(spawn_probs.values()))
        chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
        state[tuple(available_cells[chosen_indices].T)] = values
    return state


def latent_state(state: ndarray, direction: Direction | int) -> tuple[ndarray, TransitionResult]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Left untouched.
    direction : Direction or int
        The direction to move.

    Returns
    -------
    new_state : ndarray
        A new board after the move.
    result : TransitionResult
        Whether the move changed the board and the score it gained.
    """
    new_state = state.copy()
    result = apply(new_state, direction)
    return new_state, result


def after_state(
    state: ndarray, spawn_probs: Mapping[int, float] = TILE_SPAWN_PROBS
) -> list[tuple[ndarray, float]]:
    """
    Generate every board that can follow a tile spawn, with its probability.

    Parameters
    ----------
    state : ndarray
        The board after a move, before the spawn.
    spawn_probs : Mapping[int, float], optional
        Probability of each new tile value.

    Returns
    -------
    list of tuple
        ``(board, probability)`` pairs. A full board yields itself with probability 1.
    """
    cells = empty_cells(state)
    if not cells:
        return [(state, 1.0)]

    probable_states = []
    for cell in cells:
        for new_value, prob in spawn_probs.items():
            new_state = state.copy()
            new_state[cell] = new_value
            probable_states.append((new_state, prob / len(cells)))
    return probable_states


def next_state(
    state: ndarray,
    direction: Direction | int,
    seed: int | None = None,
    spawn_probs: Mapping[int, float] = TILE_SPAWN_PROBS,
    rng: Generator | None = None,
) -> tuple[ndarray, int]:
    """
    Compute the next board and the score gained after a move.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Left untouched.
    direction : Direction or int
        The direction to move.
    seed : int, optional
        Random number generator seed for reproducibility.
    spawn_probs : Mapping[int, float], optional
        Probability of each new tile value.
    rng : Generator, optional
        Generator to draw the new tile from.

    Returns
    -------
    new_state : ndarray
        The board after the move and, if the move changed anything, one new tile.
    score : int
        The score gained by merges.
    """
    new_state, result = latent_state(state, direction)
    if not result.changed:
        return new_state, 0

    fill_cells(new_state, number_tile=1, seed=seed, spawn_probs=spawn_probs, rng=rng)
    return new_state, result.score_gained


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Left untouched.

    Returns
    -------
    bool
        True if no direction changes the board.

    Notes
    -----
    Each direction is probed on its own scratch copy; probing stops at the first direction that moves a tile.
    """
    for direction in PROBE_ORDER:
        if apply(state.copy(), direction).changed:
            return False
    _logger.debug('No move left on board of shape %s', state.shape)
    return True
