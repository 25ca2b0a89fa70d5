"""
Move legality for the sliding-tile game: which directions would change the board.
"""

from numpy import ndarray

from tilemerge.core.direction import Direction


def _axis_moves(near: ndarray, far: ndarray) -> tuple[bool, bool]:
    """
    Legality of both moves along one axis.

    Parameters
    ----------
    near : ndarray
        Cells on the low-index side of each neighbouring pair.
    far : ndarray
        Cells on the high-index side of the same pairs.

    Returns
    -------
    tuple[bool, bool]
        Whether moving toward the low-index edge, then toward the high-index edge, changes a lane.
    """
    # ##>: An occupied pair of equal tiles merges whichever way the lane moves.
    mergeable = bool(((near != 0) & (near == far)).any())
    toward_near = mergeable or bool(((near == 0) & (far != 0)).any())
    toward_far = mergeable or bool(((far == 0) & (near != 0)).any())
    return toward_near, toward_far


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board, of any rectangular shape.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the direction changes the board.

    Notes
    -----
    A direction is legal when a tile has an empty neighbour on its target side, or when two adjacent
    tiles along that axis hold the same value. Each axis is scanned once for both of its directions.
    """
    left, right = _axis_moves(state[:, :-1], state[:, 1:])
    up, down = _axis_moves(state[:-1, :], state[1:, :])
    return left, up, right, down


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in ``Direction`` order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Illegal directions, in ``Direction`` order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]
