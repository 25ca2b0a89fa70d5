"""
Grid transition: slide every tile toward one edge and merge equal neighbours once.
"""

from typing import NamedTuple

from numpy import ndarray

from tilemerge.core.direction import Direction, Traversal, traversal


class TransitionResult(NamedTuple):
    """
    Outcome of a single transition.

    Attributes
    ----------
    changed : bool
        True if any tile moved or merged.
    score_gained : int
        Sum of the values created by merges during this call.
    """

    changed: bool
    score_gained: int


def _transition_lane(lane: ndarray, moves: Traversal) -> tuple[bool, int]:
    """
    Slide and merge one lane in place.

    Parameters
    ----------
    lane : ndarray
        A 1D view on one row or column of the board. **Modified in-place.**
    moves : Traversal
        Traversal parameters of the chosen direction.

    Returns
    -------
    changed : bool
        Whether the lane was modified.
    score : int
        Score gained by merges in this lane.
    """
    length = lane.shape[0]
    drop = moves.step_toward_target
    changed = False
    score = 0

    # ##>: Destination of the last merge; it cannot absorb another tile in this pass.
    merged_at = -1

    for j in moves.order(length):
        value = lane[j]
        if value == 0:
            continue

        # ##: Probe toward the target edge while cells are empty.
        new_j = j + drop
        while 0 <= new_j < length and lane[new_j] == 0:
            new_j += drop

        if 0 <= new_j < length and new_j != merged_at and lane[new_j] == value:
            merged = int(value) * 2
            lane[new_j] = merged
            lane[j] = 0
            merged_at = new_j
            changed = True
            score += merged
            continue

        # ##: Rest on the last empty cell before the halting point.
        rest = new_j - drop
        if rest != j:
            lane[rest] = value
            lane[j] = 0
            changed = True

    return changed, score


def apply(board: ndarray, direction: Direction | int) -> TransitionResult:
    """
    Slide and merge all tiles of the board toward one edge.

    Parameters
    ----------
    board : ndarray
        2D game board, 0 for empty cells. **Modified in-place.**
    direction : Direction or int
        The direction tiles move toward.

    Returns
    -------
    TransitionResult
        Whether the board changed and the score gained by merges.

    Notes
    -----
    - Every lane (a row for left/right, a column for up/down) is processed independently.
    - Tiles are processed from the target edge outward; a merged tile never merges again in the same call.
    - Pass ``board.copy()`` to keep the original board.
    """
    moves = traversal(Direction(direction))

    # ##>: Rows of the transposed view are the columns of the board, sharing memory.
    lanes = board if moves.along_row else board.T

    changed = False
    score = 0
    for lane in lanes:
        lane_changed, lane_score = _transition_lane(lane, moves)
        changed = changed or lane_changed
        score += lane_score

    return TransitionResult(changed=changed, score_gained=score)
