"""
Move directions for the sliding-tile game and the lane traversal each one implies.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class Direction(IntEnum):
    """
    Direction in which tiles slide.

    The integer codes double as action codes for the game controller.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_name(cls, name: str) -> 'Direction':
        """
        Look up a direction by name.

        Parameters
        ----------
        name : str
            One of ``left``, ``up``, ``right``, ``down`` (case-insensitive).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name does not match any direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'Unknown direction: {name!r}') from None

    @classmethod
    def coerce(cls, value: 'Direction | int | str') -> 'Direction':
        """Accept a direction, its integer code or its name."""
        if isinstance(value, str):
            return cls.from_name(value)
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f'Unknown direction code: {value!r}') from None


@dataclass(frozen=True)
class Traversal:
    """
    How a lane is walked for a given direction.

    Attributes
    ----------
    along_row : bool
        True when tiles slide along rows (left/right), False for columns (up/down).
    step_toward_target : int
        Index step taken while probing toward the target edge (the drop step).
    step_away_from_target : int
        Index step taken by the traversal, from the target edge toward the far edge.
    """

    along_row: bool
    step_toward_target: int
    step_away_from_target: int

    def order(self, length: int) -> Iterator[int]:
        """Yield inner indices of a lane of ``length`` cells, starting at the target edge."""
        if self.step_away_from_target > 0:
            return iter(range(length))
        return iter(range(length - 1, -1, -1))


# ##>: Traversal parameters of each direction.
_TRAVERSALS: dict[Direction, Traversal] = {
    Direction.LEFT: Traversal(along_row=True, step_toward_target=-1, step_away_from_target=1),
    Direction.UP: Traversal(along_row=False, step_toward_target=-1, step_away_from_target=1),
    Direction.RIGHT: Traversal(along_row=True, step_toward_target=1, step_away_from_target=-1),
    Direction.DOWN: Traversal(along_row=False, step_toward_target=1, step_away_from_target=-1),
}


def traversal(direction: Direction) -> Traversal:
    """
    Get the traversal parameters for a direction.

    Parameters
    ----------
    direction : Direction
        The move direction.

    Returns
    -------
    Traversal
        Axis and step parameters for walking each lane.
    """
    return _TRAVERSALS[direction]
