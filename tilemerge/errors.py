"""Exceptions raised by the tilemerge package."""


class TileMergeError(Exception):
    """Base class for all tilemerge errors."""


class InvalidBoardError(TileMergeError, ValueError):
    """Board has an invalid shape or holds a value that is not a tile."""


class GameOverError(TileMergeError):
    """A move was requested on a game that has no legal move left."""
