# -*- coding: utf-8 -*-
"""
Play the sliding-tile game with the arrow keys.
"""
import argparse
import logging
from typing import Any

from tilemerge import Direction, GameOverError, SlidingTileGame
from tilemerge.utils import WindowBoard

_logger = logging.getLogger(__name__)


def redraw(game: SlidingTileGame, window: WindowBoard):
    """
    Redraw the game board with the current score.

    Parameters
    ----------
    game: SlidingTileGame
        The game to draw

    window: WindowBoard
        Class to draw the game board
    """
    window.show_image(game.board, title=f"Score: {game.score}")


def reset(game: SlidingTileGame, window: WindowBoard):
    """
    Reset and redraw the game board.
    """
    game.reset()
    redraw(game, window)


def step(game: SlidingTileGame, window: WindowBoard, direction: Direction):
    """
    Apply a move to the game and redraw.

    Parameters
    ----------
    game: SlidingTileGame
        The game

    window: WindowBoard
        Class to draw the game board

    direction: Direction
        Direction to move
    """
    try:
        _, gained, finished = game.step(direction)
    except GameOverError as error:
        _logger.info("%s, press backspace to restart", error)
        return

    if gained:
        _logger.info("gained=%d score=%d", gained, game.score)
    redraw(game, window)
    if finished:
        print(f"Game over! Score: {game.score}")


def key_handler(game: SlidingTileGame, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: SlidingTileGame
        The game

    window: WindowBoard
        Class to draw the game board

    event: Any
        Key event, with a ``key`` attribute
    """
    _logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(game, window)
        return None

    if event.key in game.ACTIONS:
        step(game, window, game.ACTIONS[event.key])
        return None


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the sliding-tile merge game.")
    parser.add_argument("--rows", type=int, default=4, help="Number of rows of the board")
    parser.add_argument("--cols", type=int, default=4, help="Number of columns of the board")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible tile spawns")
    parser.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity"
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    env = SlidingTileGame(rows=args.rows, cols=args.cols, seed=args.seed)

    window_board = WindowBoard(title="Sliding Tiles", rows=env.config.rows, cols=env.config.cols)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    redraw(env, window_board)

    # Blocking event loop
    window_board.show(block=True)
