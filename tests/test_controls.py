"""
Tests for the keyboard handling of the manual play script.
"""

from types import SimpleNamespace
from unittest import TestCase, main
from unittest.mock import MagicMock, patch

import numpy as np

from manuals_control import key_handler, parse_args
from tilemerge.envs import SlidingTileGame
from tilemerge.utils import WindowBoard


class TestKeyHandler(TestCase):
    """Key presses drive the game and the window."""

    def setUp(self):
        self.game = SlidingTileGame(seed=1)
        self.window = MagicMock()

    def press(self, key: str):
        key_handler(self.game, self.window, SimpleNamespace(key=key))

    def test_arrow_moves_and_redraws(self):
        """Arrow keys move tiles and redraw the board."""
        self.game.load([[0, 0, 2, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.press("left")

        self.assertEqual(self.game.score, 4)
        self.window.show_image.assert_called_once()
        drawn = self.window.show_image.call_args.args[0]
        self.assertEqual(drawn[0, 0], 4)

    def test_escape_closes_window(self):
        """Escape closes the window."""
        self.press("escape")
        self.window.close.assert_called_once()

    def test_backspace_resets(self):
        """Backspace starts a new game."""
        self.game.load([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.press("left")
        self.press("backspace")

        self.assertEqual(self.game.score, 0)
        self.assertEqual(np.count_nonzero(self.game.board), 1)

    def test_unknown_key_is_ignored(self):
        """Other keys neither move nor redraw."""
        before = self.game.board
        self.press("q")

        np.testing.assert_array_equal(self.game.board, before)
        self.window.show_image.assert_not_called()
        self.window.close.assert_not_called()

    def test_key_on_finished_game(self):
        """A move on a finished game is ignored without redraw."""
        self.game.load([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.press("up")
        self.window.show_image.assert_not_called()


class TestWindowBoard(TestCase):
    """Window calls, with pyplot replaced by a mock."""

    def setUp(self):
        patcher = patch("tilemerge.utils.windows.plt")
        self.plt = patcher.start()
        self.addCleanup(patcher.stop)
        self.plt.subplots.return_value = (MagicMock(), MagicMock())
        self.window = WindowBoard(title="Sliding Tiles", rows=2, cols=3)

    def test_one_cell_per_tile(self):
        """A cell and a text are created for each tile of a rectangular board."""
        self.assertEqual(len(self.window.axes), 6)
        self.assertEqual(len(self.window.texts), 6)

    def test_show_on_instance(self):
        """Non-blocking show enables interactive mode before showing."""
        self.window.show(block=False)
        self.plt.ion.assert_called_once()
        self.plt.show.assert_called_once()

    def test_close(self):
        """Close shuts this figure and marks the window closed."""
        self.window.close()
        self.plt.close.assert_called_once_with(self.window.fig)
        self.assertTrue(self.window.closed)


class TestArguments(TestCase):
    def test_defaults(self):
        args = parse_args([])
        self.assertEqual((args.rows, args.cols, args.seed, args.log_level), (4, 4, None, "INFO"))

    def test_custom_board(self):
        args = parse_args(["--rows", "3", "--cols", "6", "--seed", "9", "--log-level", "DEBUG"])
        self.assertEqual((args.rows, args.cols, args.seed, args.log_level), (3, 6, 9, "DEBUG"))


if __name__ == '__main__':
    main()
