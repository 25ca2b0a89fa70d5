from unittest import TestCase, main

import numpy as np

from tilemerge.core.direction import Direction, traversal
from tilemerge.core.gamemove import illegal_actions, legal_actions, legal_actions_mask
from tilemerge.core.transition import apply


class TestGameMove(TestCase):
    def test_illegal_actions(self):
        """
        Test if illegal actions are correctly identified.
        """
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        illegal = illegal_actions(board)
        self.assertEqual(illegal, [Direction.LEFT])

    def test_legal_actions(self):
        """
        Test if legal actions are correctly identified.
        """
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_actions(board)
        self.assertEqual(legal, [Direction.UP, Direction.RIGHT, Direction.DOWN])

    def test_dead_board_has_no_legal_action(self):
        """
        Test that a full board without equal neighbours has no legal action.
        """
        board = np.array([[2, 4], [8, 16]])
        self.assertEqual(legal_actions(board), [])
        self.assertEqual(illegal_actions(board), list(Direction))

    def test_mask_agrees_with_transition(self):
        """
        Test that the vectorised mask matches whether a move changes the board.
        """
        rng = np.random.default_rng(0)
        for shape in [(4, 4)] * 50 + [(2, 3), (1, 4), (4, 1), (1, 1)] * 10:
            board = rng.choice([0, 2, 4, 8], size=shape).astype(np.int64)
            mask = legal_actions_mask(board)
            for direction in Direction:
                self.assertEqual(mask[direction], apply(board.copy(), direction).changed)


class TestDirection(TestCase):
    def test_from_name(self):
        """
        Test that directions are found by name, ignoring case.
        """
        self.assertIs(Direction.from_name("left"), Direction.LEFT)
        self.assertIs(Direction.from_name(" Down "), Direction.DOWN)
        with self.assertRaises(ValueError):
            Direction.from_name("north")

    def test_coerce(self):
        """
        Test that codes, names and members are accepted.
        """
        self.assertIs(Direction.coerce(1), Direction.UP)
        self.assertIs(Direction.coerce("right"), Direction.RIGHT)
        self.assertIs(Direction.coerce(Direction.DOWN), Direction.DOWN)
        with self.assertRaises(ValueError):
            Direction.coerce(7)

    def test_traversal_parameters(self):
        """
        Test axis and traversal order of every direction.
        """
        self.assertTrue(traversal(Direction.LEFT).along_row)
        self.assertTrue(traversal(Direction.RIGHT).along_row)
        self.assertFalse(traversal(Direction.UP).along_row)
        self.assertFalse(traversal(Direction.DOWN).along_row)

        self.assertEqual(list(traversal(Direction.LEFT).order(4)), [0, 1, 2, 3])
        self.assertEqual(list(traversal(Direction.DOWN).order(3)), [2, 1, 0])

        for direction in Direction:
            moves = traversal(direction)
            self.assertEqual(moves.step_toward_target, -moves.step_away_from_target)


if __name__ == '__main__':
    main()
