# tests/test_board.py

import unittest

from minefield.board import MinefieldBoard
from minefield.errors import CoordinateError, InvalidBoardError


class TestMinefieldBoard(unittest.TestCase):

    def test_board_dimensions(self):
        board = MinefieldBoard(width=5, height=4, num_bombs=3)
        self.assertEqual(board.mines.shape, (4, 5))
        self.assertEqual(board.count_covered(), 20)

    def test_mine_count(self):
        for width, height, bombs in [(5, 5, 5), (1, 2, 1), (3, 3, 0), (4, 2, 7)]:
            board = MinefieldBoard(width=width, height=height, num_bombs=bombs)
            mine_count = sum(
                1 for y in range(height) for x in range(width) if board.has_mine(x, y)
            )
            self.assertEqual(mine_count, bombs)
            self.assertEqual(board.num_bombs, bombs)

    def test_seed_reproduces_layout(self):
        a = MinefieldBoard(10, 10, 20, seed=7)
        b = MinefieldBoard(10, 10, 20, seed=7)
        self.assertTrue((a.mines == b.mines).all())

    def test_fresh_cells_are_covered_and_unflagged(self):
        board = MinefieldBoard(3, 2, 1)
        for y in range(2):
            for x in range(3):
                self.assertTrue(board.is_covered(x, y))
                self.assertFalse(board.has_flag(x, y))

    def test_too_many_mines_rejected(self):
        with self.assertRaises(InvalidBoardError):
            MinefieldBoard(3, 3, 9)
        with self.assertRaises(InvalidBoardError):
            MinefieldBoard(3, 3, -1)

    def test_non_positive_dimensions_rejected(self):
        with self.assertRaises(InvalidBoardError):
            MinefieldBoard(0, 3, 0)
        with self.assertRaises(InvalidBoardError):
            MinefieldBoard(3, -2, 0)

    def test_bad_mine_positions_rejected(self):
        with self.assertRaises(InvalidBoardError):
            MinefieldBoard(3, 3, mine_positions=[(1, 1), (1, 1)])
        with self.assertRaises(InvalidBoardError):
            MinefieldBoard(3, 3, mine_positions=[(3, 0)])
        with self.assertRaises(InvalidBoardError):
            MinefieldBoard(3, 3, num_bombs=2, mine_positions=[(0, 0)])

    def test_toggle_flag_twice_restores(self):
        board = MinefieldBoard(3, 3, 0)
        board.toggle_flag(1, 2)
        self.assertTrue(board.has_flag(1, 2))
        board.toggle_flag(1, 2)
        self.assertFalse(board.has_flag(1, 2))

    def test_reveal_is_monotonic(self):
        board = MinefieldBoard(3, 3, 0)
        board.reveal(0, 0)
        board.reveal(0, 0)
        self.assertFalse(board.is_covered(0, 0))
        self.assertEqual(board.count_covered(), 8)

    def test_reveal_does_not_cascade(self):
        board = MinefieldBoard(4, 4, 0)
        board.reveal(0, 0)
        self.assertEqual(board.count_covered(), 15)

    def test_adjacent_count_in_corner(self):
        board = MinefieldBoard(3, 3, mine_positions=[(1, 1), (2, 2)])
        self.assertEqual(board.adjacent_mine_count(0, 0), 1)
        self.assertEqual(board.adjacent_mine_count(2, 0), 1)
        self.assertEqual(board.adjacent_mine_count(0, 2), 1)

    def test_adjacent_count_includes_own_mine(self):
        board = MinefieldBoard(3, 3, mine_positions=[(1, 1), (2, 2)])
        self.assertEqual(board.adjacent_mine_count(2, 2), 2)
        self.assertEqual(board.adjacent_mine_count(1, 1), 2)

    def test_has_won_when_only_mines_covered(self):
        board = MinefieldBoard(2, 2, mine_positions=[(1, 1)])
        for x, y in [(0, 0), (1, 0)]:
            board.reveal(x, y)
            self.assertFalse(board.has_won())
        board.toggle_flag(1, 1)
        board.reveal(0, 1)
        self.assertEqual(board.count_covered(), board.num_bombs)
        self.assertTrue(board.has_won())

    def test_out_of_range_coordinates_raise(self):
        board = MinefieldBoard(3, 2, 0)
        for x, y in [(-1, 0), (3, 0), (0, 2), (0, -1)]:
            with self.assertRaises(CoordinateError):
                board.is_covered(x, y)
            with self.assertRaises(CoordinateError):
                board.reveal(x, y)
            with self.assertRaises(CoordinateError):
                board.adjacent_mine_count(x, y)


if __name__ == "__main__":
    unittest.main()
