# tests/test_utils.py

import unittest

from minefield.utils import clamped_window, column_header_lines, row_index


class TestUtils(unittest.TestCase):

    def test_row_index(self):
        self.assertEqual(row_index("a"), 0)
        self.assertEqual(row_index("Z"), 25)
        self.assertEqual(row_index("\u0131"), -1)
        self.assertEqual(row_index("ab"), -1)

    def test_clamped_window_in_corner(self):
        self.assertEqual(clamped_window(0, 0, 3, 3), (slice(0, 2), slice(0, 2)))
        self.assertEqual(clamped_window(2, 2, 3, 3), (slice(1, 3), slice(1, 3)))

    def test_header_lines_stay_aligned_past_99_columns(self):
        tens, units = column_header_lines(105)
        self.assertEqual(len(tens), len(units))
        self.assertEqual(len(units), 2 + 2 * 105 - 1)
        # column 100 sits at index 2 + 2 * 99
        self.assertEqual(tens[2 + 2 * 99], "0")
        self.assertEqual(units[2 + 2 * 99], "0")
        self.assertEqual(tens[2 + 2 * 104], "0")
        self.assertEqual(tens[2 + 2 * 98], "9")


if __name__ == "__main__":
    unittest.main()
