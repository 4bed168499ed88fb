# minefield/utils.py

import string
from typing import Tuple

ROW_LETTERS = string.ascii_uppercase
MAX_ROWS = len(ROW_LETTERS)


def clamped_window(x: int, y: int, width: int, height: int) -> Tuple[slice, slice]:
    """
    Return (row_slice, col_slice) covering the 3x3 block centred on (x, y),
    clipped to the board boundaries. The centre cell is part of the window.
    """
    x0, x1 = max(0, x - 1), min(width - 1, x + 1)
    y0, y1 = max(0, y - 1), min(height - 1, y + 1)
    return slice(y0, y1 + 1), slice(x0, x1 + 1)


def row_letter(y: int) -> str:
    return ROW_LETTERS[y]


def row_index(letter: str) -> int:
    """
    Map a row letter to its zero-based index ('a' / 'A' -> 0).
    Returns -1 for anything that is not a single ASCII letter.
    """
    if len(letter) != 1 or letter not in string.ascii_letters:
        return -1
    return ROW_LETTERS.find(letter.upper())


def column_header_lines(width: int):
    """
    Build the column number lines printed above the grid.

    Numbers are 1-based and aligned with the markers of each row, which
    start two characters in. Only the last digit of each column number is
    printed on the units line; boards wider than 9 get an extra tens line.
    """
    lines = []
    if width > 9:
        tens = [str((x + 1) // 10 % 10) if x + 1 >= 10 else " " for x in range(width)]
        lines.append("  " + " ".join(tens))
    lines.append("  " + " ".join(str((x + 1) % 10) for x in range(width)))
    return lines
