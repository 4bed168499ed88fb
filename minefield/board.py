# minefield/board.py

import random

import numpy as np

from .errors import CoordinateError, InvalidBoardError
from .utils import clamped_window


class MinefieldBoard:
    """
    Cell state for one game: mine placement, covered / flagged markers and
    the adjacency counts derived from them.

    Coordinates are (x, y) with x the column and y the row, both 0-based.
    Every query and mutation raises CoordinateError for cells off the board.
    """

    def __init__(
        self,
        width,
        height,
        num_bombs=None,
        seed=None,
        mine_positions=None
    ):
        """
        num_bombs:
            How many mines to scatter uniformly at random. Must satisfy
            0 <= num_bombs < width * height.

        seed:
            Seed for this board's private random generator, for
            reproducible layouts.

        mine_positions:
            Optional iterable of (x, y) cells to mine instead of sampling.
            num_bombs may then be None; if given it must match.
        """
        if width <= 0 or height <= 0:
            raise InvalidBoardError(
                f"Board dimensions must be positive, got {width}x{height}."
            )

        self.width = width
        self.height = height
        self.seed = seed
        self.rng = random.Random(seed)

        self.mines = np.zeros((height, width), dtype=bool)
        self.covered = np.ones((height, width), dtype=bool)
        self.flagged = np.zeros((height, width), dtype=bool)

        if mine_positions is not None:
            self._set_mines([tuple(p) for p in mine_positions], num_bombs)
        else:
            if num_bombs is None:
                raise InvalidBoardError("num_bombs is required without mine_positions.")
            self._place_mines(num_bombs)
        self.num_bombs = int(np.count_nonzero(self.mines))

    def _place_mines(self, num_bombs):
        """
        Mine exactly num_bombs distinct cells, chosen uniformly at random.
        At least one cell must stay free so the game can be won.
        """
        num_cells = self.width * self.height
        if not 0 <= num_bombs < num_cells:
            raise InvalidBoardError(
                f"Cannot place {num_bombs} mines: need 0 <= mines < {num_cells} "
                f"on a {self.width}x{self.height} board."
            )

        all_coords = [(x, y) for y in range(self.height) for x in range(self.width)]
        for x, y in self.rng.sample(all_coords, num_bombs):
            self.mines[y, x] = True

    def _set_mines(self, positions, num_bombs):
        if num_bombs is not None and num_bombs != len(positions):
            raise InvalidBoardError(
                f"num_bombs={num_bombs} does not match {len(positions)} mine positions."
            )
        if len(set(positions)) != len(positions):
            raise InvalidBoardError("Duplicate mine positions.")
        if len(positions) >= self.width * self.height:
            raise InvalidBoardError("At least one cell must be free of mines.")

        for x, y in positions:
            if not self.is_valid_coord(x, y):
                raise InvalidBoardError(f"Mine position ({x}, {y}) is off the board.")
            self.mines[y, x] = True

    def is_valid_coord(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x, y):
        if not self.is_valid_coord(x, y):
            raise CoordinateError(x, y, self.width, self.height)

    def toggle_flag(self, x, y):
        # callers only flag covered cells
        self._check(x, y)
        self.flagged[y, x] = not self.flagged[y, x]

    def reveal(self, x, y):
        """Uncover a single cell. There is no flood fill and no mine check."""
        self._check(x, y)
        self.covered[y, x] = False

    def has_mine(self, x, y):
        self._check(x, y)
        return bool(self.mines[y, x])

    def is_covered(self, x, y):
        self._check(x, y)
        return bool(self.covered[y, x])

    def has_flag(self, x, y):
        self._check(x, y)
        return bool(self.flagged[y, x])

    def adjacent_mine_count(self, x, y):
        """
        Count mines in the 3x3 window around (x, y), clipped to the board.
        The cell's own mine, if any, is included in the count.
        """
        self._check(x, y)
        rows, cols = clamped_window(x, y, self.width, self.height)
        return int(np.count_nonzero(self.mines[rows, cols]))

    def count_covered(self):
        return int(np.count_nonzero(self.covered))

    def has_won(self):
        # flags play no part in winning
        return self.count_covered() == self.num_bombs
