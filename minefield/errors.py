# minefield/errors.py


class MinefieldError(ValueError):
    """Base class for every error raised by the minefield core."""


class InvalidBoardError(MinefieldError):
    """Board dimensions or mine layout cannot produce a playable game."""


class CoordinateError(MinefieldError):
    """A coordinate falls outside the board."""

    def __init__(self, x, y, width, height):
        super().__init__(
            f"({x}, {y}) is outside a {width}x{height} board"
        )
        self.x = x
        self.y = y


class ParseError(MinefieldError):
    """Text could not be read as a cell coordinate."""
