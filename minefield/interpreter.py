# minefield/interpreter.py

from enum import Enum
from typing import Tuple

from .board import MinefieldBoard
from .errors import InvalidBoardError, MinefieldError, ParseError
from .utils import MAX_ROWS, column_header_lines, row_index, row_letter

FLAG_PREFIX = "#"


class Outcome(str, Enum):
    """Result of handling one line of player input."""

    SUCCESS = "success"
    FAILURE = "failure"
    ALREADY_UNCOVERED = "already_uncovered"
    WIN = "win"
    LOSE = "lose"

    @property
    def ends_game(self) -> bool:
        return self in (Outcome.WIN, Outcome.LOSE)


class CommandInterpreter:
    """
    Turns player commands such as "b3" (reveal) or "#b3" (toggle flag) into
    board operations, and renders the board as text.
    """

    def __init__(self, board: MinefieldBoard):
        if board.height > MAX_ROWS:
            raise InvalidBoardError(
                f"Rows are addressed by a single letter; height {board.height} exceeds {MAX_ROWS}."
            )
        self.board = board

    def parse_coordinate(self, text: str) -> Tuple[int, int]:
        """
        Read "<letter><digits>" as (x, y).

        The letter picks the row ('a' is row 0, case-insensitive) and the
        digits the 1-based column. Column bounds are left to the board.
        """
        if not text:
            raise ParseError("Empty coordinate.")

        y = row_index(text[0])
        if y < 0 or y >= self.board.height:
            raise ParseError(f"{text[0]!r} is not a row of this board.")

        digits = text[1:]
        if not (digits.isascii() and digits.isdigit()):
            raise ParseError(f"{digits!r} is not a column number.")

        try:
            column = int(digits)
        except ValueError as e:
            raise ParseError(f"Column number of {len(digits)} digits is too long.") from e
        return column - 1, y

    def handle_input(self, raw_text: str) -> Outcome:
        text = raw_text.strip()
        try:
            if text.startswith(FLAG_PREFIX):
                return self._handle_flag(text[len(FLAG_PREFIX):])
            return self._handle_reveal(text)
        except MinefieldError:
            return Outcome.FAILURE

    def _handle_flag(self, text):
        x, y = self.parse_coordinate(text)
        if self.board.is_covered(x, y):
            self.board.toggle_flag(x, y)
        return Outcome.SUCCESS

    def _handle_reveal(self, text):
        x, y = self.parse_coordinate(text)
        if not self.board.is_covered(x, y):
            return Outcome.ALREADY_UNCOVERED
        if self.board.has_mine(x, y):
            # the board is left as is; callers render with show_bombs
            return Outcome.LOSE

        self.board.reveal(x, y)
        if self.board.has_won():
            return Outcome.WIN
        return Outcome.SUCCESS

    def to_string(self, show_bombs: bool = False) -> str:
        lines = column_header_lines(self.board.width)
        text = "".join(line + "\n" for line in lines)
        for y in range(self.board.height):
            text += row_letter(y) + " "
            for x in range(self.board.width):
                text += self._marker(x, y, show_bombs) + " "
            text += "\n"
        return text

    def _marker(self, x, y, show_bombs):
        if show_bombs and self.board.has_mine(x, y):
            return "*"
        if not self.board.is_covered(x, y):
            return str(self.board.adjacent_mine_count(x, y))
        if self.board.has_flag(x, y):
            return "#"
        return "."
