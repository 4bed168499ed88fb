# minefield/game.py

from typing import Iterable, Optional, Tuple

from .board import MinefieldBoard
from .interpreter import CommandInterpreter, Outcome


class GameSession:
    """
    One player's game: a board, the interpreter driving it and the
    turn bookkeeping around them.
    """

    def __init__(
        self,
        width: int,
        height: int,
        num_bombs: Optional[int],
        seed: Optional[int] = None,
        mine_positions: Optional[Iterable[Tuple[int, int]]] = None,
    ):
        self.width = width
        self.height = height
        self.num_bombs = num_bombs
        self.seed = seed
        self.mine_positions = None if mine_positions is None else list(mine_positions)

        self.reset()

    def step(self, command: str) -> Outcome:
        """
        Apply one line of player input and return its outcome.
        Once the game has ended the board is frozen and the final outcome
        is returned again.
        """
        if self.game_over:
            return self.last_outcome

        outcome = self.interpreter.handle_input(command)
        if outcome is not Outcome.FAILURE:
            self.moves_made += 1
        if outcome.ends_game:
            self.game_over = True
            self.won = outcome is Outcome.WIN
        self.last_outcome = outcome
        return outcome

    def render(self) -> str:
        """Board text; mines are shown once the game is over."""
        return self.interpreter.to_string(show_bombs=self.game_over)

    def get_state(self) -> dict:
        return {
            "game_over": self.game_over,
            "won": self.won,
            "moves_made": self.moves_made,
            "dimensions": (self.height, self.width),
            "num_mines": self.board.num_bombs,
            "last_outcome": self.last_outcome,
        }

    def reset(self):
        """
        Start over with the same parameters. A seeded session replays the
        same layout.
        """
        self.board = MinefieldBoard(
            self.width,
            self.height,
            self.num_bombs,
            seed=self.seed,
            mine_positions=self.mine_positions,
        )
        self.interpreter = CommandInterpreter(self.board)
        self.game_over = False
        self.won = False
        self.moves_made = 0
        self.last_outcome = None

    def is_game_over(self) -> bool:
        return self.game_over

    def is_win(self) -> bool:
        return self.won
