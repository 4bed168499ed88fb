from .board import MinefieldBoard
from .errors import CoordinateError, InvalidBoardError, MinefieldError, ParseError
from .game import GameSession
from .interpreter import CommandInterpreter, Outcome

__all__ = [
    "MinefieldBoard",
    "CommandInterpreter",
    "GameSession",
    "Outcome",
    "MinefieldError",
    "InvalidBoardError",
    "CoordinateError",
    "ParseError",
]
