# minefield_cli/cli.py

"""Terminal front end: reads commands from stdin and prints the board.

Usage:
  minesweeper                      default 8x8 board with 6 mines
  minesweeper 16 10 20             16 columns, 10 rows, 20 mines
  minesweeper --config my.yaml     defaults taken from another YAML file

Enter a cell as a letter and a number (a1, c12); prefix it with # to toggle
a flag (#a1).
"""
import argparse
import os

import yaml

from minefield.errors import InvalidBoardError
from minefield.game import GameSession
from minefield.interpreter import Outcome

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "game_config.yaml")

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8
DEFAULT_NUM_MINES = 6

PROMPT = "What cell do you want to check? "

MESSAGES = {
    Outcome.FAILURE: "I don't understand.",
    Outcome.ALREADY_UNCOVERED: "This cell is already uncovered.",
    Outcome.WIN: "you won!",
    Outcome.LOSE: "BOOM BOOM BOOM BOOM BOOM",
}


def load_config(path=DEFAULT_CONFIG_PATH) -> dict:
    """
    Read board defaults from a YAML file. Missing files and missing keys
    fall back to the built-in defaults.
    """
    cfg = {}
    if path and os.path.exists(path):
        with open(path, "r") as f:
            cfg = yaml.safe_load(f) or {}

    board_section = cfg.get("board") or {}
    return {
        "width": int(board_section.get("width", DEFAULT_WIDTH)),
        "height": int(board_section.get("height", DEFAULT_HEIGHT)),
        "num_mines": int(board_section.get("num_mines", DEFAULT_NUM_MINES)),
        "seed": cfg.get("seed"),
    }


def build_parser():
    p = argparse.ArgumentParser(
        prog="minesweeper",
        description="Play minesweeper in the terminal.",
    )
    p.add_argument("width", type=int, nargs="?", default=None, help="number of columns")
    p.add_argument("height", type=int, nargs="?", default=None, help="number of rows")
    p.add_argument("num_mines", type=int, nargs="?", default=None, help="number of mines")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="path to a board config yaml")
    p.add_argument("--seed", type=int, default=None, help="seed for a reproducible mine layout")
    return p


def session_from_args(args) -> GameSession:
    cfg = load_config(args.config)
    width = args.width if args.width is not None else cfg["width"]
    height = args.height if args.height is not None else cfg["height"]
    num_mines = args.num_mines if args.num_mines is not None else cfg["num_mines"]
    seed = args.seed if args.seed is not None else cfg["seed"]
    return GameSession(width=width, height=height, num_bombs=num_mines, seed=seed)


def play(session: GameSession, read_line=input, write=print) -> Outcome:
    """
    Run the prompt/render loop until the game is won or lost, or input
    runs out. Returns the last outcome (None if nothing was entered).
    """
    write(session.render(), end="")
    while not session.is_game_over():
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            write()
            break

        outcome = session.step(line)
        if outcome is Outcome.SUCCESS:
            write(session.render(), end="")
        elif outcome.ends_game:
            write(MESSAGES[outcome])
            write(session.render(), end="")
        else:
            write(MESSAGES[outcome])
    return session.last_outcome


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        session = session_from_args(args)
    except InvalidBoardError as e:
        parser.error(str(e))

    play(session)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
