from __future__ import annotations

import argparse
import logging
from typing import Optional

from tictactoe import config
from tictactoe.game.controller import run_game
from tictactoe.game.state import GameState
from tictactoe.ui.keys import TerminalUnsupported

log = logging.getLogger(__name__)


def _dimension(raw: str) -> int:
    try:
        n = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{raw!r} is not a whole number")
    if n < 1:
        raise argparse.ArgumentTypeError("board size must be at least 1")
    return n


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal with the arrow keys.")
    ap.add_argument("-n", "--size", type=_dimension, default=config.DIMENSION, help="Board dimension N for an N x N game")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between frames")
    ap.add_argument("--no-numbers", action="store_true", help="Hide cell numbers on empty cells")
    ap.add_argument("--log-file", type=str, default=config.LOG_FILE, help="Write a game log to this file")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: %(default)s)",
    )
    return ap


def setup_logging(level: str, log_file: Optional[str]) -> None:
    if log_file:
        logging.basicConfig(level=level, format=config.LOG_FORMAT, filename=log_file, encoding="utf-8")
    else:
        # keep INFO chatter off the board
        logging.basicConfig(level=max(logging.getLevelName(level), logging.WARNING), format=config.LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    settings = config.Settings(
        use_color=not args.no_color,
        clear_screen=not args.no_clear,
        show_cell_numbers=not args.no_numbers,
    )

    state = GameState.new(args.size, settings)
    try:
        run_game(state)
    except TerminalUnsupported as e:
        log.info("terminal unsupported: %s", e)
        print(e)
        return 1
    except KeyboardInterrupt:
        log.info("interrupted")
        print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
