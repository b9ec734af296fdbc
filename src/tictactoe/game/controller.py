from __future__ import annotations
import logging
import sys
from typing import Callable, Optional, TextIO

from tictactoe.game.actions import apply_command
from tictactoe.game.state import GameState
from tictactoe.ui.keys import parse_key, raw_mode, read_key
from tictactoe.ui.render import render

log = logging.getLogger(__name__)


def run_game(
    state: GameState,
    stream: Optional[TextIO] = None,
    draw: Callable[[GameState], None] = render,
) -> None:
    """
    Drive one session from key presses until quit or end of input.
    Each key is fully applied and the board redrawn before the next read.
    """
    stream = stream if stream is not None else sys.stdin
    log.info("session started on a %dx%d board", state.dimension(), state.dimension())

    with raw_mode(stream):
        while True:
            draw(state)

            key = read_key(stream)
            if not key:
                log.info("input closed")
                break

            cmd = parse_key(key)
            if cmd is None:
                continue

            if not apply_command(state, cmd):
                break

    state.last_status = "Game quit."
    draw(state)
