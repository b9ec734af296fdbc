from __future__ import annotations
import logging

from tictactoe.core.board import InvalidMove
from tictactoe.core.rules import check_winner_with_line, is_draw
from tictactoe.game.state import GameState
from tictactoe.types import Command, Direction

log = logging.getLogger(__name__)


def move_cursor(state: GameState, direction: Direction) -> bool:
    return state.cursor_pos.move(direction)


def _update_result(state: GameState) -> None:
    w = check_winner_with_line(state.board)
    if w is not None:
        player, line = w
        state.result = player
        state.winning_line = line
        state.finished = True
        state.last_status = f"Player {player} wins! Press n for a new game."
        log.info("player %s wins on turn %d with line %s", player, state.turn - 1, line)
        return

    if is_draw(state.board):
        state.finished = True
        state.last_status = "Draw game. Press n for a new game."
        log.info("draw after %d moves", len(state.history))


def place_marker(state: GameState) -> bool:
    """
    Put the current player's marker under the cursor.

    The turn only advances when the board accepts the marker; a rejected
    placement leaves everything but the status line alone.
    """
    if state.finished:
        state.last_status = "Game over. Press n for a new game."
        log.debug("placement ignored: game already over")
        return False

    index = state.cursor()
    player = state.current
    try:
        state.board.place(index, player)
    except InvalidMove as e:
        state.last_status = str(e)
        log.info("rejected %s at %d: %s", player, index, e.reason)
        return False

    state.history.append((player, index))
    state.turn += 1
    state.last_status = f"Player {state.current}'s turn."
    log.debug("%s placed at %d", player, index)

    _update_result(state)
    return True


def new_game(state: GameState) -> None:
    state.board.reset()
    state.cursor_pos.reset()
    state.turn = 1
    state.result = None
    state.winning_line = None
    state.finished = False
    state.history.clear()
    state.last_status = "New game. Player X starts."
    log.info("new %dx%d game", state.dimension(), state.dimension())


def apply_command(state: GameState, command: Command) -> bool:
    """Apply one command. Returns False when the player asked to quit."""
    if command == "quit":
        return False
    if command == "new_game":
        new_game(state)
    elif command == "place":
        place_marker(state)
    else:
        move_cursor(state, command)  # type: ignore[arg-type]
    return True
