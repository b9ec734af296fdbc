from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Set

from tictactoe.config import Settings
from tictactoe.game.state import GameState
from tictactoe.types import Cell
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_GREEN, FG_RED, FG_YELLOW, REVERSE

HELP = "Arrows move  Enter places  n new game  q quit"


def _cell_width(units: int) -> int:
    return len(str(units)) + 2


def _style(cell: Cell, winning: bool) -> List[str]:
    if winning:
        return [FG_GREEN, BOLD]
    if cell is None:
        return [FG_GRAY]
    return [FG_RED if cell == "X" else FG_YELLOW, BOLD]


def _label(cell: Cell, index: int, settings: Settings) -> str:
    if cell is not None:
        return cell
    return str(index + 1) if settings.show_cell_numbers else ""


def _framed(cell: Cell, width: int, left: str, right: str) -> str:
    return left + (cell or " ").center(width - 2) + right


def board_lines(
    snapshot: Sequence[Cell],
    dimension: int,
    cursor: Optional[int] = None,
    highlight: Optional[Iterable[int]] = None,
    settings: Optional[Settings] = None,
) -> List[str]:
    """
    Lay out a flat snapshot as an N x N grid.

    Cells are separated by "|", rows by "---+---". With colour the cursor cell
    is drawn in reverse video and the winning line in green. Without colour
    the winning cells read ">X<" and the cursor cell "[X]".
    """
    settings = settings if settings is not None else Settings()
    n = dimension
    if len(snapshot) != n * n:
        raise ValueError(f"Snapshot has {len(snapshot)} cells, expected {n * n}.")

    hl: Set[int] = set(highlight) if highlight else set()
    width = _cell_width(n * n)
    separator = "+".join("-" * width for _ in range(n))

    out: List[str] = []
    for r in range(n):
        parts = []
        for col in range(n):
            i = r * n + col
            cell = snapshot[i]
            codes = _style(cell, i in hl)
            label = _label(cell, i, settings).center(width)
            if settings.use_color:
                if i == cursor:
                    codes.append(REVERSE)
            elif i in hl:
                # the line outranks the cursor once the game is won
                label = _framed(cell, width, ">", "<")
            elif i == cursor:
                label = _framed(cell, width, "[", "]")
            parts.append(c(label, *codes, color=settings.use_color))
        out.append("|".join(parts))
        if r < n - 1:
            out.append(separator)
    return out


def clear_screen(settings: Settings) -> None:
    if settings.clear_screen:
        print("\033[2J\033[H", end="")


def render(state: GameState) -> None:
    s = state.settings
    clear_screen(s)

    print(c("TIC-TAC-TOE", BOLD, color=s.use_color))
    print(c(f"Turn {state.turn} | {state.current} to move", DIM, color=s.use_color) if not state.game_over() else "")
    if state.last_status:
        print(c(state.last_status, FG_CYAN, color=s.use_color))
    else:
        print()

    print()
    for line in board_lines(state.snapshot(), state.dimension(), state.cursor(), state.winning_line, s):
        print("  " + line)
    print()
    print(c(HELP, DIM, color=s.use_color))
