from __future__ import annotations
from typing import AbstractSet, Iterator, List, Optional, Tuple

from tictactoe.core.board import Board
from tictactoe.types import Player

Line = List[int]  # flat cell indices

PLAYERS: Tuple[Player, Player] = ("X", "O")


def row_line(r: int, n: int) -> Line:
    return list(range(r * n, r * n + n))


def column_line(c: int, n: int) -> Line:
    # stride through the flat board instead of transposing it
    return list(range(c, n * n, n))


def main_diagonal(n: int) -> Line:
    return [i * n + i for i in range(n)]


def anti_diagonal(n: int) -> Line:
    return [i * n + (n - 1 - i) for i in range(n)]


def lines(n: int) -> Iterator[Line]:
    """
    Every line that wins an n x n game: rows, then columns, then the two
    main diagonals. Shorter diagonals never count.
    """
    for r in range(n):
        yield row_line(r, n)
    for c in range(n):
        yield column_line(c, n)
    yield main_diagonal(n)
    yield anti_diagonal(n)


def _complete(marks: AbstractSet[int], line: Line) -> bool:
    return all(i in marks for i in line)


def has_horizontal(marks: AbstractSet[int], n: int) -> bool:
    return any(_complete(marks, row_line(r, n)) for r in range(n))


def has_vertical(marks: AbstractSet[int], n: int) -> bool:
    return any(_complete(marks, column_line(c, n)) for c in range(n))


def has_diagonal(marks: AbstractSet[int], n: int) -> bool:
    return _complete(marks, main_diagonal(n)) or _complete(marks, anti_diagonal(n))


def has_line(marks: AbstractSet[int], n: int) -> bool:
    if n < 1:
        raise ValueError("Board dimension must be at least 1.")
    # fewer marks than a line needs can't win
    if len(marks) < n:
        return False
    return has_horizontal(marks, n) or has_vertical(marks, n) or has_diagonal(marks, n)


def winning_line(marks: AbstractSet[int], n: int) -> Optional[Line]:
    if len(marks) < n:
        return None
    for line in lines(n):
        if _complete(marks, line):
            return line
    return None


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, Line]]:
    # X is evaluated first; both players can only hold a line if a cell was overwritten
    for player in PLAYERS:
        line = winning_line(board.marks(player), board.dimension)
        if line is not None:
            return player, line
    return None


def check_winner(board: Board) -> Optional[Player]:
    for player in PLAYERS:
        if has_line(board.marks(player), board.dimension):
            return player
    return None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
