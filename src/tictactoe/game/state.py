from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tictactoe.config import DIMENSION, Settings
from tictactoe.core.board import Board
from tictactoe.game.cursor import Cursor
from tictactoe.types import Cell, Player


def player_for_turn(turn: int) -> Player:
    return "X" if turn % 2 == 1 else "O"


@dataclass(slots=True)
class GameState:
    """
    Everything one game needs: board, cursor and turn counter.
    Built once by the caller and handed to the input loop.
    """

    board: Board
    cursor_pos: Cursor
    turn: int = 1
    last_status: str = "Player X starts."
    result: Optional[Player] = None
    winning_line: Optional[List[int]] = None
    finished: bool = False
    history: List[Tuple[Player, int]] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)

    @classmethod
    def new(cls, dimension: int = DIMENSION, settings: Optional[Settings] = None) -> "GameState":
        return cls(
            board=Board(dimension),
            cursor_pos=Cursor(dimension),
            settings=settings if settings is not None else Settings(),
        )

    @property
    def current(self) -> Player:
        return player_for_turn(self.turn)

    # query interface

    def dimension(self) -> int:
        return self.board.dimension

    def cursor(self) -> int:
        return self.cursor_pos.index

    def snapshot(self) -> Tuple[Cell, ...]:
        return self.board.snapshot()

    def game_over(self) -> bool:
        return self.finished

    def winner(self) -> Optional[Player]:
        return self.result
