
# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

from tictactoe.config import DIMENSION
from tictactoe.types import Cell, Player


class InvalidMove(ValueError):
    """Raised when a marker cannot be placed at the requested index."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(reason)
        self.index = index
        self.reason = reason


@dataclass(slots=True)
class Board:
    dimension: int = DIMENSION
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise ValueError("Board dimension must be at least 1.")
        if not self.cells:
            self.cells = [None] * self.units
        elif len(self.cells) != self.units:
            raise ValueError(f"Expected {self.units} cells, got {len(self.cells)}.")

    @property
    def units(self) -> int:
        return self.dimension * self.dimension

    def reset(self) -> None:
        self.cells = [None] * self.units

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.units

    def coords(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.dimension)

    def occupant_at(self, index: int) -> Cell:
        if not self.in_bounds(index):
            raise InvalidMove(index, f"Cell {index} is off the board.")
        return self.cells[index]

    def snapshot(self) -> Tuple[Cell, ...]:
        return tuple(self.cells)

    def marks(self, player: Player) -> FrozenSet[int]:
        return frozenset(i for i, p in enumerate(self.cells) if p == player)

    def is_full(self) -> bool:
        return all(p is not None for p in self.cells)

    def place(self, index: int, player: Player) -> None:
        """
        Mark a cell for a player.
        Occupied cells are never overwritten; the board is untouched on rejection.
        """
        if not self.in_bounds(index):
            raise InvalidMove(index, f"Cell {index} is off the board.")
        occupant = self.cells[index]
        if occupant is not None:
            r, col = self.coords(index)
            raise InvalidMove(index, f"Row {r + 1}, column {col + 1} is already taken by {occupant}.")
        self.cells[index] = player
