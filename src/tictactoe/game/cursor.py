from __future__ import annotations
from dataclasses import dataclass

from tictactoe.types import Direction


@dataclass(slots=True)
class Cursor:
    dimension: int
    index: int = 0

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise ValueError("Board dimension must be at least 1.")
        if not 0 <= self.index < self.units:
            raise ValueError(f"Cursor {self.index} is off the board.")

    @property
    def units(self) -> int:
        return self.dimension * self.dimension

    def reset(self) -> None:
        self.index = 0

    def move(self, direction: Direction) -> bool:
        """
        Step one cell in a direction. Returns False and leaves the cursor
        where it is when the step would leave the grid or wrap a row.
        """
        n = self.dimension
        i = self.index

        if direction == "up":
            target = i - n
            ok = target >= 0
        elif direction == "down":
            target = i + n
            ok = target < self.units
        elif direction == "left":
            target = i - 1
            ok = target >= 0 and i % n > 0
        elif direction == "right":
            target = i + 1
            ok = target < self.units and i % n < n - 1
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

        if ok:
            self.index = target
        return ok
