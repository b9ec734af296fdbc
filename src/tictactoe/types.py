# src/tictactoe/types.py

from __future__ import annotations
from typing import Literal, Optional

Player = Literal["X", "O"]
Cell = Optional[Player]
Direction = Literal["up", "down", "left", "right"]
Command = Literal["up", "down", "left", "right", "place", "new_game", "quit"]
