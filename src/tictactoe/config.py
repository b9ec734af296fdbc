# src/tictactoe/config.py

from __future__ import annotations
from dataclasses import dataclass

DIMENSION = 3

# UI defaults
USE_COLOR = True
CLEAR_SCREEN = True
SHOW_CELL_NUMBERS = True

# Logging stays out of the terminal unless a file is given
LOG_LEVEL = "WARNING"
LOG_FILE = None
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


@dataclass(slots=True)
class Settings:
    """Per-run display options, built once from the CLI and carried by GameState."""

    use_color: bool = USE_COLOR
    clear_screen: bool = CLEAR_SCREEN
    show_cell_numbers: bool = SHOW_CELL_NUMBERS
