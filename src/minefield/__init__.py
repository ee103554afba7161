"""
Minefield engine for minesweeper.

Provides the grid of squares, mine placement, and reveal/flag logic.
"""
from .errors import MinefieldError, TooManyMines, OutOfBounds
from .square import Square
from .field import Minefield, FieldConfig

__all__ = [
    "Minefield",
    "FieldConfig",
    "Square",
    "MinefieldError",
    "TooManyMines",
    "OutOfBounds",
]
