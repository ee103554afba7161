"""
Errors raised by the minefield engine.
"""


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class TooManyMines(MinefieldError, ValueError):
    """Requested mine count leaves no safe square on the grid."""

    def __init__(self, mines: int, size: int) -> None:
        super().__init__(
            f"Too many mines: {mines} for a grid of {size} squares"
        )
        self.mines = mines
        self.size = size


class OutOfBounds(MinefieldError, IndexError):
    """Coordinates fall outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {width}x{height} grid"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height
