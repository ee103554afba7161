"""
Square module for the minefield engine.

A square's kind (mine, or field with an adjacent mine count) is decided
when the minefield is built and never changes. Its revealed and flagged
marks belong to the owning ``Minefield``, which is the only thing that
changes them, so the public surface of a square is read-only.
"""
from typing import Optional


class Square:
    """
    One square of the grid.

    Args:
        number: Count of mines among the neighbors (0-8), or None if the
            square is itself a mine.
    """

    __slots__ = ("_number", "_revealed", "_flagged")

    def __init__(self, number: Optional[int] = 0) -> None:
        self._number = number
        self._revealed = False
        self._flagged = False

    @classmethod
    def mine(cls) -> "Square":
        return cls(None)

    def __repr__(self) -> str:
        kind = "mine" if self.is_mine else f"field({self._number})"
        marks = []
        if self._revealed:
            marks.append("revealed")
        if self.is_flagged:
            marks.append("flagged")
        return f"Square({kind}{''.join(', ' + mark for mark in marks)})"

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def is_mine(self) -> bool:
        return self._number is None

    @property
    def number(self) -> Optional[int]:
        """Adjacent mine count, or None for a mine."""
        return self._number

    @property
    def is_revealed(self) -> bool:
        return self._revealed

    @property
    def is_flagged(self) -> bool:
        """A flag only counts while the square is still covered."""
        return self._flagged and not self._revealed

    @property
    def is_empty(self) -> bool:
        """Field square with no mines around it."""
        return self._number == 0

    def to_observation(self) -> int:
        """
        Integer code of what a player can see.

        Returns:
            -1 for a covered square, -2 for a flagged one, the adjacent
            count for a revealed field and 9 for a revealed mine.
        """
        if not self._revealed:
            return -2 if self._flagged else -1
        return 9 if self.is_mine else self._number

    # ========================================================================
    # Transitions, driven by Minefield
    # ========================================================================

    def _uncover(self) -> Optional[bool]:
        """
        Reveal and drop the flag.

        Returns:
            None if the square was already revealed, otherwise whether a
            flag was removed.
        """
        if self._revealed:
            return None
        had_flag = self._flagged
        self._revealed = True
        self._flagged = False
        return had_flag

    def _toggle_flag(self) -> int:
        """Flip the flag of a covered square; returns the flag count delta."""
        if self._revealed:
            return 0
        self._flagged = not self._flagged
        return 1 if self._flagged else -1
