"""
Minefield module.

Implements the grid of squares with mine placement, adjacency numbering,
and the reveal/flag state transitions including the cascading reveal of
empty regions.
"""
import logging
import random
from dataclasses import InitVar, dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .errors import OutOfBounds, TooManyMines
from .square import Square


logger = logging.getLogger(__name__)

Position = Tuple[int, int]

# One mine per ten squares when no count is given
DEFAULT_DENSITY = 10


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class FieldConfig:
    """
    Configuration for a minefield.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place. Defaults to a tenth of the
            squares, rounded down.
    """

    width: int
    height: int
    num_mines: Optional[int] = None

    def __post_init__(self) -> None:
        """Fill in the default mine count and validate."""
        if self.num_mines is None:
            self.num_mines = max(self.size, 0) // DEFAULT_DENSITY
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 0 or self.height < 0:
            raise ValueError("Field dimensions must be positive")
        if self.num_mines >= self.size:
            raise TooManyMines(self.num_mines, self.size)
        if self.width == 0 or self.height == 0:
            raise ValueError("Field dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")

    @property
    def size(self) -> int:
        return self.width * self.height


# ============================================================================
# Minefield Class
# ============================================================================

@dataclass
class Minefield:
    """
    Minesweeper minefield.

    Squares are stored in a flat row-major list addressed by
    ``y * width + x``. Mines and numbers are fixed when the field is
    built; afterwards only square states and the ``revealed`` and
    ``flagged`` counters change, and only through this class.

    Args:
        config: Dimensions and mine count.
        rng: Random source used for mine placement.
        mine_positions: Explicit ``(x, y)`` mine positions. When given,
            no random placement happens.
    """

    config: FieldConfig
    rng: Optional[random.Random] = field(
        default=None, repr=False, compare=False
    )
    mine_positions: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[Square] = field(init=False, repr=False)
    _revealed: int = field(init=False, default=0)
    _flagged: int = field(init=False, default=0)

    def __post_init__(
        self, mine_positions: Optional[Iterable[Position]]
    ) -> None:
        """Place mines, then build the numbered grid."""
        if self.rng is None:
            self.rng = random.Random()
        if mine_positions is None:
            mined = self._place_mines()
        else:
            mined = self._place_fixed_mines(mine_positions)
        self._grid = self._build_grid(mined)
        logger.debug(
            "Created %dx%d minefield with %d mines",
            self.width, self.height, self.mines,
        )

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        mines: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Minefield":
        """
        Create a minefield with randomly placed mines.

        Raises:
            TooManyMines: If ``mines`` is not less than ``width * height``.
        """
        return cls(FieldConfig(width, height, mines), rng=rng)

    @classmethod
    def from_config(
        cls, config: FieldConfig, rng: Optional[random.Random] = None
    ) -> "Minefield":
        return cls(config, rng=rng)

    @classmethod
    def from_mines(
        cls, width: int, height: int, positions: Iterable[Position]
    ) -> "Minefield":
        """
        Create a minefield with mines at fixed ``(x, y)`` positions.

        Duplicate positions count once.

        Raises:
            TooManyMines: If the mines would cover the whole grid.
            OutOfBounds: If a position lies outside the grid.
        """
        positions = set(positions)
        config = FieldConfig(width, height, len(positions))
        return cls(config, mine_positions=positions)

    # ========================================================================
    # Grid Construction (Low-level)
    # ========================================================================

    def _place_mines(self) -> List[bool]:
        """
        Choose mine squares one at a time.

        Each draw picks among the squares that are not mines yet, so the
        range shrinks by one per mine and every draw lands on a new square.
        """
        mined = [False] * self.size
        for placed in range(self.mines):
            position = self.rng.randrange(self.size - placed)
            for index, is_mine in enumerate(mined):
                if is_mine:
                    continue
                if position == 0:
                    mined[index] = True
                    break
                position -= 1
        return mined

    def _place_fixed_mines(self, positions: Iterable[Position]) -> List[bool]:
        mined = [False] * self.size
        for x, y in positions:
            mined[self._index(x, y)] = True
        return mined

    def _build_grid(self, mined: List[bool]) -> List[Square]:
        """Count mines around every square and create the squares."""
        counts = [0] * self.size
        for index, is_mine in enumerate(mined):
            if not is_mine:
                continue
            x, y = index % self.width, index // self.width
            for neighbor_x, neighbor_y in self.neighbors(x, y):
                counts[neighbor_y * self.width + neighbor_x] += 1
        return [
            Square.mine() if is_mine else Square(count)
            for is_mine, count in zip(mined, counts)
        ]

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring square positions.

        Args:
            x: Column of center square.
            y: Row of center square.

        Returns:
            List of (x, y) tuples for neighbors inside the grid.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        """Flat grid index of a position, raising OutOfBounds if invalid."""
        if not self.is_valid_position(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return y * self.width + x


    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> Square:
        """
        Reveal the square at the given position.

        A newly revealed square with no adjacent mines also reveals its
        neighbors, spreading through the whole connected empty region and
        stopping at numbered squares. Revealing clears flags. Revealing
        an already revealed square changes nothing.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            The square at (x, y). If ``is_mine`` is set the game is lost.

        Raises:
            OutOfBounds: If (x, y) is outside the grid.
        """
        square = self._grid[self._index(x, y)]
        if self._uncover(square) and square.is_empty:
            self._reveal_neighbors(x, y)
        return square

    def _uncover(self, square: Square) -> bool:
        """Reveal one square and update counters. False if already revealed."""
        had_flag = square._uncover()
        if had_flag is None:
            return False
        if had_flag:
            self._flagged -= 1
        if not square.is_mine:
            self._revealed += 1
        return True

    def _reveal_neighbors(self, x: int, y: int) -> None:
        """Reveal the empty region around (x, y) with an explicit stack."""
        pending = [(x, y)]
        uncovered = 0
        while pending:
            current_x, current_y = pending.pop()
            for neighbor_x, neighbor_y in self.neighbors(current_x, current_y):
                neighbor = self._grid[neighbor_y * self.width + neighbor_x]
                if not self._uncover(neighbor):
                    continue
                uncovered += 1
                if neighbor.is_empty:
                    pending.append((neighbor_x, neighbor_y))
        logger.debug(
            "Cascade from (%d, %d) uncovered %d squares", x, y, uncovered
        )

    def flag(self, x: int, y: int) -> Square:
        """
        Toggle flag on the square at the given position.

        Revealed squares are left untouched.

        Raises:
            OutOfBounds: If (x, y) is outside the grid.
        """
        square = self._grid[self._index(x, y)]
        self._flagged += square._toggle_flag()
        return square

    def finish(self) -> None:
        """Reveal every mine once the game is lost. Counters are kept."""
        for square in self._grid:
            if square.is_mine:
                square._uncover()
        logger.debug("Revealed all %d mines", self.mines)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def mines(self) -> int:
        return self.config.num_mines

    @property
    def revealed(self) -> int:
        """Number of safe squares revealed so far."""
        return self._revealed

    @property
    def flagged(self) -> int:
        """Number of squares flagged so far."""
        return self._flagged

    @property
    def remaining(self) -> int:
        """Safe squares still to reveal."""
        return self.size - self.mines - self._revealed

    @property
    def is_cleared(self) -> bool:
        """Check if every safe square has been revealed."""
        return self.remaining == 0

    def get_square(self, x: int, y: int) -> Square:
        """
        Get square at position.

        Raises:
            OutOfBounds: If (x, y) is outside the grid.
        """
        return self._grid[self._index(x, y)]

    def get_unrevealed(self) -> List[Position]:
        """Get (x, y) positions of all squares not yet revealed."""
        return [
            (index % self.width, index // self.width)
            for index, square in enumerate(self._grid)
            if not square.is_revealed
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get field state as a numpy array indexed ``[y, x]``.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [square.to_observation() for square in self._grid]
        return np.array(values, dtype=np.int8).reshape(self.height, self.width)


    def layout(self) -> str:
        """
        Render the mine layout regardless of square states.

        ``X`` marks a mine, a space an empty square and a digit the
        adjacent mine count. Each row ends with a newline.
        """
        lines = []
        for y in range(self.height):
            row = self._grid[y * self.width:(y + 1) * self.width]
            line = ""
            for square in row:
                if square.is_mine:
                    line += "X"
                elif square.is_empty:
                    line += " "
                else:
                    line += str(square.number)
            lines.append(line + "\n")
        return "".join(lines)
