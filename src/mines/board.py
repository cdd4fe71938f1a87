"""
Board module for Minesweeper game.

Implements the cell grid with its mine set, neighbor lookups,
value computation and whole-board state changes.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, MINE
from .config import BoardConfig


Position = Tuple[int, int]

# Moore neighborhood as (dx, dy) offsets
NEIGHBORHOOD = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the set of mine positions. Cells are
    addressed as (x, y) with x the column and y the row; the grid is
    stored row-major as ``grid[y][x]``.
    """

    config: BoardConfig
    mines: FrozenSet[Position] = frozenset()
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of in-bounds (x, y) neighbors, without wraparound.
        """
        result = []
        for dx, dy in NEIGHBORHOOD:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def has_mine(self, x: int, y: int) -> bool:
        return (x, y) in self.mines

    def count_neighboring_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(1 for pos in self.neighbors(x, y) if pos in self.mines)

    # ========================================================================
    # Setup
    # ========================================================================

    def compute_values(self) -> None:
        """Assign every cell its neighbor mine count, or MINE."""
        for y in range(self.height):
            for x in range(self.width):
                if self.has_mine(x, y):
                    self._grid[y][x].value = MINE
                else:
                    self._grid[y][x].value = self.count_neighboring_mines(x, y)

    @property
    def is_ready(self) -> bool:
        """Check that every cell has been given a value."""
        return all(cell.value is not None for _, _, cell in self.cells())

    # ========================================================================
    # Whole-board Changes
    # ========================================================================

    def reveal_all(self) -> None:
        """Show every cell's value, used when the game is lost."""
        for _, _, cell in self.cells():
            cell.force_reveal()

    def toggle_cheat(self) -> int:
        """
        Flip every mine between unexplored and cheat peek.

        Marked and revealed mines are left alone, so two calls in a row
        restore the board exactly.

        Returns:
            Number of cells that changed.
        """
        changed = 0
        for x, y in self.mines:
            if self._grid[y][x].toggle_cheat():
                changed += 1
        return changed

    # ========================================================================
    # State Accessors
    # ========================================================================

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if out of range."""
        if not self.in_bounds(x, y):
            return None
        return self._grid[y][x]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate (x, y, cell) in row-major order."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                yield x, y, cell

    def revealed_positions(self) -> FrozenSet[Position]:
        return frozenset((x, y) for x, y, cell in self.cells() if cell.is_revealed)

    def marked_positions(self) -> FrozenSet[Position]:
        return frozenset((x, y) for x, y, cell in self.cells() if cell.is_marked)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array shaped (height, width) where:
                -1 = unexplored
                -2 = marked
                -3 = cheat peek
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for x, y, cell in self.cells():
            obs[y, x] = cell.to_observation()
        return obs

    def render(self) -> str:
        """Render board as plain text, one row per line."""
        symbols = {-1: ".", -2: "F", -3: "*", 0: " ", MINE: "M"}
        lines = []
        for row in self.get_observation():
            lines.append(" ".join(symbols.get(int(v), str(v)) for v in row))
        return "\n".join(lines)
