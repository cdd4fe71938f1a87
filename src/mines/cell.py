"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(unexplored/marked/cheat/revealed) and value (mine/neighbor count).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

# Sentinel value for a cell holding a mine (neighbor counts use 0-8)
MINE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    UNEXPLORED = auto()
    MARKED = auto()
    CHEAT = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        value: Neighbor mine count (0-8) or MINE. None until the board
            has computed its values.
        state: Current visual state. A revealed cell shows its value.
    """

    value: Optional[int] = None
    state: CellState = CellState.UNEXPLORED

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was unexplored and is now revealed.
        """
        if self.state != CellState.UNEXPLORED:
            return False
        self.state = CellState.REVEALED
        return True

    def force_reveal(self) -> None:
        """Reveal regardless of current state (game over)."""
        self.state = CellState.REVEALED

    def toggle_flag(self) -> bool:
        """
        Toggle the mark on this cell.

        Returns:
            True if the mark was toggled, False if the cell is revealed
            or showing a cheat peek.
        """
        if self.state == CellState.UNEXPLORED:
            self.state = CellState.MARKED
        elif self.state == CellState.MARKED:
            self.state = CellState.UNEXPLORED
        else:
            return False
        return True

    def toggle_cheat(self) -> bool:
        """Swap between unexplored and cheat peek; other states are kept."""
        if self.state == CellState.UNEXPLORED:
            self.state = CellState.CHEAT
        elif self.state == CellState.CHEAT:
            self.state = CellState.UNEXPLORED
        else:
            return False
        return True

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.value == MINE

    @property
    def is_unexplored(self) -> bool:
        """Check if cell is unexplored."""
        return self.state == CellState.UNEXPLORED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_marked(self) -> bool:
        """Check if cell is marked."""
        return self.state == CellState.MARKED

    @property
    def is_cheat(self) -> bool:
        """Check if cell is showing a cheat peek."""
        return self.state == CellState.CHEAT

    @property
    def content(self) -> str:
        """
        Display string for the cell.

        Returns:
            "" for unexplored, marked, cheat and revealed zero cells,
            "1".."8" for revealed counts, "M" for a revealed mine.
        """
        if self.state != CellState.REVEALED:
            return ""
        if self.value == MINE:
            return "M"
        if self.value:
            return str(self.value)
        return ""

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Unexplored cell
            -2: Marked cell
            -3: Cheat peek (a mine shown without revealing)
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine
        """
        if self.state == CellState.UNEXPLORED:
            return -1
        if self.state == CellState.MARKED:
            return -2
        if self.state == CellState.CHEAT:
            return -3
        return self.value
