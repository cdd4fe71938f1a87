"""
Game status for Minesweeper.

Defines the status values and the flag check that decides a win.
"""
from enum import Enum, auto

from .board import Board


class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WIN = auto()
    LOSS = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


def evaluate(board: Board) -> GameStatus:
    """
    Judge the player's flags against the mines.

    The game is won only if every mine is marked and no safe cell is.

    Args:
        board: Board to inspect. It is not modified.

    Returns:
        GameStatus.WIN or GameStatus.LOSS.
    """
    for x, y, cell in board.cells():
        if board.has_mine(x, y) != cell.is_marked:
            return GameStatus.LOSS
    return GameStatus.WIN
