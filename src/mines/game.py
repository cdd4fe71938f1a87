"""
Game session for Minesweeper.

A Game owns one board, its mines and its status, and resolves player
actions against them. Once the game is won or lost every action is a
no-op.
"""
import logging
import random
from typing import Iterable, Optional, Tuple

import numpy as np

from .board import Board
from .cell import Cell
from .config import BoardConfig, InvalidConfigurationError, clamp_settings
from .placement import place_mines
from .reveal import flood_fill
from .status import GameStatus, evaluate


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    One Minesweeper session.

    Sessions share no state, so any number can run side by side.
    Coordinates are (x, y): x is the column, y the row, both from 0.

    Attributes:
        config: Current board configuration.
        board: Current board; replaced on every reset.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        mines: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Deal a new game.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
            seed: Seed for mine placement, for reproducible games.
            mines: Fixed (x, y) mine layout instead of a random one.
        """
        self.config = config or BoardConfig()
        self._rng = random.Random(seed)
        self.reset(mines=mines)

    def reset(
        self,
        seed: Optional[int] = None,
        mines: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Deal a fresh board with the current configuration.

        Args:
            seed: Reseed mine placement before dealing.
            mines: Fixed (x, y) mine layout instead of a random one.

        Raises:
            InvalidConfigurationError: If a fixed layout does not fit
                the configuration.
        """
        if seed is not None:
            self._rng.seed(seed)
        if mines is None:
            mines = place_mines(
                self.config.num_mines, self.config.width, self.config.height,
                self._rng,
            )
        else:
            mines = self._check_layout(mines)
        self.board = Board(self.config, mines)
        self.board.compute_values()
        self._status = GameStatus.IN_PROGRESS
        logger.debug(
            "New %dx%d game with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )

    def _check_layout(self, mines: Iterable[Position]) -> frozenset:
        """Validate a fixed mine layout against the configuration."""
        layout = frozenset((int(x), int(y)) for x, y in mines)
        if len(layout) != self.config.num_mines:
            raise InvalidConfigurationError(
                f"Expected {self.config.num_mines} mines, got {len(layout)}"
            )
        for x, y in layout:
            if not (0 <= x < self.config.width and 0 <= y < self.config.height):
                raise InvalidConfigurationError(f"Mine ({x}, {y}) is off the board")
        return layout

    def apply_settings(self, width, height, num_mines) -> BoardConfig:
        """
        Clamp raw settings, replace the board and start over.

        Returns:
            The configuration actually applied.
        """
        self.config = clamp_settings(width, height, num_mines)
        self.reset()
        return self.config

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int, rng: Optional[random.Random] = None) -> bool:
        """
        Reveal the cell at (x, y).

        Stepping on a mine reveals the whole board and loses the game.
        A safe zero cell opens its surrounding region.

        Args:
            x: Column to reveal.
            y: Row to reveal.
            rng: Optional shuffle source for the cascade order.

        Returns:
            True if the board changed, False for an ignored action.
        """
        if not self.is_playing:
            return False
        cell = self.board.get_cell(x, y)
        if cell is None or not cell.is_unexplored:
            return False

        if self.board.has_mine(x, y):
            self._finish(GameStatus.LOSS)
            return True

        return bool(flood_fill(self.board, x, y, rng))

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle the mark on an unexplored or marked cell.

        Returns:
            True if the mark was toggled, False otherwise.
        """
        if not self.is_playing:
            return False
        cell = self.board.get_cell(x, y)
        if cell is None:
            return False
        return cell.toggle_flag()

    def toggle_cheat(self) -> bool:
        """
        Show or hide the unexplored mines.

        Returns:
            True if any cell changed.
        """
        if not self.is_playing:
            return False
        changed = self.board.toggle_cheat()
        logger.debug("Cheat toggled on %d cells", changed)
        return changed > 0

    def check_win(self) -> GameStatus:
        """
        Check the player's flags and end the game.

        Returns:
            WIN if the marked cells are exactly the mines, else LOSS
            (and the board is revealed). A finished game keeps its status.
        """
        if self.is_playing:
            self._finish(evaluate(self.board))
        return self._status

    def _finish(self, status: GameStatus) -> None:
        """Move to a terminal status, revealing the board on a loss."""
        if status is GameStatus.LOSS:
            self.board.reveal_all()
        self._status = status
        logger.info("Game over: %s", status.name)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status is GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status is GameStatus.WIN

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status is GameStatus.LOSS

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if out of range."""
        return self.board.get_cell(x, y)

    def get_observation(self) -> np.ndarray:
        return self.board.get_observation()

    def render(self) -> str:
        return self.board.render()


def new_game(
    width: int,
    height: int,
    num_mines: int,
    seed: Optional[int] = None,
) -> Game:
    """
    Start a game with the given settings.

    Raises:
        InvalidConfigurationError: If the settings are out of range.
    """
    return Game(BoardConfig(width, height, num_mines), seed=seed)
