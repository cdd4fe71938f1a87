"""
Minesweeper game module.

Provides the game engine (mine placement, value computation, flood-fill
reveal, flag and cheat toggles, win check) and a Gymnasium front end.
"""
from .cell import Cell, CellState, MINE
from .config import (
    BoardConfig,
    InvalidConfigurationError,
    clamp_settings,
    DEFAULT,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .placement import place_mines
from .board import Board
from .reveal import flood_fill
from .status import GameStatus, evaluate
from .game import Game, new_game
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "MINE",
    "BoardConfig",
    "InvalidConfigurationError",
    "clamp_settings",
    "DEFAULT",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "place_mines",
    "Board",
    "flood_fill",
    "GameStatus",
    "evaluate",
    "Game",
    "new_game",
    "MinesweeperEnv",
    "make_vec_env",
]
