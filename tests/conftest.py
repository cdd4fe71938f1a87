"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mines import Board, BoardConfig, Cell, Game, MINE


# ============================================================================
# Helpers
# ============================================================================

def make_board(width: int, height: int, mines) -> Board:
    """Build a fully valued board with a fixed mine layout."""
    mines = frozenset(mines)
    board = Board(BoardConfig(width, height, len(mines)), mines)
    board.compute_values()
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def board_factory():
    """Factory for valued boards with a fixed mine layout."""
    return make_board


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with its only mine in the middle."""
    return make_board(3, 3, {(1, 1)})


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with its only mine in the bottom-right corner."""
    return make_board(3, 3, {(2, 2)})


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board split by a wall of mines down column 2.

    Layout (x across, y down)::

        0 2 M 2 0
        0 3 M 3 0
        0 3 M 3 0
        0 3 M 3 0
        0 2 M 2 0
    """
    return make_board(5, 5, {(2, y) for y in range(5)})


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a default 8x8 game with 10 mines."""
    return Game(seed=1234)


@pytest.fixture
def center_mine_game() -> Game:
    """3x3 game with its only mine in the middle."""
    return Game(BoardConfig(3, 3, 1), mines={(1, 1)})


@pytest.fixture
def corner_mine_game() -> Game:
    """3x3 game with its only mine in the bottom-right corner."""
    return Game(BoardConfig(3, 3, 1), mines={(2, 2)})


@pytest.fixture
def two_mine_game() -> Game:
    """4x4 game with mines in opposite corners."""
    return Game(BoardConfig(4, 4, 2), mines={(0, 0), (3, 3)})


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create an unexplored safe cell."""
    return Cell(value=0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(value=MINE)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(value=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
