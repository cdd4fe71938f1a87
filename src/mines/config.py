"""
Configuration for Minesweeper boards.

Holds board dimensions and mine count, their legal ranges,
preset difficulty levels, and the settings clamp used by front ends.
"""
from dataclasses import dataclass
from numbers import Integral


# ============================================================================
# Constants
# ============================================================================

MIN_WIDTH = 1
MIN_HEIGHT = 1
MAX_WIDTH = 20
MAX_HEIGHT = 20


class InvalidConfigurationError(ValueError):
    """Board dimensions or mine count outside the legal ranges."""


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("width", "height", "num_mines"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidConfigurationError(
                    f"{name} must be an integer, got {value!r}"
                )
        if not MIN_WIDTH <= self.width <= MAX_WIDTH:
            raise InvalidConfigurationError(
                f"Width must be between {MIN_WIDTH} and {MAX_WIDTH}"
            )
        if not MIN_HEIGHT <= self.height <= MAX_HEIGHT:
            raise InvalidConfigurationError(
                f"Height must be between {MIN_HEIGHT} and {MAX_HEIGHT}"
            )
        if self.num_mines < 1:
            raise InvalidConfigurationError("At least one mine is required")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
DEFAULT = BoardConfig(8, 8, 10)
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(20, 20, 80)


# ============================================================================
# Settings Clamp
# ============================================================================

def clamp_settings(width, height, num_mines) -> BoardConfig:
    """
    Coerce raw user settings into a legal configuration.

    Each dimension is pulled into its legal range. A positive mine count is
    capped so one safe cell remains; anything else becomes one mine.

    Args:
        width: Requested columns (int or numeric string).
        height: Requested rows (int or numeric string).
        num_mines: Requested mine count (int or numeric string).

    Returns:
        A validated BoardConfig.

    Raises:
        InvalidConfigurationError: If a value is not numeric, or the
            clamped board has a single cell and cannot hold a mine.
    """
    try:
        width, height, num_mines = int(width), int(height), int(num_mines)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"Settings must be integers: {exc}") from exc

    width = min(max(width, MIN_WIDTH), MAX_WIDTH)
    height = min(max(height, MIN_HEIGHT), MAX_HEIGHT)

    if num_mines > 0:
        num_mines = min(num_mines, width * height - 1)
    else:
        num_mines = 1

    return BoardConfig(width, height, num_mines)
