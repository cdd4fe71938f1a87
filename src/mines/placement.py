"""
Mine placement for Minesweeper boards.

Deals a set of unique mine coordinates by rejection sampling.
"""
import random
from typing import FrozenSet, Optional, Tuple

from .config import InvalidConfigurationError


Position = Tuple[int, int]


def place_mines(
    num_mines: int,
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> FrozenSet[Position]:
    """
    Place mines at uniformly random, distinct positions.

    A coordinate is sampled and kept only if it is not already taken;
    collisions are resampled. At least one cell always stays free, so
    the loop terminates.

    Args:
        num_mines: Number of mines to place.
        width: Number of columns.
        height: Number of rows.
        rng: Random source; the module-level generator if omitted.

    Returns:
        Frozen set of (x, y) mine positions.

    Raises:
        InvalidConfigurationError: If num_mines is not in [1, width*height).
    """
    if width < 1 or height < 1:
        raise InvalidConfigurationError("Board dimensions must be positive")
    if not 0 < num_mines < width * height:
        raise InvalidConfigurationError(
            f"Mine count must be between 1 and {width * height - 1}"
        )

    rng = rng or random.Random()
    mines = set()
    while len(mines) < num_mines:
        position = (rng.randrange(width), rng.randrange(height))
        if position not in mines:
            mines.add(position)
    return frozenset(mines)
