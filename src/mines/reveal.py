"""
Flood-fill reveal for Minesweeper boards.

Opens a safe cell and cascades breadth-first through connected
zero-value cells, stopping at their numbered fringe.
"""
import random
from collections import deque
from typing import List, Optional, Tuple

from .board import Board


Position = Tuple[int, int]


def flood_fill(
    board: Board,
    x: int,
    y: int,
    rng: Optional[random.Random] = None,
) -> List[Position]:
    """
    Reveal (x, y) and cascade through neighboring zero-value cells.

    Every position is queued at most once. Only unexplored, mine-free
    cells are expanded; marked and cheat cells stop the cascade.

    Args:
        board: Board with computed values.
        x: Column to start from.
        y: Row to start from.
        rng: If given, shuffles each batch of neighbors before queueing.
            The revealed set does not depend on the order.

    Returns:
        Positions revealed, in expansion order. Empty if (x, y) is out of
        range, holds a mine, or is not unexplored.
    """
    revealed = []
    queue = deque([(x, y)])
    visited = {(x, y)}

    while queue:
        cx, cy = queue.popleft()
        if not _expand(board, cx, cy):
            continue
        revealed.append((cx, cy))

        if board.get_cell(cx, cy).value != 0:
            continue
        neighbors = board.neighbors(cx, cy)
        if rng is not None:
            rng.shuffle(neighbors)
        for position in neighbors:
            if position not in visited:
                visited.add(position)
                queue.append(position)

    return revealed


def _expand(board: Board, x: int, y: int) -> bool:
    """Reveal a single cell if it is an unexplored non-mine."""
    cell = board.get_cell(x, y)
    if cell is None or board.has_mine(x, y):
        return False
    return cell.reveal()
