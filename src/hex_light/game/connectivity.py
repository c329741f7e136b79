"""
Edge-to-edge connectivity check for Hex.

A side has won when a chain of its stones joins its two edges:
- WHITE: column 0 to column N-1
- BLACK: row 0 to row N-1

The search is an iterative depth-first flood fill over same-colored stones.
"""

from functools import lru_cache
from typing import List, Tuple

import numpy as np

from hex_light.game.pieces import Piece


# (dr, dc) offsets of the six hex neighbours
HEX_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, 1))


@lru_cache(maxsize=None)
def neighbor_table(size: int) -> Tuple[Tuple[Tuple[int, int], ...], ...]:
    """
    In-bounds hex neighbours of every cell, indexed by row * size + col.
    """
    table = []
    for row in range(size):
        for col in range(size):
            cells = []
            for dr, dc in HEX_DIRECTIONS:
                r, c = row + dr, col + dc
                if 0 <= r < size and 0 <= c < size:
                    cells.append((r, c))
            table.append(tuple(cells))
    return tuple(table)


def start_edge(side: Piece, size: int) -> List[Tuple[int, int]]:
    if side == Piece.WHITE:
        return [(row, 0) for row in range(size)]
    if side == Piece.BLACK:
        return [(0, col) for col in range(size)]
    raise ValueError(f"Invalid side: {side!r}")


def on_goal_edge(side: Piece, row: int, col: int, size: int) -> bool:
    if side == Piece.WHITE:
        return col == size - 1
    return row == size - 1


def is_connected(grid: np.ndarray, side: Piece) -> bool:
    """
    Check whether `side` connects its two edges.

    Args:
        grid: (N, N) board array with values in {-1, 0, 1}
        side: Piece.WHITE or Piece.BLACK

    Returns:
        True if a chain of `side` stones touches both of its edges
    """
    size = grid.shape[0]
    neighbors = neighbor_table(size)

    stack = []
    visited = set()
    for row, col in start_edge(side, size):
        if grid[row, col] == side:
            stack.append((row, col))
            visited.add((row, col))

    while stack:
        row, col = stack.pop()
        if on_goal_edge(side, row, col, size):
            return True

        for r, c in neighbors[row * size + col]:
            if (r, c) not in visited and grid[r, c] == side:
                visited.add((r, c))
                stack.append((r, c))

    return False
