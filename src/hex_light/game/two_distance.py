"""
Two-distance heuristic for Hex positions.

The two-distance of an empty cell to an edge is the *second* smallest distance
among its neighbours, plus one. An opponent can block the best neighbour, so
only the second best path counts. Own stones are transparent: a cell sees
through every chain of own stones it touches (its "bridge group"), and the
group's neighbours count as the cell's neighbours.

Labels start at 1 for empty cells on the target edge; the virtual row beyond
the edge counts as 0. A label therefore equals the number of stones still
needed to reach that edge, this cell included.

Algorithm (one field, one edge):

    seed edge cells, mark own stones OWN and opponent stones BLOCKED
    for cell in scan order moving away from the edge:
        values = labels of the bridge group's neighbours
        if len(values) >= 2:
            label = second_smallest(values) + 1
        else:
            defer cell
    for cell in deferred (FIFO):
        label = second_smallest + 1, else smallest + 1, else stays unlabeled

A side's distance is min(|left + right|) over cells labeled in both of its
fields (top/bottom for BLACK). Unreachable positions get INFINITE_DISTANCE
so that scores stay finite and comparable.
"""

from collections import deque
from typing import List, Tuple

import numpy as np

from hex_light.game.pieces import Piece
from hex_light.game.connectivity import HEX_DIRECTIONS, is_connected


# Field sentinels (real labels are >= 1)
UNLABELED = 0
OWN = -1
BLOCKED = -2

# Finite stand-in for "no connecting path"
INFINITE_DISTANCE = 1_000_000

EDGES = {
    Piece.WHITE: ('left', 'right'),
    Piece.BLACK: ('top', 'bottom'),
}


def scan_order(edge: str, size: int) -> List[Tuple[int, int]]:
    """
    First-pass visiting order: lines parallel to the edge, moving away from it.

    The far edges ('right', 'bottom') are the near edges rotated by 180°,
    so their lines are also walked in reverse.
    """
    if edge == 'left':
        return [(row, col) for col in range(1, size) for row in range(size)]
    if edge == 'right':
        return [(row, col) for col in range(size - 2, -1, -1) for row in range(size - 1, -1, -1)]
    if edge == 'top':
        return [(row, col) for row in range(1, size) for col in range(size)]
    if edge == 'bottom':
        return [(row, col) for row in range(size - 2, -1, -1) for col in range(size - 1, -1, -1)]
    raise ValueError(f"Unknown edge: {edge!r}")


def _beyond_edge(edge: str, row: int, col: int, size: int) -> bool:
    # Virtual cells past the target edge, within the perpendicular range
    if edge == 'left':
        return col < 0 and 0 <= row < size
    if edge == 'right':
        return col >= size and 0 <= row < size
    if edge == 'top':
        return row < 0 and 0 <= col < size
    return row >= size and 0 <= col < size


def _seed_field(grid: np.ndarray, side: Piece, edge: str) -> List[List[int]]:
    size = grid.shape[0]
    field = [[UNLABELED] * size for _ in range(size)]

    if edge == 'left':
        for row in range(size):
            field[row][0] = 1
    elif edge == 'right':
        for row in range(size):
            field[row][size - 1] = 1
    elif edge == 'top':
        field[0] = [1] * size
    else:
        field[size - 1] = [1] * size

    opponent = side.opponent()
    for row in range(size):
        for col in range(size):
            value = grid[row, col]
            if value == side:
                field[row][col] = OWN
            elif value == opponent:
                field[row][col] = BLOCKED

    return field


def bridge_group(field: List[List[int]], row: int, col: int) -> set:
    """The cell plus every own stone reachable from it through own stones."""
    size = len(field)
    group = {(row, col)}
    stack = [(row, col)]

    while stack:
        r, c = stack.pop()
        for dr, dc in HEX_DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < size and 0 <= nc < size and field[nr][nc] == OWN and (nr, nc) not in group:
                group.add((nr, nc))
                stack.append((nr, nc))

    return group


def _neighbor_values(field: List[List[int]], edge: str, row: int, col: int) -> List[int]:
    size = len(field)
    locations = {}

    for r, c in bridge_group(field, row, col):
        for dr, dc in HEX_DIRECTIONS:
            nr, nc = r + dr, c + dc
            if (nr, nc) in locations:
                continue
            if 0 <= nr < size and 0 <= nc < size:
                if field[nr][nc] > UNLABELED:
                    locations[(nr, nc)] = field[nr][nc]
            elif _beyond_edge(edge, nr, nc, size):
                locations[(nr, nc)] = 0

    return sorted(locations.values())


def _label_cell(field: List[List[int]], edge: str, row: int, col: int, deferred: bool) -> bool:
    """
    Label one cell.

    Returns:
        True if a second-smallest neighbour value was found. In the deferred
        pass the cell falls back to the smallest value, or stays unlabeled.
    """
    values = _neighbor_values(field, edge, row, col)

    if len(values) >= 2:
        field[row][col] = values[1] + 1
        return True

    if deferred and values:
        field[row][col] = values[0] + 1

    return False


def distance_field(grid: np.ndarray, side: Piece, edge: str) -> np.ndarray:
    """
    Compute the two-distance field of `side` toward one of its edges.

    Args:
        grid: (N, N) board array with values in {-1, 0, 1}
        side: Side whose stones are transparent
        edge: 'left'/'right' for WHITE, 'top'/'bottom' for BLACK

    Returns:
        (N, N) int array: labels >= 1, UNLABELED for unreachable empty cells,
        OWN / BLOCKED for stones
    """
    if edge not in EDGES[side]:
        raise ValueError(f"{side.name} does not connect the {edge} edge")

    size = grid.shape[0]
    field = _seed_field(grid, side, edge)

    skipped = deque()
    for row, col in scan_order(edge, size):
        if field[row][col] == UNLABELED and not _label_cell(field, edge, row, col, deferred=False):
            skipped.append((row, col))

    while skipped:
        row, col = skipped.popleft()
        _label_cell(field, edge, row, col, deferred=True)

    return np.array(field, dtype=np.int64)


def combine_fields(first: np.ndarray, second: np.ndarray) -> int:
    """Smallest |first + second| over cells labeled in both fields."""
    labeled = (first > UNLABELED) & (second > UNLABELED)
    if not labeled.any():
        return INFINITE_DISTANCE
    return int(np.abs(first + second)[labeled].min())


def two_distance(grid: np.ndarray, side: Piece) -> int:
    """Number of stones `side` still needs, estimated with two-distance."""
    first_edge, second_edge = EDGES[side]
    return combine_fields(
        distance_field(grid, side, first_edge),
        distance_field(grid, side, second_edge),
    )


def evaluate(grid: np.ndarray, side: Piece) -> float:
    """
    Score a position for `side`: opponent distance / own distance.

    Higher is better for `side`. Both distances are >= 2 or INFINITE_DISTANCE,
    so the ratio is always finite. A decided position scores INFINITE_DISTANCE
    for the connected side and its reciprocal for the other side.
    """
    if is_connected(grid, side):
        return float(INFINITE_DISTANCE)
    if is_connected(grid, side.opponent()):
        return 1.0 / INFINITE_DISTANCE

    own = two_distance(grid, side)
    opponent = two_distance(grid, side.opponent())
    return opponent / own
