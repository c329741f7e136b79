from contextlib import contextmanager
from typing import List, Optional, Tuple

import numpy as np

from hex_light.game.pieces import Piece
from hex_light.game import connectivity
from hex_light.game import two_distance


Move = Tuple[int, int]


class Board:
    """
    Square Hex board with hexagonal adjacency.

    Board: N rows x N columns, cells hold Piece values (0 empty, 1 white, -1 black)
    Neighbours of (r, c): (r±1, c), (r, c±1), (r+1, c-1), (r-1, c+1)
    Win condition: WHITE joins left and right edges, BLACK joins top and bottom
    """

    def __init__(self, size=8):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)

    def __repr__(self):
        return f"Board({self.size}x{self.size}, stones={int(np.count_nonzero(self.grid))})"

    def __str__(self):
        """Rhombus-shaped text view, one row per line."""
        lines = ["   " + " ".join(str(col) for col in range(self.size))]
        for row in range(self.size):
            cells = " ".join(str(Piece(int(value))) for value in self.grid[row])
            lines.append(" " * row + f"{row:>2} {cells}")
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    @classmethod
    def from_array(cls, array):
        """Build a board from a square array-like of {-1, 0, 1}."""
        array = np.asarray(array)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Board array must be square, got shape {array.shape}")
        if not np.isin(array, (-1, 0, 1)).all():
            raise ValueError("Board array may only contain -1, 0 and 1")
        board = cls(array.shape[0])
        board.grid[:] = array
        return board

    def copy(self):
        """Deep copy: the new board never shares its grid."""
        board = Board(self.size)
        board.grid = self.grid.copy()
        return board

    def dimensions(self):
        return self.size

    def _check_bounds(self, row, col):
        if row < 0 or row >= self.size:
            raise IndexError(f"Invalid row {row} for board of size {self.size}")
        if col < 0 or col >= self.size:
            raise IndexError(f"Invalid column {col} for board of size {self.size}")

    def get(self, row, col) -> Piece:
        self._check_bounds(row, col)
        return Piece(int(self.grid[row, col]))

    def set(self, row, col, piece):
        self._check_bounds(row, col)
        self.grid[row, col] = Piece(piece)

    def clear(self, row, col):
        self._check_bounds(row, col)
        self.grid[row, col] = Piece.EMPTY

    def is_empty(self, row, col) -> bool:
        self._check_bounds(row, col)
        return self.grid[row, col] == Piece.EMPTY

    @contextmanager
    def trial(self, row, col, piece):
        """
        Place a stone for the duration of a `with` block.

        The cell is cleared again on every exit path, including exceptions.
        """
        if not self.is_empty(row, col):
            raise ValueError(f"Cell ({row}, {col}) is already occupied")
        self.set(row, col, piece)
        try:
            yield self
        finally:
            self.clear(row, col)

    def empty_cells(self) -> List[Move]:
        """Empty cells in row-major order."""
        rows, cols = np.nonzero(self.grid == Piece.EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def num_empty(self) -> int:
        return int(np.count_nonzero(self.grid == Piece.EMPTY))

    def is_full(self) -> bool:
        return self.num_empty() == 0

    def count(self, piece) -> int:
        return int(np.count_nonzero(self.grid == Piece(piece)))

    def stones(self, piece) -> List[Move]:
        rows, cols = np.nonzero(self.grid == Piece(piece))
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_connected(self, side) -> bool:
        return connectivity.is_connected(self.grid, Piece(side))

    def winner(self) -> Optional[Piece]:
        for side in (Piece.WHITE, Piece.BLACK):
            if self.is_connected(side):
                return side
        return None

    def evaluate(self, side) -> float:
        """Two-distance score for `side` (higher is better for `side`)."""
        return two_distance.evaluate(self.grid, Piece(side))
