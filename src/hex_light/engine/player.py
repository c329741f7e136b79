from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from hex_light.game.pieces import Piece


@dataclass
class SearchResult:
    """Result of a move search."""
    best_move: Optional[Tuple[int, int]]
    score: float
    nodes_searched: int = 0
    iterations: int = 0
    time_ms: int = 0


class Player(ABC):
    """
    Abstract Base Class for a Hex player.
    """

    def __init__(self, piece):
        self.piece = Piece(piece)
        if self.piece == Piece.EMPTY:
            raise ValueError("A player must play WHITE or BLACK")

    def __repr__(self):
        return f"{type(self).__name__}({self.piece.name})"

    @abstractmethod
    def choose_move(self, board):
        """
        Returns the (row, col) this player wants to play. Must not modify `board`.
        """
        pass

    def make_move(self, board):
        """
        Chooses a move and commits it to `board`.
        """
        move = self.choose_move(board)
        board.set(move[0], move[1], self.piece)
        return move


class RandomPlayer(Player):
    """
    Uniformly random baseline opponent.
    """

    def __init__(self, piece, seed=None):
        super().__init__(piece)
        self.rng = np.random.default_rng(seed)

    def choose_move(self, board):
        valid_moves = board.empty_cells()
        if not valid_moves:
            raise ValueError("No valid moves available")
        return valid_moves[self.rng.integers(len(valid_moves))]
