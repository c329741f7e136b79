"""
Fixed-depth minimax search with alpha-beta pruning for Hex.

Leaves are scored with the two-distance heuristic from the searching side's
point of view, so the tree alternates max nodes (our stones) and min nodes
(opponent stones) instead of using negamax.

Algorithm overview:

    def alphabeta(board, depth, alpha, beta, maximizing):
        if depth == 0 or board is full:
            return board.evaluate(own_side)

        for move in board.empty_cells():           # row-major order
            with board.trial(move, mover):         # always undone
                score = alphabeta(board, depth-1, alpha, beta, not maximizing)
            update best, alpha (max node) or beta (min node)
            if alpha >= beta:
                break                              # prune remaining siblings
        return best
"""

import math
import time
from typing import Optional

from hex_light.config import ALPHABETA_CONFIG
from hex_light.engine.player import Player, SearchResult


class AlphaBetaPlayer(Player):
    """
    Depth-limited alpha-beta player.

    Move ordering is plain enumeration order; the search explores a private
    copy of the board and never touches the caller's board.
    """

    def __init__(self, piece, args=None):
        """
        Args:
            piece: Color this player places
            args: Overrides for ALPHABETA_CONFIG ('search_depth', 'verbose')
        """
        super().__init__(piece)
        self.args = {**ALPHABETA_CONFIG, **(args or {})}
        self.search_depth = self.args['search_depth']
        self.verbose = self.args['verbose']

        # Search statistics
        self.nodes_searched = 0

    def choose_move(self, board):
        result = self.search(board)
        if result.best_move is None:
            raise ValueError("No valid moves available")

        if self.verbose:
            print(f"MOVE FOUND: {result.best_move} "
                  f"(score={result.score:.4f}, nodes={result.nodes_searched}, {result.time_ms}ms)")

        return result.best_move

    def search(self, board, depth: Optional[int] = None) -> SearchResult:
        """
        Main search entry point.

        Args:
            board: Current board (left unmodified)
            depth: Override search depth

        Returns:
            SearchResult with best move and its backed-up score. At depth 0
            this is the static evaluation with best_move=None.
        """
        start_time = time.time()
        self.nodes_searched = 0
        depth = self.search_depth if depth is None else depth

        work_board = board.copy()

        if depth <= 0 or work_board.is_full():
            score = self._evaluate(work_board)
            best_move = None
        else:
            score, best_move = self._search_root(work_board, depth)

        return SearchResult(
            best_move=best_move,
            score=score,
            nodes_searched=self.nodes_searched,
            time_ms=int((time.time() - start_time) * 1000),
        )

    def _search_root(self, board, depth: int):
        """
        Root max node. Returns (score, best_move); the first move wins ties.
        """
        best_score = -math.inf
        best_move = None
        alpha = -math.inf
        beta = math.inf

        for row, col in board.empty_cells():
            with board.trial(row, col, self.piece):
                score = self._alphabeta(board, depth - 1, alpha, beta, maximizing=False)

            if best_move is None or score > best_score:
                best_score = score
                best_move = (row, col)
                alpha = max(alpha, score)

        return best_score, best_move

    def _alphabeta(self, board, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
        """
        Minimax with alpha-beta pruning.

        Args:
            board: Board to explore (restored before returning)
            depth: Remaining plies
            alpha: Best score the max side can already force
            beta: Best score the min side can already force
            maximizing: True when it is our turn at this node

        Returns:
            Backed-up heuristic score from our point of view
        """
        self.nodes_searched += 1

        moves = board.empty_cells()
        if depth == 0 or not moves:
            return self._evaluate(board)

        if maximizing:
            value = -math.inf
            for row, col in moves:
                with board.trial(row, col, self.piece):
                    value = max(value, self._alphabeta(board, depth - 1, alpha, beta, False))
                alpha = max(alpha, value)

                # Max cutoff
                if alpha >= beta:
                    break
            return value

        value = math.inf
        opponent = self.piece.opponent()
        for row, col in moves:
            with board.trial(row, col, opponent):
                value = min(value, self._alphabeta(board, depth - 1, alpha, beta, True))
            beta = min(beta, value)

            # Min cutoff
            if alpha >= beta:
                break
        return value

    def _evaluate(self, board) -> float:
        """Leaf evaluation: two-distance ratio for our side."""
        return board.evaluate(self.piece)
