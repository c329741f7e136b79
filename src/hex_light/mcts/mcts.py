import math
import time
import weakref

import numpy as np

from hex_light.config import MCTS_CONFIG
from hex_light.engine.player import Player, SearchResult
from hex_light.game.pieces import Piece


class Node:
    """
    UCT tree node. Parents own their children; the parent link is a weak
    reference used only for backpropagation.
    """

    def __init__(self, move=None, parent=None, board=None):
        self.move = move
        self._parent = weakref.ref(parent) if parent is not None else None

        self.children = []
        self._child_moves = set()

        self.visit_count = 0
        self.win_count = 0

        # Legal replies from this position, counted once so that
        # is_fully_expanded() is O(1)
        self.possible_children = board.num_empty() if board is not None else 0

    @property
    def parent(self):
        return self._parent() if self._parent is not None else None

    def __repr__(self):
        return f"{type(self).__name__}(move={self.move}, wins={self.win_count}, visits={self.visit_count})"

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.move == other.move

    def __hash__(self):
        return hash(self.move)

    def is_fully_expanded(self):
        return len(self.children) == self.possible_children

    def win_rate(self):
        return self.win_count / self.visit_count

    def select(self, c):
        best_child = None
        best_ucb = -np.inf

        for child in self.children:
            ucb = self.get_ucb(child, c)
            if ucb > best_ucb:
                best_child = child
                best_ucb = ucb

        return best_child

    def get_ucb(self, child, c):
        exploitation = child.win_count / child.visit_count
        exploration = math.sqrt(2.0 * math.log(self.visit_count) / child.visit_count)
        return exploitation + c * exploration

    def expand(self, board, piece):
        """
        Add the first empty cell (row-major) that is not already a child and
        play it on `board`.
        """
        for row, col in board.empty_cells():
            if (row, col) not in self._child_moves:
                board.set(row, col, piece)

                child = type(self)((row, col), self, board)
                self.children.append(child)
                self._child_moves.add((row, col))
                return child

        raise RuntimeError("No empty cells left to expand")


class MonteCarloPlayer(Player):
    """
    Time-bounded UCT player with uniformly random rollouts.

    Each iteration: select with UCB1, expand one child, play the rest of the
    board out at random, back the winner up the path. After the budget the
    root child with the best win rate is played.
    """

    node_class = Node

    def __init__(self, piece, args=None, clock=None):
        """
        Args:
            piece: Color this player places
            args: Overrides for MCTS_CONFIG
            clock: Callable returning seconds; defaults to time.monotonic
        """
        super().__init__(piece)
        self.args = {**self.default_args(), **(args or {})}
        self.c = self.args['C']
        self.time_limit_ms = self.args['time_limit_ms']
        self.max_iterations = self.args['max_iterations']
        self.verbose = self.args['verbose']

        self.rng = np.random.default_rng(self.args['seed'])
        self.clock = clock if clock is not None else time.monotonic

    def default_args(self):
        return MCTS_CONFIG

    def choose_move(self, board):
        result = self.search(board)

        if self.verbose:
            print(f"MOVE FOUND: {result.best_move} "
                  f"(win rate={result.score:.3f}, simulations={result.iterations}, {result.time_ms}ms)")

        return result.best_move

    def search(self, board) -> SearchResult:
        """
        Run MCTS from `board` (left unmodified) and pick the best root child.
        """
        if board.is_full():
            raise ValueError("No valid moves available")

        start_time = time.time()
        root, iterations = self.build_tree(board)
        best_child = self.select_best_child(root)

        return SearchResult(
            best_move=best_child.move,
            score=self.final_score(best_child),
            iterations=iterations,
            time_ms=int((time.time() - start_time) * 1000),
        )

    def build_tree(self, board):
        """
        Grow a fresh tree until the budget is spent.

        The budget is checked before each iteration; a started rollout always
        finishes. At least one iteration always runs.

        Returns:
            (root, iterations)
        """
        root = self.node_class(board=board)
        start = self.clock()
        iterations = 0

        while iterations == 0 or self._budget_left(start, iterations):
            self._run_iteration(board, root)
            iterations += 1

        return root, iterations

    def _budget_left(self, start, iterations):
        if self.max_iterations is not None and iterations >= self.max_iterations:
            return False
        return (self.clock() - start) * 1000 < self.time_limit_ms

    def _run_iteration(self, board, root):
        work_board = board.copy()
        node, mover = self._tree_policy(work_board, root)
        winner, played = self._rollout(work_board, mover)
        self._backpropagate(node, mover, winner, played)

    def _tree_policy(self, board, root):
        """
        Descend with UCB1 until a node can be expanded, then expand it.

        Returns:
            (node, mover) where mover is the color whose stone created `node`.
            A terminal node (no empty cell) is returned without expansion.
        """
        node = root
        mover = self.piece.opponent()

        while True:
            if not node.is_fully_expanded():
                return node.expand(board, mover.opponent()), mover.opponent()

            if not node.children:
                return node, mover

            node = node.select(self.c)
            mover = mover.opponent()
            board.set(node.move[0], node.move[1], mover)

    def _rollout(self, board, mover):
        """
        Fill every empty cell at random, alternating colors.

        Returns:
            (winner, played) where played maps each color to the set of
            cells it filled during the rollout.
        """
        empty = board.empty_cells()
        played = {Piece.WHITE: set(), Piece.BLACK: set()}

        player = mover
        for index in self.rng.permutation(len(empty)):
            player = player.opponent()
            row, col = empty[index]
            board.set(row, col, player)
            played[player].add((row, col))

        # A full Hex board always has exactly one winner
        winner = Piece.BLACK if board.is_connected(Piece.BLACK) else Piece.WHITE
        return winner, played

    def _backpropagate(self, node, mover, winner, played):
        player = mover
        while node is not None:
            node.visit_count += 1
            if node.parent is not None and player == winner:
                node.win_count += 1

            node = node.parent
            player = player.opponent()

    def final_score(self, child):
        return child.win_rate()

    def select_best_child(self, root):
        """
        Root child with the highest win rate (not the most visits); the
        first child wins ties.
        """
        best_child = None
        best_score = -np.inf

        for child in root.children:
            score = self.final_score(child)
            if score > best_score:
                best_child = child
                best_score = score

        return best_child
