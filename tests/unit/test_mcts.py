"""
Unit tests for the plain UCT player.

Tests verify:
1. Tree statistics stay consistent (root visits == sum of child visits)
2. Terminal positions give root-only iterations
3. A fixed seed and clock reproduce the same move
4. An immediate connection is found
5. Final selection uses win rate, not visit count
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from hex_light.game.board import Board
from hex_light.game.pieces import Piece
from hex_light.mcts.mcts import MonteCarloPlayer, Node


class FakeClock:
    """Advances by `step` seconds every time it is read."""

    def __init__(self, step=0.001):
        self.ticks = 0
        self.step = step

    def __call__(self):
        t = self.ticks * self.step
        self.ticks += 1
        return t


def winning_position():
    # WHITE to move; (1,1) completes row 1
    return Board.from_array([
        [0, -1, 0],
        [1, 0, 1],
        [0, -1, 0],
    ])


class TestNode:
    """Test node bookkeeping."""

    def test_equality_by_move(self):
        root = Node(board=Board(2))
        assert Node(move=(0, 1), parent=root) == Node(move=(0, 1))
        assert Node(move=(0, 1)) != Node(move=(1, 0))
        assert len({Node(move=(0, 1)), Node(move=(0, 1))}) == 1

    def test_possible_children_counted_once(self):
        board = Board(2)
        board.set(0, 0, Piece.WHITE)
        root = Node(board=board)
        assert root.possible_children == 3
        assert not root.is_fully_expanded()

    def test_expand_in_row_major_order(self):
        board = Board(2)
        root = Node(board=board)

        moves = []
        for _ in range(4):
            child = root.expand(board.copy(), Piece.WHITE)
            moves.append(child.move)
            assert child.parent is root

        assert moves == [(0, 0), (0, 1), (1, 0), (1, 1)]
        assert root.is_fully_expanded()

        with pytest.raises(RuntimeError):
            root.expand(board.copy(), Piece.WHITE)

    def test_expand_places_stone(self):
        board = Board(2)
        root = Node(board=board)
        child = root.expand(board, Piece.BLACK)
        assert board.get(*child.move) == Piece.BLACK
        # Child counts replies from the position after the move
        assert child.possible_children == 3

    def test_select_exploits_with_zero_c(self):
        root = Node(board=Board(2))
        root.visit_count = 20
        for move, wins, visits in [((0, 0), 2, 10), ((0, 1), 8, 10)]:
            child = Node(move=move, parent=root)
            child.win_count = wins
            child.visit_count = visits
            root.children.append(child)

        assert root.select(0.0).move == (0, 1)


class TestMonteCarloPlayer:
    """Test the search loop."""

    def test_root_visits_equal_child_visits(self):
        player = MonteCarloPlayer(Piece.WHITE, {'max_iterations': 50, 'seed': 0})
        root, iterations = player.build_tree(Board(3))

        assert iterations == 50
        assert root.visit_count == 50
        assert sum(child.visit_count for child in root.children) == 50
        assert len(root.children) == 9

    def test_search_leaves_board_untouched(self):
        board = winning_position()
        before = board.copy()
        player = MonteCarloPlayer(Piece.WHITE, {'max_iterations': 30, 'seed': 1})
        player.choose_move(board)
        assert board == before

    def test_full_board_gives_root_only_iterations(self):
        board = Board.from_array(np.array([[1, -1], [-1, 1]]))
        player = MonteCarloPlayer(Piece.WHITE, {'max_iterations': 5})

        root, iterations = player.build_tree(board)
        assert iterations == 5
        assert root.visit_count == 5
        assert root.children == []

        with pytest.raises(ValueError):
            player.search(board)

    def test_at_least_one_iteration(self):
        player = MonteCarloPlayer(Piece.BLACK, {'time_limit_ms': 0, 'seed': 2})
        root, iterations = player.build_tree(Board(4))
        assert iterations == 1
        assert root.visit_count == 1

    def test_time_budget_with_fake_clock(self):
        # 1ms per clock read: one read at start, one per budget check
        player = MonteCarloPlayer(Piece.WHITE, {'time_limit_ms': 10, 'seed': 3},
                                  clock=FakeClock(step=0.001))
        _, iterations = player.build_tree(Board(4))
        assert iterations == 10

    def test_same_seed_same_move(self):
        moves = []
        for _ in range(2):
            player = MonteCarloPlayer(Piece.WHITE, {'time_limit_ms': 100, 'seed': 42},
                                      clock=FakeClock())
            moves.append(player.choose_move(Board(8)))
        assert moves[0] == moves[1]

    def test_finds_connecting_move(self):
        player = MonteCarloPlayer(Piece.WHITE, {
            'max_iterations': 500,
            'time_limit_ms': 10 ** 9,
            'seed': 7,
        })
        result = player.search(winning_position())
        assert result.best_move == (1, 1)
        assert result.score == 1.0
        assert result.iterations == 500

    def test_make_move_commits_stone(self):
        board = Board(3)
        player = MonteCarloPlayer(Piece.BLACK, {'max_iterations': 20, 'seed': 4})
        move = player.make_move(board)
        assert board.get(*move) == Piece.BLACK
        assert board.num_empty() == 8


class TestBackpropagation:
    """Test the statistics update along the path."""

    def test_winner_credited_on_its_nodes(self):
        board = Board(2)
        root = Node(board=board)
        child = root.expand(board.copy(), Piece.WHITE)
        player = MonteCarloPlayer(Piece.WHITE)

        played = {Piece.WHITE: set(), Piece.BLACK: set()}
        player._backpropagate(child, Piece.WHITE, Piece.WHITE, played)
        assert (child.visit_count, child.win_count) == (1, 1)
        assert (root.visit_count, root.win_count) == (1, 0)

        player._backpropagate(child, Piece.WHITE, Piece.BLACK, played)
        assert (child.visit_count, child.win_count) == (2, 1)
        assert (root.visit_count, root.win_count) == (2, 0)

    def test_rollout_fills_board(self):
        board = Board(3)
        board.set(0, 0, Piece.WHITE)
        player = MonteCarloPlayer(Piece.WHITE, {'seed': 5})

        winner, played = player._rollout(board, Piece.WHITE)
        assert board.is_full()
        assert board.is_connected(winner)
        assert not board.is_connected(winner.opponent())
        # Colors alternate starting with BLACK
        assert len(played[Piece.BLACK]) == 4
        assert len(played[Piece.WHITE]) == 4


class TestFinalSelection:
    """Test choosing the move to play."""

    def make_root(self, stats):
        root = Node(board=Board(2))
        for move, wins, visits in stats:
            child = Node(move=move, parent=root)
            child.win_count = wins
            child.visit_count = visits
            root.children.append(child)
        return root

    def test_prefers_win_rate_over_visits(self):
        root = self.make_root([((0, 0), 60, 100), ((0, 1), 3, 4)])
        best = MonteCarloPlayer(Piece.WHITE).select_best_child(root)
        assert best.move == (0, 1)

    def test_first_child_wins_ties(self):
        root = self.make_root([((1, 0), 1, 2), ((0, 0), 5, 10)])
        best = MonteCarloPlayer(Piece.WHITE).select_best_child(root)
        assert best.move == (1, 0)

    def test_zero_win_rate_can_be_chosen(self):
        root = self.make_root([((0, 0), 0, 3), ((1, 1), 0, 5)])
        best = MonteCarloPlayer(Piece.WHITE).select_best_child(root)
        assert best.move == (0, 0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
