"""
UCT enhanced with All-Moves-As-First (AMAF) statistics and an opening book.

AMAF treats a move played anywhere in a rollout as if it had been played
first. During backup, for every node on the path, each child whose move its
mover also played in the rollout gets an AMAF visit, plus an AMAF win if
that mover won. Selection and the final choice use the pooled rate

    (wins + amaf_wins) / (visits + amaf_visits)

with the UCB1 exploration term computed over pooled visit counts.
"""

import math

from hex_light.config import ENHANCED_MCTS_CONFIG
from hex_light.mcts.mcts import MonteCarloPlayer, Node
from hex_light.mcts.opening_book import opening_move
from hex_light.engine.player import SearchResult


class AMAFNode(Node):
    def __init__(self, move=None, parent=None, board=None):
        super().__init__(move, parent, board)
        self.amaf_visit_count = 0
        self.amaf_win_count = 0

    def total_visits(self):
        return self.visit_count + self.amaf_visit_count

    def win_rate(self):
        return (self.win_count + self.amaf_win_count) / self.total_visits()

    def get_ucb(self, child, c):
        exploitation = child.win_rate()
        exploration = math.sqrt(2.0 * math.log(self.total_visits()) / child.total_visits())
        return exploitation + c * exploration


class EnhancedMonteCarloPlayer(MonteCarloPlayer):
    """
    MCTS player with AMAF-pooled statistics. Plays from a fixed opening book
    while it has no stones on the board.
    """

    node_class = AMAFNode

    def __init__(self, piece, args=None, clock=None):
        super().__init__(piece, args, clock)
        self.use_opening_book = self.args['use_opening_book']

    def default_args(self):
        return ENHANCED_MCTS_CONFIG

    def search(self, board) -> SearchResult:
        if self.use_opening_book:
            move = opening_move(board, self.piece)
            if move is not None:
                return SearchResult(best_move=move, score=0.0)

        return super().search(board)

    def _backpropagate(self, node, mover, winner, played):
        player = mover
        while node is not None:
            node.visit_count += 1
            if node.parent is not None and player == winner:
                node.win_count += 1

            # Children of this node were created by the other color
            child_mover = player.opponent()
            child_moves = played[child_mover]
            for child in node.children:
                if child.move in child_moves:
                    child.amaf_visit_count += 1
                    if child_mover == winner:
                        child.amaf_win_count += 1

            node = node.parent
            player = player.opponent()
