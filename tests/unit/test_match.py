"""
Unit tests for the game runner.
"""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from hex_light.engine.alphabeta import AlphaBetaPlayer
from hex_light.engine.player import Player, RandomPlayer
from hex_light.game.match import HexMatch, create_player, evaluate
from hex_light.game.pieces import Piece
from hex_light.mcts.enhanced_mcts import EnhancedMonteCarloPlayer
from hex_light.mcts.mcts import MonteCarloPlayer


class CornerPlayer(Player):
    """Always asks for the top-left cell, occupied or not."""

    def choose_move(self, board):
        return 0, 0


class TestCreatePlayer:

    def test_known_kinds(self):
        assert isinstance(create_player('alphabeta', Piece.WHITE), AlphaBetaPlayer)
        assert isinstance(create_player('mcts', Piece.BLACK), MonteCarloPlayer)
        assert isinstance(create_player('enhanced_mcts', Piece.BLACK), EnhancedMonteCarloPlayer)
        assert isinstance(create_player('random', Piece.WHITE, {'seed': 1}), RandomPlayer)

    def test_args_are_passed(self):
        player = create_player('alphabeta', Piece.WHITE, {'search_depth': 1})
        assert player.search_depth == 1

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            create_player('minimax', Piece.WHITE)

    def test_empty_piece_rejected(self):
        with pytest.raises(ValueError):
            RandomPlayer(Piece.EMPTY)


class TestHexMatch:

    def test_random_game_has_a_winner(self):
        match = HexMatch(RandomPlayer(Piece.WHITE, seed=0), RandomPlayer(Piece.BLACK, seed=1),
                         board_size=5)
        result = match.play()

        assert result.board.is_connected(result.winner)
        assert not result.board.is_connected(result.winner.opponent())
        assert result.num_moves == result.board.size ** 2 - result.board.num_empty()

        # WHITE moves first and colors alternate
        pieces = [piece for piece, _ in result.moves]
        assert pieces[0] == Piece.WHITE
        assert all(a != b for a, b in zip(pieces, pieces[1:]))
        assert pieces[-1] == result.winner

    def test_players_must_match_colors(self):
        with pytest.raises(ValueError):
            HexMatch(RandomPlayer(Piece.BLACK), RandomPlayer(Piece.WHITE))

    def test_occupied_cell_rejected(self):
        match = HexMatch(CornerPlayer(Piece.WHITE), CornerPlayer(Piece.BLACK), board_size=3)
        with pytest.raises(ValueError):
            match.play()

    def test_search_players_finish_a_game(self):
        white = AlphaBetaPlayer(Piece.WHITE, {'search_depth': 2})
        black = MonteCarloPlayer(Piece.BLACK, {'max_iterations': 20, 'seed': 3})
        result = HexMatch(white, black, board_size=3).play()

        assert result.board.is_connected(result.winner)
        cells = [move for _, move in result.moves]
        assert len(cells) == len(set(cells))


class TestEvaluate:

    def test_series_totals(self):
        stats = evaluate('random', 'random', num_games=4, board_size=3,
                         first_args={'seed': 0}, second_args={'seed': 1}, verbose=False)
        assert stats['total'] == 4
        assert stats['wins'] + stats['losses'] == 4
        assert stats['win_rate'] == stats['wins'] / 4

    def test_zero_games(self):
        stats = evaluate('random', 'random', num_games=0, verbose=False)
        assert stats == {'wins': 0, 'losses': 0, 'total': 0, 'win_rate': 0.0}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
