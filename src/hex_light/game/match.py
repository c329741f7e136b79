from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tqdm import tqdm

from hex_light.config import BOARD_CONFIG
from hex_light.engine.alphabeta import AlphaBetaPlayer
from hex_light.engine.player import RandomPlayer
from hex_light.game.board import Board
from hex_light.game.pieces import Piece
from hex_light.mcts.mcts import MonteCarloPlayer
from hex_light.mcts.enhanced_mcts import EnhancedMonteCarloPlayer


@dataclass
class MatchResult:
    """Outcome of one game."""
    winner: Piece
    moves: List[Tuple[Piece, Tuple[int, int]]] = field(default_factory=list)
    board: Optional[Board] = None

    @property
    def num_moves(self):
        return len(self.moves)


def create_player(kind, piece, args=None):
    """
    Build a player from its name: 'alphabeta', 'mcts', 'enhanced_mcts' or 'random'.
    """
    args = args or {}
    if kind == 'alphabeta':
        return AlphaBetaPlayer(piece, args)
    if kind == 'mcts':
        return MonteCarloPlayer(piece, args)
    if kind == 'enhanced_mcts':
        return EnhancedMonteCarloPlayer(piece, args)
    if kind == 'random':
        return RandomPlayer(piece, seed=args.get('seed'))
    raise ValueError(f"Unknown player kind: {kind!r}")


class HexMatch:
    """Play games between two players. WHITE always moves first."""

    def __init__(self, white_player, black_player, board_size=None, verbose=False):
        if white_player.piece != Piece.WHITE or black_player.piece != Piece.BLACK:
            raise ValueError("white_player must play WHITE and black_player must play BLACK")
        self.players = {Piece.WHITE: white_player, Piece.BLACK: black_player}
        self.board_size = board_size if board_size is not None else BOARD_CONFIG['board_size']
        self.verbose = verbose

    def play(self) -> MatchResult:
        """
        Alternate moves until one side connects its edges.
        Returns: MatchResult with the winner and the move list
        """
        board = Board(self.board_size)
        moves = []
        piece = Piece.WHITE

        if self.verbose:
            print(board)

        while True:
            player = self.players[piece]
            if self.verbose:
                print(f"\n{piece.name}'s turn ({type(player).__name__})")

            row, col = player.choose_move(board)
            if not board.is_empty(row, col):
                raise ValueError(f"{player!r} chose occupied cell ({row}, {col})")

            board.set(row, col, piece)
            moves.append((piece, (row, col)))

            if self.verbose:
                print(board)

            if board.is_connected(piece):
                if self.verbose:
                    print(f"\n{piece.name} wins after {len(moves)} moves!")
                return MatchResult(winner=piece, moves=moves, board=board)

            piece = piece.opponent()


def evaluate(first_kind, second_kind, num_games=10, board_size=None,
             first_args=None, second_args=None, verbose=True):
    """
    Play a series between two player kinds, alternating colors each game.
    Returns: dict with wins, losses, total and win_rate for `first_kind`
    """
    wins = 0
    losses = 0

    iterator = tqdm(range(num_games), desc="Games") if verbose else range(num_games)

    for i in iterator:
        # Alternate who plays first
        first_piece = Piece.WHITE if i % 2 == 0 else Piece.BLACK
        first = create_player(first_kind, first_piece, first_args)
        second = create_player(second_kind, first_piece.opponent(), second_args)

        if first_piece == Piece.WHITE:
            match = HexMatch(first, second, board_size)
        else:
            match = HexMatch(second, first, board_size)

        result = match.play()
        if result.winner == first_piece:
            wins += 1
        else:
            losses += 1

    return {
        'wins': wins,
        'losses': losses,
        'total': num_games,
        'win_rate': wins / num_games if num_games else 0.0,
    }
