#!/usr/bin/env python3
"""
Watch two Hex AIs play each other.

Usage:
    python scripts/play_hex.py --white alphabeta --black enhanced_mcts
    python scripts/play_hex.py --white mcts --black enhanced_mcts --games 10 --quiet
"""
import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from hex_light.config import BOARD_CONFIG, ALPHABETA_CONFIG, MCTS_CONFIG
from hex_light.game.match import HexMatch, create_player, evaluate
from hex_light.game.pieces import Piece

PLAYER_KINDS = ['alphabeta', 'mcts', 'enhanced_mcts', 'random']


def parse_args():
    parser = argparse.ArgumentParser(description="Play Hex between two AI players")
    parser.add_argument('--white', choices=PLAYER_KINDS, default='alphabeta',
                        help='Player moving first (connects left-right)')
    parser.add_argument('--black', choices=PLAYER_KINDS, default='enhanced_mcts',
                        help='Player moving second (connects top-bottom)')
    parser.add_argument('--size', type=int, default=BOARD_CONFIG['board_size'],
                        help='Board side length')
    parser.add_argument('--games', type=int, default=1,
                        help='Number of games; colors alternate when > 1')
    parser.add_argument('--depth', type=int, default=ALPHABETA_CONFIG['search_depth'],
                        help='Alpha-beta search depth')
    parser.add_argument('--time-limit-ms', type=int, default=MCTS_CONFIG['time_limit_ms'],
                        help='MCTS time budget per move')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for rollouts and the random player')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the final result')
    return parser.parse_args()


def main():
    args = parse_args()

    player_args = {
        'search_depth': args.depth,
        'time_limit_ms': args.time_limit_ms,
        'seed': args.seed,
        'verbose': not args.quiet,
    }

    print("=" * 60)
    print(f"Hex {args.size}x{args.size}: {args.white} (WHITE) vs {args.black} (BLACK)")
    print("=" * 60)

    if args.games == 1:
        match = HexMatch(
            create_player(args.white, Piece.WHITE, player_args),
            create_player(args.black, Piece.BLACK, player_args),
            board_size=args.size,
            verbose=not args.quiet,
        )
        result = match.play()
        print(f"\nWinner: {result.winner.name} after {result.num_moves} moves")
        return

    stats = evaluate(
        args.white, args.black,
        num_games=args.games,
        board_size=args.size,
        first_args={**player_args, 'verbose': False},
        second_args={**player_args, 'verbose': False},
        verbose=not args.quiet,
    )
    print(f"\n{args.white}: {stats['wins']} wins / {stats['total']} games "
          f"(win rate {stats['win_rate']:.1%})")
    print(f"{args.black}: {stats['losses']} wins / {stats['total']} games")


if __name__ == '__main__':
    main()
