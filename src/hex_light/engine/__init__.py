"""
Player contract and alpha-beta search engine for Hex.

- Player base class and the random baseline
- Fixed-depth minimax with alpha-beta pruning over the two-distance heuristic
"""

from hex_light.engine.player import Player, RandomPlayer, SearchResult
from hex_light.engine.alphabeta import AlphaBetaPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'SearchResult',
    'AlphaBetaPlayer',
]
