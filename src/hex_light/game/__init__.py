"""
Hex board, win check and two-distance heuristic.
"""

from hex_light.game.pieces import Piece
from hex_light.game.board import Board, Move

__all__ = [
    'Piece',
    'Board',
    'Move',
]
