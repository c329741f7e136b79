"""
Fixed first-move replies for the enhanced MCTS player.

The first mover takes the upper-left center cell. The second mover answers
the opponent's first stone from a small table: each of the central cells has
an adjacent reply, and any other stone is answered with the central cell of
its quadrant. Threshold checks run in a fixed order, so stones on the midline
fall into the first matching quadrant.
"""

from typing import Optional, Tuple

from hex_light.game.pieces import Piece


def center_cells(size: int) -> Tuple[int, int]:
    """(lo, hi) indices of the central rows/columns; equal on odd boards."""
    return (size - 1) // 2, size // 2


def first_move(size: int) -> Tuple[int, int]:
    lo, _ = center_cells(size)
    return lo, lo


def reply_to(row: int, col: int, size: int) -> Tuple[int, int]:
    """Reply to an opponent's first stone at (row, col)."""
    lo, hi = center_cells(size)

    if lo == hi:
        if (row, col) == (lo, lo):
            return lo, lo + 1
    else:
        center_replies = {
            (lo, lo): (lo, hi),
            (lo, hi): (lo, lo),
            (hi, lo): (hi, hi),
            (hi, hi): (hi, lo),
        }
        if (row, col) in center_replies:
            return center_replies[(row, col)]

    if row <= lo and col <= lo:
        return lo, lo
    if row <= lo and col >= hi:
        return lo, hi
    if col <= lo:
        return hi, lo
    return hi, hi


def opening_move(board, piece) -> Optional[Tuple[int, int]]:
    """
    Book move for `piece`, or None when the book does not apply.

    The book applies only while `piece` has no stone on the board, and only
    if the chosen reply cell is still empty.
    """
    piece = Piece(piece)
    if board.count(piece) != 0:
        return None

    opponent_stones = board.stones(piece.opponent())
    if not opponent_stones:
        move = first_move(board.size)
    else:
        move = reply_to(opponent_stones[0][0], opponent_stones[0][1], board.size)

    if not (0 <= move[0] < board.size and 0 <= move[1] < board.size):
        return None
    if not board.is_empty(*move):
        return None
    return move
