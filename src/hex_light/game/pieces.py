from enum import IntEnum


class Piece(IntEnum):
    """
    Cell contents on a Hex board.

    WHITE moves first and connects the left and right edges.
    BLACK connects the top and bottom edges.
    """
    EMPTY = 0
    WHITE = 1
    BLACK = -1

    def opponent(self):
        if self == Piece.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Piece(-self.value)

    def __str__(self):
        return {Piece.EMPTY: '.', Piece.WHITE: 'W', Piece.BLACK: 'B'}[self]
