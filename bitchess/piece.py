"""Colors and piece types."""

from __future__ import annotations

from enum import Enum, IntEnum

NUM_COLORS = 2
NUM_PIECES = 6
NUM_PROMOTION_PIECES = 4


class Color(Enum):
    """The side a piece belongs to."""

    WHITE = 0
    BLACK = 1

    def opposite(self) -> Color:
        """Return the other color."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE


_LETTERS = "pnbrqk"


class Piece(IntEnum):
    """A chess piece type, in order of ascending value."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    def symbol(self, color: Color) -> str:
        """Return the piece letter: uppercase for White, lowercase for Black."""
        letter = _LETTERS[self]
        return letter.upper() if color is Color.WHITE else letter

    def __str__(self) -> str:
        return _LETTERS[self]


ALL_COLORS: tuple[Color, ...] = (Color.WHITE, Color.BLACK)
ALL_PIECES: tuple[Piece, ...] = tuple(Piece)
PROMOTION_PIECES: tuple[Piece, ...] = (Piece.QUEEN, Piece.KNIGHT, Piece.ROOK, Piece.BISHOP)