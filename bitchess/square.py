"""Squares of the chess board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from bitchess.piece import Color
from bitchess.rank import File, Rank

NUM_SQUARES = 64

_FILE_CHARS = "abcdefgh"
_RANK_CHARS = "12345678"


@dataclass(frozen=True, order=True)
class Square:
    """A square on the board, indexed 0 (A1) to 63 (H8); indices wrap modulo 64."""

    index: int = 0

    A1: ClassVar[Square]
    H8: ClassVar[Square]

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", self.index & 63)

    @classmethod
    def make_square(cls, rank: Rank, file: File) -> Square:
        """Make the square at a rank and a file."""
        return cls((int(rank) << 3) ^ int(file))

    @classmethod
    def from_str(cls, s: str) -> Square:
        """Parse a square such as 'e4' from the first two characters of ``s``."""
        if len(s) < 2 or s[0] not in _FILE_CHARS or s[1] not in _RANK_CHARS:
            raise ValueError(f"invalid square: {s!r}")
        return cls.make_square(
            Rank.from_index(_RANK_CHARS.index(s[1])),
            File.from_index(_FILE_CHARS.index(s[0])),
        )

    def rank(self) -> Rank:
        """Return the rank of this square."""
        return Rank.from_index(self.index >> 3)

    def file(self) -> File:
        """Return the file of this square."""
        return File.from_index(self.index & 7)

    def up(self) -> Optional[Square]:
        """Return the square above, or None on the eighth rank."""
        if self.rank() == Rank.EIGHTH:
            return None
        return self.uup()

    def down(self) -> Optional[Square]:
        """Return the square below, or None on the first rank."""
        if self.rank() == Rank.FIRST:
            return None
        return self.udown()

    def left(self) -> Optional[Square]:
        """Return the square to the left, or None on file A."""
        if self.file() == File.A:
            return None
        return self.uleft()

    def right(self) -> Optional[Square]:
        """Return the square to the right, or None on file H."""
        if self.file() == File.H:
            return None
        return self.uright()

    def forward(self, color: Color) -> Optional[Square]:
        """Return the square ahead from ``color``'s point of view, if any."""
        return self.up() if color is Color.WHITE else self.down()

    def backward(self, color: Color) -> Optional[Square]:
        """Return the square behind from ``color``'s point of view, if any."""
        return self.down() if color is Color.WHITE else self.up()

    def uup(self) -> Square:
        """Return the square above, wrapping around the board."""
        return Square.make_square(self.rank().up(), self.file())

    def udown(self) -> Square:
        """Return the square below, wrapping around the board."""
        return Square.make_square(self.rank().down(), self.file())

    def uleft(self) -> Square:
        """Return the square to the left, wrapping around the board."""
        return Square.make_square(self.rank(), self.file().left())

    def uright(self) -> Square:
        """Return the square to the right, wrapping around the board."""
        return Square.make_square(self.rank(), self.file().right())

    def uforward(self, color: Color) -> Square:
        """Return the square ahead for ``color``, wrapping around the board."""
        return self.uup() if color is Color.WHITE else self.udown()

    def ubackward(self, color: Color) -> Square:
        """Return the square behind for ``color``, wrapping around the board."""
        return self.udown() if color is Color.WHITE else self.uup()

    def __index__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return _FILE_CHARS[self.index & 7] + _RANK_CHARS[self.index >> 3]

    def __repr__(self) -> str:
        return f"Square.{str(self).upper()}"


_ALL_SQUARES: tuple[Square, ...] = tuple(Square(i) for i in range(NUM_SQUARES))

for _sq in _ALL_SQUARES:
    setattr(Square, str(_sq).upper(), _sq)
del _sq


def all_squares() -> tuple[Square, ...]:
    """Return every square on the board, from A1 to H8."""
    return _ALL_SQUARES