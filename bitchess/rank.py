"""Ranks (rows) and files (columns) of a chess board."""

from __future__ import annotations

from enum import IntEnum

NUM_RANKS = 8
NUM_FILES = 8

_RANK_CHARS = "12345678"


class Rank(IntEnum):
    """A rank (row) on the chess board, counted from White's side."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6
    EIGHTH = 7

    @classmethod
    def from_index(cls, i: int) -> Rank:
        """Return the rank for an index, wrapping around past 7."""
        return cls(i & 7)

    @classmethod
    def from_str(cls, s: str) -> Rank:
        """Parse a rank from the first character of ``s`` ('1' to '8')."""
        if not s or s[0] not in _RANK_CHARS:
            raise ValueError(f"invalid rank: {s!r}")
        return cls(_RANK_CHARS.index(s[0]))

    def up(self) -> Rank:
        """Go one rank up, wrapping around to the first rank."""
        return Rank.from_index(self + 1)

    def down(self) -> Rank:
        """Go one rank down, wrapping around to the eighth rank."""
        return Rank.from_index(self - 1)

    def __str__(self) -> str:
        return _RANK_CHARS[self]


class File(IntEnum):
    """A file (column) on the chess board, from A to H."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_index(cls, i: int) -> File:
        """Return the file for an index, wrapping around past 7."""
        return cls(i & 7)

    def left(self) -> File:
        """Go one file to the left, wrapping around to file H."""
        return File.from_index(self - 1)

    def right(self) -> File:
        """Go one file to the right, wrapping around to file A."""
        return File.from_index(self + 1)

    def __str__(self) -> str:
        return self.name.lower()


ALL_RANKS: tuple[Rank, ...] = tuple(Rank)
ALL_FILES: tuple[File, ...] = tuple(File)