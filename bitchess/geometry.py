"""Bitboard geometry: single-square bits, rays, knight jumps, lines and segments.

A bitboard is a plain ``int`` whose bit ``n`` stands for the square with index ``n``
(A1 is bit 0, H8 is bit 63).
"""

from __future__ import annotations

from collections.abc import Iterator
from operator import index

from bitchess.square import NUM_SQUARES, Square

_FULL = (1 << NUM_SQUARES) - 1

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_KNIGHT_JUMPS = (
    (2, 1), (2, -1), (-2, 1), (-2, -1),
    (1, 2), (1, -2), (-1, 2), (-1, -2),
)


def square_bit(sq: Square) -> int:
    """Return the bitboard holding only ``sq``."""
    return 1 << (index(sq) & 63)


def squares_in(bb: int) -> Iterator[Square]:
    """Yield the squares set in ``bb``, lowest index first."""
    bb &= _FULL
    while bb:
        low = bb & -bb
        yield Square(low.bit_length() - 1)
        bb ^= low


def _offset(sq: int, d_rank: int, d_file: int) -> int | None:
    rank, file = (sq >> 3) + d_rank, (sq & 7) + d_file
    if 0 <= rank < 8 and 0 <= file < 8:
        return (rank << 3) | file
    return None


def _walk(sq: int, d_rank: int, d_file: int) -> Iterator[int]:
    nxt = _offset(sq, d_rank, d_file)
    while nxt is not None:
        yield nxt
        nxt = _offset(nxt, d_rank, d_file)


def _bits(squares: Iterator[int]) -> int:
    result = 0
    for sq in squares:
        result |= 1 << sq
    return result


def _rays(directions: tuple[tuple[int, int], ...]) -> tuple[int, ...]:
    return tuple(
        _bits(s for d in directions for s in _walk(src, *d)) for src in range(NUM_SQUARES)
    )


def _knight_table() -> tuple[int, ...]:
    return tuple(
        _bits(
            dest
            for jump in _KNIGHT_JUMPS
            if (dest := _offset(src, *jump)) is not None
        )
        for src in range(NUM_SQUARES)
    )


def _line_and_between_tables() -> tuple[list[list[int]], list[list[int]]]:
    lines = [[0] * NUM_SQUARES for _ in range(NUM_SQUARES)]
    betweens = [[0] * NUM_SQUARES for _ in range(NUM_SQUARES)]
    for src in range(NUM_SQUARES):
        for d_rank, d_file in _ORTHOGONAL + _DIAGONAL:
            forward = list(_walk(src, d_rank, d_file))
            backward = list(_walk(src, -d_rank, -d_file))
            full = (1 << src) | _bits(iter(forward)) | _bits(iter(backward))
            segment = 0
            for dest in forward:
                lines[src][dest] = full
                betweens[src][dest] = segment
                segment |= 1 << dest
    return lines, betweens


_ROOK_RAYS = _rays(_ORTHOGONAL)
_BISHOP_RAYS = _rays(_DIAGONAL)
_KNIGHT_MOVES = _knight_table()
_LINE, _BETWEEN = _line_and_between_tables()


def get_bishop_rays(sq: Square) -> int:
    """Return the squares a bishop on ``sq`` attacks on an empty board."""
    return _BISHOP_RAYS[index(sq) & 63]


def get_rook_rays(sq: Square) -> int:
    """Return the squares a rook on ``sq`` attacks on an empty board."""
    return _ROOK_RAYS[index(sq) & 63]


def get_knight_moves(sq: Square) -> int:
    """Return the squares a knight on ``sq`` can jump to."""
    return _KNIGHT_MOVES[index(sq) & 63]


def line(sq1: Square, sq2: Square) -> int:
    """Return the whole rank, file or diagonal through both squares, or 0 if none."""
    return _LINE[index(sq1) & 63][index(sq2) & 63]


def between(sq1: Square, sq2: Square) -> int:
    """Return the squares strictly between two aligned squares, or 0 if not aligned."""
    return _BETWEEN[index(sq1) & 63][index(sq2) & 63]