"""Sliding-piece attacks (rooks, bishops and queens) from blocker lookup tables.

For every square, each possible arrangement of blocking pieces on the relevant
squares ("question") is paired with the squares the piece then reaches
("answer"). Lookups reduce the real blockers to the relevant squares and read
the answer from a per-square table built on first use.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from operator import index
from typing import Optional

from bitchess.geometry import get_bishop_rays, get_rook_rays, square_bit, squares_in
from bitchess.piece import Piece
from bitchess.rank import File, Rank
from bitchess.square import Square, all_squares
from bitchess.tables import get_edges

_Step = Callable[[Square], Optional[Square]]


def _then(first: _Step, second: _Step) -> _Step:
    def step(sq: Square) -> Optional[Square]:
        moved = first(sq)
        return None if moved is None else second(moved)

    return step


_ROOK_DIRECTIONS: tuple[_Step, ...] = (
    Square.left,
    Square.right,
    Square.up,
    Square.down,
)
_BISHOP_DIRECTIONS: tuple[_Step, ...] = (
    _then(Square.left, Square.up),
    _then(Square.right, Square.up),
    _then(Square.left, Square.down),
    _then(Square.right, Square.down),
)


def _check_slider(piece: Piece) -> None:
    if piece not in (Piece.ROOK, Piece.BISHOP):
        raise ValueError(f"not a rook or bishop: {piece!r}")


def _rays(sq: Square, piece: Piece) -> int:
    return get_rook_rays(sq) if piece == Piece.ROOK else get_bishop_rays(sq)


def _rook_edges(sq: Square) -> int:
    result = 0
    for edge in all_squares():
        same_rank_end = sq.rank() == edge.rank() and edge.file() in (File.A, File.H)
        same_file_end = sq.file() == edge.file() and edge.rank() in (Rank.FIRST, Rank.EIGHTH)
        if same_rank_end or same_file_end:
            result |= square_bit(edge)
    return result


def magic_mask(sq: Square, piece: Piece) -> int:
    """Return the squares whose occupancy can change a rook's or bishop's moves from ``sq``."""
    _check_slider(piece)
    edges = get_edges() if piece == Piece.BISHOP else _rook_edges(sq)
    return _rays(sq, piece) & ~edges


def _subsets(mask: int) -> list[int]:
    squares = [square_bit(s) for s in squares_in(mask)]
    result = []
    for i in range(1 << len(squares)):
        current = 0
        for j, bit in enumerate(squares):
            if i >> j & 1:
                current |= bit
        result.append(current)
    return result


def _attacks(sq: Square, directions: tuple[_Step, ...], blockers: int) -> int:
    answer = 0
    for step in directions:
        nxt = step(sq)
        while nxt is not None:
            bit = square_bit(nxt)
            answer ^= bit
            if bit & blockers:
                break
            nxt = step(nxt)
    return answer


def questions_and_answers(sq: Square, piece: Piece) -> tuple[list[int], list[int]]:
    """Return every blocker arrangement on the mask and the moves each one allows."""
    mask = magic_mask(sq, piece)
    questions = _subsets(mask)
    directions = _BISHOP_DIRECTIONS if piece == Piece.BISHOP else _ROOK_DIRECTIONS
    answers = [_attacks(sq, directions, q) for q in questions]
    return questions, answers


@lru_cache(maxsize=None)
def _table(sq_index: int, piece: Piece) -> tuple[int, dict[int, int]]:
    sq = Square(sq_index)
    questions, answers = questions_and_answers(sq, piece)
    return magic_mask(sq, piece), dict(zip(questions, answers))


def _lookup(sq: Square, piece: Piece, blockers: int) -> int:
    mask, table = _table(index(sq) & 63, piece)
    return table[blockers & mask] & _rays(sq, piece)


def get_rook_moves(sq: Square, blockers: int) -> int:
    """Return the squares a rook on ``sq`` reaches, stopping on the first blocker each way."""
    return _lookup(sq, Piece.ROOK, blockers)


def get_bishop_moves(sq: Square, blockers: int) -> int:
    """Return the squares a bishop on ``sq`` reaches, stopping on the first blocker each way."""
    return _lookup(sq, Piece.BISHOP, blockers)


def get_queen_moves(sq: Square, blockers: int) -> int:
    """Return the squares a queen on ``sq`` reaches given the blockers."""
    return get_rook_moves(sq, blockers) ^ get_bishop_moves(sq, blockers)