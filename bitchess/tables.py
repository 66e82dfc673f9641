"""Precomputed bitboards for kings, pawns, ranks, files and castling.

Every bitboard is a plain ``int`` in which bit ``n`` stands for the square
with index ``n`` (A1 is bit 0, H8 is bit 63).
"""

from __future__ import annotations

from operator import index

from bitchess.geometry import square_bit
from bitchess.piece import ALL_COLORS, Color
from bitchess.rank import ALL_FILES, ALL_RANKS, File, Rank
from bitchess.square import Square, all_squares

_FULL = (1 << 64) - 1

_BACKRANK = {Color.WHITE: Rank.FIRST, Color.BLACK: Rank.EIGHTH}
_SECOND_RANK = {Color.WHITE: Rank.SECOND, Color.BLACK: Rank.SEVENTH}


def _union(squares) -> int:
    result = 0
    for sq in squares:
        result |= square_bit(sq)
    return result


def _set(rank: Rank, file: File) -> int:
    return square_bit(Square.make_square(rank, file))


def _king_table() -> tuple[int, ...]:
    table = []
    for src in all_squares():
        src_rank, src_file = int(src.rank()), int(src.file())
        table.append(
            _union(
                dest
                for dest in all_squares()
                if abs(src_rank - int(dest.rank())) <= 1
                and abs(src_file - int(dest.file())) <= 1
                and dest != src
            )
        )
    return tuple(table)


def _pawn_quiet_table(color: Color) -> tuple[int, ...]:
    table = []
    for src in all_squares():
        if src.rank() == _SECOND_RANK[color]:
            one = src.uforward(color)
            table.append(square_bit(one) ^ square_bit(one.uforward(color)))
        else:
            ahead = src.forward(color)
            table.append(0 if ahead is None else square_bit(ahead))
    return tuple(table)


def _pawn_attack_table(color: Color) -> tuple[int, ...]:
    table = []
    for src in all_squares():
        attacks = 0
        ahead = src.forward(color)
        if ahead is not None:
            for side in (ahead.left(), ahead.right()):
                if side is not None:
                    attacks ^= square_bit(side)
        table.append(attacks)
    return tuple(table)


_KING_MOVES = _king_table()
_PAWN_MOVES = {color: _pawn_quiet_table(color) for color in ALL_COLORS}
_PAWN_ATTACKS = {color: _pawn_attack_table(color) for color in ALL_COLORS}

_RANKS = tuple(
    _union(sq for sq in all_squares() if sq.rank() == rank) for rank in ALL_RANKS
)
_FILES = tuple(
    _union(sq for sq in all_squares() if sq.file() == file) for file in ALL_FILES
)
_ADJACENT_FILES = tuple(
    _union(sq for sq in all_squares() if abs(int(sq.file()) - int(file)) == 1)
    for file in ALL_FILES
)
_EDGES = _union(
    sq
    for sq in all_squares()
    if sq.rank() in (Rank.FIRST, Rank.EIGHTH) or sq.file() in (File.A, File.H)
)

_KINGSIDE_CASTLE_SQUARES = {
    color: _set(_BACKRANK[color], File.F) ^ _set(_BACKRANK[color], File.G)
    for color in ALL_COLORS
}
_QUEENSIDE_CASTLE_SQUARES = {
    color: _set(_BACKRANK[color], File.B)
    ^ _set(_BACKRANK[color], File.C)
    ^ _set(_BACKRANK[color], File.D)
    for color in ALL_COLORS
}
_CASTLE_MOVES = _union(
    (Square.C1, Square.C8, Square.E1, Square.E8, Square.G1, Square.G8)
)
_PAWN_SOURCE_DOUBLE_MOVES = _union(
    Square.make_square(rank, file)
    for rank in (Rank.SECOND, Rank.SEVENTH)
    for file in ALL_FILES
)
_PAWN_DEST_DOUBLE_MOVES = _union(
    Square.make_square(rank, file)
    for rank in (Rank.FOURTH, Rank.FIFTH)
    for file in ALL_FILES
)


def get_king_moves(sq: Square) -> int:
    """Return the squares a king on ``sq`` can step to."""
    return _KING_MOVES[index(sq) & 63]


def get_pawn_attacks(sq: Square, color: Color, blockers: int) -> int:
    """Return the captures of a ``color`` pawn on ``sq`` among the given victims."""
    return _PAWN_ATTACKS[color][index(sq) & 63] & blockers


def get_pawn_quiets(sq: Square, color: Color, blockers: int) -> int:
    """Return the non-capturing pushes of a ``color`` pawn on ``sq``."""
    if square_bit(sq.uforward(color)) & blockers:
        return 0
    return _PAWN_MOVES[color][index(sq) & 63] & ~blockers & _FULL


def get_pawn_moves(sq: Square, color: Color, blockers: int) -> int:
    """Return every pawn move, captures and pushes, from ``sq``."""
    return get_pawn_attacks(sq, color, blockers) ^ get_pawn_quiets(sq, color, blockers)


def get_rank(rank: Rank) -> int:
    """Return all squares on ``rank``."""
    return _RANKS[index(rank) & 7]


def get_file(file: File) -> int:
    """Return all squares on ``file``."""
    return _FILES[index(file) & 7]


def get_adjacent_files(file: File) -> int:
    """Return the squares on the one or two files next to ``file``."""
    return _ADJACENT_FILES[index(file) & 7]


def get_edges() -> int:
    """Return the squares on the outer edge of the board."""
    return _EDGES


def get_castle_moves() -> int:
    """Return the king squares involved in castling for both players."""
    return _CASTLE_MOVES


def kingside_castle_squares(color: Color) -> int:
    """Return the squares that must be empty to castle kingside."""
    return _KINGSIDE_CASTLE_SQUARES[color]


def queenside_castle_squares(color: Color) -> int:
    """Return the squares that must be empty to castle queenside."""
    return _QUEENSIDE_CASTLE_SQUARES[color]


def get_pawn_source_double_moves() -> int:
    """Return the squares a pawn may start a double push from."""
    return _PAWN_SOURCE_DOUBLE_MOVES


def get_pawn_dest_double_moves() -> int:
    """Return the squares a double pawn push may land on."""
    return _PAWN_DEST_DOUBLE_MOVES