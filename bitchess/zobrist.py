"""Zobrist hashing keys drawn from a fixed-seed pseudo-random generator."""

from __future__ import annotations

from collections.abc import Iterator
from operator import index

from bitchess.piece import NUM_COLORS, NUM_PIECES, Color, Piece
from bitchess.rank import NUM_FILES, File
from bitchess.square import NUM_SQUARES, Square

_MASK = (1 << 64) - 1
_SEED = 0xDEADBEEF12345678
NUM_CASTLE_RIGHTS = 4


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK


def _splitmix64(state: int) -> Iterator[int]:
    while True:
        state = (state + 0x9E3779B97F4A7C15) & _MASK
        z = state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK
        yield z ^ (z >> 31)


def _xoshiro256pp(seed: int) -> Iterator[int]:
    seeder = _splitmix64(seed)
    s0, s1, s2, s3 = (next(seeder) for _ in range(4))
    while True:
        yield (_rotl((s0 + s3) & _MASK, 23) + s0) & _MASK
        t = (s1 << 17) & _MASK
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = _rotl(s3, 45)


def _build_tables():
    rng = _xoshiro256pp(_SEED)
    side = next(rng)
    pieces = tuple(
        tuple(tuple(next(rng) for _ in range(NUM_SQUARES)) for _ in range(NUM_PIECES))
        for _ in range(NUM_COLORS)
    )
    castles = tuple(
        tuple(next(rng) for _ in range(NUM_CASTLE_RIGHTS)) for _ in range(NUM_COLORS)
    )
    en_passant = tuple(
        tuple(next(rng) for _ in range(NUM_FILES)) for _ in range(NUM_COLORS)
    )
    return side, pieces, castles, en_passant


_SIDE_TO_MOVE, _PIECES, _CASTLES, _EN_PASSANT = _build_tables()


def piece_key(piece: Piece, square: Square, color: Color) -> int:
    """Return the key for a ``color`` ``piece`` standing on ``square``."""
    return _PIECES[color.value][index(piece)][index(square) & 63]


def castles_key(castle_rights, color: Color) -> int:
    """Return the key for ``color``'s castle rights (an index from 0 to 3)."""
    rights = index(castle_rights)
    if not 0 <= rights < NUM_CASTLE_RIGHTS:
        raise ValueError(f"invalid castle rights: {castle_rights!r}")
    return _CASTLES[color.value][rights]


def en_passant_key(file: File, color: Color) -> int:
    """Return the key for an en-passant square on ``file`` for ``color``."""
    return _EN_PASSANT[color.value][index(file) & 7]


def side_to_move_key() -> int:
    """Return the key toggled when the side to move changes."""
    return _SIDE_TO_MOVE