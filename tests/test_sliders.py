import pytest

from bitchess.geometry import (
    between,
    get_bishop_rays,
    get_rook_rays,
    square_bit,
    squares_in,
)
from bitchess.piece import Piece
from bitchess.sliders import (
    get_bishop_moves,
    get_queen_moves,
    get_rook_moves,
    magic_mask,
    questions_and_answers,
)
from bitchess.square import Square, all_squares
from bitchess.tables import get_king_moves

FULL = (1 << 64) - 1
SAMPLE_SQUARES = [Square.A1, Square.D4, Square.H8, Square.E1, Square.B7, Square.G3]


def _bits(*squares):
    result = 0
    for sq in squares:
        result |= square_bit(sq)
    return result


def test_mask_sizes_fixed_by_table_bits():
    # ROOK_BITS = 12 and BISHOP_BITS = 9 are the largest masks.
    assert bin(magic_mask(Square.A1, Piece.ROOK)).count("1") == 12
    assert bin(magic_mask(Square.D4, Piece.BISHOP)).count("1") == 9
    assert max(bin(magic_mask(s, Piece.ROOK)).count("1") for s in all_squares()) == 12
    assert max(bin(magic_mask(s, Piece.BISHOP)).count("1") for s in all_squares()) == 9


@pytest.mark.parametrize("piece", [Piece.ROOK, Piece.BISHOP])
def test_mask_is_inside_rays(piece):
    rays = get_rook_rays if piece == Piece.ROOK else get_bishop_rays
    for sq in all_squares():
        mask = magic_mask(sq, piece)
        assert mask & ~rays(sq) == 0
        assert mask & square_bit(sq) == 0


@pytest.mark.parametrize("sq", SAMPLE_SQUARES)
@pytest.mark.parametrize("piece", [Piece.ROOK, Piece.BISHOP])
def test_questions_and_answers_invariants(sq, piece):
    questions, answers = questions_and_answers(sq, piece)
    mask = magic_mask(sq, piece)
    rays = get_rook_rays(sq) if piece == Piece.ROOK else get_bishop_rays(sq)
    assert len(questions) == len(answers)
    assert len(questions) == 1 << bin(mask).count("1")
    assert len(set(questions)) == len(questions)
    union_q = 0
    for q in questions:
        union_q |= q
    union_a = 0
    for a in answers:
        union_a |= a
    assert union_q == mask
    assert union_a == rays
    assert questions[0] == 0
    assert answers[0] == rays


def test_non_slider_rejected():
    with pytest.raises(ValueError):
        magic_mask(Square.A1, Piece.KNIGHT)
    with pytest.raises(ValueError):
        questions_and_answers(Square.A1, Piece.QUEEN)


def test_empty_board_moves_equal_rays():
    for sq in all_squares():
        assert get_rook_moves(sq, 0) == get_rook_rays(sq)
        assert get_bishop_moves(sq, 0) == get_bishop_rays(sq)
        assert get_queen_moves(sq, 0) == get_rook_rays(sq) | get_bishop_rays(sq)


def test_rook_stops_on_blockers():
    blockers = _bits(Square.A3, Square.C1)
    moves = get_rook_moves(Square.A1, blockers)
    assert set(squares_in(moves)) == {Square.A2, Square.A3, Square.B1, Square.C1}


def test_fully_blocked_pieces_reach_only_neighbours():
    for sq in all_squares():
        assert get_rook_moves(sq, FULL) == get_king_moves(sq) & get_rook_rays(sq)
        assert get_bishop_moves(sq, FULL) == get_king_moves(sq) & get_bishop_rays(sq)
        assert get_queen_moves(sq, FULL) == get_king_moves(sq)


def test_attacks_are_symmetric():
    occupancy = _bits(Square.D4, Square.D7, Square.G7, Square.A4, Square.B2, Square.F2, Square.H8)
    occupied = list(squares_in(occupancy))
    for a in occupied:
        for b in occupied:
            if a == b:
                continue
            assert bool(get_rook_moves(a, occupancy) & square_bit(b)) == bool(
                get_rook_moves(b, occupancy) & square_bit(a)
            )
            assert bool(get_bishop_moves(a, occupancy) & square_bit(b)) == bool(
                get_bishop_moves(b, occupancy) & square_bit(a)
            )


def test_reach_matches_clear_path():
    occupancy = _bits(Square.C3, Square.E5, Square.D6, Square.F4, Square.B4)
    for src in SAMPLE_SQUARES:
        moves = get_queen_moves(src, occupancy)
        for dest in all_squares():
            if dest == src:
                continue
            aligned = (get_rook_rays(src) | get_bishop_rays(src)) & square_bit(dest)
            clear = between(src, dest) & occupancy == 0
            assert bool(moves & square_bit(dest)) == bool(aligned and clear)


def test_edge_blockers_do_not_matter():
    for sq in SAMPLE_SQUARES:
        rook_mask = magic_mask(sq, Piece.ROOK)
        bishop_mask = magic_mask(sq, Piece.BISHOP)
        assert get_rook_moves(sq, FULL & ~rook_mask) == get_rook_rays(sq)
        assert get_bishop_moves(sq, FULL & ~bishop_mask) == get_bishop_rays(sq)