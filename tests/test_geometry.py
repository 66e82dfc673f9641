import pytest

from bitchess.geometry import (
    between,
    get_bishop_rays,
    get_knight_moves,
    get_rook_rays,
    line,
    square_bit,
    squares_in,
)
from bitchess.rank import File, Rank
from bitchess.square import Square, all_squares

SQUARES = all_squares()


def test_square_bit_round_trip():
    for sq in SQUARES:
        assert list(squares_in(square_bit(sq))) == [sq]


def test_squares_in_full_board_yields_all_in_order():
    universe = 0
    for sq in SQUARES:
        universe ^= square_bit(sq)
    assert list(squares_in(universe)) == list(SQUARES)


def test_squares_in_empty():
    assert list(squares_in(0)) == []


def test_knight_moves_from_a1():
    assert set(squares_in(get_knight_moves(Square.A1))) == {Square.B3, Square.C2}


@pytest.mark.parametrize("table", [get_knight_moves, get_rook_rays, get_bishop_rays])
def test_move_tables_are_symmetric_and_exclude_source(table):
    for a in SQUARES:
        assert table(a) & square_bit(a) == 0
        for b in squares_in(table(a)):
            assert table(b) & square_bit(a)


def test_rook_and_bishop_rays_are_disjoint():
    for sq in SQUARES:
        assert get_rook_rays(sq) & get_bishop_rays(sq) == 0


def test_rook_rays_follow_rank_and_file():
    for sq in SQUARES:
        for target in squares_in(get_rook_rays(sq)):
            assert target.rank() == sq.rank() or target.file() == sq.file()


def test_bishop_rays_reach_far_corner():
    assert get_bishop_rays(Square.A1) & square_bit(Square.H8)
    assert get_rook_rays(Square.A1) & square_bit(Square.H8) == 0


def test_between_main_diagonal():
    expected = [Square.B2, Square.C3, Square.D4, Square.E5, Square.F6, Square.G7]
    assert list(squares_in(between(Square.A1, Square.H8))) == expected


def test_line_first_rank():
    expected = [Square.make_square(Rank.FIRST, f) for f in File]
    assert list(squares_in(line(Square.A1, Square.H1))) == expected


def test_line_and_between_are_symmetric():
    for a in SQUARES:
        for b in SQUARES:
            assert line(a, b) == line(b, a)
            assert between(a, b) == between(b, a)


def test_between_is_inside_line_and_excludes_endpoints():
    for a in SQUARES:
        for b in SQUARES:
            seg = between(a, b)
            assert seg & ~line(a, b) == 0
            assert seg & (square_bit(a) | square_bit(b)) == 0


def test_line_contains_both_endpoints_when_aligned():
    for a in SQUARES:
        aligned = get_rook_rays(a) | get_bishop_rays(a)
        for b in SQUARES:
            if aligned & square_bit(b):
                assert line(a, b) & square_bit(a)
                assert line(a, b) & square_bit(b)
            else:
                assert line(a, b) == 0
                assert between(a, b) == 0


def test_same_square_has_no_line():
    for sq in SQUARES:
        assert line(sq, sq) == 0
        assert between(sq, sq) == 0


def test_unaligned_squares():
    assert line(Square.A1, Square.B3) == 0
    assert between(Square.A1, Square.B3) == 0


def test_adjacent_squares_have_nothing_between():
    assert between(Square.E4, Square.E5) == 0
    assert between(Square.E4, Square.F5) == 0


def test_between_counts_match_distance():
    for a in SQUARES:
        for b in squares_in(get_rook_rays(a) | get_bishop_rays(a)):
            distance = max(abs(a.rank() - b.rank()), abs(a.file() - b.file()))
            assert len(list(squares_in(between(a, b)))) == distance - 1