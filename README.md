# bitchess

Bitboard building blocks for chess programs. A bitboard is a plain Python
`int` with one bit per square: bit 0 is a1, bit 63 is h8.

## Install

    pip install bitchess

The tests use pytest, available through the `test` extra:

    pip install "bitchess[test]"
    python -m pytest

## Modules

- `bitchess.rank`: the `Rank` and `File` enums, plus `ALL_RANKS` and `ALL_FILES`.
  `Rank.from_str("4")` reads the first character and raises `ValueError` when it
  is not `1` to `8`. `Rank.up()`/`Rank.down()` and `File.left()`/`File.right()`
  wrap around the board, as does `from_index`.
- `bitchess.piece`: `Color` (with `opposite()`) and `Piece`, whose `symbol(color)`
  returns an uppercase letter for White and a lowercase letter for Black, so
  `Piece.KNIGHT.symbol(Color.BLACK)` is `"n"`. `PROMOTION_PIECES` lists queen,
  knight, rook and bishop in that order.
- `bitchess.square`: `Square`, an immutable, ordered square whose index wraps
  modulo 64. Build one with `Square(index)`, `Square.make_square(rank, file)`,
  `Square.from_str("e4")` (raises `ValueError` on bad input), or a named
  constant such as `Square.E4`. `up`/`down`/`left`/`right`/`forward`/`backward`
  return `None` at the edge of the board; `uup`/`udown`/`uleft`/`uright`/`uforward`/`ubackward`
  wrap around instead. `all_squares()` returns all 64 squares from a1 to h8.
- `bitchess.geometry`: `square_bit`, `squares_in` (yields squares lowest first),
  empty-board `get_bishop_rays` and `get_rook_rays`, `get_knight_moves`, and
  `line`/`between` for two squares, which give 0 when the squares do not share
  a rank, file or diagonal.
- `bitchess.tables`: `get_king_moves`, `get_pawn_attacks`, `get_pawn_quiets`,
  `get_pawn_moves`, `get_rank`, `get_file`, `get_adjacent_files`, `get_edges`,
  `get_castle_moves`, `kingside_castle_squares`, `queenside_castle_squares`,
  `get_pawn_source_double_moves` and `get_pawn_dest_double_moves`.
- `bitchess.sliders`: `get_rook_moves`, `get_bishop_moves` and `get_queen_moves`
  for a given set of blockers. Each move includes the first blocker in each
  direction. Lookup tables are built per square on first use from
  `questions_and_answers`, which pairs every blocker arrangement on the
  `magic_mask` with the moves it allows. `magic_mask` and
  `questions_and_answers` raise `ValueError` for pieces other than rook and bishop.
- `bitchess.zobrist`: fixed, reproducible 64-bit keys: `piece_key`,
  `castles_key` (castle rights as an index from 0 to 3, `ValueError` otherwise),
  `en_passant_key` and `side_to_move_key`.

## Example

```python
from bitchess.square import Square
from bitchess.geometry import squares_in, square_bit
from bitchess.sliders import get_rook_moves

blockers = square_bit(Square.from_str("a4"))
moves = get_rook_moves(Square.A1, blockers)
print(sorted(str(sq) for sq in squares_in(moves)))
# ['a2', 'a3', 'a4', 'b1', 'c1', 'd1', 'e1', 'f1', 'g1', 'h1']
```

## What it does not do

There is no board or position type, no FEN parsing, no legal move generation,
no check or pin detection, and no game or result tracking. The package gives
the per-square tables and keys that such code is built on. Moves from the
tables do not exclude squares held by the mover's own pieces, and they do not
check the position for legality.