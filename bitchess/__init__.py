"""Bitboard chess primitives: squares, attack tables, sliding moves and Zobrist keys."""

__version__ = "0.1.0"
__all__ = ["geometry", "piece", "rank", "sliders", "square", "tables", "zobrist"]