"""
Cathedral core Python package.

This package holds the piece catalog for the Cathedral board game: the
literal shape table and the immutable lookup structures derived from it.
Modules:
- shapes.py: Coord, PIECE_SHAPES, count rule
- piece.py: Piece, Cell
- catalog.py: Catalog, build_catalog, get_catalog
- cli.py: command-line listing of the catalog
"""
