from __future__ import annotations

# Facade module that re-exports the piece catalog.
# Kept so the Flask app and tests import from one place.
# Single-responsibility modules live under cathedral_core/*.

from cathedral_core.shapes import (  # noqa: F401
    CATHEDRAL_NAME,
    DOUBLE_PIECES,
    PIECE_SHAPES,
    Coord,
    Shape,
    max_count_for,
)
from cathedral_core.piece import ANCHOR, Cell, Piece  # noqa: F401
from cathedral_core.catalog import (  # noqa: F401
    CATHEDRAL,
    PIECES,
    Catalog,
    CatalogError,
    DuplicateCell,
    DuplicateDefinition,
    EmptyShape,
    build_catalog,
    get_catalog,
)
