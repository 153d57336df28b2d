from __future__ import annotations

from typing import Tuple

Coord = Tuple[int, int]  # (dx, dy) offset from the anchor
Shape = Tuple[Coord, ...]

CATHEDRAL_NAME = 'Cathedral'

# Pieces a player owns two of; every other piece is unique.
DOUBLE_PIECES = frozenset({'Tavern', 'Stable', 'Inn'})

# Canonical table, in the order consumers list pieces.
PIECE_SHAPES: Tuple[Tuple[str, Shape], ...] = (
    # Cathedral has no cell on the anchor.
    (CATHEDRAL_NAME, ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2), (1, 3))),
    ('Castle', ((0, 0), (1, 0), (0, 1), (0, 2), (1, 2))),
    ('Infirmary', ((0, 0), (1, 0), (2, 0), (1, 1), (1, -1))),
    ('Academy', ((0, 0), (1, -1), (1, 0), (2, 0), (0, 1))),
    ('Abbey', ((0, 0), (1, 0), (0, 1), (1, -1))),
    ('Manor', ((0, 0), (1, 0), (1, 1), (2, 0))),
    ('Square', ((0, 0), (1, 0), (0, 1), (1, 1))),
    ('Bridge', ((0, 0), (1, 0), (2, 0))),
    ('Inn', ((0, 0), (1, 0), (0, 1))),
    ('Stable', ((0, 0), (1, 0))),
    ('Tavern', ((0, 0),)),
)


def max_count_for(name: str) -> int:
    """How many copies of a piece one game allows."""
    return 2 if name in DOUBLE_PIECES else 1
