from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .shapes import Coord, Shape

ANCHOR: Coord = (0, 0)


@dataclass(frozen=True)
class Cell:
    """One square of a piece, tagged with the name of the piece that owns it."""
    cell: Coord
    id: str

    def to_json(self) -> Dict[str, Any]:
        return {"cell": [int(self.cell[0]), int(self.cell[1])], "id": self.id}


@dataclass(frozen=True)
class Piece:
    """A named shape template plus how many copies of it a game allows."""
    name: str
    shape: Shape  # insertion order from the literal table
    max_count: int

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """The shape flattened into cells tagged with this piece's name."""
        return tuple(Cell(cell=c, id=self.name) for c in self.shape)

    @property
    def size(self) -> int:
        return len(self.shape)

    def bounds(self) -> Tuple[int, int, int, int]:
        """Returns (min_dx, min_dy, max_dx, max_dy) over the shape."""
        xs = [dx for dx, _ in self.shape]
        ys = [dy for _, dy in self.shape]
        return min(xs), min(ys), max(xs), max(ys)

    @property
    def width(self) -> int:
        """Width of the bounding box in cells."""
        x0, _, x1, _ = self.bounds()
        return x1 - x0 + 1

    @property
    def height(self) -> int:
        """Height of the bounding box in cells."""
        _, y0, _, y1 = self.bounds()
        return y1 - y0 + 1

    def has_anchor(self) -> bool:
        return ANCHOR in self.shape

    def pretty(self) -> str:
        """Generates a text sketch of the shape, one row per dy."""
        x0, y0, x1, y1 = self.bounds()
        occupied = set(self.shape)
        lines: List[str] = []
        for dy in range(y0, y1 + 1):
            row: List[str] = []
            for dx in range(x0, x1 + 1):
                if (dx, dy) not in occupied:
                    row.append(".")
                elif (dx, dy) == ANCHOR:
                    row.append("@")
                else:
                    row.append("#")
            lines.append(" ".join(row))
        return "\n".join(lines)

    def to_json(self, include_count: bool = True) -> Dict[str, Any]:
        rec: Dict[str, Any] = {
            "name": self.name,
            "cells": [c.to_json() for c in self.cells],
        }
        if include_count:
            rec["count"] = int(self.max_count)
        return rec
