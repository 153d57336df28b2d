from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from .piece import Cell, Piece
from .shapes import CATHEDRAL_NAME, PIECE_SHAPES, Coord, Shape, max_count_for


class CatalogError(ValueError):
    """Raised when the literal piece table is malformed."""


class DuplicateDefinition(CatalogError):
    pass


class EmptyShape(CatalogError):
    pass


class DuplicateCell(CatalogError):
    pass


def _debug_enabled() -> bool:
    return os.getenv('CATHEDRAL_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Catalog:
    """Immutable set of pieces, kept in table order, with lookup by name."""
    pieces: Tuple[Piece, ...]
    index: Mapping[str, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        pieces = tuple(self.pieces)
        index: Dict[str, int] = {}
        for i, p in enumerate(pieces):
            if p.name in index:
                raise DuplicateDefinition(f'Piece {p.name!r} is defined more than once')
            index[p.name] = i
        object.__setattr__(self, 'pieces', pieces)
        object.__setattr__(self, 'index', MappingProxyType(index))

    def __len__(self) -> int:
        return len(self.pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.pieces)

    def __contains__(self, name: object) -> bool:
        return name in self.index

    def names(self) -> List[str]:
        return [p.name for p in self.pieces]

    def get(self, name: str) -> Piece:
        """Looks up a piece by name; unknown names raise KeyError."""
        try:
            return self.pieces[self.index[name]]
        except KeyError:
            raise KeyError(f'Unknown piece: {name!r}') from None

    def shape(self, name: str) -> Shape:
        return self.get(name).shape

    def max_count(self, name: str) -> int:
        return self.get(name).max_count

    def cells(self, name: str) -> Tuple[Cell, ...]:
        return self.get(name).cells

    def flat_cells(self) -> List[Cell]:
        """All cells of all pieces, in table order."""
        out: List[Cell] = []
        for p in self.pieces:
            out.extend(p.cells)
        return out

    def records(self, include_count: bool = True) -> List[Dict[str, Any]]:
        """JSON-ready {name, cells, count} records; a fresh list on every call."""
        return [p.to_json(include_count=include_count) for p in self.pieces]

    def supply(self) -> List[str]:
        """One player's starting set: each name repeated max_count times."""
        out: List[str] = []
        for p in self.pieces:
            out.extend([p.name] * p.max_count)
        return out

    def total_cells(self) -> int:
        return sum(p.size * p.max_count for p in self.pieces)


def _validate_shape(name: str, shape: Sequence[Coord]) -> Shape:
    if not shape:
        raise EmptyShape(f'Piece {name!r} has no cells')
    seen: Set[Coord] = set()
    cells: List[Coord] = []
    for dx, dy in shape:
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (dx, dy)):
            raise CatalogError(f'Piece {name!r} has non-integer cell {(dx, dy)!r}')
        c = (dx, dy)
        if c in seen:
            raise DuplicateCell(f'Piece {name!r} lists cell {c} twice')
        seen.add(c)
        cells.append(c)
    return tuple(cells)


def build_catalog(
    table: Iterable[Tuple[str, Sequence[Coord]]] = PIECE_SHAPES,
    counts: Optional[Mapping[str, int]] = None,
) -> Catalog:
    """
    Build an immutable Catalog from a (name, shape) table.
    Validation stops at the first problem, in table order:
    - duplicate name -> DuplicateDefinition
    - shape with no cells -> EmptyShape
    - repeated offset within a shape -> DuplicateCell
    - non-integer offset, count below 1 -> CatalogError
    counts overrides the default count rule per name; every key must name
    a piece in the table.
    """
    debug = _debug_enabled()
    pieces: List[Piece] = []
    seen: Set[str] = set()
    for name, shape in table:
        if name in seen:
            raise DuplicateDefinition(f'Piece {name!r} is defined more than once')
        cells = _validate_shape(name, shape)
        count = max_count_for(name)
        if counts is not None and name in counts:
            count = counts[name]
        if not isinstance(count, int) or isinstance(count, bool) or count < 1:
            raise CatalogError(f'Piece {name!r} has count {count!r}; expected an integer of at least 1')
        seen.add(name)
        pieces.append(Piece(name=name, shape=cells, max_count=count))
        if debug:
            print(f"[catalog] {name}: {len(cells)} cells, count={count}")
    unknown = sorted(set(counts or ()) - seen)
    if unknown:
        raise CatalogError(f'Count override for unknown piece(s): {", ".join(unknown)}')
    if debug:
        print(f"[catalog] built {len(pieces)} pieces")
    return Catalog(pieces=tuple(pieces))


_catalog: Optional[Catalog] = None
_catalog_lock = threading.Lock()


def get_catalog() -> Catalog:
    """Process-wide catalog, built on first access and never rebuilt."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = build_catalog()
    return _catalog


def _frozen_record(piece: Piece) -> Mapping[str, Any]:
    # Read-only twin of Piece.to_json(); cells and offsets are tuples.
    return MappingProxyType({
        "name": piece.name,
        "cells": tuple(MappingProxyType({"cell": c.cell, "id": c.id}) for c in piece.cells),
        "count": piece.max_count,
    })


# Shared by every importer, so read-only all the way down.
# Use get_catalog().records() for JSON-ready dicts.
PIECES: Tuple[Mapping[str, Any], ...] = tuple(_frozen_record(p) for p in get_catalog())
CATHEDRAL: Mapping[str, Any] = _frozen_record(get_catalog().get(CATHEDRAL_NAME))
