from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from .catalog import get_catalog


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='List the Cathedral piece catalog')
    parser.add_argument('--piece', default=None, help='Show one piece by name')
    parser.add_argument('--json', action='store_true', help='Dump piece records as JSON')
    parser.add_argument('--no-counts', action='store_true', help='Omit the count field from JSON records')
    args = parser.parse_args(argv)

    catalog = get_catalog()

    if args.piece is not None:
        if args.piece not in catalog:
            print(f"error: unknown piece '{args.piece}'", file=sys.stderr)
            return 2
        piece = catalog.get(args.piece)
        if args.json:
            print(json.dumps(piece.to_json(include_count=not args.no_counts), indent=2))
            return 0
        print(f"{piece.name} (count {piece.max_count}, {piece.size} cells, {piece.width}x{piece.height})")
        print(piece.pretty())
        print('Offsets:', list(piece.shape))
        return 0

    if args.json:
        print(json.dumps(catalog.records(include_count=not args.no_counts), indent=2))
        return 0

    width = max(len(n) for n in catalog.names())
    print(f"{'name':<{width}}  size  count")
    for p in catalog:
        print(f"{p.name:<{width}}  {p.size:>4}  {p.max_count:>5}")
    print(f"Supply: {len(catalog.supply())} pieces, {catalog.total_cells()} cells")
    return 0


if __name__ == '__main__':
    sys.exit(main())
