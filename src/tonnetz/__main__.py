"""
Command-line interface.

Run with: python -m tonnetz Dom7 --root 2,-1
"""
from __future__ import annotations

import argparse
import sys

from tonnetz.logging_config import level_for_verbosity, setup_logging
from tonnetz.model.chord_layout import resolve_chord_layout
from tonnetz.model.chords import chord_label, get_chord, list_keys, note_name
from tonnetz.model.identifiers import parse_node_id
from tonnetz.model.lattice_point import LatticePoint


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tonnetz", description="Lay out a chord on the Tonnetz lattice.")
    parser.add_argument("chord", choices=list_keys())
    parser.add_argument("--root", default="0,0", help="root node as 'lx,ly' (default: 0,0); write --root=-1,0 for a negative lx")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for selection info, -vv for search details")
    args = parser.parse_args(argv)

    setup_logging(level=level_for_verbosity(args.verbose))

    parsed = parse_node_id(args.root)
    if parsed is None:
        parser.error(f"invalid root node id: {args.root!r}")
    root = LatticePoint(*parsed)

    layout = resolve_chord_layout(root, get_chord(args.chord).intervals)
    print(chord_label(root.pitch_class, args.chord))
    for point in layout:
        print(f"  {point.id:>8}  {note_name(point.pitch_class)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
