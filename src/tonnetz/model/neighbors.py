"""
Lattice adjacency.

Each node has six neighbours. The enumeration order below is fixed; the
chord layout search walks it in this order and its output depends on it.
"""
from __future__ import annotations

from dataclasses import dataclass

from tonnetz.model.lattice_point import LatticePoint


@dataclass(frozen=True)
class NeighborOffset:
    """A lattice step and the interval it adds, in semitones."""
    dlx: int
    dly: int
    semitones: int


NEIGHBOR_OFFSETS: tuple[NeighborOffset, ...] = (
    NeighborOffset(+1, 0, +7),   # P5
    NeighborOffset(-1, 0, -7),   # P4
    NeighborOffset(0, +1, +4),   # M3
    NeighborOffset(0, -1, -4),   # m6
    NeighborOffset(+1, -1, +3),  # m3
    NeighborOffset(-1, +1, -3),  # M6
)

# One direction of each axis; every undirected edge is (node, node + offset)
FORWARD_OFFSETS: tuple[NeighborOffset, ...] = (
    NEIGHBOR_OFFSETS[0],
    NEIGHBOR_OFFSETS[2],
    NEIGHBOR_OFFSETS[4],
)


def neighbors(lx: int, ly: int) -> list[LatticePoint]:
    """The six adjacent nodes of (lx, ly), in NEIGHBOR_OFFSETS order."""
    return [LatticePoint(lx + o.dlx, ly + o.dly) for o in NEIGHBOR_OFFSETS]

def are_adjacent(a: LatticePoint, b: LatticePoint) -> bool:
    dlx, dly = b.lx - a.lx, b.ly - a.ly
    return any(o.dlx == dlx and o.dly == dly for o in NEIGHBOR_OFFSETS)
