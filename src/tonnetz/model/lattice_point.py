from __future__ import annotations

from typing import NamedTuple

from tonnetz.model.chords import note_name
from tonnetz.model.identifiers import node_id
from tonnetz.utils import pitch_mod

# Semitones per unit step along each lattice axis
FIFTH_AXIS_SEMITONES = 7
THIRD_AXIS_SEMITONES = 4


def pitch_class(lx: int, ly: int) -> int:
    """
    Pitch class of a lattice node: 0 (C) at the origin, +7 per step in lx
    (perfect fifth), +4 per step in ly (major third).
    """
    return pitch_mod(lx * FIFTH_AXIS_SEMITONES + ly * THIRD_AXIS_SEMITONES)


class LatticePoint(NamedTuple):
    """
    Integer position on the (unbounded) lattice.

    Distinct points can share a pitch class; the lattice repeats every
    (0, 3), (4, -1) and (4, 2) steps, among others.
    """
    lx: int
    ly: int

    @property
    def id(self) -> str:
        return node_id(self.lx, self.ly)

    @property
    def pitch_class(self) -> int:
        return pitch_class(self.lx, self.ly)

    @property
    def note_name(self) -> str:
        return note_name(self.pitch_class)

    def offset(self, dlx: int, dly: int) -> LatticePoint:
        return LatticePoint(self.lx + dlx, self.ly + dly)

    def __add__(self, other: tuple[int, int]) -> LatticePoint:
        # Translation by an (dlx, dly) offset, not tuple concatenation
        dlx, dly = other
        return self.offset(dlx, dly)
