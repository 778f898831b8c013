import unittest

from tonnetz.model.lattice_point import LatticePoint, pitch_class
from tonnetz.model.neighbors import FORWARD_OFFSETS, NEIGHBOR_OFFSETS, are_adjacent, neighbors


class TestNeighbors(unittest.TestCase):
    def test_six_neighbours_in_fixed_order(self):
        self.assertEqual(
            neighbors(0, 0),
            [(1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, 1)],
        )

    def test_neighbours_are_lattice_points(self):
        for point in neighbors(-1, 2):
            self.assertIsInstance(point, LatticePoint)
        self.assertEqual(neighbors(*LatticePoint(3, -2)), neighbors(3, -2))

    def test_neighbours_are_translated(self):
        self.assertEqual(
            neighbors(3, -2),
            [(4, -2), (2, -2), (3, -1), (3, -3), (4, -3), (2, -1)],
        )

    def test_semitone_deltas_match_pitch_classes(self):
        for lx in range(-3, 4):
            for ly in range(-3, 4):
                base = pitch_class(lx, ly)
                for o in NEIGHBOR_OFFSETS:
                    self.assertEqual(
                        pitch_class(lx + o.dlx, ly + o.dly),
                        (base + o.semitones) % 12,
                    )

    def test_offsets_come_in_opposite_pairs(self):
        offsets = {(o.dlx, o.dly) for o in NEIGHBOR_OFFSETS}
        for dlx, dly in offsets:
            self.assertIn((-dlx, -dly), offsets)
        self.assertEqual(len(FORWARD_OFFSETS), 3)

    def test_are_adjacent(self):
        self.assertTrue(are_adjacent(LatticePoint(0, 0), LatticePoint(1, -1)))
        self.assertTrue(are_adjacent(LatticePoint(0, 0), LatticePoint(-1, 1)))
        self.assertFalse(are_adjacent(LatticePoint(0, 0), LatticePoint(1, 1)))
        self.assertFalse(are_adjacent(LatticePoint(0, 0), LatticePoint(0, 0)))
