import math
import unittest

from tonnetz.model.geometry_primitives import Point, Vector
from tonnetz.model.hit_test import (
    NoteHit,
    hit_test_chord_region,
    hit_test_note,
    inverse_project,
    nearest_node,
)
from tonnetz.model.identifiers import TriadQuality
from tonnetz.model.lattice import Geometry, centroid_screen, project, project_fractional

GEOMETRIES = (
    Geometry(),
    Geometry(zoom=0.4, pan=Vector(13.5, -7.25)),
    Geometry(zoom=2.5, pan=Vector(-300.0, 120.0), width=1024.0, height=768.0),
)


class TestInverseProjection(unittest.TestCase):
    def test_round_trip(self):
        for g in GEOMETRIES:
            for lx in range(-6, 7):
                for ly in range(-6, 7):
                    flx, fly = inverse_project(project(lx, ly, g), g)
                    self.assertLess(abs(flx - lx), 1e-6)
                    self.assertLess(abs(fly - ly), 1e-6)
                    self.assertEqual(nearest_node(project(lx, ly, g), g), (lx, ly))

    def test_fractional_round_trip(self):
        g = GEOMETRIES[1]
        flx, fly = inverse_project(project_fractional(0.25, -1.75, g), g)
        self.assertAlmostEqual(flx, 0.25)
        self.assertAlmostEqual(fly, -1.75)

    def test_nearest_node(self):
        g = Geometry()
        screen = project_fractional(2.2, -0.9, g)
        self.assertEqual(nearest_node(screen, g), (2, -1))


class TestNoteHit(unittest.TestCase):
    def test_exact_hit(self):
        g = Geometry(zoom=1.0, pan=Vector(0.0, 0.0))
        hit = hit_test_note(project(2, -1, g), g)
        self.assertEqual(hit, NoteHit(10, 2, -1))
        self.assertEqual(hit.pitch_class, 10)

    def test_hit_within_generous_radius(self):
        g = Geometry()
        # 25px off, inside 1.5 x 22px
        self.assertEqual(hit_test_note(project(0, 0, g) + Vector(0.0, 25.0), g), (0, 0, 0))
        self.assertIsNone(hit_test_note(project(0, 0, g) + Vector(0.0, -34.0), g))

    def test_hit_scales_with_zoom(self):
        g = Geometry(zoom=2.0)
        self.assertEqual(hit_test_note(project(1, 1, g) + Vector(0.0, 40.0), g), (11, 1, 1))

    def test_midway_between_nodes_misses(self):
        # Wide cells: the midpoint is 50px from both nodes, beyond 33px
        g = Geometry(base_cell_size=100.0)
        a, b = project(0, 0, g), project(1, 0, g)
        midway = Point((a.x + b.x) / 2, (a.y + b.y) / 2)
        self.assertIsNone(hit_test_note(midway, g))

    def test_triangle_centre_misses(self):
        # The centroid is cell / sqrt(3) ~ 34.6px from every vertex
        g = Geometry()
        self.assertIsNone(hit_test_note(centroid_screen(0, 0, TriadQuality.MAJOR, g), g))

    def test_every_node_is_hittable(self):
        for g in GEOMETRIES:
            for lx in range(-3, 4):
                for ly in range(-3, 4):
                    hit = hit_test_note(project(lx, ly, g), g)
                    self.assertEqual((hit.lx, hit.ly), (lx, ly))


class TestChordRegionHit(unittest.TestCase):
    def test_major_centroid(self):
        g = Geometry()
        screen = centroid_screen(2, -1, TriadQuality.MAJOR, g)
        self.assertEqual(hit_test_chord_region(screen, g), "M:2,-1")

    def test_minor_centroid(self):
        g = Geometry()
        screen = centroid_screen(0, 0, TriadQuality.MINOR, g)
        self.assertEqual(hit_test_chord_region(screen, g), "m:0,0")

    def test_near_centroid(self):
        g = Geometry(zoom=1.5, pan=Vector(40.0, -10.0))
        screen = centroid_screen(-2, 3, TriadQuality.MINOR, g) + Vector(5.0, -5.0)
        self.assertEqual(hit_test_chord_region(screen, g), "m:-2,3")

    def test_all_regions_resolve(self):
        for g in GEOMETRIES:
            for lx in range(-3, 4):
                for ly in range(-3, 4):
                    for quality in TriadQuality:
                        screen = centroid_screen(lx, ly, quality, g)
                        self.assertEqual(
                            hit_test_chord_region(screen, g),
                            f"{quality.value}:{lx},{ly}",
                        )

    def test_on_node_misses(self):
        # A node is cell / sqrt(3) from the nearest centroids, beyond 0.4 x cell
        g = Geometry()
        self.assertIsNone(hit_test_chord_region(project(1, 1, g), g))
        self.assertGreater(60.0 / math.sqrt(3.0), 0.4 * 60.0)
