"""
Lattice Coordinate System
=========================
Forward projection from lattice coordinates to screen pixels.

Screen position of node (lx, ly):

    origin + lx * v1 + ly * v2

    v1 = (cell, 0)
    v2 = (cos(60deg) * cell, V2_Y_SIGN * sin(60deg) * cell)

where `cell` is the zoomed cell size and `origin` is the viewport centre
shifted by the pan offset. The same basis is used by the inverse projection
(`tonnetz.model.hit_test`) and by triad centroid placement.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

import numpy as np

from tonnetz import config
from tonnetz.model.geometry_primitives import Point, Vector
from tonnetz.model.identifiers import TriadQuality
from tonnetz.model.lattice_point import LatticePoint, pitch_class  # noqa: F401 (public here)
from tonnetz.utils import clamp

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


# Vertex offsets of the triangle anchored at (lx, ly)
TRIAD_VERTEX_OFFSETS: dict[TriadQuality, tuple[tuple[int, int], ...]] = {
    TriadQuality.MAJOR: ((0, 0), (1, 0), (0, 1)),
    TriadQuality.MINOR: ((0, 0), (1, 0), (1, -1)),
}


@dataclass(frozen=True)
class Geometry:
    """
    Snapshot of the view state needed to map between lattice and screen.

    Owned by the view; the engine only reads it. Use `center_on` and
    `with_zoom` to derive a new snapshot.
    """
    zoom: float = config.DEFAULT_ZOOM
    pan: Vector = field(default_factory=lambda: Vector(0.0, 0.0))
    width: float = config.DEFAULT_VIEWPORT_WIDTH
    height: float = config.DEFAULT_VIEWPORT_HEIGHT
    base_cell_size: float = config.BASE_CELL_SIZE
    base_node_radius: float = config.BASE_NODE_RADIUS

    def __post_init__(self) -> None:
        if self.zoom <= 0.0:
            raise ValueError(f"Zoom must be positive, got {self.zoom}.")
        if self.base_cell_size <= 0.0:
            raise ValueError(f"Cell size must be positive, got {self.base_cell_size}.")

    @property
    def cell_size(self) -> float:
        return self.base_cell_size * self.zoom

    @property
    def node_radius(self) -> float:
        return self.base_node_radius * self.zoom

    @property
    def v1(self) -> Vector:
        """Basis vector of the fifths axis (lx)."""
        return Vector(self.cell_size, 0.0)

    @property
    def v2(self) -> Vector:
        """Basis vector of the major-thirds axis (ly)."""
        return Vector(
            math.cos(config.BASIS_ANGLE_RAD) * self.cell_size,
            config.V2_Y_SIGN * math.sin(config.BASIS_ANGLE_RAD) * self.cell_size,
        )

    @property
    def origin(self) -> Point:
        """Screen position of lattice node (0, 0)."""
        return Point(self.width / 2 + self.pan.x, self.height / 2 + self.pan.y)

    @property
    def basis(self) -> npt.NDArray[np.float64]:
        """2x2 matrix with v1 and v2 as columns."""
        return np.column_stack((self.v1.to_array(), self.v2.to_array()))


def project_fractional(flx: float, fly: float, geometry: Geometry) -> Point:
    """Screen position of a (possibly fractional) lattice coordinate."""
    return geometry.origin + geometry.v1 * flx + geometry.v2 * fly

def project(lx: int, ly: int, geometry: Geometry) -> Point:
    """Screen position of lattice node (lx, ly)."""
    return project_fractional(lx, ly, geometry)

def triad_vertices(lx: int, ly: int, quality: TriadQuality) -> list[LatticePoint]:
    """
    The three nodes of the triangle anchored at (lx, ly).

    Major: root, fifth (+1, 0), major third (0, +1).
    Minor: root, fifth (+1, 0), minor third (+1, -1).
    """
    return [LatticePoint(lx + dlx, ly + dly) for dlx, dly in TRIAD_VERTEX_OFFSETS[TriadQuality(quality)]]

def triad_centroid(lx: int, ly: int, quality: TriadQuality) -> tuple[float, float]:
    """Centroid of the triad triangle, in fractional lattice coordinates."""
    offsets = TRIAD_VERTEX_OFFSETS[TriadQuality(quality)]
    return (
        lx + sum(o[0] for o in offsets) / 3.0,
        ly + sum(o[1] for o in offsets) / 3.0,
    )

def centroid_screen(lx: int, ly: int, quality: TriadQuality, geometry: Geometry) -> Point:
    return project_fractional(*triad_centroid(lx, ly, quality), geometry)

def center_on(point: LatticePoint, geometry: Geometry) -> Geometry:
    """Return a geometry panned so that `point` sits at the viewport centre."""
    offset = geometry.v1 * point.lx + geometry.v2 * point.ly
    return replace(geometry, pan=-offset)

def with_zoom(geometry: Geometry, zoom: float) -> Geometry:
    """
    Return a geometry at the new zoom level, clamped to [ZOOM_MIN, ZOOM_MAX].

    The pan offset is scaled by the zoom ratio, so the lattice location at
    the viewport centre stays put.
    """
    new_zoom = clamp(zoom, config.ZOOM_MIN, config.ZOOM_MAX)
    ratio = new_zoom / geometry.zoom
    logger.debug(f"Zoom {geometry.zoom:.2f} -> {new_zoom:.2f}")
    return replace(geometry, zoom=new_zoom, pan=geometry.pan * ratio)
