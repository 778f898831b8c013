"""
Visible grid enumeration.

Lists the lattice nodes (and the edges between them) that can appear in
the current viewport, for whatever layer draws them.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from tonnetz import config
from tonnetz.model.geometry_primitives import Point
from tonnetz.model.hit_test import inverse_project
from tonnetz.model.lattice import Geometry, project
from tonnetz.model.lattice_point import LatticePoint
from tonnetz.model.neighbors import FORWARD_OFFSETS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridNode:
    point: LatticePoint
    pitch_class: int
    screen: Point

    @property
    def id(self) -> str:
        return self.point.id


def lattice_bounds(geometry: Geometry, buffer: int = config.GRID_BUFFER) -> tuple[int, int, int, int]:
    """
    Integer lattice ranges covering the viewport.

    The viewport is a parallelogram in lattice space; its four corners are
    inverse projected and the floor/ceil extremes padded by `buffer`.

    Returns:
        (min_lx, max_lx, min_ly, max_ly), all inclusive.
    """
    corners = (
        Point(0.0, 0.0),
        Point(geometry.width, 0.0),
        Point(geometry.width, geometry.height),
        Point(0.0, geometry.height),
    )
    coords = [inverse_project(c, geometry) for c in corners]
    min_lx = min(math.floor(flx) for flx, _ in coords) - buffer
    max_lx = max(math.ceil(flx) for flx, _ in coords) + buffer
    min_ly = min(math.floor(fly) for _, fly in coords) - buffer
    max_ly = max(math.ceil(fly) for _, fly in coords) + buffer
    return min_lx, max_lx, min_ly, max_ly

def visible_nodes(geometry: Geometry, buffer: int = config.GRID_BUFFER) -> list[GridNode]:
    """All nodes inside the padded viewport bounds, row by row (ly outer, lx inner)."""
    min_lx, max_lx, min_ly, max_ly = lattice_bounds(geometry, buffer)
    nodes = []
    for ly in range(min_ly, max_ly + 1):
        for lx in range(min_lx, max_lx + 1):
            point = LatticePoint(lx, ly)
            nodes.append(GridNode(point=point, pitch_class=point.pitch_class, screen=project(lx, ly, geometry)))
    logger.debug(f"{len(nodes)} grid nodes for lx [{min_lx}, {max_lx}], ly [{min_ly}, {max_ly}]")
    return nodes

def lattice_edges(nodes: list[GridNode]) -> list[tuple[GridNode, GridNode]]:
    """Undirected P5, M3 and m3 edges between the given nodes, each listed once."""
    by_point = {node.point: node for node in nodes}
    edges = []
    for node in nodes:
        for offset in FORWARD_OFFSETS:
            other = by_point.get(node.point.offset(offset.dlx, offset.dly))
            if other is not None:
                edges.append((node, other))
    return edges
