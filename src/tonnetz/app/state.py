from __future__ import annotations

import logging
from dataclasses import replace
from enum import StrEnum

from PySide6.QtCore import QObject, Signal

from tonnetz import config
from tonnetz.model.chord_layout import embedding_ids, resolve_chord_layout
from tonnetz.model.chords import get_chord
from tonnetz.model.geometry_primitives import Point, Vector
from tonnetz.model.hit_test import hit_test_chord_region, hit_test_note
from tonnetz.model.identifiers import TriadQuality, parse_chord_region_id
from tonnetz.model.lattice import Geometry, center_on, triad_vertices, with_zoom
from tonnetz.model.lattice_point import LatticePoint

logger = logging.getLogger(__name__)

# Catalog key selected when a triad region is clicked
TRIAD_CHORD_KEYS: dict[TriadQuality, str] = {
    TriadQuality.MAJOR: "Major",
    TriadQuality.MINOR: "Minor",
}


class ViewMode(StrEnum):
    """What a click on the lattice selects."""
    NOTES = "notes"
    CHORDS = "chords"


class Store(QObject):
    """Central interaction state with signals for view sync."""
    active_nodes_changed = Signal(object)
    root_changed = Signal(object)
    chord_changed = Signal(object)
    geometry_changed = Signal(object)

    def __init__(self, geometry: Geometry | None = None) -> None:
        super().__init__()
        self.geometry = geometry if geometry is not None else Geometry()
        self.view_mode = ViewMode.NOTES
        self.active_node_ids: set[str] = set()
        self.root: LatticePoint | None = None
        self.selected_chord: str | None = None

    # ------------------------------------------------------------------
    # Internal setters
    # ------------------------------------------------------------------
    def _set_active(self, ids: set[str]) -> None:
        self.active_node_ids = ids
        self.active_nodes_changed.emit(set(self.active_node_ids))

    def _set_chord(self, key: str | None) -> None:
        if key != self.selected_chord:
            self.selected_chord = key
            self.chord_changed.emit(self.selected_chord)

    def _set_geometry(self, geometry: Geometry) -> None:
        self.geometry = geometry
        self.geometry_changed.emit(self.geometry)

    def _set_root(self, point: LatticePoint) -> None:
        if point == self.root:
            return
        self.root = point
        self.root_changed.emit(self.root)
        # Bring the new root to the centre of the view
        self._set_geometry(center_on(point, self.geometry))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def note_clicked(self, lx: int, ly: int) -> None:
        """
        Make (lx, ly) the root.

        With a chord selected, the chord is re-embedded at the new root and
        replaces the active nodes. Otherwise the node is toggled in the
        active set and the chord selection is dropped.
        """
        point = LatticePoint(lx, ly)
        self._set_root(point)

        if self.selected_chord:
            intervals = get_chord(self.selected_chord).intervals
            self._set_active(set(embedding_ids(resolve_chord_layout(point, intervals))))
            logger.debug(f"Moved {self.selected_chord} to {point.id}")
            return

        ids = set(self.active_node_ids)
        if point.id in ids:
            ids.remove(point.id)
        else:
            ids.add(point.id)
        self._set_active(ids)
        self._set_chord(None)

    def select_chord(self, key: str) -> None:
        """Lay out chord `key` at the current root. Does nothing without a root."""
        if self.root is None:
            logger.debug(f"Chord '{key}' selected without a root; ignored.")
            return
        intervals = get_chord(key).intervals
        self._set_active(set(embedding_ids(resolve_chord_layout(self.root, intervals))))
        self._set_chord(key)
        logger.info(f"Selected {key} at {self.root.id}")

    def select_chord_region(self, region_id: str) -> bool:
        """
        Activate the triad of a chord region id.

        Returns:
            False (and leaves the state untouched) if the id is malformed.
        """
        parsed = parse_chord_region_id(region_id)
        if parsed is None:
            return False
        quality, lx, ly = parsed
        self._set_root(LatticePoint(lx, ly))
        self._set_active({p.id for p in triad_vertices(lx, ly, quality)})
        self._set_chord(TRIAD_CHORD_KEYS[quality])
        return True

    def click(self, screen: Point) -> bool:
        """
        Resolve a click in the current view mode and apply it.

        Returns:
            True if a note or region was hit.
        """
        if self.view_mode == ViewMode.CHORDS:
            region = hit_test_chord_region(screen, self.geometry)
            return region is not None and self.select_chord_region(region)

        hit = hit_test_note(screen, self.geometry)
        if hit is None:
            return False
        self.note_clicked(hit.lx, hit.ly)
        return True

    def pointer_released(self, pressed_at: Point, released_at: Point) -> bool:
        """Treat a press/release pair as a click unless the pointer travelled (a drag)."""
        if pressed_at.distance_to(released_at) >= config.CLICK_DRAG_THRESHOLD:
            return False
        return self.click(released_at)

    def set_view_mode(self, mode: ViewMode) -> None:
        self.view_mode = ViewMode(mode)

    def clear(self) -> None:
        self.root = None
        self.root_changed.emit(None)
        self._set_active(set())
        self._set_chord(None)
        logger.info("Selection has been cleared.")

    # ------------------------------------------------------------------
    # View geometry
    # ------------------------------------------------------------------
    def set_zoom(self, zoom: float) -> None:
        self._set_geometry(with_zoom(self.geometry, zoom))

    def zoom_in(self) -> None:
        self.set_zoom(self.geometry.zoom + config.ZOOM_STEP)

    def zoom_out(self) -> None:
        self.set_zoom(self.geometry.zoom - config.ZOOM_STEP)

    def pan_by(self, dx: float, dy: float) -> None:
        self._set_geometry(replace(self.geometry, pan=self.geometry.pan + Vector(dx, dy)))

    def resize(self, width: float, height: float) -> None:
        self._set_geometry(replace(self.geometry, width=width, height=height))
