"""
Configuration & Constants
=========================
This module serves as the central registry for the lattice engine's numbers.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (cell sizes, hit radii, search
   bounds) being scattered throughout the model and the store.
2. Consistency: Projection, inverse projection and centroid placement must
   all agree on the same basis orientation; it is defined once here.

Exports:
    BASE_CELL_SIZE (float): Distance between adjacent nodes at zoom 1, in pixels.
    BASE_NODE_RADIUS (float): Node radius at zoom 1, in pixels.
    MAX_SEARCH_DEPTH (int): Depth bound of the chord layout search.
"""
import math

# Lattice geometry (pixels at zoom 1.0)
BASE_CELL_SIZE: float = 60.0
BASE_NODE_RADIUS: float = 22.0

# Angle between the two basis vectors. v2.y is multiplied by V2_Y_SIGN;
# -1 means the thirds axis leans upwards on a Y-down screen.
BASIS_ANGLE_DEG: float = 60.0
BASIS_ANGLE_RAD: float = math.radians(BASIS_ANGLE_DEG)
V2_Y_SIGN: int = -1

# Hit testing
NOTE_HIT_FACTOR: float = 1.5     # x node radius
REGION_HIT_FACTOR: float = 0.4   # x cell size

# Chord layout search
MAX_SEARCH_DEPTH: int = 4

# Zoom
DEFAULT_ZOOM: float = 1.0
ZOOM_MIN: float = 0.4
ZOOM_MAX: float = 2.5
ZOOM_STEP: float = 0.1

# Viewport
DEFAULT_VIEWPORT_WIDTH: float = 800.0
DEFAULT_VIEWPORT_HEIGHT: float = 600.0
GRID_BUFFER: int = 2

# Pointer travel (pixels) below which a press/release counts as a click
CLICK_DRAG_THRESHOLD: float = 5.0
