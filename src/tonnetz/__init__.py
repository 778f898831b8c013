"""
Tonnetz lattice engine.

Pitch classes laid out on a 2D integer lattice (fifths on one axis, major
thirds on the other), projected to screen space and back, plus a search
that places chord shapes on the lattice as connected clusters.
"""
