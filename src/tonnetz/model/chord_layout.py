"""
Chord Layout Resolver
=====================
Places a chord shape on the lattice as a connected cluster of nodes.

For each interval after the root, a breadth-first search starts from the
neighbours of the most recently placed note, then the neighbours of every
other placed note (in placement order), and accepts the first node whose
pitch class matches. Placed nodes are pre-marked as visited so a node is
never used twice. The search expands up to `max_depth` steps; an interval
with no match inside that radius is left out of the result.

The queue is FIFO and neighbours are enumerated in a fixed order, so the
same input always gives the same layout.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Sequence

from tonnetz import config
from tonnetz.model.lattice_point import LatticePoint
from tonnetz.model.neighbors import neighbors
from tonnetz.utils import pitch_mod

logger = logging.getLogger(__name__)


def _find_nearest(
    target_pc: int,
    placed: Sequence[LatticePoint],
    max_depth: int,
) -> LatticePoint | None:
    visited: set[LatticePoint] = set(placed)
    queue: deque[tuple[LatticePoint, int]] = deque()

    def enqueue(point: LatticePoint, depth: int) -> None:
        if point not in visited:
            visited.add(point)
            queue.append((point, depth))

    # Priority 1: around the last placed note; priority 2: around the rest
    for seed in neighbors(*placed[-1]):
        enqueue(seed, 1)
    for earlier in placed[:-1]:
        for seed in neighbors(*earlier):
            enqueue(seed, 1)

    while queue:
        point, depth = queue.popleft()
        if point.pitch_class == target_pc:
            return point
        if depth < max_depth:
            for nxt in neighbors(*point):
                enqueue(nxt, depth + 1)
    return None


def resolve_chord_layout(
    root: LatticePoint | tuple[int, int],
    intervals: Sequence[int],
    max_depth: int = config.MAX_SEARCH_DEPTH,
) -> list[LatticePoint]:
    """
    Embed a chord shape at `root`.

    Args:
        root: Lattice node of the chord root.
        intervals: Semitone offsets from the root; the first must be 0.
        max_depth: Search radius, in lattice steps, for each note.

    Raises:
        ValueError: If `intervals` is empty or does not start with 0.

    Returns:
        Lattice nodes, root first, one per embeddable interval. Each note
        after the root is adjacent to at least one earlier note. The list is
        shorter than `intervals` when a note could not be placed.
    """
    if not intervals:
        raise ValueError("Chord shape must contain at least the root interval.")
    if intervals[0] != 0:
        raise ValueError(f"Chord shape must start with 0, got {intervals[0]}.")

    root = LatticePoint(*root)
    root_pc = root.pitch_class
    embedding = [root]

    for interval in intervals[1:]:
        target_pc = pitch_mod(root_pc + interval)
        found = _find_nearest(target_pc, embedding, max_depth)
        if found is None:
            logger.debug(
                f"Interval {interval} (pc {target_pc}) not reachable within "
                f"{max_depth} steps of {[p.id for p in embedding]}; skipped."
            )
            continue
        embedding.append(found)

    return embedding

def embedding_ids(embedding: Iterable[LatticePoint]) -> list[str]:
    """Node ids of an embedding, in order."""
    return [point.id for point in embedding]
