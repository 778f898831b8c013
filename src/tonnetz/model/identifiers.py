"""
String keys for lattice nodes and triad regions.

The formats are part of the public contract, callers use them as dict/set keys:
    node id          "{lx},{ly}"          e.g. "2,-1"
    chord region id  "{M|m}:{lx},{ly}"    e.g. "M:2,-1"
"""
from __future__ import annotations

import logging
import re
from enum import StrEnum
from typing import Optional

logger = logging.getLogger(__name__)

REGION_SEPARATOR = ":"
COORD_SEPARATOR = ","

# Exactly what node_id writes: optional minus, digits
_COORD_RE = re.compile(r"-?[0-9]+")


class TriadQuality(StrEnum):
    """Quality of a triangular lattice region."""
    MAJOR = "M"
    MINOR = "m"


def node_id(lx: int, ly: int) -> str:
    return f"{lx}{COORD_SEPARATOR}{ly}"

def parse_node_id(value: str) -> Optional[tuple[int, int]]:
    """
    Parse "lx,ly" into an integer pair.

    Returns:
        (lx, ly), or None if the string is malformed.
    """
    parts = value.split(COORD_SEPARATOR)
    if len(parts) != 2:
        logger.debug(f"Malformed node id: {value!r}")
        return None
    if not all(_COORD_RE.fullmatch(part) for part in parts):
        logger.debug(f"Non-integer coordinates in node id: {value!r}")
        return None
    return int(parts[0]), int(parts[1])

def chord_region_id(quality: TriadQuality, lx: int, ly: int) -> str:
    return f"{TriadQuality(quality).value}{REGION_SEPARATOR}{node_id(lx, ly)}"

def parse_chord_region_id(value: str) -> Optional[tuple[TriadQuality, int, int]]:
    """
    Parse "M:lx,ly" / "m:lx,ly".

    Ids are only produced by the engine itself, so a malformed one is not
    reported; the caller gets None and should do nothing.

    Returns:
        (quality, lx, ly), or None if the string is malformed.
    """
    quality_str, sep, coords = value.partition(REGION_SEPARATOR)
    if not sep:
        logger.debug(f"Chord region id without separator: {value!r}")
        return None
    try:
        quality = TriadQuality(quality_str)
    except ValueError:
        logger.debug(f"Unknown triad quality in region id: {value!r}")
        return None
    parsed = parse_node_id(coords)
    if parsed is None:
        return None
    return quality, parsed[0], parsed[1]
