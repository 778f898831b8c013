"""Chord quality catalog and note names."""
from __future__ import annotations

from dataclasses import dataclass

from tonnetz.utils import pitch_mod

NOTE_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


@dataclass(frozen=True)
class ChordDefinition:
    """
    A chord shape: semitone intervals above the root, root (0) first.

    Order matters; the layout search places notes in this order.
    """
    key: str
    name: str
    intervals: tuple[int, ...]


_REGISTRY: dict[str, ChordDefinition] = {}

def register_chord(key: str, name: str, intervals: list[int]) -> ChordDefinition:
    """Add a chord shape to the catalog under `key`."""
    if not intervals or intervals[0] != 0:
        raise ValueError(f"Chord '{key}' must start with the root interval 0, got {intervals}.")
    if key in _REGISTRY:
        raise ValueError(f"Chord '{key}' is already registered.")
    chord = ChordDefinition(key=key, name=name, intervals=tuple(intervals))
    _REGISTRY[key] = chord
    return chord

def get_chord(key: str) -> ChordDefinition:
    chord = _REGISTRY.get(key)
    if not chord:
        raise KeyError(f"No chord registered for key '{key}'")
    return chord

def list_keys() -> list[str]:
    return list(_REGISTRY.keys())

def note_name(pc: int) -> str:
    return NOTE_NAMES[pitch_mod(pc)]

def chord_label(root_pc: int, key: str) -> str:
    """Human readable label, e.g. chord_label(9, "Min7") -> "A Min7"."""
    return f"{note_name(root_pc)} {get_chord(key).name}"


# Triads
register_chord("Major", "Major", [0, 4, 7])
register_chord("Minor", "Minor", [0, 3, 7])
register_chord("Augmented", "Augmented", [0, 4, 8])
register_chord("Diminished", "Diminished", [0, 3, 6])

# Suspended & Adds & 6ths
register_chord("Sus2", "Sus2", [0, 2, 7])
register_chord("Sus4", "Sus4", [0, 5, 7])
register_chord("Maj6", "Maj6", [0, 4, 7, 9])
register_chord("Min6", "Min6", [0, 3, 7, 9])
register_chord("Add9", "Add9", [0, 4, 7, 2])

# 7ths
register_chord("Maj7", "Maj7", [0, 4, 7, 11])
register_chord("Min7", "Min7", [0, 3, 7, 10])
register_chord("Dom7", "Dom7", [0, 4, 7, 10])
register_chord("HalfDim7", "Half-Dim7", [0, 3, 6, 10])  # m7b5
register_chord("Dim7", "Full Dim7", [0, 3, 6, 9])

# Extensions
register_chord("Maj9", "Maj9", [0, 4, 7, 11, 2])
register_chord("Min9", "Min9", [0, 3, 7, 10, 2])
register_chord("Dom9", "Dom9", [0, 4, 7, 10, 2])
register_chord("Maj11", "Maj11", [0, 4, 7, 11, 2, 5])
register_chord("Maj13", "Maj13", [0, 4, 7, 11, 2, 9])
