import math

PITCH_CLASS_COUNT = 12


def pitch_mod(value: int) -> int:
    """Reduce a semitone count to a pitch class in [0, 11]."""
    return value % PITCH_CLASS_COUNT

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +inf (not banker's rounding)."""
    return int(math.floor(value + 0.5))

def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))
