from __future__ import annotations

# Coordinates at or beyond this magnitude are treated as decoding noise
PLAUSIBILITY_LIMIT = 100000.0


def is_plausible(value: float, limit: float = PLAUSIBILITY_LIMIT) -> bool:
    """True when `value` looks like a real coordinate (|value| < limit).

    NaN compares false against everything, so it is never plausible.
    """
    return abs(value) < limit


def coords_plausible(x: float, y: float, z: float, limit: float = PLAUSIBILITY_LIMIT) -> bool:
    return is_plausible(x, limit) and is_plausible(y, limit) and is_plausible(z, limit)
