"""Weight unit conversion for the presentation edge.

The engine works in grams only; these helpers translate user input into grams
and grams into the unit a user prefers.
"""
from typing import Final, Optional

# Grams in one unit (international avoirdupois definitions for oz and lbs)
GRAMS_PER_UNIT: Final[dict[str, float]] = {
    "g": 1,
    "kg": 1000,
    "oz": 28.349523125,
    "lbs": 453.59237,
}

WEIGHT_UNITS: Final[tuple] = tuple(GRAMS_PER_UNIT)


def _factor(unit: str) -> float:
    try:
        return GRAMS_PER_UNIT[unit]
    except KeyError:
        raise ValueError(f"Unknown weight unit: {unit!r} (expected one of {', '.join(WEIGHT_UNITS)})") from None


def convert_weight(grams: float, unit: str) -> float:
    return grams / _factor(unit)


def convert_to_grams(value: float, unit: str) -> float:
    return value * _factor(unit)


def parse_weight_input(text: str, unit: str) -> Optional[float]:
    """Parse a user-typed weight in ``unit`` into grams; None if not a non-negative number."""
    try:
        value = float(str(text).strip())
    except (TypeError, ValueError):
        return None
    if value != value or value < 0:  # NaN or negative
        return None
    return convert_to_grams(value, unit)
