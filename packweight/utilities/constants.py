from typing import Final

# Every weight handled by the engine is expressed in this unit
CANONICAL_UNIT: Final[str] = "g"

CLASS_BASE: Final[str] = "base"
CLASS_WORN: Final[str] = "worn"
CLASS_CONSUMABLE: Final[str] = "consumable"
CLASS_EXCLUDED: Final[str] = "excluded"

# (label, lower bound inclusive, upper bound exclusive); None = unbounded
WEIGHT_BUCKETS: Final[tuple] = (
    ("0-50g", 0, 50),
    ("50-100g", 50, 100),
    ("100-250g", 100, 250),
    ("250-500g", 250, 500),
    ("500g-1kg", 500, 1000),
    ("1kg+", 1000, None),
)

WEIGHT_SPLIT_COLORS: Final[dict[str, str]] = {
    CLASS_BASE: "#3b82f6",
    CLASS_WORN: "#10b981",
    CLASS_CONSUMABLE: "#f59e0b",
}

DEFAULT_TOP_ITEMS: Final[int] = 5
DEFAULT_RECENT_ITEMS: Final[int] = 5
