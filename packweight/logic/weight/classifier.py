"""Weight classification for a single pack list entry."""
from __future__ import annotations
import logging
from typing import Any, FrozenSet, Tuple

from packweight.domain.GearItem import GearItem
from packweight.domain.PackListItem import PackListItem
from packweight.utilities.constants import CLASS_BASE, CLASS_WORN, CLASS_CONSUMABLE, CLASS_EXCLUDED

logger = logging.getLogger(__name__)

__all__ = [
    "UnresolvedGearItemError", "sanitize_quantity", "effective_weight",
    "classify_item", "weight_classes", "gear_classes", "require_gear",
]


class UnresolvedGearItemError(LookupError):
    """A PackListItem reached the engine without its GearItem attached."""

    def __init__(self, item: PackListItem):
        self.item_id = item.id
        self.gear_item_id = item.gear_item_id
        super().__init__(
            f"Pack list item '{item.id}' references gear item '{item.gear_item_id}' which is not in the supplied graph"
        )


def sanitize_quantity(quantity: Any) -> int:
    """Coerce a stored quantity to an int >= 1 (read path over validated storage)."""
    if isinstance(quantity, bool):
        return 1
    if isinstance(quantity, int) and quantity >= 1:
        return quantity
    if isinstance(quantity, float) and quantity.is_integer() and quantity >= 1:
        return int(quantity)
    logger.debug("Malformed quantity %r treated as 1", quantity)
    return 1


def require_gear(item: PackListItem) -> GearItem:
    """Return the resolved GearItem or raise UnresolvedGearItemError."""
    if item.gear_item is None:
        raise UnresolvedGearItemError(item)
    return item.gear_item


def effective_weight(item: PackListItem) -> float:
    """Unit weight times the list-item quantity; 0 when the entry is excluded."""
    gear = require_gear(item)
    if not item.is_included:
        return 0
    if gear.weight < 0:
        # Propagated untouched so the bad row stays visible downstream
        logger.warning("Gear item '%s' has negative weight %s", gear.id, gear.weight)
    return gear.weight * sanitize_quantity(item.quantity)


def weight_classes(item: PackListItem) -> FrozenSet[str]:
    """Every bucket an entry's weight counts toward.

    Worn and consumable are independent exclusion reasons from base weight, so an
    item flagged both lands in both the worn and consumable buckets.
    """
    gear = require_gear(item)
    if not item.is_included:
        return frozenset({CLASS_EXCLUDED})
    return gear_classes(gear)


def gear_classes(gear: GearItem) -> FrozenSet[str]:
    """Buckets a GearItem's weight counts toward whenever it is included."""
    classes = set()
    if gear.is_worn:
        classes.add(CLASS_WORN)
    if gear.is_consumable:
        classes.add(CLASS_CONSUMABLE)
    if not classes:
        classes.add(CLASS_BASE)
    return frozenset(classes)


def classify_item(item: PackListItem) -> Tuple[float, FrozenSet[str]]:
    """Return (effective weight, weight classes) for one entry."""
    return effective_weight(item), weight_classes(item)
