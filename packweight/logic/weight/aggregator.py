"""Per-list weight aggregation.

compute_list_stats(items) reduces one pack list's rows into a ListStats record:

    {
      'total_weight': g,        # every included row
      'base_weight': g,         # included rows neither worn nor consumable
      'worn_weight': g,         # included rows flagged worn
      'consumable_weight': g,   # included rows flagged consumable
      'item_count': int         # all rows, included or not
    }
"""
from __future__ import annotations
from typing import Iterable, Optional

from packweight.domain.PackList import PackList
from packweight.domain.PackListItem import PackListItem
from packweight.logic.weight.classifier import classify_item
from packweight.utilities.constants import CLASS_BASE, CLASS_WORN, CLASS_CONSUMABLE

__all__ = ["ListStats", "compute_list_stats", "compute_pack_list_stats"]


class ListStats:
    def __init__(self, total_weight: float = 0, base_weight: float = 0, worn_weight: float = 0,
                 consumable_weight: float = 0, item_count: int = 0):
        self.total_weight = total_weight
        self.base_weight = base_weight
        self.worn_weight = worn_weight
        self.consumable_weight = consumable_weight
        self.item_count = item_count

    def __eq__(self, other) -> bool:
        if not isinstance(other, ListStats):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return (f"ListStats(total={self.total_weight}, base={self.base_weight}, worn={self.worn_weight}, "
                f"consumable={self.consumable_weight}, items={self.item_count})")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Builds ListStats from any mapping carrying the stats keys (extra keys ignored).'''
        d = dict(data) if isinstance(data, dict) else {}
        return ListStats(
            total_weight=d.get('total_weight', 0),
            base_weight=d.get('base_weight', 0),
            worn_weight=d.get('worn_weight', 0),
            consumable_weight=d.get('consumable_weight', 0),
            item_count=d.get('item_count', 0),
        )

    def to_dict(self):
        return {
            'total_weight': self.total_weight,
            'base_weight': self.base_weight,
            'worn_weight': self.worn_weight,
            'consumable_weight': self.consumable_weight,
            'item_count': self.item_count,
        }


def compute_list_stats(items: Optional[Iterable[PackListItem]]) -> ListStats:
    """Aggregate weights for the given pack list rows in a single pass.

    Excluded rows add nothing to any sum but still count toward item_count.
    Raises UnresolvedGearItemError if a row has no GearItem attached.
    """
    stats = ListStats()
    if not items:
        return stats
    for item in items:
        stats.item_count += 1
        weight, classes = classify_item(item)
        if not item.is_included:
            continue
        stats.total_weight += weight
        if CLASS_BASE in classes:
            stats.base_weight += weight
        if CLASS_WORN in classes:
            stats.worn_weight += weight
        if CLASS_CONSUMABLE in classes:
            stats.consumable_weight += weight
    return stats


def compute_pack_list_stats(pack_list: Optional[PackList]) -> ListStats:
    if pack_list is None:
        return ListStats()
    return compute_list_stats(pack_list.items)
