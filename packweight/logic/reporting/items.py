"""Item-level highlights: weight-class split, heaviest rows, heaviest gear by usage."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional

from packweight.domain.PackList import PackList
from packweight.domain.PackListItem import PackListItem
from packweight.logic.weight.aggregator import ListStats
from packweight.logic.weight.classifier import effective_weight, require_gear
from packweight.utilities.constants import (
    CLASS_BASE, CLASS_WORN, CLASS_CONSUMABLE, DEFAULT_TOP_ITEMS, WEIGHT_SPLIT_COLORS
)

__all__ = ["compute_weight_split", "compute_heaviest_items", "compute_top_heaviest_by_usage"]


def compute_weight_split(stats: ListStats) -> List[Dict[str, Any]]:
    """Base / worn / consumable slices of a list, zero-weight slices dropped."""
    slices = [
        ('Base Weight', stats.base_weight, WEIGHT_SPLIT_COLORS[CLASS_BASE]),
        ('Worn Weight', stats.worn_weight, WEIGHT_SPLIT_COLORS[CLASS_WORN]),
        ('Consumables', stats.consumable_weight, WEIGHT_SPLIT_COLORS[CLASS_CONSUMABLE]),
    ]
    return [{'name': name, 'weight': weight, 'color': color} for name, weight, color in slices if weight > 0]


def compute_heaviest_items(items: Optional[Iterable[PackListItem]], limit: int = DEFAULT_TOP_ITEMS) -> List[Dict[str, Any]]:
    """Included rows by effective weight desc (ties by name)."""
    rows = []
    for item in items or []:
        gear = require_gear(item)
        if not item.is_included:
            continue
        rows.append({
            'gear_item_id': gear.id,
            'name': gear.name,
            'weight': effective_weight(item),
            'category_name': item.category.name if item.category else None,
            'is_worn': gear.is_worn,
            'is_consumable': gear.is_consumable,
        })
    rows.sort(key=lambda r: (-r['weight'], r['name']))
    return rows[:limit]


def compute_top_heaviest_by_usage(pack_lists: Optional[Iterable[PackList]], limit: int = DEFAULT_TOP_ITEMS) -> List[Dict[str, Any]]:
    """Gear referenced by any list, ranked by unit weight x number of referencing rows.

    Every row counts toward usage regardless of inclusion: it is about how often a
    piece of gear gets packed into plans, not about a particular list's totals.
    """
    usage: Dict[str, Dict[str, Any]] = {}
    for pack_list in pack_lists or []:
        for item in pack_list.items:
            gear = require_gear(item)
            rec = usage.get(gear.id)
            if rec is None:
                rec = usage[gear.id] = {
                    'gear_item_id': gear.id,
                    'name': gear.name,
                    'category_name': item.category.name if item.category else None,
                    'weight': gear.weight,
                    'usage': 0,
                }
            rec['usage'] += 1
    ranked = sorted(usage.values(), key=lambda r: (-(r['weight'] * r['usage']), r['name']))
    return ranked[:limit]
