"""Category breakdowns.

compute_category_breakdown(items) works on one pack list (included rows only);
compute_library_breakdown(gear_items, categories) works on the whole catalog.

Both return a list of records sorted by weight desc, then category name asc:

    { 'category_id': str, 'category_name': str, 'color': str,
      'weight': g, 'item_count': int, 'percentage_of_total': float }
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional

from packweight.domain.Category import Category
from packweight.domain.GearItem import GearItem
from packweight.domain.PackListItem import PackListItem
from packweight.logic.weight.classifier import effective_weight, require_gear, sanitize_quantity

__all__ = ["UnresolvedCategoryError", "percentage_of", "compute_category_breakdown", "compute_library_breakdown"]


class UnresolvedCategoryError(LookupError):
    """A gear item's category_id has no matching Category in the supplied graph."""

    def __init__(self, gear_item_id: str, category_id: str):
        self.gear_item_id = gear_item_id
        self.category_id = category_id
        super().__init__(f"Gear item '{gear_item_id}' references unknown category '{category_id}'")


def percentage_of(part: float, whole: float) -> float:
    """part / whole * 100, defined as 0 when whole is 0."""
    if whole == 0:
        return 0
    return part / whole * 100


def _index(categories: Optional[Iterable[Category]]) -> Dict[str, Category]:
    if not categories:
        return {}
    if isinstance(categories, Mapping):
        return dict(categories)
    return {c.id: c for c in categories}


def _record(category: Category) -> Dict[str, Any]:
    return {
        'category_id': category.id,
        'category_name': category.name,
        'color': category.color,
        'weight': 0,
        'item_count': 0,
        'percentage_of_total': 0,
    }


def _finish(groups: Dict[str, Dict[str, Any]], total: float) -> List[Dict[str, Any]]:
    result = list(groups.values())
    for rec in result:
        rec['percentage_of_total'] = percentage_of(rec['weight'], total)
    result.sort(key=lambda r: (-r['weight'], r['category_name'], r['category_id']))
    return result


def compute_category_breakdown(items: Optional[Iterable[PackListItem]],
                               categories: Optional[Iterable[Category]] = None) -> List[Dict[str, Any]]:
    """Group a list's included rows by category.

    The category comes from the row's resolved ``category`` or, failing that, from
    ``categories`` by the gear item's category_id. item_count counts rows, not the
    catalog quantity. Category weights add up to the list's total weight.
    """
    if not items:
        return []
    lookup = _index(categories)
    groups: Dict[str, Dict[str, Any]] = {}
    total = 0
    for item in items:
        gear = require_gear(item)
        if not item.is_included:
            continue
        category = item.category or lookup.get(gear.category_id)
        if category is None:
            raise UnresolvedCategoryError(gear.id, gear.category_id)
        weight = effective_weight(item)
        rec = groups.get(category.id)
        if rec is None:
            rec = groups[category.id] = _record(category)
        rec['weight'] += weight
        rec['item_count'] += 1
        total += weight
    return _finish(groups, total)


def compute_library_breakdown(gear_items: Optional[Iterable[GearItem]],
                              categories: Optional[Iterable[Category]]) -> List[Dict[str, Any]]:
    """Catalog-wide weight per category (unit weight x catalog quantity); item_count counts gear items."""
    if not gear_items:
        return []
    lookup = _index(categories)
    groups: Dict[str, Dict[str, Any]] = {}
    total = 0
    for gear in gear_items:
        category = lookup.get(gear.category_id)
        if category is None:
            raise UnresolvedCategoryError(gear.id, gear.category_id)
        weight = gear.weight * sanitize_quantity(gear.quantity)
        rec = groups.get(category.id)
        if rec is None:
            rec = groups[category.id] = _record(category)
        rec['weight'] += weight
        rec['item_count'] += 1
        total += weight
    return _finish(groups, total)
