"""Small builders for resolved entity graphs used across the tests."""
from datetime import datetime
from itertools import count

from packweight.domain.Category import Category
from packweight.domain.GearItem import GearItem
from packweight.domain.PackList import PackList
from packweight.domain.PackListItem import PackListItem

_ids = count(1)

SHELTER = Category("cat-shelter", "Shelter", "#1d4ed8")
CLOTHING = Category("cat-clothing", "Clothing", "#059669")
FOOD = Category("cat-food", "Food", "#d97706")
CATEGORIES = {c.id: c for c in (SHELTER, CLOTHING, FOOD)}


def make_gear(weight, quantity=1, worn=False, consumable=False, category=SHELTER, name=None, created_at=None):
    n = next(_ids)
    return GearItem(id=f"gear-{n}", name=name or f"Gear {n}", weight=weight, quantity=quantity,
                    is_worn=worn, is_consumable=consumable, category_id=category.id, created_at=created_at)


def make_item(weight, qty=1, included=True, worn=False, consumable=False, category=SHELTER, name=None):
    gear = make_gear(weight, worn=worn, consumable=consumable, category=category, name=name)
    return PackListItem(id=f"row-{next(_ids)}", quantity=qty, is_included=included,
                        gear_item=gear, category=category)


def make_list(name, items=None, created_at=None, id=None):
    return PackList(id=id or f"list-{next(_ids)}", name=name, items=items or [],
                    created_at=created_at or datetime(2024, 1, 1))
