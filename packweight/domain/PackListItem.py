"""PackListItem domain entity: a pack list's reference to a GearItem with its own quantity and inclusion flag."""
from typing import Optional
from packweight.domain.GearItem import GearItem
from packweight.domain.Category import Category


class PackListItem:
    def __init__(self, id: str = "", gear_item_id: str = "", quantity: int = 1, is_included: bool = True,
                 gear_item: Optional[GearItem] = None, category: Optional[Category] = None):
        self.id = id
        self.gear_item_id = gear_item_id or (gear_item.id if gear_item else "")
        # Overrides the catalog quantity for this list; never multiplied with it
        self.quantity = quantity
        self.is_included = bool(is_included)
        self.gear_item = gear_item
        self.category = category

    def resolve(self, gear_item: Optional[GearItem], category: Optional[Category] = None):
        '''Attaches the referenced GearItem (and its Category) loaded by the data-access layer.'''
        self.gear_item = gear_item
        self.category = category
        return self

    @property
    def is_resolved(self) -> bool:
        return self.gear_item is not None

    def __str__(self) -> str:
        name = self.gear_item.name if self.gear_item else f"<unresolved {self.gear_item_id}>"
        state = "" if self.is_included else " (excluded)"
        return f"{name} x{self.quantity}{state}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return PackListItem(
            id=str(d.get("id", "")),
            gear_item_id=str(d.get("gear_item_id", "")),
            quantity=d.get("quantity", 1),
            is_included=d.get("is_included", True),
        )

    def to_dict(self):
        '''Persistence form: the gear reference only, never the resolved graph.'''
        return {
            "id": self.id,
            "gear_item_id": self.gear_item_id,
            "quantity": self.quantity,
            "is_included": self.is_included,
        }
