"""GearItem domain entity: one owned piece of gear (unit weight in grams, catalog quantity, flags, category)."""
from datetime import datetime
from typing import Optional
from packweight.utilities.timestamps import parse_timestamp


class GearItem:
    def __init__(self, id: str = "", name: str = "", weight: float = 0, quantity: int = 1,
                 is_worn: bool = False, is_consumable: bool = False, category_id: str = "",
                 created_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        # Grams per single unit; 0 is a legitimate weight (e.g. a digital map)
        self.weight = weight
        self.quantity = quantity
        self.is_worn = bool(is_worn)
        self.is_consumable = bool(is_consumable)
        self.category_id = category_id
        self.created_at = created_at

    def __str__(self) -> str:
        flags = []
        if self.is_worn:
            flags.append("worn")
        if self.is_consumable:
            flags.append("consumable")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        return f"{self.name} - {self.weight} g x{self.quantity}{suffix}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a GearItem from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        created = parse_timestamp(d.get("created_at"))
        weight = d.get("weight")
        return GearItem(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            weight=weight if weight is not None else 0,
            quantity=d.get("quantity", 1),
            is_worn=d.get("is_worn", False),
            is_consumable=d.get("is_consumable", False),
            category_id=str(d.get("category_id", "")),
            created_at=created,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "weight": self.weight,
            "quantity": self.quantity,
            "is_worn": self.is_worn,
            "is_consumable": self.is_consumable,
            "category_id": self.category_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
