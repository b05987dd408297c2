"""PackList aggregate: a named, trip-specific selection of gear (PackListItem rows)."""
from datetime import datetime
from typing import List, Optional
from packweight.domain.PackListItem import PackListItem
from packweight.utilities.timestamps import parse_timestamp


class PackList:
    def __init__(self, id: str = "", name: str = "", items: Optional[List[PackListItem]] = None,
                 created_at: Optional[datetime] = None, description: str = ""):
        self.id = id
        self.name = name
        self.items = items[:] if items else []
        self.created_at = created_at
        self.description = description

    def find_item(self, item_id: str) -> Optional[PackListItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"{self.name}:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        created = parse_timestamp(d.get("created_at"))
        return PackList(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            items=[PackListItem.from_dict(i) for i in d.get("items", []) or []],
            created_at=created,
            description=d.get("description", "") or "",
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "items": [item.to_dict() for item in self.items],
        }
