"""Category domain entity: id, display name, display color."""


class Category:
    def __init__(self, id: str = "", name: str = "", color: str = ""):
        self.id = id
        self.name = name
        self.color = color

    def __str__(self) -> str:
        return f"{self.name} ({self.color})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Category(id=str(d.get("id", "")), name=d.get("name", ""), color=d.get("color", ""))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "color": self.color}
