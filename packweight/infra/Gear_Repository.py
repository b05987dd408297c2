"""Gear catalog repository (gear.json + categories.json)."""
import logging
from pathlib import Path
from typing import Dict, List, Optional

from packweight.domain.Category import Category
from packweight.domain.GearItem import GearItem
from packweight.infra.json_store import read_json
from packweight.infra.paths import CATEGORIES_FILENAME, GEAR_FILENAME, data_file

logger = logging.getLogger(__name__)


class GearRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.gear_file = data_file(GEAR_FILENAME, data_dir)
        self.categories_file = data_file(CATEGORIES_FILENAME, data_dir)

    def list_gear(self) -> List[GearItem]:
        return [GearItem.from_dict(entry) for entry in read_json(self.gear_file, [])]

    def list_categories(self) -> List[Category]:
        return [Category.from_dict(entry) for entry in read_json(self.categories_file, [])]

    def gear_index(self) -> Dict[str, GearItem]:
        return {g.id: g for g in self.list_gear()}

    def category_index(self) -> Dict[str, Category]:
        return {c.id: c for c in self.list_categories()}
