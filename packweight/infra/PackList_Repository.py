"""Pack list repository: loads lists from pack_lists.json and resolves them into entity graphs."""
import logging
from pathlib import Path
from typing import Dict, List, Optional

from packweight.domain.Category import Category
from packweight.domain.GearItem import GearItem
from packweight.domain.PackList import PackList
from packweight.events.event_helpers import publish_pack_list_changed
from packweight.infra.Gear_Repository import GearRepository
from packweight.infra.json_store import read_json, write_json
from packweight.infra.paths import PACK_LISTS_FILENAME, data_file
from packweight.utilities.timestamps import sort_timestamp

logger = logging.getLogger(__name__)


class PackListRepository:
    def __init__(self, data_dir: Optional[Path] = None, gear_repository: Optional[GearRepository] = None):
        self.pack_lists_file = data_file(PACK_LISTS_FILENAME, data_dir)
        self.gear_repository = gear_repository or GearRepository(data_dir)

    def _load_raw(self) -> List[PackList]:
        return [PackList.from_dict(entry) for entry in read_json(self.pack_lists_file, [])]

    @staticmethod
    def _resolve(pack_list: PackList, gear: Dict[str, GearItem], categories: Dict[str, Category]) -> PackList:
        # Dangling references stay unresolved; the engine rejects them as a contract violation
        for item in pack_list.items:
            gear_item = gear.get(item.gear_item_id)
            if gear_item is None:
                logger.error("Pack list %s item %s references missing gear %s",
                             pack_list.id, item.id, item.gear_item_id)
                item.resolve(None)
                continue
            item.resolve(gear_item, categories.get(gear_item.category_id))
        return pack_list

    def list_pack_lists(self) -> List[PackList]:
        """Every pack list, resolved, oldest first."""
        gear = self.gear_repository.gear_index()
        categories = self.gear_repository.category_index()
        lists = [self._resolve(pl, gear, categories) for pl in self._load_raw()]
        lists.sort(key=lambda pl: (pl.created_at is None, sort_timestamp(pl.created_at)))
        return lists

    def get_pack_list(self, pack_list_id: str) -> Optional[PackList]:
        for pl in self._load_raw():
            if pl.id == pack_list_id:
                return self._resolve(pl, self.gear_repository.gear_index(), self.gear_repository.category_index())
        return None

    def save_pack_list(self, pack_list: PackList, reason: str = "updated") -> None:
        """Persist one list (replace by id or append) and announce the change."""
        stored = read_json(self.pack_lists_file, [])
        payload = pack_list.to_dict()
        for idx, entry in enumerate(stored):
            if str(entry.get('id', '')) == pack_list.id:
                stored[idx] = payload
                break
        else:
            stored.append(payload)
        write_json(self.pack_lists_file, stored)
        logger.info("Pack list %s saved (%s)", pack_list.id, reason)
        publish_pack_list_changed(pack_list.id, reason)
