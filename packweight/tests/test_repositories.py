import json
import shutil
import tempfile
import unittest
from pathlib import Path

from packweight.domain.WeightGoal import WeightGoal
from packweight.events.Event_Bus import GLOBAL_EVENT_BUS, PACK_LIST_CHANGED
from packweight.infra.Gear_Repository import GearRepository
from packweight.infra.PackList_Repository import PackListRepository
from packweight.infra.User_Repository import UserRepository


class TestRepositories(unittest.TestCase):

    def setUp(self):
        self.data_dir = Path(tempfile.mkdtemp(prefix="packweight_repo_"))
        self.events = []
        GLOBAL_EVENT_BUS.subscribe(PACK_LIST_CHANGED, self._record)

    def tearDown(self):
        GLOBAL_EVENT_BUS.unsubscribe(PACK_LIST_CHANGED, self._record)
        shutil.rmtree(self.data_dir, ignore_errors=True)

    def _record(self, event_name, payload):
        self.events.append(payload)

    def _write(self, name, content):
        with open(self.data_dir / name, 'w', encoding='utf-8') as f:
            if isinstance(content, str):
                f.write(content)
            else:
                json.dump(content, f)

    def test_missing_files_are_empty(self):
        self.assertEqual(GearRepository(self.data_dir).list_gear(), [])
        self.assertEqual(PackListRepository(self.data_dir).list_pack_lists(), [])
        goals = UserRepository(self.data_dir).get_goals()
        self.assertIsNone(goals.base_weight_goal)
        self.assertIsNone(goals.total_weight_goal)

    def test_invalid_json_is_empty(self):
        self._write("gear.json", "{not json")
        self.assertEqual(GearRepository(self.data_dir).list_gear(), [])

    def test_resolves_gear_and_category(self):
        self._write("categories.json", [{"id": "c1", "name": "Sleep", "color": "#000"}])
        self._write("gear.json", [{"id": "g1", "name": "Quilt", "weight": 0, "category_id": "c1"}])
        self._write("pack_lists.json", [{"id": "p1", "name": "Trip", "items": [
            {"id": "r1", "gear_item_id": "g1", "quantity": 1},
            {"id": "r2", "gear_item_id": "ghost", "quantity": 1},
        ]}])
        pack_list = PackListRepository(self.data_dir).get_pack_list("p1")
        quilt, ghost = pack_list.items
        self.assertEqual(quilt.gear_item.weight, 0)
        self.assertEqual(quilt.category.name, "Sleep")
        self.assertFalse(ghost.is_resolved)

    def test_save_replaces_and_publishes(self):
        self._write("pack_lists.json", [{"id": "p1", "name": "Trip", "items": []}])
        repo = PackListRepository(self.data_dir)
        pack_list = repo.get_pack_list("p1")
        pack_list.name = "Renamed"
        repo.save_pack_list(pack_list)
        with open(self.data_dir / "pack_lists.json", encoding='utf-8') as f:
            stored = json.load(f)
        self.assertEqual([p['name'] for p in stored], ["Renamed"])
        self.assertEqual(self.events, [{'pack_list_id': "p1", 'reason': "updated"}])

    def test_goals_persist_zero(self):
        users = UserRepository(self.data_dir)
        users.save_goals(WeightGoal(base_weight_goal=0))
        self.assertEqual(UserRepository(self.data_dir).get_goals().base_weight_goal, 0)
        self.assertIsNone(UserRepository(self.data_dir).get_goals().total_weight_goal)


if __name__ == '__main__':
    unittest.main()
