import unittest
from packweight.logic.reporting.items import (
    compute_heaviest_items, compute_top_heaviest_by_usage, compute_weight_split
)
from packweight.logic.weight.aggregator import ListStats
from packweight.domain.PackListItem import PackListItem
from packweight.tests.helpers import FOOD, make_gear, make_item, make_list


class TestItemHighlights(unittest.TestCase):

    def test_weight_split_drops_empty_slices(self):
        split = compute_weight_split(ListStats(total_weight=700, base_weight=500, worn_weight=200))
        self.assertEqual([s['name'] for s in split], ["Base Weight", "Worn Weight"])
        self.assertEqual(split[1]['weight'], 200)
        self.assertEqual(compute_weight_split(ListStats()), [])

    def test_heaviest_items(self):
        items = [
            make_item(300, name="Tent"),
            make_item(200, qty=3, name="Fuel", category=FOOD, consumable=True),
            make_item(5000, name="Cooler", included=False),
            make_item(300, name="Quilt"),
        ]
        heaviest = compute_heaviest_items(items, limit=2)
        self.assertEqual([h['name'] for h in heaviest], ["Fuel", "Quilt"])
        self.assertEqual(heaviest[0]['weight'], 600)
        self.assertEqual(heaviest[0]['category_name'], "Food")
        self.assertTrue(heaviest[0]['is_consumable'])

    def test_top_heaviest_by_usage(self):
        stove = make_gear(300, name="Stove")
        tent = make_gear(1100, name="Tent")
        lists = [
            make_list("A", [PackListItem(id="a1", gear_item=stove), PackListItem(id="a2", gear_item=tent)]),
            make_list("B", [PackListItem(id="b1", gear_item=stove)]),
            make_list("C", [PackListItem(id="c1", gear_item=stove, is_included=False)]),
        ]
        ranked = compute_top_heaviest_by_usage(lists)
        self.assertEqual([(r['name'], r['usage']) for r in ranked], [("Tent", 1), ("Stove", 3)])
        self.assertEqual(compute_top_heaviest_by_usage([]), [])


if __name__ == '__main__':
    unittest.main()
