import unittest
from packweight.domain.PackListItem import PackListItem
from packweight.logic.weight.aggregator import ListStats, compute_list_stats, compute_pack_list_stats
from packweight.logic.weight.classifier import UnresolvedGearItemError, classify_item, effective_weight
from packweight.tests.helpers import make_item, make_list


class TestListStats(unittest.TestCase):

    def setUp(self):
        self.items = [
            make_item(500, qty=1),
            make_item(200, qty=2, worn=True),
            make_item(300, qty=1, included=False, consumable=True),
        ]

    def test_mixed_list(self):
        stats = compute_list_stats(self.items)
        self.assertEqual(stats.total_weight, 900)
        self.assertEqual(stats.base_weight, 500)
        self.assertEqual(stats.worn_weight, 400)
        self.assertEqual(stats.consumable_weight, 0)
        self.assertEqual(stats.item_count, 3)

    def test_empty_list(self):
        self.assertEqual(compute_list_stats([]).to_dict(), ListStats().to_dict())
        self.assertEqual(compute_list_stats(None).item_count, 0)
        self.assertEqual(compute_pack_list_stats(make_list("Empty")).total_weight, 0)

    def test_only_excluded_items(self):
        stats = compute_list_stats([make_item(100, included=False), make_item(250, included=False)])
        self.assertEqual(stats.item_count, 2)
        self.assertEqual(stats.total_weight, 0)
        self.assertEqual(stats.base_weight, 0)

    def test_recomputing_gives_identical_stats(self):
        self.assertEqual(compute_list_stats(self.items).to_dict(), compute_list_stats(self.items).to_dict())

    def test_excluding_one_item_removes_exactly_its_weight(self):
        before = compute_list_stats(self.items)
        removed = effective_weight(self.items[1])
        self.items[1].is_included = False
        after = compute_list_stats(self.items)
        self.assertEqual(before.total_weight - after.total_weight, removed)
        self.assertEqual(after.base_weight, before.base_weight)
        self.assertEqual(after.item_count, before.item_count)

    def test_worn_and_consumable_counts_in_both_but_not_base(self):
        stats = compute_list_stats([make_item(120, worn=True, consumable=True)])
        self.assertEqual(stats.total_weight, 120)
        self.assertEqual(stats.base_weight, 0)
        self.assertEqual(stats.worn_weight, 120)
        self.assertEqual(stats.consumable_weight, 120)

    def test_zero_weight_item_still_counts(self):
        stats = compute_list_stats([make_item(0, qty=3)])
        self.assertEqual(stats.item_count, 1)
        self.assertEqual(stats.total_weight, 0)

    def test_list_quantity_overrides_catalog_quantity(self):
        item = make_item(100, qty=2)
        item.gear_item.quantity = 4
        self.assertEqual(effective_weight(item), 200)

    def test_malformed_quantity_treated_as_one(self):
        for bad in (0, -3, None, "x", 1.5):
            with self.subTest(quantity=bad):
                self.assertEqual(effective_weight(make_item(80, qty=bad)), 80)

    def test_negative_weight_is_propagated(self):
        stats = compute_list_stats([make_item(-50), make_item(100)])
        self.assertEqual(stats.total_weight, 50)

    def test_classify_item(self):
        weight, classes = classify_item(make_item(40, qty=2, consumable=True))
        self.assertEqual(weight, 80)
        self.assertEqual(classes, frozenset({"consumable"}))
        weight, classes = classify_item(make_item(40, included=False))
        self.assertEqual(weight, 0)
        self.assertEqual(classes, frozenset({"excluded"}))

    def test_unresolved_gear_raises(self):
        dangling = PackListItem(id="row-x", gear_item_id="missing", quantity=1)
        with self.assertRaises(UnresolvedGearItemError) as ctx:
            compute_list_stats([make_item(10), dangling])
        self.assertEqual(ctx.exception.gear_item_id, "missing")


if __name__ == '__main__':
    unittest.main()
