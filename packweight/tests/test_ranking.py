import unittest
from datetime import datetime, timezone
from packweight.domain.PackList import PackList
from packweight.logic.reporting.ranking import ListEntry, average_item_count, entries_for, rank_pack_lists
from packweight.logic.weight.aggregator import ListStats
from packweight.tests.helpers import make_item, make_list


def _entry(name, base, day, items=1):
    return ListEntry(name, ListStats(total_weight=base, base_weight=base, item_count=items),
                     created_at=datetime(2024, 5, day), id=name)


class TestCrossListRanker(unittest.TestCase):

    def setUp(self):
        self.entries = [
            _entry("Winter", 9000, 3),
            _entry("Summer", 4000, 1),
            _entry("Empty", 0, 4, items=0),
            _entry("Desert", 6000, 2),
        ]

    def test_ranking_lightest_first(self):
        result = rank_pack_lists(self.entries)
        self.assertEqual([e['name'] for e in result['ranking']], ["Empty", "Summer", "Desert", "Winter"])

    def test_extremes_skip_zero_weight_lists(self):
        result = rank_pack_lists(self.entries)
        self.assertEqual(result['lightest']['name'], "Summer")
        self.assertEqual(result['heaviest']['name'], "Winter")
        self.assertEqual(result['spread'], 5000)
        self.assertEqual(result['average_base_weight'], (9000 + 4000 + 6000) / 3)

    def test_trend_is_creation_order(self):
        result = rank_pack_lists(self.entries)
        self.assertEqual([e['name'] for e in result['trend']], ["Summer", "Desert", "Winter", "Empty"])

    def test_ties_broken_by_creation_time(self):
        entries = [_entry("Later", 3000, 9), _entry("Earlier", 3000, 2)]
        for _ in range(3):
            ranking = rank_pack_lists(entries)['ranking']
            self.assertEqual([e['name'] for e in ranking], ["Earlier", "Later"])

    def test_mixed_offset_and_naive_timestamps(self):
        aware = PackList.from_dict({"id": "a", "name": "Aware", "created_at": "2024-01-01T00:00:00+00:00"})
        naive = PackList.from_dict({"id": "b", "name": "Naive", "created_at": "2024-01-02T00:00:00"})
        entries = [
            ListEntry("Naive", ListStats(base_weight=1000), created_at=naive.created_at),
            ListEntry("Aware", ListStats(base_weight=1000), created_at=aware.created_at),
        ]
        result = rank_pack_lists(entries)
        self.assertEqual([e["name"] for e in result["ranking"]], ["Aware", "Naive"])
        self.assertEqual([e["name"] for e in result["trend"]], ["Aware", "Naive"])

    def test_directly_built_entries_mixing_offsets(self):
        entries = [
            ListEntry("Naive", ListStats(base_weight=1000), created_at=datetime(2024, 1, 2)),
            ListEntry("Aware", ListStats(base_weight=1000), created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
            ListEntry("Undated", ListStats(base_weight=1000)),
        ]
        ranking = rank_pack_lists(entries)["ranking"]
        self.assertEqual([e["name"] for e in ranking], ["Aware", "Naive", "Undated"])

    def test_single_weighted_list_is_both_extremes(self):
        result = rank_pack_lists([_entry("Solo", 2500, 1), _entry("New", 0, 2, items=0)])
        self.assertEqual(result['lightest']['name'], "Solo")
        self.assertEqual(result['heaviest']['name'], "Solo")
        self.assertEqual(result['spread'], 0)
        self.assertEqual(result['average_base_weight'], 2500)

    def test_no_lists(self):
        result = rank_pack_lists([])
        self.assertEqual(result['ranking'], [])
        self.assertIsNone(result['lightest'])
        self.assertIsNone(result['heaviest'])
        self.assertEqual(result['average_base_weight'], 0)
        self.assertEqual(result['spread'], 0)

    def test_average_item_count_includes_empty_lists(self):
        self.assertEqual(average_item_count(self.entries), 3 / 4)
        self.assertEqual(average_item_count([]), 0)

    def test_entries_for_pack_lists(self):
        pl = make_list("Weekend", [make_item(300), make_item(200, worn=True)])
        entries = entries_for([pl])
        self.assertEqual(entries[0].stats.base_weight, 300)
        self.assertEqual(entries[0].to_dict()['created_at'], "2024-01-01T00:00:00")


if __name__ == '__main__':
    unittest.main()
