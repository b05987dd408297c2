"""Cross-list ranking and comparison for one owner's pack lists."""
from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from packweight.domain.PackList import PackList
from packweight.logic.weight.aggregator import ListStats, compute_list_stats
from packweight.utilities.timestamps import sort_timestamp

__all__ = ["ListEntry", "entries_for", "rank_pack_lists", "average_item_count"]


class ListEntry:
    """ListStats tagged with the list identity it was computed for."""

    def __init__(self, name: str, stats: ListStats, created_at: Optional[datetime] = None, id: str = ""):
        self.id = id
        self.name = name
        self.stats = stats
        self.created_at = created_at

    def __str__(self) -> str:
        return f"{self.name}: {self.stats}"

    __repr__ = __str__

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            **self.stats.to_dict(),
        }


def entries_for(pack_lists: Optional[Iterable[PackList]]) -> List[ListEntry]:
    """Compute ListStats for every pack list and tag it with the list identity."""
    return [
        ListEntry(pl.name, compute_list_stats(pl.items), created_at=pl.created_at, id=pl.id)
        for pl in pack_lists or []
    ]


def _created_key(entry: ListEntry):
    # Lists without a timestamp sort after dated ones
    return (entry.created_at is None, sort_timestamp(entry.created_at))


def rank_pack_lists(entries: Optional[Iterable[ListEntry]]) -> Dict[str, Any]:
    """Rank lists by base weight and derive cross-list statistics.

    Returns:
    {
      'ranking': [entry, ...],          # base_weight asc, ties by created_at asc
      'lightest': entry | None,         # among lists with non-zero base weight
      'heaviest': entry | None,
      'average_base_weight': g,         # over non-zero lists only, 0 if none
      'spread': g,                      # heaviest - lightest, 0 if none
      'trend': [entry, ...]             # created_at asc, for charting
    }
    Entries are serialized with ListEntry.to_dict().
    """
    entries = list(entries or [])
    by_created = sorted(entries, key=_created_key)
    # Stable sort on top of creation order breaks base-weight ties deterministically
    ranking = sorted(by_created, key=lambda e: e.stats.base_weight)

    weighted = [e for e in ranking if e.stats.base_weight > 0]
    lightest = weighted[0] if weighted else None
    heaviest = weighted[-1] if weighted else None
    if weighted:
        average = sum(e.stats.base_weight for e in weighted) / len(weighted)
        spread = heaviest.stats.base_weight - lightest.stats.base_weight
    else:
        average = 0
        spread = 0

    return {
        'ranking': [e.to_dict() for e in ranking],
        'lightest': lightest.to_dict() if lightest else None,
        'heaviest': heaviest.to_dict() if heaviest else None,
        'average_base_weight': average,
        'spread': spread,
        'trend': [e.to_dict() for e in by_created],
    }


def average_item_count(entries: Optional[Iterable[ListEntry]]) -> float:
    """Mean item_count over every list, empty ones included; 0 when there are no lists."""
    entries = list(entries or [])
    if not entries:
        return 0
    return sum(e.stats.item_count for e in entries) / len(entries)
