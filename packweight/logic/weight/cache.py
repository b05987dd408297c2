"""ListStats cache keyed on the weight inputs of the snapshot it was computed from.

Contract:
  * The authoritative ListStats for a list is always compute_list_stats() over the
    latest snapshot. An entry is only served while the snapshot's fingerprint (every
    row's quantity and inclusion plus its gear weight and flags) is unchanged, so an
    edit to either pack_lists.json or gear.json is recomputed on the next read.
  * pack_list.changed drops the entry for that list.
  * apply_optimistic_toggle() gives a provisional result for immediate feedback
    after an inclusion toggle. It is never written into the cache; the next read
    recomputes from the snapshot.
"""
from __future__ import annotations
import logging
from threading import Lock
from typing import Any, Dict, Optional, Tuple

from packweight.domain.PackList import PackList
from packweight.domain.PackListItem import PackListItem
from packweight.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS, PACK_LIST_CHANGED
from packweight.logic.weight.aggregator import ListStats, compute_list_stats
from packweight.logic.weight.classifier import gear_classes, require_gear, sanitize_quantity
from packweight.utilities.constants import CLASS_BASE, CLASS_WORN, CLASS_CONSUMABLE

logger = logging.getLogger(__name__)

__all__ = ["StatsCache", "apply_optimistic_toggle", "snapshot_fingerprint"]


def snapshot_fingerprint(pack_list: PackList) -> Tuple:
    """Everything compute_list_stats() reads from a list, as a hashable tuple."""
    rows = []
    for item in pack_list.items:
        gear = item.gear_item
        gear_key = None if gear is None else (gear.id, gear.weight, gear.is_worn, gear.is_consumable)
        rows.append((item.id, item.quantity, bool(item.is_included), gear_key))
    return tuple(rows)


class StatsCache:
    def __init__(self, bus: Optional[EventBus] = None):
        self._lock = Lock()
        self._entries: Dict[str, Tuple[Tuple, ListStats]] = {}
        self._bus = bus or GLOBAL_EVENT_BUS
        self._bus.subscribe(PACK_LIST_CHANGED, self._on_pack_list_changed)

    def close(self):
        self._bus.unsubscribe(PACK_LIST_CHANGED, self._on_pack_list_changed)

    # --- Observer callbacks ------------------------------------------------
    def _on_pack_list_changed(self, event_name: str, payload: Any):
        pack_list_id = payload.get('pack_list_id') if isinstance(payload, dict) else None
        if pack_list_id is None:
            self.clear()
            return
        self.invalidate(pack_list_id)

    # --- Cache operations --------------------------------------------------
    def get(self, pack_list: PackList) -> ListStats:
        fingerprint = snapshot_fingerprint(pack_list)
        with self._lock:
            cached = self._entries.get(pack_list.id)
        if cached is not None and cached[0] == fingerprint:
            return cached[1]
        if cached is not None:
            logger.debug("Stats cache entry for pack list %s is stale, recomputing", pack_list.id)
        stats = compute_list_stats(pack_list.items)
        with self._lock:
            self._entries[pack_list.id] = (fingerprint, stats)
        return stats

    def invalidate(self, pack_list_id: str):
        with self._lock:
            if self._entries.pop(pack_list_id, None) is not None:
                logger.debug("Stats cache entry dropped for pack list %s", pack_list_id)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __contains__(self, pack_list_id: str) -> bool:
        with self._lock:
            return pack_list_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def apply_optimistic_toggle(stats: ListStats, item: PackListItem, included: bool) -> ListStats:
    """Patch stats for one row's inclusion flipping to ``included``.

    Returns a new provisional ListStats; ``stats`` is left untouched. A no-op
    toggle returns an equal copy.
    """
    result = ListStats(**stats.to_dict())
    if bool(item.is_included) == bool(included):
        return result
    gear = require_gear(item)
    sign = 1 if included else -1
    delta = sign * gear.weight * sanitize_quantity(item.quantity)
    result.total_weight += delta
    classes = gear_classes(gear)
    if CLASS_BASE in classes:
        result.base_weight += delta
    if CLASS_WORN in classes:
        result.worn_weight += delta
    if CLASS_CONSUMABLE in classes:
        result.consumable_weight += delta
    return result
