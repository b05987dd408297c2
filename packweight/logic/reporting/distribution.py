"""Library-wide weight histogram over the flat gear catalog."""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional

from packweight.domain.GearItem import GearItem
from packweight.utilities.constants import WEIGHT_BUCKETS

logger = logging.getLogger(__name__)

__all__ = ["bucket_for", "compute_weight_distribution"]


def bucket_for(weight: float) -> Optional[int]:
    """Index into WEIGHT_BUCKETS for a unit weight; None for negative weights."""
    for idx, (_label, low, high) in enumerate(WEIGHT_BUCKETS):
        if weight >= low and (high is None or weight < high):
            return idx
    return None


def compute_weight_distribution(gear_items: Optional[Iterable[GearItem]]) -> List[Dict[str, Any]]:
    """Count gear items per fixed weight range using each item's unit weight.

    Always returns every bucket in ascending order, zero counts included:
        [{ 'range': '0-50g', 'min': 0, 'max': 50, 'count': int }, ...]
    The last bucket has 'max': None.
    """
    counts = [0] * len(WEIGHT_BUCKETS)
    for gear in gear_items or []:
        idx = bucket_for(gear.weight)
        if idx is None:
            logger.warning("Gear item '%s' with negative weight %s left out of distribution", gear.id, gear.weight)
            continue
        counts[idx] += 1
    return [
        {'range': label, 'min': low, 'max': high, 'count': counts[idx]}
        for idx, (label, low, high) in enumerate(WEIGHT_BUCKETS)
    ]
