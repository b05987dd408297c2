"""Payload builders for the four weight consumers.

Summary, detail, library analytics and dashboard are all assembled from the same
engine functions so their numbers can never drift apart.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional

from packweight.domain.Category import Category
from packweight.domain.GearItem import GearItem
from packweight.domain.PackList import PackList
from packweight.domain.WeightGoal import WeightGoal
from packweight.logic.reporting.categories import compute_category_breakdown, compute_library_breakdown
from packweight.logic.reporting.distribution import compute_weight_distribution
from packweight.logic.reporting.goals import compute_goal_progress
from packweight.logic.reporting.items import (
    compute_heaviest_items, compute_top_heaviest_by_usage, compute_weight_split
)
from packweight.logic.reporting.ranking import average_item_count, entries_for, rank_pack_lists
from packweight.logic.weight.aggregator import ListStats, compute_list_stats
from packweight.utilities.constants import CANONICAL_UNIT, DEFAULT_RECENT_ITEMS, DEFAULT_TOP_ITEMS
from packweight.utilities.timestamps import sort_timestamp

__all__ = ["build_list_summary", "build_list_detail", "build_library_analytics", "build_dashboard_summary"]


def _list_header(pack_list: PackList) -> Dict[str, Any]:
    return {
        'id': pack_list.id,
        'name': pack_list.name,
        'created_at': pack_list.created_at.isoformat() if pack_list.created_at else None,
    }


def build_list_summary(pack_list: PackList, stats: Optional[ListStats] = None) -> Dict[str, Any]:
    """{ id, name, created_at, unit, stats } for list overviews."""
    if stats is None:
        stats = compute_list_stats(pack_list.items)
    return {**_list_header(pack_list), 'unit': CANONICAL_UNIT, 'stats': stats.to_dict()}


def build_list_detail(pack_list: PackList, goal: Optional[WeightGoal] = None,
                      categories: Optional[Iterable[Category]] = None,
                      top_limit: int = DEFAULT_TOP_ITEMS) -> Dict[str, Any]:
    """Summary plus category breakdown, weight split, heaviest rows and goal progress."""
    stats = compute_list_stats(pack_list.items)
    result = build_list_summary(pack_list, stats)
    result.update({
        'category_breakdown': compute_category_breakdown(pack_list.items, categories),
        'weight_split': compute_weight_split(stats),
        'heaviest_items': compute_heaviest_items(pack_list.items, limit=top_limit),
        'goal_progress': compute_goal_progress(stats, goal),
    })
    return result


def build_library_analytics(gear_items: List[GearItem], categories: Iterable[Category],
                            pack_lists: List[PackList], goal: Optional[WeightGoal] = None,
                            top_limit: int = DEFAULT_TOP_ITEMS) -> Dict[str, Any]:
    """Library-wide analytics report.

    Goal progress is measured against the lightest list (the user's best current
    setup); it is None on each side when there is no goal or no weighted list.
    """
    gear_items = list(gear_items or [])
    pack_lists = list(pack_lists or [])
    entries = entries_for(pack_lists)
    comparison = rank_pack_lists(entries)

    lightest_stats = ListStats.from_dict(comparison['lightest']) if comparison['lightest'] else None

    return {
        'unit': CANONICAL_UNIT,
        'total_gear_items': len(gear_items),
        'total_pack_lists': len(pack_lists),
        'average_base_weight': comparison['average_base_weight'],
        'lightest_base_weight': comparison['lightest']['base_weight'] if comparison['lightest'] else None,
        'heaviest_base_weight': comparison['heaviest']['base_weight'] if comparison['heaviest'] else None,
        'spread': comparison['spread'],
        'average_item_count': average_item_count(entries),
        'lightest': comparison['lightest'],
        'heaviest': comparison['heaviest'],
        'ranking': comparison['ranking'],
        'trend': comparison['trend'],
        'category_breakdown': compute_library_breakdown(gear_items, categories),
        'weight_distribution': compute_weight_distribution(gear_items),
        'top_heaviest_items': compute_top_heaviest_by_usage(pack_lists, limit=top_limit),
        'goal_progress': compute_goal_progress(lightest_stats, goal),
    }


def _recent_key(obj):
    return (obj.created_at is not None, sort_timestamp(obj.created_at))


def build_dashboard_summary(gear_items: List[GearItem], pack_lists: List[PackList],
                            recent: int = DEFAULT_RECENT_ITEMS) -> Dict[str, Any]:
    """Counts, lightest base weight, and the most recently created gear and lists."""
    gear_items = list(gear_items or [])
    pack_lists = list(pack_lists or [])
    comparison = rank_pack_lists(entries_for(pack_lists))
    recent_gear = sorted(gear_items, key=_recent_key, reverse=True)[:recent]
    recent_lists = sorted(pack_lists, key=_recent_key, reverse=True)[:recent]
    return {
        'unit': CANONICAL_UNIT,
        'total_gear_items': len(gear_items),
        'total_pack_lists': len(pack_lists),
        'lightest_base_weight': comparison['lightest']['base_weight'] if comparison['lightest'] else None,
        'lightest': comparison['lightest'],
        'recent_gear': [
            {'id': g.id, 'name': g.name, 'weight': g.weight, 'category_id': g.category_id}
            for g in recent_gear
        ],
        'recent_pack_lists': [build_list_summary(pl) for pl in recent_lists],
    }
