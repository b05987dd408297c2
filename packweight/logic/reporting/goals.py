"""Goal progress tracking.

A missing goal propagates as None all the way to the output; a goal of 0 is a real goal.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

from packweight.domain.WeightGoal import WeightGoal
from packweight.logic.weight.aggregator import ListStats

__all__ = ["track_goal", "compute_goal_progress"]


def track_goal(current: float, goal: Optional[float]) -> Optional[Dict[str, Any]]:
    """Compare current weight against goal.

    Returns None when no goal is set, else:
        { 'percentage': 0..100, 'is_over_goal': bool, 'delta': |current - goal| }
    """
    if goal is None:
        return None
    if goal == 0:
        # Any positive weight exceeds a zero goal; 0 of 0 is no progress
        percentage = 100 if current > 0 else 0
    else:
        percentage = min(current / goal * 100, 100)
    return {
        'percentage': percentage,
        'is_over_goal': current > goal,
        'delta': abs(current - goal),
    }


def compute_goal_progress(stats: Optional[ListStats], goal: Optional[WeightGoal]) -> Dict[str, Optional[Dict[str, Any]]]:
    """Base and total goal progress for one ListStats; each side is None independently."""
    if stats is None or goal is None:
        return {'base': None, 'total': None}
    return {
        'base': track_goal(stats.base_weight, goal.base_weight_goal),
        'total': track_goal(stats.total_weight, goal.total_weight_goal),
    }
