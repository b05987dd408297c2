"""WeightGoal: a user's optional base/total weight targets in grams.

Each value is independently optional. ``None`` means "no goal"; ``0`` is a real
(aspirational) goal and must never be confused with absence.
"""
from typing import Optional


class WeightGoal:
    def __init__(self, base_weight_goal: Optional[float] = None, total_weight_goal: Optional[float] = None):
        self.base_weight_goal = base_weight_goal
        self.total_weight_goal = total_weight_goal

    def __str__(self) -> str:
        return f"WeightGoal(base={self.base_weight_goal}, total={self.total_weight_goal})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return WeightGoal(d.get("base_weight_goal"), d.get("total_weight_goal"))

    def to_dict(self):
        return {
            "base_weight_goal": self.base_weight_goal,
            "total_weight_goal": self.total_weight_goal,
        }
