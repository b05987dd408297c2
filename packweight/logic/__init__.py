"""Pack weight aggregation engine.

Subpackages:
- weight: per-item classification, per-list aggregation, stats cache
- reporting: category breakdowns, distribution, goals, cross-list ranking, analytics

Every function here is pure: inputs are resolved entity graphs, outputs are plain
records in grams. Handlers import these instead of re-deriving weight math.
"""
__all__ = ["weight", "reporting"]
