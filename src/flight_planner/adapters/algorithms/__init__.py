"""
Algorithm adapters for route finding.
"""

from src.flight_planner.adapters.algorithms.best_first_adapter import (
    BestFirstRouteFinder,
)

__all__ = ["BestFirstRouteFinder"]
