"""
Repository adapters for flight network storage.
"""

from src.flight_planner.adapters.repositories.network_repo import (
    LoadReport,
    NetworkRepository,
)

__all__ = [
    "LoadReport",
    "NetworkRepository",
]
