"""
Route store adapters.
"""

from src.flight_planner.adapters.stores.csv_route_store import CsvRouteStore

__all__ = ["CsvRouteStore"]
