"""
Port interfaces for the Flight Planner.

Ports define the abstract interfaces (ABCs) that the domain layer uses to
communicate with external systems. This follows the Ports and Adapters
(Hexagonal) architecture pattern.
"""

from src.flight_planner.ports.network_data_provider import NetworkDataProvider
from src.flight_planner.ports.network_repository import NetworkNotInitializedError
from src.flight_planner.ports.route_finder import RouteFinder
from src.flight_planner.ports.route_store import RouteStore, RouteStoreError

__all__ = [
    "NetworkDataProvider",
    "NetworkNotInitializedError",
    "RouteFinder",
    "RouteStore",
    "RouteStoreError",
]
