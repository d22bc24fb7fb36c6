"""
Route Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from src.flight_planner.schemas.route import Route
    from src.route_search.criteria import Criterion
    from src.route_search.network import FlightNetwork


class RouteFinder(ABC):
    """
    Abstract interface for route finding algorithms.

    Algorithm adapters receive the loaded FlightNetwork and return the
    single best route for one criterion.

    Implementations:
    - BestFirstRouteFinder: constrained best-first search
    """

    @abstractmethod
    def find_route(
        self,
        network: FlightNetwork,
        origin: str,
        destination: str,
        criterion: Criterion,
    ) -> Optional[Route]:
        """
        Find the best route between two airports.

        Args:
            network: Loaded flight network.
            origin: Origin airport IATA code.
            destination: Destination airport IATA code.
            criterion: Optimization criterion.

        Returns:
            Best Route, or None when no route exists.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
