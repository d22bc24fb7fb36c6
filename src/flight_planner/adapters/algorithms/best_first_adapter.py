"""
Best-First Algorithm Adapter - Bridge between architecture and algorithm.

Wraps the route_search module behind the RouteFinder port and carries the
search limits (stopover cap, minimum connection time).
"""

import logging
from typing import Optional

from src.flight_planner.ports.route_finder import RouteFinder
from src.flight_planner.schemas.route import Route
from src.route_search.alg import MAX_STOPOVERS, find_optimal_route
from src.route_search.connections import MIN_CONNECTION_TIME
from src.route_search.criteria import Criterion
from src.route_search.network import FlightNetwork

logger = logging.getLogger(__name__)


class BestFirstRouteFinder(RouteFinder):
    """
    Adapter for the constrained best-first search.

    Attributes:
        _max_stopovers: Maximum intermediate landings per route.
        _min_connection_minutes: Minimum layover between flights.
    """

    def __init__(
        self,
        max_stopovers: int = MAX_STOPOVERS,
        min_connection_minutes: int = MIN_CONNECTION_TIME,
    ) -> None:
        """
        Initialize the route finder.

        Args:
            max_stopovers: Maximum intermediate landings (default 3).
            min_connection_minutes: Minimum layover in minutes (default 20).

        Raises:
            ValueError: If a limit is negative.
        """
        if max_stopovers < 0:
            raise ValueError(f"max_stopovers must be >= 0, got {max_stopovers}")
        if min_connection_minutes < 0:
            raise ValueError(
                f"min_connection_minutes must be >= 0, got {min_connection_minutes}"
            )
        self._max_stopovers = max_stopovers
        self._min_connection_minutes = min_connection_minutes

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Constrained Best-First Search"

    @property
    def max_stopovers(self) -> int:
        return self._max_stopovers

    @property
    def min_connection_minutes(self) -> int:
        return self._min_connection_minutes

    def find_route(
        self,
        network: FlightNetwork,
        origin: str,
        destination: str,
        criterion: Criterion,
    ) -> Optional[Route]:
        """
        Find the best route under the criterion.

        Returns:
            Route with id 0 (callers assign session ids), or None.
        """
        route = find_optimal_route(
            network,
            origin,
            destination,
            criterion,
            max_stopovers=self._max_stopovers,
            min_connection_minutes=self._min_connection_minutes,
        )

        logger.debug(
            "%s %s -> %s (%s): %s",
            self.name,
            origin,
            destination,
            criterion.value,
            route if route is not None else "no route",
        )
        return route
