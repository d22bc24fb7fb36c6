"""
Route Planner Service - Domain orchestrator for route planning sessions.

Coordinates the interaction between:
- NetworkRepository (loaded flight network)
- RouteFinder (algorithm adapter)
- RouteStore (saved routes)

and keeps the routes computed during a session, numbered with
monotonically increasing ids.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

from src.flight_planner.schemas.route import Route
from src.route_search.comparators import get_comparator
from src.route_search.criteria import Criterion, parse_criterion
from src.route_search.sorting import get_sort_algorithm

if TYPE_CHECKING:
    from src.flight_planner.adapters.repositories.network_repo import (
        NetworkRepository,
    )
    from src.flight_planner.ports.route_finder import RouteFinder
    from src.flight_planner.ports.route_store import RouteStore

logger = logging.getLogger(__name__)


def normalize_iata(code: str) -> str:
    """Normalize user input to an IATA code ('  vie ' -> 'VIE')."""
    return code.strip().upper()


class RoutePlannerService:
    """
    Domain service for planning, ordering and saving routes.

    Attributes:
        _network_repo: Repository providing the loaded network.
        _route_finder: Algorithm adapter for route finding.
        _route_store: Persistence for session routes (optional).
        _routes: Routes of this session, in creation order.
        _next_route_id: Id given to the next planned route.
    """

    def __init__(
        self,
        network_repo: NetworkRepository,
        route_finder: RouteFinder,
        route_store: Optional[RouteStore] = None,
        existing_routes: Optional[Iterable[Route]] = None,
    ) -> None:
        """
        Initialize the route planner service.

        Args:
            network_repo: Repository for the loaded flight network.
            route_finder: Algorithm adapter (e.g., BestFirstRouteFinder).
            route_store: Where save_routes() writes to.
            existing_routes: Routes saved in earlier sessions; new ids
                continue after the highest existing id.
        """
        self._network_repo = network_repo
        self._route_finder = route_finder
        self._route_store = route_store
        self._routes: List[Route] = list(existing_routes or [])
        self._next_route_id = max((r.route_id for r in self._routes), default=0) + 1

    def plan_route(
        self,
        origin: str,
        destination: str,
        criterion: Union[Criterion, str],
    ) -> Optional[Route]:
        """
        Find the best route and add it to the session.

        Args:
            origin: Origin IATA code (case and surrounding spaces ignored).
            destination: Destination IATA code.
            criterion: Criterion or its name ('cheapest', 'fastest', ...).

        Returns:
            The stored Route with its session id, or None if no route exists.

        Raises:
            InvalidCriterionError: If criterion names no known criterion.
            NetworkNotInitializedError: If the network cannot be loaded.
        """
        criterion = parse_criterion(criterion)
        origin = normalize_iata(origin)
        destination = normalize_iata(destination)

        start_time = time.perf_counter()
        network = self._network_repo.get_network()
        route = self._route_finder.find_route(network, origin, destination, criterion)
        elapsed = time.perf_counter() - start_time

        if route is None:
            logger.info(
                "No %s route from %s to %s (%.3fms)",
                criterion.value,
                origin,
                destination,
                elapsed * 1000,
            )
            return None

        route = route.with_id(self._next_route_id)
        self._next_route_id += 1
        self._routes.append(route)

        logger.info(
            "Planned %s route %d from %s to %s: %d flight(s) in %.3fms",
            criterion.value,
            route.route_id,
            origin,
            destination,
            route.num_flights,
            elapsed * 1000,
        )
        return route

    @property
    def saved_routes(self) -> tuple[Route, ...]:
        """Routes of this session (loaded and planned), in creation order."""
        return tuple(self._routes)

    @property
    def next_route_id(self) -> int:
        return self._next_route_id

    def get_route(self, route_id: int) -> Optional[Route]:
        """Session route with the given id, or None."""
        for route in self._routes:
            if route.route_id == route_id:
                return route
        return None

    def select_routes(self, route_ids: Iterable[int]) -> List[Route]:
        """
        Pick session routes by id, in the order requested.

        Unknown ids and ids requested twice are skipped with a warning.
        """
        selected: List[Route] = []
        seen: set[int] = set()

        for route_id in route_ids:
            if route_id in seen:
                logger.warning("Route %d was already selected", route_id)
                continue
            route = self.get_route(route_id)
            if route is None:
                logger.warning("Route %d not found", route_id)
                continue
            seen.add(route_id)
            selected.append(route)

        return selected

    def sort_routes(
        self,
        route_ids: Optional[Iterable[int]] = None,
        algorithm: str = "merge",
        comparator: str = "combination",
    ) -> List[Route]:
        """
        Sort session routes for display.

        Args:
            route_ids: Ids to sort; None sorts every session route.
            algorithm: 'merge' (stable) or 'quick'.
            comparator: 'price', 'duration', 'stopovers' or 'combination'.

        Returns:
            New sorted list; the session order is unchanged.

        Raises:
            InvalidSortAlgorithmError: If algorithm is unknown.
            InvalidComparatorError: If comparator is unknown.
        """
        sort = get_sort_algorithm(algorithm)
        compare = get_comparator(comparator)

        routes = self._routes if route_ids is None else self.select_routes(route_ids)
        return sort(routes, compare)

    def save_routes(self) -> int:
        """
        Persist all session routes.

        Returns:
            Number of routes written.

        Raises:
            RuntimeError: If the service has no route store.
            RouteStoreError: If writing fails.
        """
        if self._route_store is None:
            raise RuntimeError("No route store configured")

        self._route_store.save_routes(self._routes)
        return len(self._routes)

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._network_repo.is_initialized
