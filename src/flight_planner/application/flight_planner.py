"""
FlightPlanner - Public API for route planning.

This module provides the main entry point for the route planning engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers (console menu, HTTP API).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from src.flight_planner.adapters.algorithms.best_first_adapter import (
    BestFirstRouteFinder,
)
from src.flight_planner.adapters.data_providers.csv_provider import CsvDataProvider
from src.flight_planner.adapters.repositories.network_repo import (
    LoadReport,
    NetworkRepository,
)
from src.flight_planner.adapters.stores.csv_route_store import CsvRouteStore
from src.flight_planner.config import Config
from src.flight_planner.ports.network_data_provider import NetworkDataProvider
from src.flight_planner.ports.route_finder import RouteFinder
from src.flight_planner.ports.route_store import RouteStore
from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight
from src.flight_planner.schemas.route import Route
from src.flight_planner.services.route_planner_service import RoutePlannerService
from src.flight_planner.services.search_service import SearchResult, SearchService
from src.route_search.criteria import Criterion

logger = logging.getLogger(__name__)


class FlightPlanner:
    """
    Public API for planning flight routes.

    Example usage:
        >>> with FlightPlanner(data_dir="data") as planner:
        ...     route = planner.find_cheapest_route("VIE", "JFK")
        ...     if route is not None:
        ...         print(route)

    Attributes:
        _network_repo: Repository owning the loaded network.
        _planner_service: Route planning session.
        _search_service: Network lookups.
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        data_provider: Optional[NetworkDataProvider] = None,
        route_store: Optional[RouteStore] = None,
        route_finder: Optional[RouteFinder] = None,
        strict_flight_ids: Optional[bool] = None,
        load_saved_routes: bool = True,
    ) -> None:
        """
        Initialize the planner with optional custom dependencies.

        Args:
            data_dir: Directory with the CSV files. Defaults to Config.DATA_DIR.
            data_provider: Custom data provider. If None, uses CsvDataProvider.
            route_store: Custom route store. If None, uses CsvRouteStore.
            route_finder: Custom algorithm. If None, uses BestFirstRouteFinder.
            strict_flight_ids: Reject duplicate flight ids while loading.
                Defaults to Config.STRICT_FLIGHT_IDS.
            load_saved_routes: Start the session with the stored routes.
        """
        data_dir = Path(data_dir) if data_dir is not None else Config.DATA_DIR

        self._data_provider = data_provider or CsvDataProvider.from_directory(data_dir)
        self._route_store = route_store or CsvRouteStore.from_directory(data_dir)
        self._route_finder = route_finder or BestFirstRouteFinder()

        if strict_flight_ids is None:
            strict_flight_ids = Config.STRICT_FLIGHT_IDS

        self._network_repo = NetworkRepository(
            data_provider=self._data_provider,
            strict_flight_ids=strict_flight_ids,
        )

        existing_routes: List[Route] = []
        if load_saved_routes:
            existing_routes = self._route_store.load_routes()

        self._planner_service = RoutePlannerService(
            network_repo=self._network_repo,
            route_finder=self._route_finder,
            route_store=self._route_store,
            existing_routes=existing_routes,
        )
        self._search_service = SearchService(self._network_repo)

        logger.info(
            "FlightPlanner initialized with %s algorithm (%d saved routes)",
            self._route_finder.name,
            len(existing_routes),
        )

    # -------------------------------------------------------------------------
    # Route planning
    # -------------------------------------------------------------------------

    def find_route(
        self,
        origin: str,
        destination: str,
        criterion: Union[Criterion, str] = Criterion.PRICE,
    ) -> Optional[Route]:
        """
        Find the best route under a criterion and add it to the session.

        Args:
            origin: Origin airport IATA code (e.g., 'VIE').
            destination: Destination airport IATA code (e.g., 'JFK').
            criterion: Criterion or its name ('cheapest', 'fastest',
                'slowest', 'fewest_stopovers', ...).

        Returns:
            Route with its session id, or None if no route exists.
        """
        return self._planner_service.plan_route(origin, destination, criterion)

    def find_cheapest_route(self, origin: str, destination: str) -> Optional[Route]:
        return self.find_route(origin, destination, Criterion.PRICE)

    def find_fastest_route(self, origin: str, destination: str) -> Optional[Route]:
        return self.find_route(origin, destination, Criterion.DURATION)

    def find_slowest_route(self, origin: str, destination: str) -> Optional[Route]:
        return self.find_route(origin, destination, Criterion.DURATION_MAX)

    def find_fewest_stopover_route(
        self, origin: str, destination: str
    ) -> Optional[Route]:
        return self.find_route(origin, destination, Criterion.STOPOVERS)

    @property
    def saved_routes(self) -> Tuple[Route, ...]:
        """Routes of this session, including routes loaded at startup."""
        return self._planner_service.saved_routes

    def get_route(self, route_id: int) -> Optional[Route]:
        return self._planner_service.get_route(route_id)

    def route_flights(self, route: Route) -> List[Flight]:
        """
        Resolve the flights of a route in travel order.

        Ids no longer present in the network are left out.
        """
        network = self._network_repo.get_network()
        flights = (network.get_flight_by_id(i) for i in route.flight_ids)
        return [f for f in flights if f is not None]

    def sort_routes(
        self,
        route_ids: Optional[Iterable[int]] = None,
        algorithm: str = "merge",
        comparator: str = "combination",
    ) -> List[Route]:
        """
        Sort session routes with 'merge' or 'quick' sort.

        Args:
            route_ids: Ids to sort; None sorts all session routes.
            algorithm: 'merge' or 'quick'.
            comparator: 'price', 'duration', 'stopovers' or 'combination'.
        """
        return self._planner_service.sort_routes(route_ids, algorithm, comparator)

    def save_routes(self) -> int:
        """
        Persist all session routes.

        Returns:
            Number of routes written.
        """
        return self._planner_service.save_routes()

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def search_by_origin(self, iata: str) -> SearchResult:
        return self._search_service.search_by_origin(iata)

    def search_by_destination(self, iata: str) -> SearchResult:
        return self._search_service.search_by_destination(iata)

    def search_by_airline(self, airline: str) -> Tuple[Flight, ...]:
        return self._search_service.search_by_airline(airline)

    def search_by_flight_number(self, flight_number: str) -> Optional[Flight]:
        return self._search_service.search_by_flight_number(flight_number)

    def get_airport(self, iata: str) -> Optional[Airport]:
        return self._network_repo.get_network().get_airport(iata.strip().upper())

    def get_available_airports(self) -> Tuple[Airport, ...]:
        """
        Get all airports in the network, sorted by IATA code.

        Returns:
            Tuple of airports.
        """
        return self._search_service.list_airports()

    def has_airport(self, iata: str) -> bool:
        return self._network_repo.get_network().has_airport(iata.strip().upper())

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def load(self) -> Optional[LoadReport]:
        """
        Load the network now instead of on the first query.

        Returns:
            Report with airport and flight counts.
        """
        self._network_repo.get_network()
        return self._network_repo.load_report

    @property
    def load_report(self) -> Optional[LoadReport]:
        return self._network_repo.load_report

    @property
    def is_ready(self) -> bool:
        """Check if the planner is ready to handle requests."""
        return self._planner_service.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._planner_service.algorithm_name

    def refresh_data(self) -> None:
        """Reload the flight network from the data provider."""
        self._network_repo.reload()

    def shutdown(self) -> None:
        """Release the loaded network."""
        self._network_repo.invalidate()
        logger.info("FlightPlanner shutdown complete")

    def __enter__(self) -> "FlightPlanner":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
