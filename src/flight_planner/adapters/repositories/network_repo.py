"""
Network Repository - builds and caches the flight network.

Loads airports and flights from a data provider into a FlightNetwork once
and serves the same instance to every search afterwards. The network is
never mutated after it has been built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from src.flight_planner.ports.network_repository import NetworkNotInitializedError
from src.route_search.exceptions import NetworkError
from src.route_search.network import FlightNetwork

if TYPE_CHECKING:
    from src.flight_planner.ports.network_data_provider import NetworkDataProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadReport:
    """
    Summary of one network build.

    Attributes:
        airports: Airports registered.
        flights_loaded: Flights accepted by the network.
        flights_skipped: Flights rejected (unknown airport, duplicate id).
        built_at: Timestamp when the network was built.
    """

    airports: int
    flights_loaded: int
    flights_skipped: int
    built_at: datetime


class NetworkRepository:
    """
    Repository that owns the loaded FlightNetwork.

    Usage:
        >>> provider = CsvDataProvider.from_directory(Path("data"))
        >>> repo = NetworkRepository(provider)
        >>> network = repo.get_network()  # builds on first call
    """

    def __init__(
        self,
        data_provider: NetworkDataProvider,
        strict_flight_ids: bool = False,
    ) -> None:
        """
        Initialize repository with a data provider.

        Args:
            data_provider: Source of airports and flights.
            strict_flight_ids: Reject duplicate flight ids instead of
                letting the last one win.
        """
        self._provider = data_provider
        self._strict_flight_ids = strict_flight_ids
        self._network: Optional[FlightNetwork] = None
        self._report: Optional[LoadReport] = None

    def get_network(self) -> FlightNetwork:
        """
        Get the loaded network, building it on first access.

        Returns:
            The cached FlightNetwork.

        Raises:
            NetworkNotInitializedError: If loading fails or yields no
                airports or no flights.
        """
        if self._network is None:
            self._network = self._build_network()
        return self._network

    def _build_network(self) -> FlightNetwork:
        """
        Build a new network from the data provider.

        Steps:
        1. Register all airports
        2. Insert each flight, skipping the ones the network rejects
        3. Record a load report
        """
        try:
            airports = self._provider.get_airports()
            flights = self._provider.get_flights()
        except Exception as e:
            logger.error("Loading network data from %s failed: %s", self._provider.name, e)
            raise NetworkNotInitializedError(
                f"Failed to load flight network data: {e}"
            ) from e

        if not airports or not flights:
            raise NetworkNotInitializedError(
                f"No network data available (airports: {len(airports)}, "
                f"flights: {len(flights)})"
            )

        network = FlightNetwork(strict_flight_ids=self._strict_flight_ids)
        for airport in airports:
            network.add_airport(airport)

        skipped = 0
        for flight in flights:
            try:
                network.add_flight(flight)
            except NetworkError as e:
                skipped += 1
                logger.warning(
                    "Flight %s could not be loaded: %s", flight.flight_number, e
                )

        self._report = LoadReport(
            airports=network.airport_count,
            flights_loaded=len(flights) - skipped,
            flights_skipped=skipped,
            built_at=datetime.now(),
        )

        logger.info(
            "Flight network loaded: %d airports, %d flights (%d skipped)",
            self._report.airports,
            self._report.flights_loaded,
            self._report.flights_skipped,
        )
        return network

    def reload(self) -> FlightNetwork:
        """Rebuild the network from the data provider."""
        self.invalidate()
        return self.get_network()

    def invalidate(self) -> None:
        """Drop the cached network; the next access rebuilds it."""
        self._network = None
        self._report = None

    @property
    def load_report(self) -> Optional[LoadReport]:
        """Report of the last build, or None before the first build."""
        return self._report

    @property
    def is_initialized(self) -> bool:
        """Check if the network has been loaded."""
        return self._network is not None
