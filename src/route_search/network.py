"""
Flight network - directed multigraph of airports and daily flights.

Vertices are airports keyed by IATA code, edges are flights from origin to
destination. Several flights may connect the same pair of airports.

Indexes:
- airports: IATA code -> Airport
- adjacency: IATA code -> outgoing flights (insertion order)
- flights by id: flight id -> Flight (last write wins)
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight

from .exceptions import DuplicateFlightError, UnknownAirportError

logger = logging.getLogger(__name__)


class FlightNetwork:
    """
    Graph store searched by the route finder.

    Populated once while loading and read-only afterwards. Lookups never
    raise; they return None or an empty tuple for unknown keys. Collections
    are returned as tuples so callers cannot alias the internal lists.

    Attributes:
        _airports: Airport registry keyed by IATA code.
        _adjacency: Outgoing flights per IATA code.
        _flights_by_id: Flight registry keyed by flight id.
        _strict_flight_ids: Reject duplicate flight ids instead of overwriting.
    """

    def __init__(self, strict_flight_ids: bool = False) -> None:
        self._airports: Dict[str, Airport] = {}
        self._adjacency: Dict[str, List[Flight]] = {}
        self._flights_by_id: Dict[int, Flight] = {}
        self._strict_flight_ids = strict_flight_ids

    # -------------------------------------------------------------------------
    # Mutation (load phase only)
    # -------------------------------------------------------------------------

    def add_airport(self, airport: Airport) -> None:
        """
        Add an airport (isolated vertex) to the network.

        A second airport with the same IATA code replaces the first one;
        flights already departing from that code are kept.
        """
        self._airports[airport.iata] = airport
        self._adjacency.setdefault(airport.iata, [])

    def add_flight(self, flight: Flight) -> None:
        """
        Add a flight (directed edge) to the network.

        Args:
            flight: Flight whose origin and destination are registered.

        Raises:
            UnknownAirportError: If origin or destination is not registered.
                Nothing is stored in that case.
            DuplicateFlightError: In strict mode, if the flight id exists.
        """
        for iata in (flight.origin, flight.destination):
            if iata not in self._airports:
                raise UnknownAirportError(iata, flight.flight_id)

        previous = self._flights_by_id.get(flight.flight_id)
        if previous is not None:
            if self._strict_flight_ids:
                raise DuplicateFlightError(flight.flight_id)
            logger.warning(
                "Flight id %d overwritten: %s replaces %s",
                flight.flight_id,
                flight.flight_number,
                previous.flight_number,
            )

        self._adjacency.setdefault(flight.origin, []).append(flight)
        self._flights_by_id[flight.flight_id] = flight

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_flights_from(self, iata: str) -> Tuple[Flight, ...]:
        """Outgoing flights of an airport; empty for unknown airports."""
        return tuple(self._adjacency.get(iata, ()))

    def get_airport(self, iata: str) -> Optional[Airport]:
        """Airport registered under the IATA code, or None."""
        return self._airports.get(iata)

    def has_airport(self, iata: str) -> bool:
        """Check if an airport is registered under the IATA code."""
        return iata in self._airports

    def get_flight_by_id(self, flight_id: int) -> Optional[Flight]:
        """Flight registered under the id, or None."""
        return self._flights_by_id.get(flight_id)

    def get_all_flights(self) -> Tuple[Flight, ...]:
        """All flights in the id index (one per flight id)."""
        return tuple(self._flights_by_id.values())

    def get_all_airports(self) -> Tuple[Airport, ...]:
        """All registered airports."""
        return tuple(self._airports.values())

    @property
    def airport_count(self) -> int:
        return len(self._airports)

    @property
    def flight_count(self) -> int:
        return len(self._flights_by_id)

    def __contains__(self, iata: object) -> bool:
        return iata in self._airports

    def __repr__(self) -> str:
        return (
            f"FlightNetwork(airports={self.airport_count}, "
            f"flights={self.flight_count})"
        )
