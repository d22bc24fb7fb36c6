"""
Search Service - read-only lookups over the flight network.

Linear searches by origin, destination, airline and flight number.
Inputs are normalized the way users type them (spaces, lower case).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight

if TYPE_CHECKING:
    from src.flight_planner.adapters.repositories.network_repo import (
        NetworkRepository,
    )


@dataclass(frozen=True)
class SearchResult:
    """
    Airport found by a search together with its associated flights.

    Attributes:
        airport: The airport, or None if the code is unknown.
        flights: Departing or arriving flights, depending on the search.
    """

    airport: Optional[Airport]
    flights: Tuple[Flight, ...] = ()

    @property
    def has_results(self) -> bool:
        """True if an airport or at least one flight was found."""
        return self.airport is not None or bool(self.flights)


class SearchService:
    """
    Lookup service over the loaded network.

    Attributes:
        _network_repo: Repository providing the loaded network.
    """

    def __init__(self, network_repo: NetworkRepository) -> None:
        self._network_repo = network_repo

    def search_by_origin(self, iata: str) -> SearchResult:
        """Airport and all flights departing from it."""
        network = self._network_repo.get_network()
        code = iata.strip().upper()

        airport = network.get_airport(code)
        if airport is None:
            return SearchResult(airport=None)

        return SearchResult(airport=airport, flights=network.get_flights_from(code))

    def search_by_destination(self, iata: str) -> SearchResult:
        """Airport and all flights arriving at it."""
        network = self._network_repo.get_network()
        code = iata.strip().upper()

        airport = network.get_airport(code)
        if airport is None:
            return SearchResult(airport=None)

        flights = tuple(f for f in network.get_all_flights() if f.destination == code)
        return SearchResult(airport=airport, flights=flights)

    def search_by_airline(self, airline: str) -> Tuple[Flight, ...]:
        """Flights whose airline name contains the term (case-insensitive)."""
        term = airline.strip().lower()
        return tuple(
            f
            for f in self._network_repo.get_network().get_all_flights()
            if term in f.airline.lower()
        )

    def search_by_flight_number(self, flight_number: str) -> Optional[Flight]:
        """First flight with the given flight number (case-insensitive), or None."""
        term = flight_number.strip().upper()
        for flight in self._network_repo.get_network().get_all_flights():
            if flight.flight_number.upper() == term:
                return flight
        return None

    def list_airports(self) -> Tuple[Airport, ...]:
        """All airports, sorted by IATA code."""
        airports = self._network_repo.get_network().get_all_airports()
        return tuple(sorted(airports, key=lambda a: a.iata))
