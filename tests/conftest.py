"""
Shared fixtures for Flight Planner tests.

Provides factories for airports, flights, routes and small networks, plus
a temporary data directory with CSV files for the adapter and application
tests.
"""

from datetime import time
from pathlib import Path

import pytest

from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight
from src.flight_planner.schemas.route import Route
from src.route_search.network import FlightNetwork


# =============================================================================
# ENTITY FACTORIES
# =============================================================================


@pytest.fixture
def make_airport():
    def _make(iata, airport_id=1, city=None, country="Testland", latitude=0.0, longitude=0.0):
        return Airport(
            airport_id=airport_id,
            iata=iata,
            city=city or iata.title(),
            country=country,
            latitude=latitude,
            longitude=longitude,
        )

    return _make


@pytest.fixture
def make_flight():
    def _make(
        flight_id,
        origin,
        destination,
        duration=60,
        price=100.0,
        departure="08:00",
        airline="Test Air",
        flight_number=None,
    ):
        return Flight(
            flight_id=flight_id,
            origin=origin,
            destination=destination,
            airline=airline,
            flight_number=flight_number or f"TA{flight_id}",
            duration=duration,
            price=price,
            departure_time=time.fromisoformat(departure),
        )

    return _make


@pytest.fixture
def make_route():
    def _make(route_id, price, duration, stopovers, flight_ids=None):
        return Route(
            route_id=route_id,
            flight_ids=flight_ids or tuple(range(1, stopovers + 2)),
            total_duration=duration,
            total_price=price,
            stopovers=stopovers,
        )

    return _make


@pytest.fixture
def build_network(make_airport, make_flight):
    """
    Build a FlightNetwork from flight tuples.

    Each tuple is (id, origin, destination, duration, price, departure).
    Airports are derived from the flight endpoints unless given.
    """

    def _build(flights, airports=None, strict=False):
        network = FlightNetwork(strict_flight_ids=strict)
        codes = airports or sorted({f[1] for f in flights} | {f[2] for f in flights})
        for i, code in enumerate(codes, 1):
            network.add_airport(make_airport(code, airport_id=i))
        for f in flights:
            network.add_flight(make_flight(*f))
        return network

    return _build


@pytest.fixture
def scenario_network(build_network):
    """Two-leg VIE -> LHR -> JFK against the VIE -> JFK direct flight."""
    return build_network(
        [
            (1, "VIE", "LHR", 60, 100.0, "08:00"),
            (2, "LHR", "JFK", 360, 200.0, "10:00"),
            (3, "VIE", "JFK", 500, 550.0, "09:00"),
        ]
    )


# =============================================================================
# CSV DATA DIRECTORY
# =============================================================================

AIRPORTS_CSV = """id,iata,city,country,latitude,longitude
1,VIE,Vienna,Austria,48.1103,16.5697
2,LHR,London,United Kingdom,51.4700,-0.4543
3,JFK,New York,United States,40.6413,-73.7781
4,SIN,Singapore,Singapore,1.3644,103.9915
"""

FLIGHTS_CSV = """id,origin,destination,airline,flight_number,duration,price,departure_time
1,VIE,LHR,Austrian Airlines,OS451,60,100.00,08:00
2,LHR,JFK,British Airways,BA117,360,200.00,10:00
3,VIE,JFK,Austrian Airlines,OS87,500,550.00,09:00
4,JFK,VIE,Austrian Airlines,OS88,540,690.00,17:45
"""


@pytest.fixture
def csv_data_dir(tmp_path) -> Path:
    """Data directory with airports.csv and flights.csv (no saved routes)."""
    (tmp_path / "airports.csv").write_text(AIRPORTS_CSV, encoding="utf-8")
    (tmp_path / "flights.csv").write_text(FLIGHTS_CSV, encoding="utf-8")
    return tmp_path
