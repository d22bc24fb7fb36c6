"""Tests for SearchService lookups."""

from unittest.mock import MagicMock

import pytest

from src.flight_planner.services.search_service import SearchResult, SearchService
from src.route_search.network import FlightNetwork


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def network(make_airport, make_flight):
    network = FlightNetwork()
    for i, code in enumerate(["VIE", "LHR", "JFK", "SIN"], 1):
        network.add_airport(make_airport(code, airport_id=i))
    network.add_flight(make_flight(1, "VIE", "LHR", airline="Austrian Airlines", flight_number="OS451"))
    network.add_flight(make_flight(2, "LHR", "JFK", airline="British Airways", flight_number="BA117"))
    network.add_flight(make_flight(3, "VIE", "JFK", airline="Austrian Airlines", flight_number="OS87"))
    network.add_flight(make_flight(4, "JFK", "LHR", airline="British Airways", flight_number="BA178"))
    return network


@pytest.fixture
def search(network):
    repo = MagicMock()
    repo.get_network.return_value = network
    return SearchService(repo)


# =============================================================================
# AIRPORT SEARCHES
# =============================================================================


def test_search_by_origin(search):
    result = search.search_by_origin("vie")

    assert result.airport.iata == "VIE"
    assert [f.flight_id for f in result.flights] == [1, 3]
    assert result.has_results


def test_search_by_destination(search):
    result = search.search_by_destination(" jfk ")

    assert result.airport.iata == "JFK"
    assert sorted(f.flight_id for f in result.flights) == [2, 3]


def test_airport_without_flights(search):
    result = search.search_by_origin("SIN")

    assert result.airport.iata == "SIN"
    assert result.flights == ()
    assert result.has_results


@pytest.mark.parametrize("method", ["search_by_origin", "search_by_destination"])
def test_unknown_airport(search, method):
    result = getattr(search, method)("XXX")

    assert result == SearchResult(airport=None)
    assert not result.has_results


# =============================================================================
# FLIGHT SEARCHES
# =============================================================================


@pytest.mark.parametrize(
    "term,expected_ids",
    [
        ("Austrian Airlines", [1, 3]),
        ("british", [2, 4]),
        ("  AIR", [1, 2, 3, 4]),
        ("Ryanair", []),
    ],
)
def test_search_by_airline(search, term, expected_ids):
    flights = search.search_by_airline(term)

    assert sorted(f.flight_id for f in flights) == expected_ids


@pytest.mark.parametrize(
    "number,expected_id",
    [
        ("OS87", 3),
        ("ba117", 2),
        (" BA178 ", 4),
        ("LH400", None),
    ],
)
def test_search_by_flight_number(search, number, expected_id):
    flight = search.search_by_flight_number(number)

    if expected_id is None:
        assert flight is None
    else:
        assert flight.flight_id == expected_id


def test_list_airports_sorted(search):
    assert [a.iata for a in search.list_airports()] == ["JFK", "LHR", "SIN", "VIE"]
