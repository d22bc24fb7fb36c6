import logging

import pytest

from src.route_search.exceptions import DuplicateFlightError, UnknownAirportError
from src.route_search.network import FlightNetwork


# -------------------------
# Fixtures
# -------------------------

@pytest.fixture
def network(make_airport):
    network = FlightNetwork()
    network.add_airport(make_airport("VIE", airport_id=1))
    network.add_airport(make_airport("LHR", airport_id=2))
    network.add_airport(make_airport("JFK", airport_id=3))
    return network


# -------------------------
# Airports
# -------------------------

def test_add_airport_registers_lookup(network):
    airport = network.get_airport("VIE")

    assert airport is not None
    assert airport.airport_id == 1
    assert network.has_airport("VIE")
    assert "VIE" in network
    assert network.airport_count == 3


def test_unknown_airport_lookups_are_empty(network):
    assert network.get_airport("XXX") is None
    assert not network.has_airport("XXX")
    assert network.get_flights_from("XXX") == ()


def test_new_airport_has_no_flights(network):
    assert network.get_flights_from("JFK") == ()


def test_readding_airport_keeps_its_flights(network, make_airport, make_flight):
    network.add_flight(make_flight(1, "VIE", "LHR"))
    network.add_airport(make_airport("VIE", airport_id=99))

    assert network.get_airport("VIE").airport_id == 99
    assert len(network.get_flights_from("VIE")) == 1


# -------------------------
# Flights
# -------------------------

def test_add_flight_indexes_adjacency_and_id(network, make_flight):
    f1 = make_flight(1, "VIE", "LHR")
    f2 = make_flight(2, "VIE", "JFK")
    network.add_flight(f1)
    network.add_flight(f2)

    assert network.get_flights_from("VIE") == (f1, f2)
    assert network.get_flight_by_id(2) == f2
    assert network.get_flight_by_id(42) is None
    assert set(network.get_all_flights()) == {f1, f2}
    assert network.flight_count == 2


def test_parallel_flights_between_same_airports(network, make_flight):
    network.add_flight(make_flight(1, "VIE", "LHR", departure="08:00"))
    network.add_flight(make_flight(2, "VIE", "LHR", departure="18:00"))

    assert len(network.get_flights_from("VIE")) == 2


@pytest.mark.parametrize(
    "origin,destination,missing",
    [
        ("XXX", "LHR", "XXX"),
        ("VIE", "YYY", "YYY"),
    ],
)
def test_flight_with_unknown_airport_is_rejected(
    network, make_flight, origin, destination, missing
):
    flight = make_flight(7, origin, destination)

    with pytest.raises(UnknownAirportError) as exc_info:
        network.add_flight(flight)

    assert exc_info.value.airport == missing
    assert exc_info.value.flight_id == 7
    assert flight not in network.get_all_flights()
    assert flight not in network.get_flights_from(origin)
    assert network.get_flight_by_id(7) is None


def test_returned_flights_are_snapshots(network, make_flight):
    network.add_flight(make_flight(1, "VIE", "LHR"))
    before = network.get_flights_from("VIE")

    network.add_flight(make_flight(2, "VIE", "JFK"))

    assert len(before) == 1
    assert len(network.get_flights_from("VIE")) == 2


def test_duplicate_flight_id_last_write_wins(network, make_flight, caplog):
    first = make_flight(5, "VIE", "LHR", flight_number="OS1")
    second = make_flight(5, "VIE", "JFK", flight_number="OS2")

    with caplog.at_level(logging.WARNING):
        network.add_flight(first)
        network.add_flight(second)

    assert network.get_flight_by_id(5) == second
    assert network.get_all_flights() == (second,)
    # Both stay reachable through the adjacency index
    assert network.get_flights_from("VIE") == (first, second)
    assert "overwritten" in caplog.text


def test_duplicate_flight_id_rejected_in_strict_mode(make_airport, make_flight):
    network = FlightNetwork(strict_flight_ids=True)
    network.add_airport(make_airport("VIE"))
    network.add_airport(make_airport("LHR"))
    first = make_flight(5, "VIE", "LHR")
    network.add_flight(first)

    with pytest.raises(DuplicateFlightError) as exc_info:
        network.add_flight(make_flight(5, "LHR", "VIE"))

    assert exc_info.value.flight_id == 5
    assert network.get_all_flights() == (first,)
    assert network.get_flights_from("LHR") == ()


def test_repr_shows_counts(network, make_flight):
    network.add_flight(make_flight(1, "VIE", "LHR"))

    assert repr(network) == "FlightNetwork(airports=3, flights=1)"
