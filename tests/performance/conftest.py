"""
Shared fixtures for performance benchmarks.

Key design principle: Build the network once at module scope, then
benchmark only the hot paths.
"""

import random
from datetime import time

import pytest

from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight
from src.route_search.network import FlightNetwork

NUM_AIRPORTS = 30
NUM_FLIGHTS = 600


@pytest.fixture(scope="module")
def airport_codes() -> list[str]:
    """Synthetic three-letter codes AAA, AAB, ..."""
    letters = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    return [f"A{letters[i // 26]}{letters[i % 26]}" for i in range(NUM_AIRPORTS)]


@pytest.fixture(scope="module")
def large_network(airport_codes) -> FlightNetwork:
    """Random network with a fixed seed (module-scoped)."""
    rng = random.Random(2024)
    network = FlightNetwork()

    for i, code in enumerate(airport_codes, 1):
        network.add_airport(
            Airport(
                airport_id=i,
                iata=code,
                city=f"City {code}",
                country="Benchland",
                latitude=rng.uniform(-60, 60),
                longitude=rng.uniform(-170, 170),
            )
        )

    for flight_id in range(1, NUM_FLIGHTS + 1):
        origin, destination = rng.sample(airport_codes, 2)
        network.add_flight(
            Flight(
                flight_id=flight_id,
                origin=origin,
                destination=destination,
                airline="Bench Air",
                flight_number=f"BA{flight_id}",
                duration=rng.randint(45, 720),
                price=float(rng.randint(30, 900)),
                departure_time=time(rng.randint(0, 23), rng.choice([0, 15, 30, 45])),
            )
        )

    return network
