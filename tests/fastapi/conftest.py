"""
Fixtures for FastAPI endpoint tests.

The planner dependency is overridden with a FlightPlanner over temporary
CSV files, so every test starts with a fresh session.
"""

import pytest
from fastapi.testclient import TestClient

from src.fastapi.planner_api import app, get_planner
from src.flight_planner.application import FlightPlanner


@pytest.fixture
def planner(csv_data_dir) -> FlightPlanner:
    return FlightPlanner(data_dir=csv_data_dir)


@pytest.fixture
def client(planner):
    app.dependency_overrides[get_planner] = lambda: planner
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
