"""
Application layer for the Flight Planner.

This layer provides the public API for the route planning engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.flight_planner.application.flight_planner import FlightPlanner

__all__ = ["FlightPlanner"]
