"""
Schema definitions for Flight Planner.

Frozen dataclasses for the domain entities and Pandera models for the
tabular contracts at the ingestion and persistence boundaries.
"""

from .airport import Airport, AirportSchema
from .flight import Flight, FlightSchema
from .route import Route, RouteSchema

__all__ = [
    # Airport
    "Airport",
    "AirportSchema",
    # Flight
    "Flight",
    "FlightSchema",
    # Route
    "Route",
    "RouteSchema",
]
