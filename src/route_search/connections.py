"""
Connection rule between consecutive flights.

Flights carry only a time of day, so a connection is evaluated on a
24-hour clock: if the next flight departs earlier in the day than the
previous one arrives, it is taken on the following day.
"""

from typing import Optional

from src.flight_planner.schemas.flight import MINUTES_PER_DAY, Flight

MIN_CONNECTION_TIME = 20  # minutes


def layover_minutes(previous: Flight, next_flight: Flight) -> int:
    """
    Minutes between the arrival of previous and the departure of next_flight.

    Always in [0, 24h): a departure earlier than the arrival time of day
    is moved to the next day.
    """
    arrival = previous.arrival_minute
    departure = next_flight.departure_minute

    if departure < arrival:
        departure += MINUTES_PER_DAY

    return departure - arrival


def is_valid_connection(
    previous: Optional[Flight],
    next_flight: Flight,
    min_connection_minutes: int = MIN_CONNECTION_TIME,
) -> bool:
    """
    Check whether next_flight can be taken after previous.

    Args:
        previous: Last flight taken, or None for the first flight of a route.
        next_flight: Candidate flight.
        min_connection_minutes: Minimum layover.

    Returns:
        True if there is no previous flight or the layover is at least
        min_connection_minutes.
    """
    if previous is None:
        return True

    return layover_minutes(previous, next_flight) >= min_connection_minutes
