from typing import List, Optional

from src.flight_planner.schemas.flight import Flight

from .labels import SearchState


def reconstruct_path(state: SearchState) -> List[Flight]:
    """
    Reconstruct the flights taken to reach a state.

    Returns:
        flights: ordered list of flights from origin to the state's airport
    """
    flights: List[Flight] = []

    curr: Optional[SearchState] = state
    while curr is not None:
        if curr.flight is not None:
            flights.append(curr.flight)
        curr = curr.prev

    flights.reverse()
    return flights


def format_path(flights: List[Flight]) -> str:
    """
    Render a flight path as 'VIE -> LHR -> JFK'.

    Returns:
        Empty string for an empty path.
    """
    if not flights:
        return ""
    airports = [flights[0].origin] + [f.destination for f in flights]
    return " -> ".join(airports)
