"""
Constrained best-first route search.

Label-correcting variant of Dijkstra over partial paths: the frontier holds
partial routes (not airports) ordered by their cost under the active
criterion. Two constraints shape the search space:
- minimum connection time between consecutive flights (daily recurrence)
- maximum number of stopovers (hard bound on path length)

The stopover cap bounds the depth of every path, so the frontier drains
even on graphs with cycles.
"""

import heapq
import itertools
import logging
from typing import Dict, List, Optional, Tuple, Union

from src.flight_planner.schemas.route import Route

from .connections import MIN_CONNECTION_TIME, is_valid_connection
from .criteria import Criterion, cost_of, parse_criterion
from .labels import SearchState
from .network import FlightNetwork
from .reconstruction import format_path, reconstruct_path

logger = logging.getLogger(__name__)

MAX_STOPOVERS = 3  # 3 stopovers = 4 flights


def search_best_state(
    network: FlightNetwork,
    origin: str,
    destination: str,
    criterion: Criterion,
    max_stopovers: int = MAX_STOPOVERS,
    min_connection_minutes: int = MIN_CONNECTION_TIME,
) -> Optional[SearchState]:
    """
    Run the best-first search and return the best destination state.

    Args:
        network: Flight network to search.
        origin: Origin IATA code (must be registered).
        destination: Destination IATA code (must be registered).
        criterion: Optimization criterion driving the cost function.
        max_stopovers: Maximum intermediate landings per route.
        min_connection_minutes: Minimum layover between flights.

    Returns:
        Lowest-cost state at the destination, or None if none was reached.
        The state may hold an empty path when origin == destination.
    """
    max_flights = max_stopovers + 1

    # Insertion counter breaks cost ties without comparing states
    counter = itertools.count()
    frontier: List[Tuple[float, int, SearchState]] = []

    start = SearchState(airport=origin, num_flights=0, cost=0.0)
    heapq.heappush(frontier, (start.cost, next(counter), start))

    settled: Dict[Tuple[str, int], float] = {}
    best: Optional[SearchState] = None
    expanded = 0

    while frontier:
        cost, _, state = heapq.heappop(frontier)

        if state.airport == destination:
            if best is None or cost < best.cost:
                best = state
            continue

        if state.num_flights >= max_flights:
            continue

        key = state.dedup_key
        if key in settled and settled[key] <= cost:
            continue
        settled[key] = cost
        expanded += 1

        path = reconstruct_path(state)
        for flight in network.get_flights_from(state.airport):
            if not is_valid_connection(
                state.last_flight, flight, min_connection_minutes
            ):
                continue

            new_state = SearchState(
                airport=flight.destination,
                num_flights=state.num_flights + 1,
                cost=cost_of(path + [flight], criterion),
                prev=state,
                flight=flight,
            )
            heapq.heappush(frontier, (new_state.cost, next(counter), new_state))

    logger.debug(
        "Search %s %s -> %s: %d states expanded, %s",
        criterion.value,
        origin,
        destination,
        expanded,
        "no route" if best is None else f"best cost {best.cost:g}",
    )

    return best


def find_optimal_route(
    network: FlightNetwork,
    origin: str,
    destination: str,
    criterion: Union[Criterion, str],
    max_stopovers: int = MAX_STOPOVERS,
    min_connection_minutes: int = MIN_CONNECTION_TIME,
    route_id: int = 0,
) -> Optional[Route]:
    """
    Find the single best route from origin to destination.

    "No route found" is a normal outcome and is returned as None: unknown
    origin or destination, no path within the stopover cap and connection
    rule, or origin == destination.

    Args:
        network: Flight network to search.
        origin: Origin IATA code.
        destination: Destination IATA code.
        criterion: Criterion or its name ('price', 'cheapest', ...).
        max_stopovers: Maximum intermediate landings per route.
        min_connection_minutes: Minimum layover between flights.
        route_id: Identifier given to the packaged route.

    Returns:
        Best Route under the criterion, or None.

    Raises:
        InvalidCriterionError: If criterion names no known criterion.
    """
    criterion = parse_criterion(criterion)

    if not network.has_airport(origin) or not network.has_airport(destination):
        logger.debug("Unknown airport in search %s -> %s", origin, destination)
        return None

    best = search_best_state(
        network,
        origin,
        destination,
        criterion,
        max_stopovers=max_stopovers,
        min_connection_minutes=min_connection_minutes,
    )
    if best is None:
        return None

    flights = reconstruct_path(best)
    if not flights:
        return None

    logger.debug("Best %s route: %s", criterion.value, format_path(flights))
    return Route.from_flights(route_id, flights)


def find_cheapest_route(
    network: FlightNetwork, origin: str, destination: str
) -> Optional[Route]:
    """Route with the lowest total price."""
    return find_optimal_route(network, origin, destination, Criterion.PRICE)


def find_fastest_route(
    network: FlightNetwork, origin: str, destination: str
) -> Optional[Route]:
    """Route with the lowest total flight duration."""
    return find_optimal_route(network, origin, destination, Criterion.DURATION)


def find_slowest_route(
    network: FlightNetwork, origin: str, destination: str
) -> Optional[Route]:
    """Route with the highest total flight duration."""
    return find_optimal_route(network, origin, destination, Criterion.DURATION_MAX)


def find_fewest_stopover_route(
    network: FlightNetwork, origin: str, destination: str
) -> Optional[Route]:
    """Route with the fewest flights."""
    return find_optimal_route(network, origin, destination, Criterion.STOPOVERS)
