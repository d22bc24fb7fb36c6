"""
Optimization criteria for the route search.

Each criterion is a pure cost function over a (partial) flight path.
The search always pops the lowest cost first, so maximizing duration is
expressed as minimizing the negated duration.
"""

from enum import Enum
from typing import Callable, Dict, Sequence, Union

from src.flight_planner.schemas.flight import Flight

from .exceptions import InvalidCriterionError

CostFunction = Callable[[Sequence[Flight]], float]


class Criterion(str, Enum):
    """Optimization objective of a route search."""

    PRICE = "price"
    DURATION = "duration"
    DURATION_MAX = "duration_max"
    STOPOVERS = "stopovers"


def price_cost(flights: Sequence[Flight]) -> float:
    """Summed ticket price."""
    return float(sum(f.price for f in flights))


def duration_cost(flights: Sequence[Flight]) -> float:
    """Summed flight duration."""
    return float(sum(f.duration for f in flights))


def negated_duration_cost(flights: Sequence[Flight]) -> float:
    """Negated summed duration (lowest cost = longest route)."""
    return -duration_cost(flights)


def stopover_cost(flights: Sequence[Flight]) -> float:
    """Number of flights taken."""
    return float(len(flights))


COST_FUNCTIONS: Dict[Criterion, CostFunction] = {
    Criterion.PRICE: price_cost,
    Criterion.DURATION: duration_cost,
    Criterion.DURATION_MAX: negated_duration_cost,
    Criterion.STOPOVERS: stopover_cost,
}

# User-facing names accepted in addition to the enum values
_ALIASES: Dict[str, Criterion] = {
    "cheapest": Criterion.PRICE,
    "fastest": Criterion.DURATION,
    "slowest": Criterion.DURATION_MAX,
    "fewest_stopovers": Criterion.STOPOVERS,
}


def parse_criterion(value: Union[Criterion, str]) -> Criterion:
    """
    Resolve a criterion from an enum member, value, name or alias.

    Matching is case-insensitive and treats '-' and ' ' like '_'.

    Raises:
        InvalidCriterionError: If the value names no criterion.
    """
    if isinstance(value, Criterion):
        return value

    if not isinstance(value, str):
        raise InvalidCriterionError(value)

    key = value.strip().lower().replace("-", "_").replace(" ", "_")
    if key in _ALIASES:
        return _ALIASES[key]

    try:
        return Criterion(key)
    except ValueError:
        raise InvalidCriterionError(value) from None


def cost_of(flights: Sequence[Flight], criterion: Criterion) -> float:
    """Cost of a flight path under the criterion (0 for an empty path)."""
    if not flights:
        return 0.0
    return COST_FUNCTIONS[criterion](flights)
