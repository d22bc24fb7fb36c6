"""
Three-way comparators over routes.

Each comparator returns a negative number, zero or a positive number
(-1, 0, 1) like a classic cmp function, so they plug into
functools.cmp_to_key as well as the display sorts in sorting.py.
"""

from typing import Callable, Dict

from src.flight_planner.schemas.route import Route

from .exceptions import InvalidComparatorError

RouteComparator = Callable[[Route, Route], int]


def _cmp(a: float, b: float) -> int:
    return (a > b) - (a < b)


def compare_by_price(r1: Route, r2: Route) -> int:
    """Ascending total price."""
    return _cmp(r1.total_price, r2.total_price)


def compare_by_duration(r1: Route, r2: Route) -> int:
    """Ascending total duration."""
    return _cmp(r1.total_duration, r2.total_duration)


def compare_by_stopovers(r1: Route, r2: Route) -> int:
    """Ascending stopover count."""
    return _cmp(r1.stopovers, r2.stopovers)


def compare_combined(r1: Route, r2: Route) -> int:
    """
    Price, then duration, then stopovers (all ascending).

    The first non-zero comparison wins; routes equal on all three compare 0.
    """
    for comparator in (compare_by_price, compare_by_duration, compare_by_stopovers):
        result = comparator(r1, r2)
        if result != 0:
            return result
    return 0


COMPARATORS: Dict[str, RouteComparator] = {
    "price": compare_by_price,
    "duration": compare_by_duration,
    "stopovers": compare_by_stopovers,
    "combination": compare_combined,
}


def get_comparator(name: str) -> RouteComparator:
    """
    Look up a comparator by name (case-insensitive).

    Raises:
        InvalidComparatorError: If no comparator has that name.
    """
    try:
        return COMPARATORS[name.strip().lower()]
    except (KeyError, AttributeError):
        raise InvalidComparatorError(name) from None
