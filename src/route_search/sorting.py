"""
Display sorts for computed routes.

Both algorithms take a three-way comparator (see comparators.py) and
return a new list; the input sequence is never modified.
"""

from typing import Callable, Dict, List, Sequence

from src.flight_planner.schemas.route import Route

from .comparators import RouteComparator
from .exceptions import InvalidSortAlgorithmError

SortAlgorithm = Callable[[Sequence[Route], RouteComparator], List[Route]]


def merge_sort(routes: Sequence[Route], compare: RouteComparator) -> List[Route]:
    """
    Stable top-down merge sort.

    Routes that compare equal keep their input order.
    """
    items = list(routes)
    if len(items) <= 1:
        return items

    mid = len(items) // 2
    left = merge_sort(items[:mid], compare)
    right = merge_sort(items[mid:], compare)

    merged: List[Route] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # <= keeps the left element first on ties (stability)
        if compare(left[i], right[j]) <= 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1

    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def quick_sort(routes: Sequence[Route], compare: RouteComparator) -> List[Route]:
    """
    In-place quick sort (Lomuto partition) on a copy of the input.

    Not stable: routes that compare equal may change relative order.
    """
    items = list(routes)
    _quick_sort(items, 0, len(items) - 1, compare)
    return items


def _quick_sort(
    items: List[Route], low: int, high: int, compare: RouteComparator
) -> None:
    while low < high:
        pivot = _partition(items, low, high, compare)
        # Recurse into the smaller half to keep the stack shallow
        if pivot - low < high - pivot:
            _quick_sort(items, low, pivot - 1, compare)
            low = pivot + 1
        else:
            _quick_sort(items, pivot + 1, high, compare)
            high = pivot - 1


def _partition(
    items: List[Route], low: int, high: int, compare: RouteComparator
) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if compare(items[j], pivot) <= 0:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


SORT_ALGORITHMS: Dict[str, SortAlgorithm] = {
    "merge": merge_sort,
    "quick": quick_sort,
}


def get_sort_algorithm(name: str) -> SortAlgorithm:
    """
    Look up a sort algorithm by name ('merge' or 'quick', case-insensitive).

    Raises:
        InvalidSortAlgorithmError: If no algorithm has that name.
    """
    try:
        return SORT_ALGORITHMS[name.strip().lower()]
    except (KeyError, AttributeError):
        raise InvalidSortAlgorithmError(name) from None
