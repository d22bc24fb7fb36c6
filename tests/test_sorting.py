from functools import cmp_to_key

import pytest

from src.route_search.comparators import COMPARATORS, compare_by_price
from src.route_search.exceptions import InvalidSortAlgorithmError
from src.route_search.sorting import (
    SORT_ALGORITHMS,
    get_sort_algorithm,
    merge_sort,
    quick_sort,
)


# -------------------------
# Fixtures
# -------------------------

@pytest.fixture
def routes(make_route):
    return [
        make_route(1, 480.0, 600, 1),
        make_route(2, 120.0, 900, 3),
        make_route(3, 480.0, 300, 0),
        make_route(4, 95.5, 420, 2),
        make_route(5, 300.0, 420, 1),
        make_route(6, 120.0, 900, 2),
    ]


# -------------------------
# Both algorithms
# -------------------------

@pytest.mark.parametrize("algorithm", [merge_sort, quick_sort])
@pytest.mark.parametrize("comparator", sorted(COMPARATORS))
def test_sort_orders_routes(routes, algorithm, comparator):
    compare = COMPARATORS[comparator]

    result = algorithm(routes, compare)

    assert sorted(r.route_id for r in result) == [1, 2, 3, 4, 5, 6]
    for a, b in zip(result, result[1:]):
        assert compare(a, b) <= 0


@pytest.mark.parametrize("algorithm", [merge_sort, quick_sort])
def test_sort_returns_new_list(routes, algorithm):
    original = list(routes)

    result = algorithm(routes, compare_by_price)

    assert routes == original
    assert result is not routes


@pytest.mark.parametrize("algorithm", [merge_sort, quick_sort])
@pytest.mark.parametrize("size", [0, 1])
def test_sort_trivial_inputs(routes, algorithm, size):
    assert algorithm(routes[:size], compare_by_price) == routes[:size]


@pytest.mark.parametrize("algorithm", [merge_sort, quick_sort])
def test_sort_matches_builtin_sort(make_route, algorithm):
    prices = [17.0, 3.0, 99.0, 3.0, 42.0, 8.0, 65.0, 1.0, 42.0, 12.0]
    routes = [make_route(i, p, 60, 0) for i, p in enumerate(prices, 1)]

    result = algorithm(routes, compare_by_price)
    expected = sorted(routes, key=cmp_to_key(compare_by_price))

    assert [r.total_price for r in result] == [r.total_price for r in expected]


def test_quick_sort_handles_presorted_input(make_route):
    routes = [make_route(i, float(i), 60, 0) for i in range(300)]

    result = quick_sort(routes, compare_by_price)

    assert result == routes


# -------------------------
# Stability
# -------------------------

def test_merge_sort_is_stable(routes):
    result = merge_sort(routes, compare_by_price)

    # Routes 2 and 6 share price 120, routes 1 and 3 share price 480
    assert [r.route_id for r in result] == [4, 2, 6, 5, 1, 3]


# -------------------------
# Lookup
# -------------------------

@pytest.mark.parametrize(
    "name,expected",
    [
        ("merge", merge_sort),
        ("Quick", quick_sort),
        (" MERGE ", merge_sort),
    ],
)
def test_get_sort_algorithm(name, expected):
    assert get_sort_algorithm(name) is expected


@pytest.mark.parametrize("name", ["bubble", "", None])
def test_get_sort_algorithm_rejects_unknown(name):
    with pytest.raises(InvalidSortAlgorithmError):
        get_sort_algorithm(name)


def test_sort_algorithm_registry():
    assert set(SORT_ALGORITHMS) == {"merge", "quick"}
