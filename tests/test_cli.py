"""
Tests for the console menu.

The menu is driven with scripted answers instead of stdin.
"""

import io

import pytest

from src.flight_planner.application import FlightPlanner
from src.flight_planner.cli import Menu, main, parse_args


# -------------------------
# Fixtures
# -------------------------

@pytest.fixture
def planner(csv_data_dir):
    return FlightPlanner(data_dir=csv_data_dir)


@pytest.fixture
def run_menu(planner):
    def _run(*answers):
        script = iter(answers)

        def _input(prompt):
            try:
                return next(script)
            except StopIteration:
                raise EOFError from None

        out = io.StringIO()
        Menu(planner, input_func=_input, out=out).start()
        return out.getvalue()

    return _run


# -------------------------
# Main loop
# -------------------------

def test_exit(run_menu):
    output = run_menu("5")

    assert "FLIGHT ROUTE PLANNER" in output
    assert "Goodbye" in output


def test_end_of_input_exits(run_menu):
    assert "Goodbye" in run_menu()


def test_invalid_choice(run_menu):
    assert "Invalid input" in run_menu("9", "5")


# -------------------------
# Route planning
# -------------------------

def test_plan_cheapest_route(run_menu, planner):
    output = run_menu("1", "vie", "jfk", "1", "5")

    assert "Cheapest route found" in output
    assert "Route 1: 2 flight(s)" in output
    assert "OS451" in output and "BA117" in output
    assert len(planner.saved_routes) == 1


def test_plan_route_unknown_airport(run_menu):
    output = run_menu("1", "XXX", "5")

    assert "airport XXX not found" in output


def test_plan_route_no_route(run_menu):
    output = run_menu("1", "VIE", "SIN", "1", "5")

    assert "No route from VIE to SIN found" in output


def test_plan_route_invalid_criterion(run_menu, planner):
    output = run_menu("1", "VIE", "JFK", "7", "5")

    assert "Invalid selection" in output
    assert planner.saved_routes == ()


# -------------------------
# Sorting
# -------------------------

def test_sorting_without_routes(run_menu):
    assert "No saved routes available" in run_menu("2", "5")


def test_sorting(run_menu, planner):
    planner.find_slowest_route("VIE", "JFK")
    planner.find_cheapest_route("VIE", "JFK")

    output = run_menu("2", "1,2,7", "1", "1", "5")

    assert "Route with id 7 not found" in output
    sorted_part = output.split("Sorted routes")[1]
    assert sorted_part.index("Route 2") < sorted_part.index("Route 1")


def test_sorting_duplicate_ids(run_menu, planner):
    planner.find_slowest_route("VIE", "JFK")
    planner.find_cheapest_route("VIE", "JFK")

    output = run_menu("2", "2,1,2", "1", "1", "5")

    assert "Route with id 2 was already selected" in output
    sorted_part = output.split("Sorted routes")[1]
    assert sorted_part.count("Route 2") == 1


def test_sorting_invalid_ids(run_menu, planner):
    planner.find_cheapest_route("VIE", "JFK")

    assert "invalid format" in run_menu("2", "one,two", "5")
    assert "No valid routes" in run_menu("2", "8,9", "5")


# -------------------------
# Search
# -------------------------

@pytest.mark.parametrize(
    "answers,expected",
    [
        (("3", "1", "VIE"), "Departures (2)"),
        (("3", "2", "jfk"), "Arrivals (2)"),
        (("3", "1", "XXX"), "Airport XXX not found"),
        (("3", "3", "british"), "1 flight(s) found"),
        (("3", "3", "Ryanair"), "No flights for airline 'Ryanair' found"),
        (("3", "4", "os87"), "OS87"),
        (("3", "4", "LH400"), "Flight LH400 not found"),
    ],
)
def test_search(run_menu, answers, expected):
    assert expected in run_menu(*answers, "5")


# -------------------------
# Saving
# -------------------------

def test_save_routes(run_menu, planner, csv_data_dir):
    planner.find_cheapest_route("VIE", "JFK")

    output = run_menu("4", "5")

    assert "1 route(s) saved" in output
    assert (csv_data_dir / "routes.csv").exists()


def test_save_without_routes(run_menu):
    assert "No routes to save" in run_menu("4", "5")


# -------------------------
# Entry point
# -------------------------

def test_parse_args(tmp_path):
    args = parse_args(["--data-dir", str(tmp_path), "--log-level", "DEBUG"])

    assert args.data_dir == tmp_path
    assert args.log_level == "DEBUG"


def test_main_fails_without_data(tmp_path):
    assert main(["--data-dir", str(tmp_path)]) == 1


def test_main_fails_with_empty_airports(csv_data_dir):
    (csv_data_dir / "airports.csv").write_text("", encoding="utf-8")

    assert main(["--data-dir", str(csv_data_dir)]) == 1
