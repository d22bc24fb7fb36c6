"""
Flight Planner - Console Entry Point.

Interactive text menu over the FlightPlanner facade: plan routes, sort the
routes of the session, search the network and save routes to CSV.

Usage:
    flight-planner --data-dir data
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from src.flight_planner.application.flight_planner import FlightPlanner
from src.flight_planner.config import Config
from src.flight_planner.ports.network_repository import NetworkNotInitializedError
from src.flight_planner.ports.route_store import RouteStoreError
from src.flight_planner.schemas.route import Route
from src.route_search.criteria import Criterion

# Module-level logger
logger = logging.getLogger(__name__)

CRITERIA_MENU = {
    "1": (Criterion.PRICE, "Cheapest route"),
    "2": (Criterion.DURATION_MAX, "Slowest route"),
    "3": (Criterion.DURATION, "Fastest route"),
    "4": (Criterion.STOPOVERS, "Fewest stopovers"),
}

SORT_ALGORITHM_MENU = {"1": "merge", "2": "quick"}

COMPARATOR_MENU = {
    "1": "price",
    "2": "duration",
    "3": "stopovers",
    "4": "combination",
}

SPACER = "=" * 40


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging to output to the console and optionally a file.

    Sets up the root logger with the given level, formatting with
    timestamps, a stderr handler (stdout belongs to the menu) and an
    optional file handler.
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Create formatter
    formatter = logging.Formatter(log_format, datefmt=date_format)

    # Get root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


class Menu:
    """
    Console menu for the flight planner.

    Input and output are injectable so the menu can be driven by tests.

    Attributes:
        _planner: Facade over routing, lookups and persistence.
        _input: Function reading one line after printing a prompt.
        _out: Stream the menu writes to.
    """

    def __init__(
        self,
        planner: FlightPlanner,
        input_func: Callable[[str], str] = input,
        out: TextIO = sys.stdout,
    ) -> None:
        self._planner = planner
        self._input = input_func
        self._out = out

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def start(self) -> None:
        """Run the main menu loop until the user exits."""
        handlers = {
            "1": self.handle_route_planning,
            "2": self.handle_sorting,
            "3": self.handle_search,
            "4": self.handle_save_routes,
        }

        while True:
            self._print_main_menu()
            try:
                choice = self._ask("Your choice: ")
            except EOFError:
                choice = "5"

            if choice == "5":
                self._print("\nThank you! Goodbye!")
                return

            handler = handlers.get(choice)
            if handler is None:
                self._print("\nInvalid input. Please choose 1-5.")
                continue
            handler()

    def _print_main_menu(self) -> None:
        self._print()
        self._print(SPACER)
        self._print("       FLIGHT ROUTE PLANNER")
        self._print(SPACER)
        self._print("1. Route planning")
        self._print("2. Sorting")
        self._print("3. Search")
        self._print("4. Save routes")
        self._print("5. Exit")
        self._print(SPACER)

    def handle_route_planning(self) -> None:
        """
        Menu action "Route planning":
        1. Ask for origin and destination
        2. Ask for the optimization criterion
        3. Delegate to the planner and print the result
        """
        self._print("\n--- ROUTE PLANNING ---")

        origin = self._ask("Origin (IATA code, e.g. VIE): ").upper()
        if not self._planner.has_airport(origin):
            self._print(f"Error: airport {origin} not found!")
            return

        destination = self._ask("Destination (IATA code, e.g. JFK): ").upper()
        if not self._planner.has_airport(destination):
            self._print(f"Error: airport {destination} not found!")
            return

        self._print("\nChoose criterion:")
        for key, (_, label) in CRITERIA_MENU.items():
            self._print(f"{key}. {label}")
        choice = self._ask("Your choice: ")

        if choice not in CRITERIA_MENU:
            self._print("Invalid selection!")
            return
        criterion, label = CRITERIA_MENU[choice]

        route = self._planner.find_route(origin, destination, criterion)
        if route is None:
            self._print(f"\nNo route from {origin} to {destination} found!")
            return

        self._print(f"\n{label} found:")
        self._print(str(route))
        self._print_route_details(route)

    def _print_route_details(self, route: Route) -> None:
        self._print("\nFlight details:")
        for i, flight in enumerate(self._planner.route_flights(route), 1):
            self._print(f"  {i}. {flight}")

    def handle_sorting(self) -> None:
        """
        Menu action "Sorting":
        1. Show the session routes and ask which ones to sort
        2. Ask for the sort algorithm and the comparator
        3. Print the sorted routes
        """
        self._print("\n--- SORTING ---")

        routes = self._planner.saved_routes
        if not routes:
            self._print("No saved routes available!")
            self._print("Please plan some routes first.")
            return

        self._print("\nAvailable routes:")
        for route in routes:
            self._print(str(route))

        raw_ids = self._ask("\nRoute ids to sort (comma separated, e.g. 1,2,3): ")
        try:
            route_ids = [int(part) for part in raw_ids.split(",") if part.strip()]
        except ValueError:
            self._print("Error: invalid format!")
            return

        known_ids = {r.route_id for r in routes}
        seen: set[int] = set()
        for route_id in route_ids:
            if route_id not in known_ids:
                self._print(f"Route with id {route_id} not found!")
            elif route_id in seen:
                self._print(f"Route with id {route_id} was already selected!")
            seen.add(route_id)
        if not known_ids.intersection(route_ids):
            self._print("No valid routes to sort!")
            return

        self._print("\nChoose sort algorithm:")
        self._print("1. Merge sort (stable)")
        self._print("2. Quick sort (unstable)")
        algorithm = SORT_ALGORITHM_MENU.get(self._ask("Your choice: "))

        self._print("\nChoose sort criterion:")
        self._print("1. Price (ascending)")
        self._print("2. Duration (ascending)")
        self._print("3. Stopovers (ascending)")
        self._print("4. Combination (price, duration, stopovers)")
        comparator = COMPARATOR_MENU.get(self._ask("Your choice: "))

        if algorithm is None or comparator is None:
            self._print("Invalid selection!")
            return

        sorted_routes = self._planner.sort_routes(route_ids, algorithm, comparator)
        self._print(f"\nSorted routes ({algorithm} sort by {comparator}):")
        for route in sorted_routes:
            self._print(str(route))

    def handle_search(self) -> None:
        """Menu action "Search": origin, destination, airline, flight number."""
        self._print("\n--- SEARCH ---")
        self._print("1. By origin")
        self._print("2. By destination")
        self._print("3. By airline")
        self._print("4. By flight number")
        choice = self._ask("Your choice: ")

        if choice in ("1", "2"):
            code = self._ask("IATA code: ")
            if choice == "1":
                result = self._planner.search_by_origin(code)
                direction = "Departures"
            else:
                result = self._planner.search_by_destination(code)
                direction = "Arrivals"

            if result.airport is None:
                self._print(f"Airport {code.upper()} not found!")
                return
            self._print(f"\n{result.airport}")
            self._print(f"{direction} ({len(result.flights)}):")
            for flight in result.flights:
                self._print(f"  {flight}")

        elif choice == "3":
            airline = self._ask("Airline: ")
            flights = self._planner.search_by_airline(airline)
            if not flights:
                self._print(f"No flights for airline '{airline}' found!")
                return
            self._print(f"\n{len(flights)} flight(s) found:")
            for flight in flights:
                self._print(f"  {flight}")

        elif choice == "4":
            number = self._ask("Flight number: ")
            flight = self._planner.search_by_flight_number(number)
            if flight is None:
                self._print(f"Flight {number.upper()} not found!")
                return
            self._print(f"\n{flight}")

        else:
            self._print("Invalid selection!")

    def handle_save_routes(self) -> None:
        """Menu action "Save routes": write the session routes to CSV."""
        self._print("\n--- SAVE ROUTES ---")

        if not self._planner.saved_routes:
            self._print("No routes to save!")
            return

        try:
            count = self._planner.save_routes()
        except RouteStoreError as e:
            self._print(f"Error while saving routes: {e}")
            return

        self._print(f"{count} route(s) saved.")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plan routes through a flight network")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Config.DATA_DIR,
        help="Directory with airports.csv, flights.csv and routes.csv",
    )
    parser.add_argument(
        "--log-level",
        default=Config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for console output",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the flight planner console.

    Loads the network, then runs the interactive menu.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)
    setup_logging(args.log_level, Config.LOG_FILE)
    logger.info("Flight Planner starting (data: %s)", args.data_dir)

    try:
        planner = FlightPlanner(data_dir=args.data_dir)
        report = planner.load()
    except (NetworkNotInitializedError, RouteStoreError) as e:
        logger.critical("Could not load flight data: %s", e)
        return 1

    if report is not None:
        print(
            f"Loaded {report.airports} airports and {report.flights_loaded} flights"
            f" ({report.flights_skipped} skipped), "
            f"{len(planner.saved_routes)} saved route(s)."
        )

    try:
        Menu(planner).start()
    except KeyboardInterrupt:
        logger.info("Planner stopped by user")
    finally:
        planner.shutdown()

    return 0


if __name__ == "__main__":
    sys.exit(main())
