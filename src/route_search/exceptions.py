"""
Custom exceptions for the route_search module.

Provides a hierarchy of exceptions for clear error handling
and debugging of network building and route-finding operations.
"""


class RouteSearchError(Exception):
    """Base exception for all route_search module errors."""

    pass


class NetworkError(RouteSearchError):
    """Base exception for flight network integrity errors."""

    pass


class UnknownAirportError(NetworkError):
    """Raised when a flight references an airport that is not registered."""

    def __init__(self, airport: str, flight_id: int | None = None) -> None:
        self.airport = airport
        self.flight_id = flight_id
        if flight_id is None:
            message = f"Flight references unknown airport '{airport}'"
        else:
            message = f"Flight {flight_id} references unknown airport '{airport}'"
        super().__init__(message)


class DuplicateFlightError(NetworkError):
    """Raised in strict mode when a flight id is inserted twice."""

    def __init__(self, flight_id: int) -> None:
        self.flight_id = flight_id
        super().__init__(f"Flight id {flight_id} is already registered")


class ValidationError(RouteSearchError):
    """Base exception for input validation errors."""

    pass


class InvalidCriterionError(ValidationError):
    """Raised when an optimization criterion name is not recognized."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown optimization criterion: {value!r}")


class InvalidComparatorError(ValidationError):
    """Raised when a route comparator name is not recognized."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown route comparator: {value!r}")


class InvalidSortAlgorithmError(ValidationError):
    """Raised when a sort algorithm name is not recognized."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown sort algorithm: {value!r}")
