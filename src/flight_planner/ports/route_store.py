"""
Route Store port interface.

Defines the contract for persisting computed routes and reading back
routes saved in earlier sessions.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from src.flight_planner.schemas.route import Route


class RouteStoreError(Exception):
    """Raised when routes cannot be written to or read from the store."""

    pass


class RouteStore(ABC):
    """
    Abstract interface for route persistence.

    Implementations:
    - CsvRouteStore: routes.csv file
    """

    @abstractmethod
    def load_routes(self) -> List[Route]:
        """
        Return previously saved routes.

        A store without saved routes returns an empty list.
        """
        ...

    @abstractmethod
    def save_routes(self, routes: Sequence[Route]) -> None:
        """
        Persist routes, replacing earlier content.

        Raises:
            RouteStoreError: If the routes cannot be written.
        """
        ...
