"""
Network Data Provider port interface.

Defines the abstract contract for data sources that supply the airports
and flights a flight network is built from.
"""

from abc import ABC, abstractmethod
from typing import List

from src.flight_planner.schemas.airport import Airport
from src.flight_planner.schemas.flight import Flight


class NetworkDataProvider(ABC):
    """
    Abstract interface for network data providers.

    Providers validate records at the boundary (field parsing, value
    ranges) and hand over plain entity lists. Endpoint integrity of flights
    is checked later by the network itself.

    Implementations:
    - CsvDataProvider: airports.csv / flights.csv files
    """

    @abstractmethod
    def get_airports(self) -> List[Airport]:
        """
        Return all valid airport records.

        Malformed records are skipped, never raised.
        """
        ...

    @abstractmethod
    def get_flights(self) -> List[Flight]:
        """
        Return all valid flight records.

        Malformed records are skipped, never raised.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "CSV files").
        """
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True.
        """
        return True
