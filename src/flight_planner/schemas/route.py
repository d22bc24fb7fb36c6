"""
Route result schemas.

Defines the output contract of the route search: an immutable route
record with cached aggregates, plus the Pandera contract for the
tabular route format used by persistence.
"""

from dataclasses import dataclass, replace
from typing import Sequence

import pandera as pa
from pandera.typing import Series

from src.flight_planner.schemas.flight import Flight

FLIGHT_IDS_SEPARATOR = "-"


class RouteSchema(pa.DataFrameModel):
    """
    Tabular contract for saved routes.

    Each row is one route; the flights column holds flight ids joined by
    FLIGHT_IDS_SEPARATOR in travel order (e.g., '12-7-31').
    """

    id: Series[int] = pa.Field(ge=0, description="Route identifier")
    flights: Series[str] = pa.Field(
        nullable=False,
        str_matches=r"^\d+(-\d+)*$",
        description="Flight ids in travel order, dash separated",
    )
    total_duration: Series[int] = pa.Field(ge=0, alias="totalDuration")
    total_price: Series[float] = pa.Field(ge=0, alias="totalPrice")
    stopovers: Series[int] = pa.Field(ge=0)

    class Config:
        strict = False
        coerce = True
        name = "RouteSchema"
        ordered = True


@dataclass(frozen=True)
class Route:
    """
    Immutable representation of a complete route.

    Aggregates are computed once when the route is packaged and never
    change afterwards.

    Attributes:
        route_id: Identifier assigned by the caller (session or file).
        flight_ids: Flight ids in travel order.
        total_duration: Sum of flight durations in minutes.
        total_price: Sum of flight prices.
        stopovers: Number of intermediate landings (flights - 1, min 0).
    """

    route_id: int
    flight_ids: tuple[int, ...]
    total_duration: int
    total_price: float
    stopovers: int

    @property
    def num_flights(self) -> int:
        """Number of flights in the route."""
        return len(self.flight_ids)

    @property
    def flight_ids_label(self) -> str:
        """Flight ids joined for display and persistence (e.g., '3-8')."""
        return FLIGHT_IDS_SEPARATOR.join(str(i) for i in self.flight_ids)

    @classmethod
    def from_flights(cls, route_id: int, flights: Sequence[Flight]) -> "Route":
        """
        Package an ordered flight sequence into a Route.

        Args:
            route_id: Identifier for the new route.
            flights: Flights in travel order. An empty sequence yields a
                route with zero duration, price and stopovers.

        Returns:
            Route with aggregates summed over the flights.
        """
        return cls(
            route_id=route_id,
            flight_ids=tuple(f.flight_id for f in flights),
            total_duration=sum(f.duration for f in flights),
            total_price=float(sum(f.price for f in flights)),
            stopovers=max(0, len(flights) - 1),
        )

    def with_id(self, route_id: int) -> "Route":
        """Create a copy of this route under a new identifier."""
        return replace(self, route_id=route_id)

    def __str__(self) -> str:
        return (
            f"Route {self.route_id}: {self.num_flights} flight(s) | "
            f"{self.total_duration} min | EUR {self.total_price:.2f} | "
            f"{self.stopovers} stopover(s) | Flights: {self.flight_ids_label}"
        )
