"""
Flight schemas.

Flights recur every day at the same departure time of day; there is no
date dimension. Times of day are handled as minutes after midnight by the
search engine.
"""

from dataclasses import dataclass
from datetime import time

import pandera as pa
from pandera.typing import Series

from src.flight_planner.schemas.airport import IATA_PATTERN

MINUTES_PER_DAY = 24 * 60

TIME_OF_DAY_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"


class FlightSchema(pa.DataFrameModel):
    """
    Tabular contract for flight records (one row per daily flight).

    departure_time stays a string here; conversion to datetime.time
    happens after validation.
    """

    id: Series[int] = pa.Field(ge=0, description="Numeric flight identifier")
    origin: Series[str] = pa.Field(
        nullable=False,
        str_matches=IATA_PATTERN,
        description="Departure airport IATA code",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_matches=IATA_PATTERN,
        description="Arrival airport IATA code",
    )
    airline: Series[str] = pa.Field(nullable=False)
    flight_number: Series[str] = pa.Field(nullable=False)
    duration: Series[int] = pa.Field(ge=0, description="Flight duration in minutes")
    price: Series[float] = pa.Field(ge=0, description="Ticket price")
    departure_time: Series[str] = pa.Field(
        nullable=False,
        str_matches=TIME_OF_DAY_PATTERN,
        description="Daily departure time of day (HH:MM or HH:MM:SS)",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightSchema"


def time_to_minutes(value: time) -> int:
    """Minutes after midnight for a time of day (seconds are dropped)."""
    return value.hour * 60 + value.minute


@dataclass(frozen=True)
class Flight:
    """
    Immutable daily flight (a directed edge of the flight network).

    Attributes:
        flight_id: Numeric identifier.
        origin: Departure airport IATA code.
        destination: Arrival airport IATA code.
        airline: Operating airline name.
        flight_number: Marketing flight number (e.g., 'OS101').
        duration: Block time in minutes.
        price: Ticket price.
        departure_time: Departure time of day, same every day.
    """

    flight_id: int
    origin: str
    destination: str
    airline: str
    flight_number: str
    duration: int
    price: float
    departure_time: time

    @property
    def departure_minute(self) -> int:
        """Departure time in minutes after midnight."""
        return time_to_minutes(self.departure_time)

    @property
    def arrival_minute(self) -> int:
        """Arrival time of day in minutes after midnight (wraps past midnight)."""
        return (self.departure_minute + self.duration) % MINUTES_PER_DAY

    def __str__(self) -> str:
        return (
            f"{self.airline} {self.flight_number}: {self.origin} -> "
            f"{self.destination} | {self.duration} min | EUR {self.price:.2f} | "
            f"Dep: {self.departure_time.strftime('%H:%M')}"
        )
