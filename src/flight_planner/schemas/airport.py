"""
Airport schemas.

Defines the in-memory airport entity used by the flight network and the
Pandera contract for tabular airport records.
"""

from dataclasses import dataclass

import pandera as pa
from pandera.typing import Series

IATA_PATTERN = r"^[A-Z]{3}$"


class AirportSchema(pa.DataFrameModel):
    """
    Tabular contract for airport records (one row per airport).

    Validated at the ingestion boundary, not per object.
    """

    id: Series[int] = pa.Field(
        ge=0,
        description="Numeric airport identifier",
    )
    iata: Series[str] = pa.Field(
        nullable=False,
        str_matches=IATA_PATTERN,
        description="Three-letter IATA code (e.g., 'VIE', 'JFK')",
    )
    city: Series[str] = pa.Field(nullable=False)
    country: Series[str] = pa.Field(nullable=False)
    latitude: Series[float] = pa.Field(ge=-90, le=90)
    longitude: Series[float] = pa.Field(ge=-180, le=180)

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"


@dataclass(frozen=True)
class Airport:
    """
    Immutable airport (a vertex of the flight network).

    Airports are keyed by IATA code inside the network.
    """

    airport_id: int
    iata: str
    city: str
    country: str
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return (
            f"{self.iata} ({self.airport_id}) - {self.city}, {self.country} "
            f"[Lat: {self.latitude:.2f}, Lon: {self.longitude:.2f}]"
        )
