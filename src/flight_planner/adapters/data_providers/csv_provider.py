"""
CSV Data Provider - CSV files to network entities.

Reads airports and flights from CSV files with pandas, validates them
against the Pandera schemas in lazy mode and converts the surviving rows
to frozen dataclasses. A malformed record is logged and skipped; it never
aborts the whole load.
"""

import logging
from datetime import time
from pathlib import Path
from typing import Iterable, List, Optional, Type

import pandas as pd
import pandera as pa
from pandera.errors import SchemaErrors

from src.flight_planner.config import Config
from src.flight_planner.ports.network_data_provider import NetworkDataProvider
from src.flight_planner.schemas.airport import Airport, AirportSchema
from src.flight_planner.schemas.flight import Flight, FlightSchema

logger = logging.getLogger(__name__)


def read_csv_records(
    path: Path,
    upper_columns: Iterable[str] = (),
) -> Optional[pd.DataFrame]:
    """
    Read a CSV file as strings, skipping lines with a wrong field count.

    Args:
        path: CSV file with a header row.
        upper_columns: Columns normalized to upper case (IATA codes).

    Returns:
        DataFrame of stripped string values, or None if the file is missing.
        An empty file yields an empty DataFrame.
    """
    if not path.exists():
        return None

    def _skip_bad_line(fields: List[str]) -> None:
        logger.warning("%s: skipping line with %d fields: %s", path.name, len(fields), fields)
        return None

    try:
        df = pd.read_csv(
            path,
            dtype=str,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=_skip_bad_line,
        )
    except pd.errors.EmptyDataError:
        logger.warning("%s is empty", path.name)
        return pd.DataFrame()

    df.columns = [str(c).strip() for c in df.columns]

    for col in df.columns:
        df[col] = df[col].str.strip()
    for col in upper_columns:
        if col in df.columns:
            df[col] = df[col].str.upper()

    return df


def validate_records(
    df: pd.DataFrame,
    schema: Type[pa.DataFrameModel],
    source: str,
) -> pd.DataFrame:
    """
    Validate rows against a schema, dropping the rows that fail.

    Uses lazy validation so every failing row is reported in one pass.
    Structural problems (e.g., a missing column) cannot be fixed by
    dropping rows; they are logged and yield an empty DataFrame.
    A DataFrame without columns (an empty file) is returned unchanged.

    Args:
        df: Raw string DataFrame.
        schema: Pandera DataFrameModel to validate against.
        source: Name used in log messages (usually the file name).

    Returns:
        Validated (coerced) DataFrame containing only valid rows.
    """
    if df.columns.empty:
        return df

    try:
        return schema.validate(df, lazy=True)
    except SchemaErrors as exc:
        failure_cases = exc.failure_cases
        bad_index = sorted(
            {int(i) for i in failure_cases["index"].dropna().unique()}
        )

    if not bad_index:
        logger.error(
            "%s does not match %s: %s",
            source,
            schema.__name__,
            failure_cases[["column", "check"]].drop_duplicates().to_dict("records"),
        )
        return df.iloc[0:0]

    for idx in bad_index:
        logger.warning("%s: skipping invalid record %s", source, df.loc[idx].to_dict())

    remaining = df.drop(index=bad_index)
    try:
        return schema.validate(remaining, lazy=True)
    except SchemaErrors as exc:
        logger.error("%s still invalid after dropping rows: %s", source, exc)
        return df.iloc[0:0]


def parse_time_of_day(value: str) -> time:
    """Parse 'HH:MM' or 'HH:MM:SS' into a time of day."""
    return time.fromisoformat(value)


class CsvDataProvider(NetworkDataProvider):
    """
    Data provider for airports.csv and flights.csv.

    Expected headers:
    - airports: id,iata,city,country,latitude,longitude
    - flights: id,origin,destination,airline,flight_number,duration,price,departure_time

    Attributes:
        _airports_path: Path to the airports CSV file.
        _flights_path: Path to the flights CSV file.
    """

    def __init__(self, airports_path: Path, flights_path: Path) -> None:
        """
        Initialize the CSV data provider.

        Args:
            airports_path: Airports CSV file.
            flights_path: Flights CSV file.
        """
        self._airports_path = Path(airports_path)
        self._flights_path = Path(flights_path)

    @classmethod
    def from_directory(cls, data_dir: Optional[Path] = None) -> "CsvDataProvider":
        """Create a provider for the configured file names inside data_dir."""
        return cls(
            airports_path=Config.airports_path(data_dir),
            flights_path=Config.flights_path(data_dir),
        )

    @property
    def name(self) -> str:
        return "CSV files"

    @property
    def is_available(self) -> bool:
        return self._airports_path.exists() and self._flights_path.exists()

    def get_airports(self) -> List[Airport]:
        """
        Read and validate airports.

        Returns:
            Valid airports in file order; empty if the file is missing.
        """
        df = read_csv_records(self._airports_path, upper_columns=("iata",))
        if df is None:
            logger.error("Airports file not found: %s", self._airports_path)
            return []

        df = validate_records(df, AirportSchema, self._airports_path.name)

        airports = [
            Airport(
                airport_id=int(row.id),
                iata=str(row.iata),
                city=str(row.city),
                country=str(row.country),
                latitude=float(row.latitude),
                longitude=float(row.longitude),
            )
            for row in df.itertuples(index=False)
        ]

        logger.info("Loaded %d airports from %s", len(airports), self._airports_path)
        return airports

    def get_flights(self) -> List[Flight]:
        """
        Read and validate flights.

        Endpoints are not checked here; the network rejects flights with
        unknown airports when they are inserted.

        Returns:
            Valid flights in file order; empty if the file is missing.
        """
        df = read_csv_records(
            self._flights_path, upper_columns=("origin", "destination")
        )
        if df is None:
            logger.error("Flights file not found: %s", self._flights_path)
            return []

        df = validate_records(df, FlightSchema, self._flights_path.name)

        flights = [
            Flight(
                flight_id=int(row.id),
                origin=str(row.origin),
                destination=str(row.destination),
                airline=str(row.airline),
                flight_number=str(row.flight_number),
                duration=int(row.duration),
                price=float(row.price),
                departure_time=parse_time_of_day(str(row.departure_time)),
            )
            for row in df.itertuples(index=False)
        ]

        logger.info("Loaded %d flights from %s", len(flights), self._flights_path)
        return flights
