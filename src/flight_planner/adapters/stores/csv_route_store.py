"""
CSV Route Store - routes.csv persistence.

Format (one route per row, flight ids dash separated):

    id,flights,totalDuration,totalPrice,stopovers
    1,3-8,420,380.00,1
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from src.flight_planner.adapters.data_providers.csv_provider import (
    read_csv_records,
    validate_records,
)
from src.flight_planner.config import Config
from src.flight_planner.ports.route_store import RouteStore, RouteStoreError
from src.flight_planner.schemas.route import FLIGHT_IDS_SEPARATOR, Route, RouteSchema

logger = logging.getLogger(__name__)

ROUTE_COLUMNS = ["id", "flights", "totalDuration", "totalPrice", "stopovers"]


class CsvRouteStore(RouteStore):
    """
    Route store backed by a single CSV file.

    Attributes:
        _path: Location of the routes CSV file.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @classmethod
    def from_directory(cls, data_dir: Optional[Path] = None) -> "CsvRouteStore":
        """Create a store for the configured routes file inside data_dir."""
        return cls(Config.routes_path(data_dir))

    @property
    def path(self) -> Path:
        return self._path

    def load_routes(self) -> List[Route]:
        """
        Read saved routes; a missing file means no routes were saved yet.

        Rows that fail validation are skipped with a warning.
        """
        try:
            df = read_csv_records(self._path)
        except (OSError, pd.errors.ParserError) as e:
            raise RouteStoreError(f"Failed to read routes from {self._path}: {e}") from e

        if df is None:
            logger.info("No saved routes at %s", self._path)
            return []

        df = validate_records(df, RouteSchema, self._path.name)

        routes = [
            Route(
                route_id=int(row.id),
                flight_ids=tuple(
                    int(i) for i in str(row.flights).split(FLIGHT_IDS_SEPARATOR)
                ),
                total_duration=int(row.totalDuration),
                total_price=float(row.totalPrice),
                stopovers=int(row.stopovers),
            )
            for row in df.itertuples(index=False)
        ]

        logger.info("Loaded %d saved routes from %s", len(routes), self._path)
        return routes

    def save_routes(self, routes: Sequence[Route]) -> None:
        """
        Write routes to the CSV file, replacing its content.

        Raises:
            RouteStoreError: If the file cannot be written.
        """
        df = pd.DataFrame(
            [
                {
                    "id": route.route_id,
                    "flights": route.flight_ids_label,
                    "totalDuration": route.total_duration,
                    "totalPrice": route.total_price,
                    "stopovers": route.stopovers,
                }
                for route in routes
            ],
            columns=ROUTE_COLUMNS,
        )

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(self._path, index=False, float_format="%.2f")
        except OSError as e:
            logger.error("Error writing routes to %s: %s", self._path, e)
            raise RouteStoreError(f"Failed to write routes to {self._path}: {e}") from e

        logger.info("Saved %d routes to %s", len(routes), self._path)
