"""
Configuration module for the Flight Planner application.

This module handles loading environment variables and provides
centralized configuration for data locations and logging.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """
    Application configuration class.

    Attributes:
        DATA_DIR: Directory holding the CSV files.
        AIRPORTS_FILE: Airports file name inside DATA_DIR.
        FLIGHTS_FILE: Flights file name inside DATA_DIR.
        ROUTES_FILE: Saved routes file name inside DATA_DIR.
        LOG_LEVEL: Root log level for entry points.
        LOG_FILE: Optional log file (console only when unset).
        STRICT_FLIGHT_IDS: Reject duplicate flight ids while loading.
    """

    DATA_DIR: Path = Path(os.getenv("FLIGHT_PLANNER_DATA_DIR", "data"))
    AIRPORTS_FILE: str = os.getenv("FLIGHT_PLANNER_AIRPORTS_FILE", "airports.csv")
    FLIGHTS_FILE: str = os.getenv("FLIGHT_PLANNER_FLIGHTS_FILE", "flights.csv")
    ROUTES_FILE: str = os.getenv("FLIGHT_PLANNER_ROUTES_FILE", "routes.csv")

    LOG_LEVEL: str = os.getenv("FLIGHT_PLANNER_LOG_LEVEL", "INFO").upper()
    LOG_FILE: Optional[str] = os.getenv("FLIGHT_PLANNER_LOG_FILE") or None

    STRICT_FLIGHT_IDS: bool = _env_flag("FLIGHT_PLANNER_STRICT_FLIGHT_IDS")

    @classmethod
    def airports_path(cls, data_dir: Optional[Path] = None) -> Path:
        return Path(data_dir or cls.DATA_DIR) / cls.AIRPORTS_FILE

    @classmethod
    def flights_path(cls, data_dir: Optional[Path] = None) -> Path:
        return Path(data_dir or cls.DATA_DIR) / cls.FLIGHTS_FILE

    @classmethod
    def routes_path(cls, data_dir: Optional[Path] = None) -> Path:
        return Path(data_dir or cls.DATA_DIR) / cls.ROUTES_FILE
