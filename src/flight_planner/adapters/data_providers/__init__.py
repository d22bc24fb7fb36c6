"""
Data provider adapters.

Concrete implementations of NetworkDataProvider for different sources.
"""

from src.flight_planner.adapters.data_providers.csv_provider import CsvDataProvider

__all__ = ["CsvDataProvider"]
