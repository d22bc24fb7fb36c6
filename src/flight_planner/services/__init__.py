"""
Domain services for the Flight Planner.

Services orchestrate the interaction between ports (repositories,
algorithms, stores) and the route planning session.
"""

from src.flight_planner.services.route_planner_service import RoutePlannerService
from src.flight_planner.services.search_service import SearchResult, SearchService

__all__ = ["RoutePlannerService", "SearchResult", "SearchService"]
