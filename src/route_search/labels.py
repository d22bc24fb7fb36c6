from dataclasses import dataclass
from typing import Optional

from src.flight_planner.schemas.flight import Flight


@dataclass(frozen=True, eq=False)
class SearchState:
    """
    Represents a partial route in the best-first search space.

    Each SearchState tracks:
    - Current position (airport)
    - Number of flights taken so far
    - Cost of the path so far under the active criterion
    - Chain back to the previous state (for path reconstruction)
    - The flight that led to this state (None for the start state)

    Note: eq=False keeps identity semantics; two states reaching the same
    airport along different paths are distinct.
    """
    airport: str
    num_flights: int
    cost: float
    prev: Optional["SearchState"] = None
    flight: Optional[Flight] = None

    @property
    def last_flight(self) -> Optional[Flight]:
        """Flight taken to reach this state (None at the origin)."""
        return self.flight

    @property
    def dedup_key(self) -> tuple[str, int]:
        """Settlement key: same airport reached with the same flight count."""
        return self.airport, self.num_flights
