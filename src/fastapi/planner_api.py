from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

# Load environment variables from .env file
load_dotenv()

from src.flight_planner.application import FlightPlanner
from src.flight_planner.ports.route_store import RouteStoreError
from src.flight_planner.schemas.route import Route
from src.route_search.criteria import Criterion
from src.route_search.exceptions import ValidationError

app = FastAPI(title="Flight Route Planner API")

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_planner() -> FlightPlanner:
    """Shared planner for all requests (overridden in tests)."""
    return FlightPlanner()


# --- Pydantic Schemas (The JSON Contract) ---


class AirportSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    airport_id: int
    iata: str
    city: str
    country: str
    latitude: float
    longitude: float


class FlightSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    flight_id: int
    origin: str
    destination: str
    airline: str
    flight_number: str
    duration: int
    price: float
    departure_time: str
    arrival_minute: int  # Captures @property

    @classmethod
    def from_flight(cls, flight) -> "FlightSchema":
        return cls(
            flight_id=flight.flight_id,
            origin=flight.origin,
            destination=flight.destination,
            airline=flight.airline,
            flight_number=flight.flight_number,
            duration=flight.duration,
            price=flight.price,
            departure_time=flight.departure_time.strftime("%H:%M"),
            arrival_minute=flight.arrival_minute,
        )


class RouteSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    route_id: int
    flight_ids: List[int]
    total_duration: int
    total_price: float
    stopovers: int
    num_flights: int  # Captures @property


class RouteDetailSchema(RouteSchema):
    flights: List[FlightSchema]


class AirportFlightsSchema(BaseModel):
    airport: AirportSchema
    flights: List[FlightSchema]


class RouteRequest(BaseModel):
    origin: str = Field(min_length=3, max_length=3)
    destination: str = Field(min_length=3, max_length=3)
    criterion: str = Criterion.PRICE.value


class SortRequest(BaseModel):
    route_ids: Optional[List[int]] = None
    algorithm: str = "merge"
    comparator: str = "combination"


class SaveResponse(BaseModel):
    saved: int


# --- API Endpoints ---


def _route_detail(planner: FlightPlanner, route: Route) -> RouteDetailSchema:
    return RouteDetailSchema(
        route_id=route.route_id,
        flight_ids=list(route.flight_ids),
        total_duration=route.total_duration,
        total_price=route.total_price,
        stopovers=route.stopovers,
        num_flights=route.num_flights,
        flights=[FlightSchema.from_flight(f) for f in planner.route_flights(route)],
    )


@app.post("/routes", response_model=RouteDetailSchema)
def plan_route(request: RouteRequest, planner: FlightPlanner = Depends(get_planner)):
    try:
        route = planner.find_route(request.origin, request.destination, request.criterion)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if route is None:
        raise HTTPException(status_code=404, detail="No route found")

    return _route_detail(planner, route)


@app.get("/routes", response_model=List[RouteSchema])
def list_routes(planner: FlightPlanner = Depends(get_planner)):
    return [RouteSchema.model_validate(r) for r in planner.saved_routes]


@app.post("/routes/sort", response_model=List[RouteSchema])
def sort_routes(request: SortRequest, planner: FlightPlanner = Depends(get_planner)):
    try:
        routes = planner.sort_routes(
            request.route_ids, request.algorithm, request.comparator
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return [RouteSchema.model_validate(r) for r in routes]


@app.post("/routes/save", response_model=SaveResponse)
def save_routes(planner: FlightPlanner = Depends(get_planner)):
    try:
        return SaveResponse(saved=planner.save_routes())
    except RouteStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/routes/{route_id}", response_model=RouteDetailSchema)
def get_route(route_id: int, planner: FlightPlanner = Depends(get_planner)):
    route = planner.get_route(route_id)
    if route is None:
        raise HTTPException(status_code=404, detail=f"Route {route_id} not found")
    return _route_detail(planner, route)


@app.get("/airports", response_model=List[AirportSchema])
def list_airports(planner: FlightPlanner = Depends(get_planner)):
    return [AirportSchema.model_validate(a) for a in planner.get_available_airports()]


@app.get("/airports/{iata}", response_model=AirportSchema)
def get_airport(iata: str, planner: FlightPlanner = Depends(get_planner)):
    airport = planner.get_airport(iata)
    if airport is None:
        raise HTTPException(status_code=404, detail=f"Airport {iata.upper()} not found")
    return AirportSchema.model_validate(airport)


@app.get("/airports/{iata}/departures", response_model=AirportFlightsSchema)
def get_departures(iata: str, planner: FlightPlanner = Depends(get_planner)):
    result = planner.search_by_origin(iata)
    if result.airport is None:
        raise HTTPException(status_code=404, detail=f"Airport {iata.upper()} not found")
    return AirportFlightsSchema(
        airport=AirportSchema.model_validate(result.airport),
        flights=[FlightSchema.from_flight(f) for f in result.flights],
    )


@app.get("/airports/{iata}/arrivals", response_model=AirportFlightsSchema)
def get_arrivals(iata: str, planner: FlightPlanner = Depends(get_planner)):
    result = planner.search_by_destination(iata)
    if result.airport is None:
        raise HTTPException(status_code=404, detail=f"Airport {iata.upper()} not found")
    return AirportFlightsSchema(
        airport=AirportSchema.model_validate(result.airport),
        flights=[FlightSchema.from_flight(f) for f in result.flights],
    )


@app.get("/flights", response_model=List[FlightSchema])
def search_flights(airline: str = "", planner: FlightPlanner = Depends(get_planner)):
    """
    Flights whose airline name contains the given term.

    An empty term matches every flight.
    """
    return [FlightSchema.from_flight(f) for f in planner.search_by_airline(airline)]


@app.get("/flights/{flight_number}", response_model=FlightSchema)
def get_flight(flight_number: str, planner: FlightPlanner = Depends(get_planner)):
    flight = planner.search_by_flight_number(flight_number)
    if flight is None:
        raise HTTPException(
            status_code=404, detail=f"Flight {flight_number.upper()} not found"
        )
    return FlightSchema.from_flight(flight)
