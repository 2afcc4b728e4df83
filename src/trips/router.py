from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
from src.database import get_db
from src.enums import TransportMode, TripSort
from src.exceptions import MissingRouteParameters, InvalidTransportMode
from src.trips.schemas import Trip, Connection, DatePrice, TripSearch
from src.trips.service import TripService
from src.trips.journey_service import ConnectionService
from src.trips.utils import day_of_week

router = APIRouter()

def parse_types(types: Optional[str] = Query(None, description="Comma separated modes, e.g. ferry,bus")) -> Optional[List[TransportMode]]:
    """Split the comma separated `types` parameter into transport modes"""
    if not types:
        return None
    try:
        return [TransportMode(value.strip()) for value in types.split(",") if value.strip()]
    except ValueError:
        raise InvalidTransportMode(types)

@router.get("", response_model=List[Trip])
def search_trips(
    origin: Optional[str] = Query(None, description="Departure city"),
    destination: Optional[str] = Query(None, description="Arrival city"),
    modes: Optional[List[TransportMode]] = Depends(parse_types),
    travel_date: Optional[date] = Query(None, alias="date", description="Travel date (YYYY-MM-DD)"),
    min_price: Optional[int] = Query(None, alias="minPrice", ge=0, description="Minimum price in cents"),
    max_price: Optional[int] = Query(None, alias="maxPrice", ge=0, description="Maximum price in cents"),
    sort: Optional[TripSort] = Query(None, description="Sort by price, departure or duration"),
    db: Session = Depends(get_db)
):
    """Search trips with filters"""
    search = TripSearch(
        origin=origin,
        destination=destination,
        types=modes,
        day_of_week=day_of_week(travel_date) if travel_date else None,
        min_price=min_price,
        max_price=max_price
    )
    
    return TripService(db).search_trips(search, sort=sort)

@router.get("/connections", response_model=List[Connection])
def find_connections(
    origin: Optional[str] = Query(None, description="Departure city"),
    destination: Optional[str] = Query(None, description="Arrival city"),
    travel_date: Optional[date] = Query(None, alias="date", description="Travel date (YYYY-MM-DD)"),
    db: Session = Depends(get_db)
):
    """Find one-transfer itineraries between two cities"""
    if not origin or not destination:
        raise MissingRouteParameters()
    
    return ConnectionService(db).find_connections(origin, destination, travel_date)

@router.get("/prices-by-date", response_model=List[DatePrice])
def get_prices_by_date(
    origin: Optional[str] = Query(None, description="Departure city"),
    destination: Optional[str] = Query(None, description="Arrival city"),
    start_date: date = Query(..., alias="startDate", description="First day (YYYY-MM-DD)"),
    end_date: date = Query(..., alias="endDate", description="Last day, inclusive (YYYY-MM-DD)"),
    db: Session = Depends(get_db)
):
    """Lowest price per day for a route over a date range"""
    if not origin or not destination:
        raise MissingRouteParameters()
    
    return TripService(db).get_prices_by_date(origin, destination, start_date, end_date)

@router.get("/{trip_id}", response_model=Trip)
def get_trip(trip_id: str, db: Session = Depends(get_db)):
    """Get trip details by ID"""
    return TripService(db).get_trip(trip_id)
