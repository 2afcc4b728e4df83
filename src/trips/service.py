from datetime import date, timedelta
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from src.config import settings
from src.enums import TripSort
from src.exceptions import TripNotFound, InvalidDateRange
from src.models import Trip
from src.trips.schemas import TripSearch, DatePrice
from src.trips.utils import day_of_week


SORT_KEYS = {
    TripSort.PRICE: lambda trip: trip.price,
    TripSort.DEPARTURE: lambda trip: trip.departure,
    TripSort.DURATION: lambda trip: trip.duration_minutes,
}

class TripService:
    """Catalog queries over scheduled trips"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def search_trips(self, search: TripSearch, sort: Optional[TripSort] = None) -> List[Trip]:
        """Filter trips by route, mode, weekday and price range"""
        query = self.db.query(Trip)
        
        if search.origin:
            query = query.filter(Trip.origin == search.origin)
        
        if search.destination:
            query = query.filter(Trip.destination == search.destination)
        
        if search.types:
            query = query.filter(Trip.mode.in_([mode.value for mode in search.types]))
        
        if search.min_price is not None:
            query = query.filter(Trip.price >= search.min_price)
        
        if search.max_price is not None:
            query = query.filter(Trip.price <= search.max_price)
        
        trips = query.all()
        
        # days_of_week is a JSON array, membership is checked in Python
        if search.day_of_week:
            trips = [t for t in trips if search.day_of_week.value in t.days_of_week]
        
        if sort:
            trips = sorted(trips, key=SORT_KEYS[sort])
        
        return trips
    
    def get_trip(self, trip_id: str) -> Trip:
        trip = self.db.query(Trip).filter(Trip.id == trip_id).first()
        if not trip:
            raise TripNotFound()
        return trip
    
    def get_route_trips(self, origin: str, destination: str) -> List[Trip]:
        return self.db.query(Trip).filter(
            Trip.origin == origin,
            Trip.destination == destination
        ).all()
    
    def get_prices_by_date(
        self,
        origin: str,
        destination: str,
        start_date: date,
        end_date: date
    ) -> List[DatePrice]:
        """Lowest fare per calendar day; days with no running trip are omitted"""
        
        if end_date < start_date:
            raise InvalidDateRange("endDate must not be before startDate")
        
        span_days = (end_date - start_date).days + 1
        if span_days > settings.MAX_PRICE_CALENDAR_DAYS:
            raise InvalidDateRange(
                f"Date range cannot exceed {settings.MAX_PRICE_CALENDAR_DAYS} days"
            )
        
        route_trips = self.get_route_trips(origin, destination)
        if not route_trips:
            return []
        
        # Lowest price per weekday, computed once for the whole range
        lowest_by_day: Dict[str, int] = {}
        for trip in route_trips:
            for day in trip.days_of_week:
                current = lowest_by_day.get(day)
                if current is None or trip.price < current:
                    lowest_by_day[day] = trip.price
        
        prices = []
        for offset in range(span_days):
            current_date = start_date + timedelta(days=offset)
            lowest = lowest_by_day.get(day_of_week(current_date).value)
            if lowest is not None:
                prices.append(DatePrice(date=current_date, lowest_price=lowest))
        
        return prices
