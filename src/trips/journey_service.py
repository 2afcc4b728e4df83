import logging
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from src.config import settings
from src.models import Trip
from src.trips.schemas import Connection, Trip as TripSchema
from src.trips.utils import day_of_week, format_duration, minutes_of_day

logger = logging.getLogger(__name__)

class ConnectionService:
    """Finds one-transfer itineraries when no direct trip covers a route"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def find_connections(
        self,
        origin: str,
        destination: str,
        travel_date: Optional[date] = None,
        limit: Optional[int] = None
    ) -> List[Connection]:
        """Pair trips leaving `origin` with trips reaching `destination` via a shared city"""
        
        if limit is None:
            limit = settings.CONNECTION_RESULT_LIMIT
        weekday = day_of_week(travel_date).value if travel_date else None
        
        from_origin = self._running_on(
            self.db.query(Trip).filter(Trip.origin == origin).all(), weekday
        )
        to_destination = self._running_on(
            self.db.query(Trip).filter(Trip.destination == destination).all(), weekday
        )
        
        connections = []
        for first_leg in from_origin:
            # Arrival measured from the departure day's midnight; an overnight
            # first leg lands past 1440 and cannot make a same-day departure
            arrival = minutes_of_day(first_leg.departure) + first_leg.duration_minutes
            
            for second_leg in to_destination:
                if second_leg.origin != first_leg.destination:
                    continue
                if minutes_of_day(second_leg.departure) <= arrival:
                    continue
                if minutes_of_day(second_leg.departure) <= minutes_of_day(first_leg.arrival):
                    continue
                
                connections.append(Connection(
                    legs=[TripSchema.model_validate(first_leg), TripSchema.model_validate(second_leg)],
                    total_duration=format_duration(
                        first_leg.duration_minutes + second_leg.duration_minutes
                    ),
                    total_price=first_leg.price + second_leg.price
                ))
        
        connections.sort(key=lambda c: c.total_price)
        logger.debug(
            "Found %d connections %s -> %s", len(connections), origin, destination
        )
        return connections[:limit]
    
    @staticmethod
    def _running_on(trips: List[Trip], weekday: Optional[str]) -> List[Trip]:
        if weekday is None:
            return trips
        return [t for t in trips if weekday in t.days_of_week]
