from pydantic import BaseModel, Field, computed_field, field_serializer
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import date, time
from src.enums import TransportMode, DayOfWeek
from src.trips.utils import format_duration

class TripBase(BaseModel):
    operator_id: str
    origin: str
    destination: str
    departure: time
    arrival: time
    duration_minutes: int = Field(..., ge=0)
    price: int = Field(..., ge=0)
    mode: TransportMode
    features: List[str] = []
    available_seats: int = Field(50, ge=0)
    days_of_week: List[DayOfWeek] = list(DayOfWeek)
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class Trip(TripBase):
    """Scheduled trip as returned by the API, with times rendered as HH:MM"""
    id: str
    
    @computed_field
    @property
    def duration(self) -> str:
        return format_duration(self.duration_minutes, pad=True)
    
    @field_serializer("departure", "arrival")
    def serialize_time(self, value: time) -> str:
        return value.strftime("%H:%M")
    
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class Connection(BaseModel):
    """A one-transfer itinerary"""
    legs: List[Trip]
    total_duration: str
    total_price: int
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class DatePrice(BaseModel):
    date: date
    lowest_price: int
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class TripSearch(BaseModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    types: Optional[List[TransportMode]] = None
    day_of_week: Optional[DayOfWeek] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
