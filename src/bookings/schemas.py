from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from src.enums import BookingStatus

class BookingCreateRequest(BaseModel):
    """Booking payload; the signed-in user, if any, comes from the bearer token"""
    trip_id: str
    passenger_name: str = Field(..., min_length=1)
    passenger_email: EmailStr
    passenger_phone: Optional[str] = None
    passengers: int = Field(1, ge=1, le=10)
    travel_date: datetime
    total_price: Optional[int] = Field(None, ge=0)
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class Booking(BaseModel):
    id: str
    trip_id: str
    user_id: Optional[str] = None
    passenger_name: str
    passenger_email: str
    passenger_phone: Optional[str] = None
    passengers: int
    total_price: int
    booking_date: datetime
    travel_date: datetime
    status: BookingStatus
    miles_earned: Optional[int] = 0
    
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
