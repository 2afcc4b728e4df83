import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Time, Text, ForeignKey, JSON, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from src.database import Base
from src.enums import BookingStatus, TierLevel, ALL_DAYS

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def generate_id() -> str:
    return str(uuid.uuid4())

# ================================
# Users
# ================================
class User(Base):
    __tablename__ = "users"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    # Relationships
    bookings = relationship("Booking", back_populates="user")

# ================================
# Catalog: Operators & Trips
# ================================
class Operator(Base):
    __tablename__ = "operators"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(Text, nullable=False)
    mode = Column(String(20), nullable=False)  # ferry | bus
    logo = Column(Text)
    
    # Relationships
    trips = relationship("Trip", back_populates="operator")

class Trip(Base):
    __tablename__ = "trips"
    __table_args__ = (
        CheckConstraint("available_seats >= 0", name="ck_trips_available_seats"),
    )
    
    id = Column(String(36), primary_key=True, default=generate_id)
    operator_id = Column(String(36), ForeignKey("operators.id"), nullable=False, index=True)
    origin = Column(Text, nullable=False, index=True)
    destination = Column(Text, nullable=False, index=True)
    departure = Column(Time, nullable=False)
    arrival = Column(Time, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)  # minor currency units
    mode = Column(String(20), nullable=False)
    features = Column(JSON, nullable=False, default=list)
    available_seats = Column(Integer, nullable=False, default=50)
    days_of_week = Column(JSON, nullable=False, default=lambda: list(ALL_DAYS))
    
    # Relationships
    operator = relationship("Operator", back_populates="trips")
    bookings = relationship("Booking", back_populates="trip")

# ================================
# Bookings
# ================================
class Booking(Base):
    __tablename__ = "bookings"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), index=True)  # null for guest bookings
    passenger_name = Column(Text, nullable=False)
    passenger_email = Column(Text, nullable=False)
    passenger_phone = Column(Text)
    passengers = Column(Integer, nullable=False, default=1)
    total_price = Column(Integer, nullable=False)
    booking_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    travel_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(20), nullable=False, default=BookingStatus.CONFIRMED.value)
    miles_earned = Column(Integer, default=0)
    
    # Relationships
    trip = relationship("Trip", back_populates="bookings")
    user = relationship("User", back_populates="bookings")

# ================================
# Loyalty Miles
# ================================
class UserMiles(Base):
    __tablename__ = "user_miles"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), unique=True, nullable=False, index=True)
    total_miles = Column(Integer, nullable=False, default=0)
    lifetime_miles = Column(Integer, nullable=False, default=0)
    tier_level = Column(String(20), nullable=False, default=TierLevel.BRONZE.value)

class MilesTransaction(Base):
    __tablename__ = "miles_transactions"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), nullable=False, index=True)
    booking_id = Column(String(36), ForeignKey("bookings.id"))
    miles = Column(Integer, nullable=False)
    type = Column(String(20), nullable=False)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
