from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from src.database import get_db
from src.auth.dependencies import get_current_user, get_optional_user
from src.models import User
from src.bookings.schemas import BookingCreateRequest, Booking
from src.bookings.booking_service import BookingService

router = APIRouter()

@router.post("/bookings", response_model=Booking, status_code=status.HTTP_201_CREATED)
def create_booking(
    request: BookingCreateRequest,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """Create a booking; signed-in users also earn miles"""
    return BookingService(db).create_booking(request, user=current_user)

@router.get("/bookings/{booking_id}", response_model=Booking)
def get_booking(booking_id: str, db: Session = Depends(get_db)):
    """Get booking details by ID"""
    return BookingService(db).get_booking(booking_id)

@router.put("/bookings/{booking_id}/cancel", response_model=Booking)
def cancel_booking(
    booking_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Cancel one of the current user's bookings"""
    return BookingService(db).cancel_booking(booking_id, current_user.id)

@router.get("/my-bookings", response_model=List[Booking])
def get_my_bookings(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get all bookings for the current user"""
    return BookingService(db).get_user_bookings(current_user.id)
