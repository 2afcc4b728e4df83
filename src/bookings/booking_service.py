import logging
from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session
from src.config import settings
from src.enums import BookingStatus
from src.exceptions import BookingNotFound, InsufficientSeats, NotBookingOwner, TripNotFound
from src.models import Booking, Trip, User
from src.bookings.schemas import BookingCreateRequest
from src.miles.service import MilesService

logger = logging.getLogger(__name__)

class BookingService:
    """Service for creating, reading and cancelling trip bookings"""
    
    def __init__(self, db: Session):
        self.db = db
        self.miles_service = MilesService(db)
    
    def create_booking(
        self,
        request: BookingCreateRequest,
        user: Optional[User] = None
    ) -> Booking:
        """Book seats on a trip
        
        The seat decrement is a conditional update that only matches while
        enough seats remain, so the booking row and the decrement are
        committed together or not at all. Signed-in users earn miles on the
        booking total; guests do not.
        """
        trip = self.db.query(Trip).filter(Trip.id == request.trip_id).first()
        if not trip:
            raise TripNotFound()
        
        passengers = request.passengers
        if trip.available_seats < passengers:
            logger.warning(
                "Rejected booking on trip %s: %d requested, %d available",
                trip.id, passengers, trip.available_seats
            )
            raise InsufficientSeats(trip.available_seats)
        
        total_price = trip.price * passengers
        if request.total_price is not None and request.total_price != total_price:
            logger.info(
                "Client total %d for trip %s replaced by %d",
                request.total_price, trip.id, total_price
            )
        
        booking = Booking(
            trip_id=trip.id,
            user_id=user.id if user else None,
            passenger_name=request.passenger_name,
            passenger_email=request.passenger_email,
            passenger_phone=request.passenger_phone,
            passengers=passengers,
            total_price=total_price,
            travel_date=request.travel_date,
            status=BookingStatus.CONFIRMED.value,
            miles_earned=0
        )
        
        try:
            self.db.add(booking)
            self.db.flush()
            
            result = self.db.execute(
                update(Trip)
                .where(Trip.id == trip.id, Trip.available_seats >= passengers)
                .values(available_seats=Trip.available_seats - passengers)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.db.rollback()
                remaining = self.db.query(Trip.available_seats).filter(Trip.id == trip.id).scalar()
                logger.warning("Seats on trip %s taken concurrently, %d left", trip.id, remaining)
                raise InsufficientSeats(remaining)
            
            if user:
                miles = self.calculate_miles(total_price)
                if miles > 0:
                    booking.miles_earned = miles
                    self.miles_service.add_miles(
                        user.id,
                        miles,
                        booking_id=booking.id,
                        description=f"Miles earned: {trip.origin} - {trip.destination}",
                        commit=False
                    )
            
            self.db.commit()
        except InsufficientSeats:
            raise
        except Exception:
            self.db.rollback()
            raise
        
        self.db.refresh(booking)
        logger.info(
            "Booking %s confirmed on trip %s for %d passenger(s)",
            booking.id, trip.id, passengers
        )
        return booking
    
    @staticmethod
    def calculate_miles(total_price: int) -> int:
        """Miles earned for a booking total given in minor currency units"""
        return total_price // settings.MILES_PER_BOOKING_UNIT
    
    def get_booking(self, booking_id: str) -> Booking:
        booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            raise BookingNotFound()
        return booking
    
    def get_user_bookings(self, user_id: str) -> List[Booking]:
        """Get all bookings for a user, newest first"""
        return self.db.query(Booking).filter(
            Booking.user_id == user_id
        ).order_by(Booking.booking_date.desc()).all()
    
    def cancel_booking(self, booking_id: str, user_id: str) -> Booking:
        """Cancel a booking owned by `user_id`
        
        Only the status changes: seats are not returned to the trip and
        miles already earned stay on the account.
        """
        booking = self.get_booking(booking_id)
        
        if booking.user_id != user_id:
            raise NotBookingOwner()
        
        if booking.status == BookingStatus.CANCELLED.value:
            return booking
        
        booking.status = BookingStatus.CANCELLED.value
        self.db.commit()
        self.db.refresh(booking)
        
        logger.info("Booking %s cancelled by user %s", booking.id, user_id)
        return booking
