from enum import Enum


class TransportMode(str, Enum):
    """Kind of vessel or vehicle an operator runs"""
    FERRY = "ferry"
    BUS = "bus"


class DayOfWeek(str, Enum):
    """Weekday codes used in trip schedules"""
    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"


class BookingStatus(str, Enum):
    """Booking status enumeration"""
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class TierLevel(str, Enum):
    """Loyalty tiers, lowest first"""
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


class MilesTransactionType(str, Enum):
    EARNED = "earned"
    REDEEMED = "redeemed"
    BONUS = "bonus"
    EXPIRED = "expired"


class TripSort(str, Enum):
    PRICE = "price"
    DEPARTURE = "departure"
    DURATION = "duration"


ALL_DAYS = [day.value for day in DayOfWeek]
