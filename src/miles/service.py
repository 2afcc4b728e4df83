import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from src.enums import TierLevel, MilesTransactionType
from src.models import UserMiles, MilesTransaction

logger = logging.getLogger(__name__)

# Lifetime miles needed for each tier, highest first
TIER_THRESHOLDS = [
    (100000, TierLevel.PLATINUM),
    (50000, TierLevel.GOLD),
    (20000, TierLevel.SILVER),
]

def tier_for_lifetime_miles(lifetime_miles: int) -> TierLevel:
    """Tier is a pure function of lifetime miles; thresholds are inclusive"""
    for threshold, tier in TIER_THRESHOLDS:
        if lifetime_miles >= threshold:
            return tier
    return TierLevel.BRONZE

class MilesService:
    """Loyalty balance and transaction ledger"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_or_create_user_miles(self, user_id: str, commit: bool = True) -> UserMiles:
        """Return the user's miles record, creating an empty bronze one if absent"""
        record = self.db.query(UserMiles).filter(UserMiles.user_id == user_id).first()
        if record:
            return record
        
        try:
            with self.db.begin_nested():
                record = UserMiles(
                    user_id=user_id,
                    total_miles=0,
                    lifetime_miles=0,
                    tier_level=TierLevel.BRONZE.value
                )
                self.db.add(record)
        except IntegrityError:
            # Another request created the row first
            record = self.db.query(UserMiles).filter(UserMiles.user_id == user_id).one()
        
        if commit:
            self.db.commit()
        return record
    
    def add_miles(
        self,
        user_id: str,
        miles: int,
        booking_id: Optional[str] = None,
        description: Optional[str] = None,
        commit: bool = True
    ) -> UserMiles:
        """Apply a signed miles delta and append it to the ledger
        
        Positive deltas grow both the spendable balance and lifetime miles;
        negative deltas only reduce the balance. The tier is recomputed from
        the new lifetime total.
        """
        self.get_or_create_user_miles(user_id, commit=False)
        
        record = (
            self.db.query(UserMiles)
            .filter(UserMiles.user_id == user_id)
            .with_for_update()
            .one()
        )
        
        record.total_miles = record.total_miles + miles
        record.lifetime_miles = record.lifetime_miles + max(miles, 0)
        record.tier_level = tier_for_lifetime_miles(record.lifetime_miles).value
        
        earned = miles > 0
        transaction = MilesTransaction(
            user_id=user_id,
            booking_id=booking_id,
            miles=miles,
            type=(MilesTransactionType.EARNED if earned else MilesTransactionType.REDEEMED).value,
            description=description or ("Miles earned from booking" if earned else "Miles redeemed")
        )
        self.db.add(transaction)
        
        if commit:
            self.db.commit()
            self.db.refresh(record)
        else:
            self.db.flush()
        
        logger.info(
            "Miles %+d for user %s (balance %d, tier %s)",
            miles, user_id, record.total_miles, record.tier_level
        )
        return record
    
    def get_transactions(self, user_id: str) -> List[MilesTransaction]:
        """Get a user's miles history, newest first"""
        return self.db.query(MilesTransaction).filter(
            MilesTransaction.user_id == user_id
        ).order_by(MilesTransaction.created_at.desc()).all()
