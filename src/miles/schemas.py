from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from src.enums import TierLevel, MilesTransactionType

class UserMiles(BaseModel):
    id: str
    user_id: str
    total_miles: int
    lifetime_miles: int
    tier_level: TierLevel
    
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class MilesTransaction(BaseModel):
    id: str
    user_id: str
    booking_id: Optional[str] = None
    miles: int
    type: MilesTransactionType
    description: Optional[str] = None
    created_at: datetime
    
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
