from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from src.database import get_db
from src.auth.dependencies import get_current_user
from src.models import User
from src.miles.schemas import UserMiles, MilesTransaction
from src.miles.service import MilesService

router = APIRouter()

@router.get("/my-miles", response_model=UserMiles)
def get_my_miles(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the current user's miles balance and tier"""
    return MilesService(db).get_or_create_user_miles(current_user.id)

@router.get("/my-miles/transactions", response_model=List[MilesTransaction])
def get_my_miles_transactions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the current user's miles transaction history"""
    return MilesService(db).get_transactions(current_user.id)
