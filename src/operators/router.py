from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from src.database import get_db
from src.operators.schemas import Operator
from src.operators.service import OperatorService

router = APIRouter()

@router.get("", response_model=List[Operator])
def get_operators(db: Session = Depends(get_db)):
    """Get all ferry and bus operators"""
    return OperatorService.list_operators(db)
