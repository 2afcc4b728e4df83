from sqlalchemy.orm import Session
from typing import List
from src.models import Operator

class OperatorService:
    @staticmethod
    def list_operators(db: Session) -> List[Operator]:
        """Get all operators ordered by name"""
        return db.query(Operator).order_by(Operator.name).all()
