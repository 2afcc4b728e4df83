import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from src.models import User
from src.auth.schemas import UserCreate
from src.auth.utils import get_password_hash, verify_password
from src.exceptions import EmailAlreadyRegistered
from typing import Optional

logger = logging.getLogger(__name__)

class UserService:
    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()
    
    @staticmethod
    def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
        """Get user by ID"""
        return db.query(User).filter(User.id == user_id).first()
    
    @staticmethod
    def create_user(db: Session, user: UserCreate) -> User:
        """Create a new user"""
        db_user = User(
            name=user.name,
            email=user.email,
            password=get_password_hash(user.password)
        )
        
        try:
            db.add(db_user)
            db.commit()
        except IntegrityError:
            db.rollback()
            raise EmailAlreadyRegistered()
        
        db.refresh(db_user)
        logger.info("Registered user %s", db_user.id)
        return db_user
    
    @staticmethod
    def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = UserService.get_user_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        return user
