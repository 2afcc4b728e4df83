from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from src.config import settings
from src.database import get_db
from src.auth.utils import verify_token
from src.auth.service import UserService
from src.exceptions import InvalidToken
from src.models import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)

def _resolve_user(token: str, db: Session) -> User:
    token_data = verify_token(token)
    user = UserService.get_user_by_id(db, user_id=token_data["user_id"])
    if user is None:
        raise InvalidToken()
    return user

def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """Get current authenticated user"""
    return _resolve_user(token, db)

def get_optional_user(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Get the authenticated user if a bearer token was sent, otherwise None (guest)"""
    if not token:
        return None
    return _resolve_user(token, db)
