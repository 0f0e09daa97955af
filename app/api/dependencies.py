"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication, database access, the
server clock and the verse list.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.core.security import decode_access_token, oauth2_scheme, optional_oauth2_scheme
from app.db.session import get_db
from app.models.user import User
from app.rule.clock import LocalClock
from app.rule.verses import DailyVerse, load_verses
from app.services.user_service import UserService


def _user_from_token(token: Optional[str], db: Session) -> Optional[User]:
    email = decode_access_token(token)
    if not email:
        return None
    return UserService(db).get_active_user(email)


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> User:
    """Extract and validate the current user from the JWT token."""
    user = _user_from_token(token, db)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return user


def get_optional_user(token: Optional[str] = Depends(optional_oauth2_scheme),
                      db: Session = Depends(get_db), ) -> Optional[User]:
    """Current user, or ``None`` when the request carries no valid token."""
    return _user_from_token(token, db)


def get_clock() -> LocalClock:
    return LocalClock(settings.TIME_ZONE)


@lru_cache(maxsize=1)
def get_verses() -> tuple[DailyVerse, ...]:
    """Verse list, loaded once per process."""
    return load_verses(settings.DAILY_VERSES_FILE)
