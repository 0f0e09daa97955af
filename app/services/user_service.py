"""
User service.

Registration, token login, and the token-to-user lookup behind the
bearer dependency.  A user only needs an email and password; everything
else in the rule of life hangs off the user id.
"""

import logging
from datetime import timedelta
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import Token, UserCreate, UserLogin

logger = logging.getLogger(__name__)


class UserService:
    """Service for user accounts."""

    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Create an account.

        Raises:
            HTTPException 400: If the email is already registered
        """
        if self.repository.exists_by_email(user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

        user = self.repository.create(User(email=user_data.email, full_name=user_data.full_name,
                                           hashed_password=get_password_hash(user_data.password)))
        logger.info("registered user_id=%s", user.id)
        return user

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Check credentials and issue a bearer token whose ``sub`` is the email.

        Raises:
            HTTPException 401: Unknown email or wrong password
            HTTPException 403: Account deactivated
        """
        user = self.repository.get_by_email(login_data.email)
        if not user or not verify_password(login_data.password, user.hashed_password):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password",
                                headers={ "WWW-Authenticate": "Bearer" }, )
        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

        expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        token = create_access_token(data={ "sub": user.email }, expires_delta=expires)
        return Token(access_token=token, expires_in=int(expires.total_seconds()))

    def get_active_user(self, email: str) -> Optional[User]:
        """The account named by a token subject, or ``None`` if missing or inactive."""
        user = self.repository.get_by_email(email)
        if user is None or not user.is_active:
            return None
        return user
