import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": subject, "exp": datetime.now(timezone.utc) + expires_delta}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def get_subject_from_token(token: Optional[str]) -> Optional[str]:
    """
    Verify signature and expiry of a bearer token and return its subject.

    Any verification failure yields None so that callers treat it as
    "no identity" rather than an error.
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning("Token verification failed: %s", e)
        return None
    return payload.get("sub")


def authorize_identity(claimed: str, token_user: Optional[str]) -> None:
    """Raise 403 unless the token subject is exactly the targeted username."""
    if token_user is None or claimed != token_user:
        logger.warning("username (%s) does not equal subject of token (%s)", claimed, token_user)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
