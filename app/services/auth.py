import logging
from typing import Optional
from sqlmodel import Session, select
from fastapi import HTTPException, status

from app.models.user import User, UserRead
from app.models.cart import Cart
from app.core.config import settings
from app.core.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, session: Session):
        self.session = session

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.username == username)).first()

    def register_user(self, username: str, password: str, confirm_password: str) -> UserRead:
        """Create a user together with an empty cart. Validation runs before anything is written."""
        if len(password) < settings.MIN_PASSWORD_LENGTH or password != confirm_password:
            logger.warning(
                "User not created: either length is less than %d or password and confirmation do not match. "
                "Unable to create %s", settings.MIN_PASSWORD_LENGTH, username
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters and match its confirmation"
            )

        if self.get_user_by_username(username):
            logger.warning("User not created: username %s is already taken", username)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already registered")

        user = User(username=username, password_hash=get_password_hash(password))
        self.session.add(user)
        self.session.flush()

        cart = Cart(user_id=user.id)
        self.session.add(cart)
        self.session.commit()
        self.session.refresh(user)
        self.session.refresh(cart)

        logger.info("User was created: name set with %s", username)
        return UserRead(id=user.id, username=user.username, cart_id=cart.id)

    def authenticate_user(self, username: str, password: str) -> Optional[User]:
        user = self.get_user_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for %s", username)
            return None
        return user
