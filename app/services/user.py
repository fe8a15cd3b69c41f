import logging
from typing import Optional
from sqlmodel import Session, select
from fastapi import HTTPException, status

from app.models.user import User, UserRead
from app.models.cart import Cart
from app.core.security import authorize_identity

logger = logging.getLogger(__name__)


def find_user(session: Session, username: str) -> Optional[User]:
    return session.exec(select(User).where(User.username == username)).first()


def find_cart(session: Session, user_id: int) -> Optional[Cart]:
    return session.exec(select(Cart).where(Cart.user_id == user_id)).first()


class UserService:
    def __init__(self, session: Session):
        self.session = session

    def get_user_by_id(self, token_user: Optional[str], user_id: int) -> UserRead:
        # The token subject has to resolve to a stored user whose id is the one requested
        owner = find_user(self.session, token_user) if token_user else None
        if owner is None:
            logger.warning("Token subject (%s) was not found in the user store", token_user)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
        if owner.id != user_id:
            logger.warning("user id requested (%s) does not match the authenticated user", user_id)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")

        # owner is the requested user at this point, so no second lookup is needed
        return self.to_read(owner)

    def get_user_by_username(self, token_user: Optional[str], username: str) -> UserRead:
        authorize_identity(username, token_user)

        user = find_user(self.session, username)
        if not user:
            logger.warning("username (%s) not found", username)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return self.to_read(user)

    def to_read(self, user: User) -> UserRead:
        cart = find_cart(self.session, user.id)
        return UserRead(id=user.id, username=user.username, cart_id=cart.id if cart else None)
