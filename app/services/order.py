import logging
from typing import List, Optional
from sqlmodel import Session, select
from fastapi import HTTPException, status

from app.models.order import Order, OrderItem, OrderLine, OrderRead
from app.core.security import authorize_identity
from app.services.cart import cart_entries
from app.services.user import find_user, find_cart

logger = logging.getLogger(__name__)

class OrderService:
    def __init__(self, session: Session):
        self.session = session

    def submit_order(self, token_user: Optional[str], username: str) -> OrderRead:
        """Snapshot the user's cart into a new order. The cart itself is left as is."""
        authorize_identity(username, token_user)

        user = find_user(self.session, username)
        if not user:
            logger.warning("username (%s) not found", username)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        cart = find_cart(self.session, user.id)
        if cart is None:
            logger.warning("User %s tried to submit an order without a cart", username)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User has no cart")

        order = Order(user_id=user.id, total=cart.total)
        self.session.add(order)
        self.session.flush()

        for _, item in cart_entries(self.session, cart.id):
            self.session.add(OrderItem(
                order_id=order.id,
                item_id=item.id,
                name=item.name,
                price_at_purchase=item.price
            ))

        self.session.commit()
        self.session.refresh(order)

        logger.info("User %s successfully placed order %s", username, order.id)
        return self._to_read(order, username)

    def get_order_history(self, token_user: Optional[str], username: str) -> List[OrderRead]:
        authorize_identity(username, token_user)

        user = find_user(self.session, username)
        if not user:
            logger.warning("username (%s) not found", username)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        orders = self.session.exec(
            select(Order).where(Order.user_id == user.id).order_by(Order.id)
        ).all()
        logger.info("user %s successfully viewed order history", username)
        return [self._to_read(order, username) for order in orders]

    def _to_read(self, order: Order, username: str) -> OrderRead:
        lines = self.session.exec(
            select(OrderItem).where(OrderItem.order_id == order.id).order_by(OrderItem.id)
        ).all()
        return OrderRead(
            id=order.id,
            username=username,
            items=[OrderLine(id=line.item_id, name=line.name, price=line.price_at_purchase) for line in lines],
            total=order.total,
            created_at=order.created_at
        )
