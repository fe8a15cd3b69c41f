import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Tuple
from sqlmodel import Session, select
from fastapi import HTTPException, status

from app.models.cart import Cart, CartEntry, CartRead
from app.models.item import Item, ItemRead
from app.models.user import User
from app.core.security import authorize_identity
from app.services.user import find_user, find_cart

logger = logging.getLogger(__name__)


def cart_entries(session: Session, cart_id: int) -> List[Tuple[CartEntry, Item]]:
    """Entries of a cart with their catalog items, in insertion order."""
    return session.exec(
        select(CartEntry, Item)
        .join(Item, CartEntry.item_id == Item.id)
        .where(CartEntry.cart_id == cart_id)
        .order_by(CartEntry.id)
    ).all()


class CartService:
    def __init__(self, session: Session):
        self.session = session

    def add_to_cart(self, token_user: Optional[str], username: str, item_id: int, quantity: int) -> CartRead:
        """Append the item to the user's cart `quantity` times."""
        user, item = self._resolve(token_user, username, item_id)
        cart = self._get_or_create_cart(user)

        for _ in range(quantity):
            self.session.add(CartEntry(cart_id=cart.id, item_id=item.id))
        self.session.flush()

        return self._save(cart, user)

    def remove_from_cart(self, token_user: Optional[str], username: str, item_id: int, quantity: int) -> CartRead:
        """
        Remove one occurrence of the item `quantity` times.

        Nothing is removed unless the cart holds at least `quantity` entries
        in total. The check counts every entry, not only those of `item_id`.
        """
        user, item = self._resolve(token_user, username, item_id)
        cart = self._get_or_create_cart(user)

        entries = cart_entries(self.session, cart.id)
        if quantity <= len(entries):
            removed = 0
            for entry, _ in entries:
                if removed >= quantity:
                    break
                if entry.item_id == item.id:
                    self.session.delete(entry)
                    removed += 1
            self.session.flush()

        return self._save(cart, user)

    def _resolve(self, token_user: Optional[str], username: str, item_id: int) -> Tuple[User, Item]:
        authorize_identity(username, token_user)

        user = find_user(self.session, username)
        if not user:
            logger.warning("username (%s) not found in user store", username)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        item = self.session.get(Item, item_id)
        if not item:
            logger.warning("item id %s was not found in the catalog", item_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")

        return user, item

    def _get_or_create_cart(self, user: User) -> Cart:
        cart = find_cart(self.session, user.id)
        if cart is None:
            cart = Cart(user_id=user.id)
            self.session.add(cart)
            self.session.flush()
            logger.info("Created cart %s for user %s", cart.id, user.username)
        return cart

    def _save(self, cart: Cart, user: User) -> CartRead:
        entries = cart_entries(self.session, cart.id)
        items = [ItemRead.model_validate(item) for _, item in entries]

        cart.total = sum((item.price for item in items), Decimal("0.00"))
        cart.updated_at = datetime.now(timezone.utc)
        self.session.add(cart)
        self.session.commit()
        self.session.refresh(cart)

        return CartRead(id=cart.id, username=user.username, items=items, total=cart.total)
