# Import all models to register them with SQLModel
from app.models.user import User, UserRead
from app.models.item import Item, ItemRead
from app.models.cart import Cart, CartEntry, CartRead
from app.models.order import Order, OrderItem, OrderLine, OrderRead

__all__ = [
    "User",
    "UserRead",
    "Item",
    "ItemRead",
    "Cart",
    "CartEntry",
    "CartRead",
    "Order",
    "OrderItem",
    "OrderLine",
    "OrderRead",
]
