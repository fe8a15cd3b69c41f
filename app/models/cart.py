from typing import List, Optional
from datetime import datetime, timezone
from decimal import Decimal
from sqlmodel import Field, SQLModel
from pydantic import BaseModel

from app.models.item import ItemRead

class Cart(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # One cart per user
    user_id: int = Field(foreign_key="user.id", unique=True, index=True)

    # Sum of the prices of every entry, recomputed on each mutation
    total: Decimal = Field(default=Decimal("0.00"), max_digits=12, decimal_places=2)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CartEntry(SQLModel, table=True):
    """One occurrence of an item in a cart. Insertion order is the id order."""
    id: Optional[int] = Field(default=None, primary_key=True)
    cart_id: int = Field(foreign_key="cart.id", index=True)
    item_id: int = Field(foreign_key="item.id")


class CartRead(BaseModel):
    id: int
    username: str
    items: List[ItemRead]
    total: Decimal
