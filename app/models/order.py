from typing import List, Optional
from datetime import datetime, timezone
from decimal import Decimal
from sqlmodel import Field, SQLModel
from pydantic import BaseModel

class Order(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)

    # Copied from the cart at submission time
    total: Decimal = Field(max_digits=12, decimal_places=2)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class OrderItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="order.id", index=True)
    item_id: int = Field(foreign_key="item.id")

    # Snapshot of the catalog entry, later catalog edits do not touch past orders
    name: str
    price_at_purchase: Decimal = Field(max_digits=10, decimal_places=2)


class OrderLine(BaseModel):
    id: int
    name: str
    price: Decimal


class OrderRead(BaseModel):
    id: int
    username: str
    items: List[OrderLine]
    total: Decimal
    created_at: datetime
