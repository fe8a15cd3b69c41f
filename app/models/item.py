from typing import Optional
from decimal import Decimal
from sqlmodel import Field, SQLModel
from pydantic import BaseModel, ConfigDict

class Item(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Catalog Info
    name: str = Field(index=True)
    description: Optional[str] = None

    # Pricing
    price: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=10, decimal_places=2)


class ItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
