from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel
from pydantic import BaseModel

class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Credentials
    username: str = Field(unique=True, index=True)
    password_hash: str

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class UserRead(BaseModel):
    """Public view of a user. The password hash is never serialized."""
    id: int
    username: str
    cart_id: Optional[int] = None
