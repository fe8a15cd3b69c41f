from typing import Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session
from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings
from app.db.session import get_session
from app.models.cart import CartRead
from app.routers.auth import get_token_user
from app.services.cart import CartService

router = APIRouter()

class ModifyCartRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    item_id: int = Field(alias="itemId")
    # A missing quantity changes nothing
    quantity: int = Field(default=0, le=settings.MAX_CART_QUANTITY)

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

@router.post("/addToCart", response_model=CartRead)
def add_to_cart(
    request: ModifyCartRequest,
    token_user: Optional[str] = Depends(get_token_user),
    service: CartService = Depends(get_cart_service)
):
    """Add `quantity` copies of an item to the user's cart"""
    return service.add_to_cart(token_user, request.username, request.item_id, request.quantity)

@router.post("/removeFromCart", response_model=CartRead)
def remove_from_cart(
    request: ModifyCartRequest,
    token_user: Optional[str] = Depends(get_token_user),
    service: CartService = Depends(get_cart_service)
):
    """Remove `quantity` copies of an item from the user's cart"""
    return service.remove_from_cart(token_user, request.username, request.item_id, request.quantity)
