from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_session
from app.models.order import OrderRead
from app.routers.auth import get_token_user
from app.services.order import OrderService

router = APIRouter()

def get_order_service(session: Session = Depends(get_session)) -> OrderService:
    return OrderService(session)

@router.post("/submit/{username}", response_model=OrderRead)
def submit(
    username: str,
    token_user: Optional[str] = Depends(get_token_user),
    service: OrderService = Depends(get_order_service)
):
    return service.submit_order(token_user, username)

@router.get("/history/{username}", response_model=List[OrderRead])
def get_orders_for_user(
    username: str,
    token_user: Optional[str] = Depends(get_token_user),
    service: OrderService = Depends(get_order_service)
):
    return service.get_order_history(token_user, username)
