from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from app.db.session import get_session
from app.models.item import Item, ItemRead

router = APIRouter()

@router.get("/", response_model=List[ItemRead])
def get_items(session: Session = Depends(get_session)):
    return session.exec(select(Item).order_by(Item.id)).all()

@router.get("/{item_id}", response_model=ItemRead)
def get_item_by_id(item_id: int, session: Session = Depends(get_session)):
    item = session.get(Item, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item

@router.get("/name/{name}", response_model=List[ItemRead])
def get_items_by_name(name: str, session: Session = Depends(get_session)):
    items = session.exec(select(Item).where(Item.name == name).order_by(Item.id)).all()
    if not items:
        raise HTTPException(status_code=404, detail="Item not found")
    return items
