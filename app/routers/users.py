from typing import Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session
from pydantic import BaseModel, ConfigDict, Field

from app.db.session import get_session
from app.models.user import UserRead
from app.routers.auth import get_auth_service, get_token_user
from app.services.auth import AuthService
from app.services.user import UserService

router = APIRouter()

class CreateUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    password: str
    confirm_password: str = Field(alias="confirmPassword")

def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)

@router.post("/create", response_model=UserRead)
def create_user(user_in: CreateUserRequest, service: AuthService = Depends(get_auth_service)):
    """
    Register a new shopper. No token is needed here.
    """
    return service.register_user(user_in.username, user_in.password, user_in.confirm_password)

@router.get("/id/{user_id}", response_model=UserRead)
def find_by_id(
    user_id: int,
    token_user: Optional[str] = Depends(get_token_user),
    service: UserService = Depends(get_user_service)
):
    """
    Profile lookup by id. Shoppers can only see their own profile.
    """
    return service.get_user_by_id(token_user, user_id)

@router.get("/{username}", response_model=UserRead)
def find_by_username(
    username: str,
    token_user: Optional[str] = Depends(get_token_user),
    service: UserService = Depends(get_user_service)
):
    return service.get_user_by_username(token_user, username)
