from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session
from pydantic import BaseModel

from app.db.session import get_session
from app.core.security import create_access_token, get_subject_from_token
from app.services.auth import AuthService

router = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)


class Token(BaseModel):
    access_token: str
    token_type: str

class LoginRequest(BaseModel):
    username: str
    password: str

def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(session)

def get_token_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Optional[str]:
    """
    Resolve the identity carried by the bearer token, once per request.

    Returns None for a missing, malformed or expired token. Handlers compare
    this value with the identity they act on and answer 403 on mismatch.
    """
    if credentials is None:
        return None
    return get_subject_from_token(credentials.credentials)

@router.post("/login", response_model=Token)
def login(
    form: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service)
):
    user = service.authenticate_user(form.username, form.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(user.username)
    response.headers["Authorization"] = f"Bearer {access_token}"
    return {"access_token": access_token, "token_type": "bearer"}
