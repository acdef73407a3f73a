# storefront/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session
from typing import Optional

from storefront.core import locales
from storefront.core.config import settings
from storefront.core.limiter import limiter
from storefront.dependencies import get_current_user_id, get_db, get_optional_user_id
from storefront.schemas.user import AuthStatus, LoginRequest, RegisterRequest, UserResponse
from storefront.services import auth as auth_service

router = APIRouter(prefix="/auth")


@router.post("/register", response_model=UserResponse)
@limiter.limit(lambda: settings.AUTH_RATE_LIMIT)
def register(
    request: Request,
    payload: RegisterRequest,
    db: Session = Depends(get_db),
):
    """Creates an account. Does not log the new user in."""
    user = auth_service.register_user(db, payload)
    if not user:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=locales.ERROR_EMAIL_TAKEN)
    return UserResponse(user=user)


@router.post("/login", response_model=UserResponse)
@limiter.limit(lambda: settings.AUTH_RATE_LIMIT)
def login(
    request: Request,
    response: Response,
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Validates the credentials and sets the `user_id` and `session_id` cookies.
    Unknown email and wrong password both answer 401.
    """
    user = auth_service.authenticate_user(db, email=payload.email, password=payload.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=locales.ERROR_INVALID_CREDENTIALS)

    auth_service.start_session(response, user.id)
    return UserResponse(user=user)


@router.post("/logout")
def logout(response: Response):
    auth_service.end_session(response)
    return {"success": True}


@router.get("/me", response_model=UserResponse)
def read_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    user = auth_service.get_user(db, user_id=user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=locales.ERROR_USER_NOT_FOUND)
    return UserResponse(user=user)


@router.get("/status", response_model=AuthStatus)
def read_auth_status(user_id: Optional[str] = Depends(get_optional_user_id)):
    return AuthStatus(is_authenticated=user_id is not None)
