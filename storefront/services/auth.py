# storefront/services/auth.py

import logging

from fastapi import Response
from sqlalchemy.orm import Session

from storefront.core.config import settings
from storefront.core.security import create_session_token
from storefront.crud import user as crud_user
from storefront.schemas.user import RegisterRequest, UserPublic

logger = logging.getLogger(__name__)

USER_ID_COOKIE = "user_id"
SESSION_COOKIE = "session_id"


def register_user(db: Session, payload: RegisterRequest) -> UserPublic | None:
    """Creates the account. Returns None when the email is already in use."""
    db_user = crud_user.create_user(db, name=payload.name, email=payload.email, password=payload.password)
    if not db_user:
        logger.warning(f"Registration refused: email {payload.email} is already in use.")
        return None

    logger.info(f"Registered new user {db_user.id}.")
    return UserPublic.model_validate(db_user)


def authenticate_user(db: Session, email: str, password: str) -> UserPublic | None:
    db_user = crud_user.validate_credentials(db, email=email, password=password)
    if not db_user:
        logger.warning("Login failed: invalid credentials.")
        return None

    logger.info(f"User {db_user.id} logged in.")
    return UserPublic.model_validate(db_user)


def get_user(db: Session, user_id: str) -> UserPublic | None:
    return crud_user.get_public_user(db, user_id=user_id)


def start_session(response: Response, user_id: str) -> None:
    """Sets the `user_id` cookie and the signed `session_id` cookie."""
    cookie_options = {
        "max_age": settings.SESSION_MAX_AGE_SECONDS,
        "httponly": True,
        "secure": settings.COOKIE_SECURE,
        "samesite": "lax",
        "path": "/",
    }
    response.set_cookie(USER_ID_COOKIE, user_id, **cookie_options)
    response.set_cookie(SESSION_COOKIE, create_session_token(user_id), **cookie_options)


def end_session(response: Response) -> None:
    for cookie_name in (USER_ID_COOKIE, SESSION_COOKIE):
        response.delete_cookie(cookie_name, path="/", httponly=True, secure=settings.COOKIE_SECURE, samesite="lax")
