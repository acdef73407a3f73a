# storefront/dependencies.py

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storefront.core import locales
from storefront.core.security import decode_session_token
from storefront.crud import user as crud_user
from storefront.db.session import SessionLocal

logger = logging.getLogger(__name__)

# --- Database session management ---

def get_db() -> Iterator[Session]:
    """
    Main FastAPI dependency for a database session.
    Closing the session rolls back whatever was left uncommitted.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Iterator[Session]:
    """Context manager for a database session outside of requests (startup, scripts)."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# --- Authentication ---

def _resolve_user_id(db: Session, user_id: Optional[str], session_id: Optional[str]) -> Optional[str]:
    if not user_id or not session_id:
        return None

    token_user_id = decode_session_token(session_id)
    if token_user_id is None:
        return None
    if token_user_id != user_id:
        logger.warning(f"Session token subject does not match user_id cookie {user_id}.")
        return None

    if crud_user.get_user_by_id(db, user_id=user_id) is None:
        logger.warning(f"User {user_id} from session cookie not found in DB.")
        return None
    return user_id


def get_current_user_id(
    user_id: Optional[str] = Cookie(None),
    session_id: Optional[str] = Cookie(None),
    db: Session = Depends(get_db),
) -> str:
    """
    REQUIRED dependency.
    Both cookies must be present, the session token must be valid and issued
    for the same user, and the user must exist. Otherwise 401.
    """
    resolved = _resolve_user_id(db, user_id, session_id)
    if resolved is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=locales.ERROR_NOT_AUTHENTICATED)
    return resolved


def get_optional_user_id(
    user_id: Optional[str] = Cookie(None),
    session_id: Optional[str] = Cookie(None),
    db: Session = Depends(get_db),
) -> Optional[str]:
    """OPTIONAL dependency: the authenticated user id, or None."""
    return _resolve_user_id(db, user_id, session_id)
