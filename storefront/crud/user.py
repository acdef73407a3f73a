# storefront/crud/user.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.core.security import hash_password, verify_password
from storefront.models.user import User
from storefront.schemas.user import UserPublic

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: str) -> User | None:
    """Gets a user row by primary key, password hash included. Internal use only."""
    return db.query(User).filter(User.id == user_id).first()


def get_public_user(db: Session, user_id: str) -> UserPublic | None:
    """Public view of a user by id: never carries the password hash."""
    db_user = get_user_by_id(db, user_id=user_id)
    return UserPublic.model_validate(db_user) if db_user else None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Gets a user by email, password hash included."""
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, name: str, email: str, password: str) -> User | None:
    """
    Registers a new user. Returns None when the email is already taken,
    including the case where a concurrent request wins the unique constraint.
    """
    if get_user_by_email(db, email=email):
        return None

    db_user = User(name=name, email=email, password_hash=hash_password(password))
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Concurrent registration for {email} lost the unique constraint race.")
        return None
    db.refresh(db_user)
    return db_user


def validate_credentials(db: Session, email: str, password: str) -> User | None:
    """
    Returns the user when the password matches. Unknown email and wrong
    password are indistinguishable to the caller.
    """
    user = get_user_by_email(db, email=email)
    if not user:
        return None
    return user if verify_password(password, user.password_hash) else None
