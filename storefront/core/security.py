# storefront/core/security.py

import logging
import secrets
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from storefront.core.config import settings

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of the secret
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Salted one-way hash of a plaintext password."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash.")
        return False


def create_session_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Creates the signed token stored in the `session_id` cookie."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS))
    to_encode = {
        "sub": user_id,
        "sid": secrets.token_urlsafe(16),
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> str | None:
    """Returns the user id carried by a valid, unexpired token, otherwise None."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"Session token rejected: {e}")
        return None

    user_id = payload.get("sub")
    if not user_id:
        logger.warning("Session token payload is missing 'sub'.")
        return None
    return user_id
