# tests/test_security.py

from datetime import timedelta

from jose import jwt

from storefront.core.config import settings
from storefront.core.security import (
    create_session_token, decode_session_token, hash_password, verify_password
)


def test_hash_is_salted():
    assert hash_password("same") != hash_password("same")


def test_verify_password():
    hashed = hash_password("correct horse")

    assert verify_password("correct horse", hashed)
    assert not verify_password("battery staple", hashed)


def test_verify_password_with_garbage_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_session_token_round_trip():
    token = create_session_token("user-123")

    assert decode_session_token(token) == "user-123"


def test_session_tokens_are_unique_per_login():
    assert create_session_token("user-123") != create_session_token("user-123")


def test_expired_session_token_is_rejected():
    token = create_session_token("user-123", expires_delta=timedelta(seconds=-1))

    assert decode_session_token(token) is None


def test_token_signed_with_other_key_is_rejected():
    forged = jwt.encode({"sub": "user-123"}, "not-the-key", algorithm=settings.ALGORITHM)

    assert decode_session_token(forged) is None


def test_token_without_subject_is_rejected():
    token = jwt.encode({"sid": "x"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    assert decode_session_token(token) is None
