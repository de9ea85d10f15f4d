"""Unit tests for password hashing and bearer tokens."""

from uuid import uuid4

import pytest
from jose import jwt

from schoolboard.auth.schemas import TokenIdentity
from schoolboard.auth.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from schoolboard.core.config import settings


def test_password_hash_round_trip() -> None:
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_password_hash_is_salted() -> None:
    assert hash_password("same") != hash_password("same")


def test_verify_password_with_corrupt_hash_is_false() -> None:
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_token_round_trip() -> None:
    identity = TokenIdentity(id=uuid4(), email="admin@example.com")
    token = create_access_token(identity)
    assert decode_access_token(token) == identity


def test_token_expires_after_24_hours() -> None:
    identity = TokenIdentity(id=uuid4(), email="admin@example.com")
    token = create_access_token(identity)
    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60


def test_expired_token_is_rejected() -> None:
    identity = TokenIdentity(id=uuid4(), email="admin@example.com")
    token = create_access_token(identity, expires_minutes=-1)
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_token_signed_with_other_key_is_rejected() -> None:
    identity = TokenIdentity(id=uuid4(), email="admin@example.com")
    token = create_access_token(identity, secret="some-other-key")
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_garbage_token_is_rejected() -> None:
    with pytest.raises(InvalidTokenError):
        decode_access_token("garbage")


def test_token_without_identity_claims_is_rejected() -> None:
    token = jwt.encode({"foo": "bar"}, "k", algorithm=settings.jwt_algorithm)
    with pytest.raises(InvalidTokenError):
        decode_access_token(token, secret="k")
