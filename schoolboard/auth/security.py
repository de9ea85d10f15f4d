from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt
from pydantic import ValidationError

from schoolboard.auth.schemas import TokenIdentity
from schoolboard.core.config import settings, resolve_jwt_secret

BCRYPT_ROUNDS = 10

# Checked against when the email is unknown so both login failure paths hash once.
_DUMMY_HASH = bcrypt.hashpw(b"schoolboard-dummy-password", bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


class InvalidTokenError(Exception):
    """Token is malformed, tampered with, expired or missing claims."""


def hash_password(plain_password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # In case the stored hash is invalid/corrupted
        return False


def burn_password_check(plain_password: str) -> None:
    verify_password(plain_password, _DUMMY_HASH)


def create_access_token(
    identity: TokenIdentity,
    *,
    expires_minutes: Optional[int] = None,
    secret: Optional[str] = None,
) -> str:
    if expires_minutes is None:
        expires_minutes = settings.access_token_expire_minutes

    issued_at = datetime.now(timezone.utc)
    to_encode = {
        "sub": str(identity.id),
        "id": str(identity.id),
        "email": identity.email,
        "iat": int(issued_at.timestamp()),
        "exp": issued_at + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(
        to_encode, secret or resolve_jwt_secret(), algorithm=settings.jwt_algorithm
    )


def decode_access_token(token: str, *, secret: Optional[str] = None) -> TokenIdentity:
    """Verify signature and expiry. Every failure raises InvalidTokenError."""
    try:
        payload = jwt.decode(
            token,
            secret or resolve_jwt_secret(),
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        raise InvalidTokenError() from e

    try:
        return TokenIdentity(id=payload.get("id") or payload.get("sub"), email=payload.get("email"))
    except ValidationError as e:
        raise InvalidTokenError() from e
