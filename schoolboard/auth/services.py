import logging
from typing import Optional
from uuid import UUID

from fastapi import status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.auth.models import User
from schoolboard.auth.schemas import LoginRequest, LoginResponse, TokenIdentity, UserInfo
from schoolboard.auth.security import (
    burn_password_check,
    create_access_token,
    hash_password,
    verify_password,
)
from schoolboard.core.exceptions import ServiceError, StorageError

logger = logging.getLogger(__name__)


async def get_user(db: AsyncSession, user_id: UUID) -> Optional[User]:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    stmt = select(User).where(func.lower(User.email) == email.strip().lower())
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, email: str, password: str, name: str) -> User:
    user = User(
        email=email.strip().lower(),
        password_hash=hash_password(password),
        name=name.strip(),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise StorageError("Email is already in use") from e
    await db.refresh(user)
    logger.info("Created user %s", user.id)
    return user


async def validate_user(db: AsyncSession, email: str, password: str) -> Optional[User]:
    """Return the user when the password matches, otherwise None.

    An unknown email and a wrong password look the same to the caller.
    """
    user = await get_user_by_email(db, email)
    if user is None:
        burn_password_check(password)
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


async def login_user(db: AsyncSession, payload: LoginRequest) -> LoginResponse:
    user = await validate_user(db, payload.email, payload.password)
    if user is None:
        logger.info("Rejected login attempt")
        raise ServiceError("Invalid credentials", status.HTTP_401_UNAUTHORIZED)

    token = create_access_token(TokenIdentity(id=user.id, email=user.email))
    logger.info("User %s logged in", user.id)
    return LoginResponse(
        token=token,
        user=UserInfo(id=user.id, email=user.email, name=user.name),
    )
