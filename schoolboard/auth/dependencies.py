from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.auth.schemas import CurrentUser
from schoolboard.auth.security import InvalidTokenError, decode_access_token
from schoolboard.auth.services import get_user
from schoolboard.db.session import get_db


# auto_error=False: a missing header must answer 401, a bad token 403.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """Resolve the authenticated administrator from the bearer token.

    No header, or a scheme other than Bearer, is 401. A token that fails
    verification, or names a user that no longer exists, is 403. The response
    never says which check failed.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    forbidden = HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    try:
        identity = decode_access_token(token)
    except InvalidTokenError:
        raise forbidden

    user = await get_user(db, identity.id)
    if not user:
        raise forbidden

    current_user = CurrentUser(id=user.id, email=user.email, name=user.name)
    request.state.user = current_user
    return current_user
