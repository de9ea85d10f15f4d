from fastapi import APIRouter, Depends, HTTPException
from fastapi import status as http_status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.auth.dependencies import get_current_user
from schoolboard.auth.schemas import CurrentUser, LoginRequest, LoginResponse, UserInfo
from schoolboard.auth.services import login_user
from schoolboard.core.exceptions import ServiceError
from schoolboard.db.session import get_db

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=http_status.HTTP_200_OK,
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    try:
        return await login_user(db, payload)
    except ServiceError as e:
        if e.status_code == http_status.HTTP_500_INTERNAL_SERVER_ERROR:
            raise HTTPException(status_code=e.status_code, detail="Internal server error")
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/me", response_model=UserInfo)
async def me(current_user: CurrentUser = Depends(get_current_user)) -> UserInfo:
    return UserInfo(id=current_user.id, email=current_user.email, name=current_user.name)
