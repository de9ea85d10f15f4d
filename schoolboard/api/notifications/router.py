from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.auth.dependencies import get_current_user
from schoolboard.core.exceptions import ServiceError
from schoolboard.db.session import get_db

from . import service
from .schemas import NotificationCreate, NotificationResponse, NotificationStatusUpdate

router = APIRouter(
    prefix="/api/notifications",
    tags=["notifications"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(db: AsyncSession = Depends(get_db)) -> List[NotificationResponse]:
    return await service.list_notifications(db)


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    payload: NotificationCreate,
    db: AsyncSession = Depends(get_db),
) -> NotificationResponse:
    """Create a notification. Any status other than draft is recorded as sent."""
    try:
        return await service.create_notification(db, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/{notification_id}/status", response_model=NotificationResponse)
async def update_notification_status(
    notification_id: UUID,
    payload: NotificationStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> NotificationResponse:
    try:
        return await service.update_notification_status(db, notification_id, payload.status)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
