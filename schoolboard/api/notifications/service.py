"""Parent notifications.

Delivery is not performed here: a notification submitted with any status other
than draft is recorded as sent immediately.
"""

import logging
from datetime import datetime, timezone
from typing import List
from uuid import UUID

from fastapi import status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.core.enums import NotificationStatus
from schoolboard.core.exceptions import NotFoundError, ServiceError
from schoolboard.core.models import Notification
from schoolboard.core.services import commit_or_raise

from .schemas import NotificationCreate, NotificationResponse

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    NotificationStatus.draft: {NotificationStatus.sent, NotificationStatus.failed},
    NotificationStatus.sent: set(),
    NotificationStatus.failed: set(),
}


def _mark(notification: Notification, new_status: NotificationStatus) -> None:
    notification.status = new_status
    if new_status == NotificationStatus.sent:
        notification.sent_at = datetime.now(timezone.utc)


async def list_notifications(db: AsyncSession) -> List[NotificationResponse]:
    result = await db.execute(select(Notification).order_by(Notification.created_at.desc()))
    return [NotificationResponse.model_validate(n) for n in result.scalars().all()]


async def create_notification(db: AsyncSession, payload: NotificationCreate) -> NotificationResponse:
    send_now = payload.status != NotificationStatus.draft
    if send_now and not payload.recipients:
        raise ServiceError("Recipients are required to send a notification", status.HTTP_400_BAD_REQUEST)

    notification = Notification(
        subject=payload.subject,
        message=payload.message,
        recipients=payload.recipients,
        type=payload.type,
        status=NotificationStatus.draft,
    )
    if send_now:
        _mark(notification, NotificationStatus.sent)
    db.add(notification)
    await commit_or_raise(db, notification, "Could not save notification")
    logger.info("Created notification %s with status %s", notification.id, notification.status.value)
    return NotificationResponse.model_validate(notification)


async def update_notification_status(
    db: AsyncSession,
    notification_id: UUID,
    new_status: NotificationStatus,
) -> NotificationResponse:
    notification = await db.get(Notification, notification_id)
    if not notification:
        raise NotFoundError("Notification not found")
    if new_status not in ALLOWED_TRANSITIONS[notification.status]:
        raise ServiceError(
            f"Cannot change notification status from {notification.status.value} to {new_status.value}",
            status.HTTP_409_CONFLICT,
        )
    if new_status == NotificationStatus.sent and not notification.recipients:
        raise ServiceError("Recipients are required to send a notification", status.HTTP_400_BAD_REQUEST)

    _mark(notification, new_status)
    await commit_or_raise(db, notification, "Could not save notification")
    logger.info("Notification %s is now %s", notification.id, new_status.value)
    return NotificationResponse.model_validate(notification)
