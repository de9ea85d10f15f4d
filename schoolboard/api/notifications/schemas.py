from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from schoolboard.core.enums import NotificationStatus
from schoolboard.core.schemas import CamelModel


class NotificationCreate(CamelModel):
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    recipients: List[str] = Field(default_factory=list)
    type: str = Field(..., min_length=1, max_length=50)
    status: NotificationStatus = NotificationStatus.draft

    @field_validator("recipients")
    @classmethod
    def drop_blank_recipients(cls, value: List[str]) -> List[str]:
        # The form posts [""] when nothing is selected.
        return [r.strip() for r in value if r and r.strip()]


class NotificationStatusUpdate(CamelModel):
    status: NotificationStatus


class NotificationResponse(CamelModel):
    id: UUID
    subject: str
    message: str
    recipients: List[str]
    type: str
    status: NotificationStatus
    sent_at: Optional[datetime] = None
    created_at: datetime
