import uuid

from sqlalchemy import JSON, Column, DateTime, String, Text, Uuid

from schoolboard.core.enums import NotificationStatus
from schoolboard.db.session import Base
from schoolboard.db.types import utcnow, value_enum


class Notification(Base):
    """Parent notification. Lifecycle: draft -> sent | failed, both terminal."""

    __tablename__ = "notifications"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    recipients = Column(JSON, nullable=False, default=list)  # ["todos", "grade-5", ...]
    type = Column(String(50), nullable=False)
    status = Column(
        value_enum(NotificationStatus, "notification_status"),
        nullable=False,
        default=NotificationStatus.draft,
    )
    sent_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
