import uuid

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from schoolboard.core.enums import BehaviorType
from schoolboard.db.session import Base
from schoolboard.db.types import utcnow, value_enum


class BehaviorReport(Base):
    __tablename__ = "behavior_reports"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    student_id = Column(Uuid, ForeignKey("students.id", ondelete="RESTRICT"), nullable=False, index=True)
    teacher_name = Column(String(255), nullable=False)
    type = Column(value_enum(BehaviorType, "behavior_type"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    student = relationship("Student", back_populates="behavior_reports")
