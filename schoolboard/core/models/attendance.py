import uuid

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from schoolboard.core.enums import AttendanceStatus
from schoolboard.db.session import Base
from schoolboard.db.types import utcnow, value_enum


class Attendance(Base):
    """Attendance mark. Several marks per student per day are allowed."""

    __tablename__ = "attendance"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    student_id = Column(Uuid, ForeignKey("students.id", ondelete="RESTRICT"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    status = Column(value_enum(AttendanceStatus, "attendance_status"), nullable=False)
    time = Column(String(20), nullable=True)  # free text, e.g. "08:15"
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    student = relationship("Student", back_populates="attendance")
