import uuid

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship

from schoolboard.core.enums import StudentStatus
from schoolboard.db.session import Base
from schoolboard.db.types import utcnow, value_enum


class Student(Base):
    """Student record. student_code is the human-facing identifier printed on cards."""

    __tablename__ = "students"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    student_code = Column("student_id", String(50), nullable=False, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    grade = Column(String(20), nullable=False)
    section = Column(String(20), nullable=False)
    status = Column(value_enum(StudentStatus, "student_status"), nullable=False, default=StudentStatus.active)
    parent_name = Column(String(255), nullable=False)
    parent_email = Column(String(255), nullable=False)
    parent_phone = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    attendance = relationship("Attendance", back_populates="student", passive_deletes="all")
    behavior_reports = relationship("BehaviorReport", back_populates="student", passive_deletes="all")
